"""Core constants: cache key prefixes, family patterns and shared literal values.

Single source of truth for cache key structure. Key strings are persisted in
Redis and must stay stable across releases so a warm cache survives restarts.
"""

# Delimiter for composite keys
CACHE_KEY_SEP = ":"

# Single-entity keys (evicted by exact delete)
CACHE_PREFIX_ITEM = "item"
CACHE_PREFIX_CATEGORY = "category"
CACHE_PREFIX_PROMOTION = "promo"
CACHE_PREFIX_ORDER = "order"
CACHE_PREFIX_FAVORITE = "favorite"

# Item-derived keys
CACHE_PREFIX_ITEMS_LIST = "items-list"
CACHE_PREFIX_ITEMS_SEARCH = "items-search"
CACHE_PREFIX_ITEMS_RELATED = "items-related"
CACHE_PREFIX_ITEMS_LABEL = "items-label"
CACHE_PREFIX_ITEMS_CATEGORY = "items-category"
CACHE_PREFIX_ITEMS_ATTR_SEARCH = "items-attr-search"
CACHE_PREFIX_ITEMS_HIT = "items-hit"
CACHE_PREFIX_ITEMS_REC = "items-rec"
CACHE_PREFIX_ITEMS_PROMOS = "items-promos"

# Category-derived keys
CACHE_PREFIX_CATEGORIES_LIST = "categories-list"
CACHE_PREFIX_CATEGORIES_SEARCH = "categories-search"
CACHE_PREFIX_CATEGORIES_FILTERS_LIST = "categories-filters-list"
CACHE_PREFIX_CATEGORIES_FILTERS_SEARCH = "categories-filters-search"

# Promotion-derived keys
CACHE_PREFIX_PROMOS_LIST = "promos-list"
CACHE_PREFIX_PROMOS_SEARCH = "promos-search"

# Order-derived keys
CACHE_PREFIX_ORDERS_USER = "orders-user"

# Family patterns (Redis glob). They match derived entries only, never the
# single-entity keys above.
ITEMS_FAMILY_PATTERN = "items-*"
CATEGORIES_FAMILY_PATTERN = "categories-*"
PROMOS_FAMILY_PATTERN = "promos-*"
ORDERS_FAMILY_PATTERN = "orders-*"

# Cache timing defaults (seconds); Settings reads these as field defaults.
CACHE_TTL_DEFAULT = 3600
CACHE_RECONNECT_INTERVAL = 5.0
