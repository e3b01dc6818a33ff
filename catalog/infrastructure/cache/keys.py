"""Cache key builders. Single place for key format (DRY).

Keys are ``<prefix>:<arg>:<arg>...`` with prefixes from catalog.core.constants.
Arguments render deterministically:

- bool -> ``true`` / ``false``; int -> digits; float -> ``str()``;
  UUID -> canonical hyphenated form; str -> raw; None -> empty string.
- filter maps -> ``{k=v,...}`` with entries sorted by key; sequence values
  -> ``[a,b]`` in the given order; ``{min,max}`` sub-mappings ->
  ``{min=a,max=b}`` in that fixed order (absent bounds are omitted).
- inside a filter map, and for the slug and sort of a category listing,
  the characters ``\\ { } = , [ ] :`` are escaped with a backslash.

Anything else raises KeyCodecError. Key strings are persisted in Redis, so
this rendering must not change between releases.
"""

from collections.abc import Mapping, Sequence
from typing import Any
from uuid import UUID

from catalog.core.constants import (
    CACHE_KEY_SEP,
    CACHE_PREFIX_CATEGORIES_FILTERS_LIST,
    CACHE_PREFIX_CATEGORIES_FILTERS_SEARCH,
    CACHE_PREFIX_CATEGORIES_LIST,
    CACHE_PREFIX_CATEGORIES_SEARCH,
    CACHE_PREFIX_CATEGORY,
    CACHE_PREFIX_FAVORITE,
    CACHE_PREFIX_ITEM,
    CACHE_PREFIX_ITEMS_ATTR_SEARCH,
    CACHE_PREFIX_ITEMS_CATEGORY,
    CACHE_PREFIX_ITEMS_HIT,
    CACHE_PREFIX_ITEMS_LABEL,
    CACHE_PREFIX_ITEMS_LIST,
    CACHE_PREFIX_ITEMS_PROMOS,
    CACHE_PREFIX_ITEMS_REC,
    CACHE_PREFIX_ITEMS_RELATED,
    CACHE_PREFIX_ITEMS_SEARCH,
    CACHE_PREFIX_ORDER,
    CACHE_PREFIX_ORDERS_USER,
    CACHE_PREFIX_PROMOS_LIST,
    CACHE_PREFIX_PROMOS_SEARCH,
    CACHE_PREFIX_PROMOTION,
)
from catalog.infrastructure.cache.errors import KeyCodecError

# Field order for range sub-mappings in filter maps.
RANGE_FIELDS = ("min", "max")

# Structural characters of a rendered filter map; escaped inside it and in
# the slug and sort around it.
FILTER_DELIMITERS = "\\{}=,[]:"
_FILTER_ESCAPES = str.maketrans({c: "\\" + c for c in FILTER_DELIMITERS})


def render_scalar(value: Any) -> str:
    """Render a single key argument.

    Raises:
        KeyCodecError: If value is not a supported scalar.
    """
    if value is None:
        return ""
    # bool first: it is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (str, int, float)):
        return str(value)
    if isinstance(value, UUID):
        return str(value)
    raise KeyCodecError(f"Cannot render {type(value).__name__} in a cache key")


def escape_component(value: Any) -> str:
    """render_scalar with the filter-map delimiters escaped."""
    return render_scalar(value).translate(_FILTER_ESCAPES)


def _render_sequence(values: Sequence[Any]) -> str:
    return "[" + ",".join(escape_component(v) for v in values) + "]"


def _render_range(name: str, bounds: Mapping[str, Any]) -> str:
    unknown = set(bounds) - set(RANGE_FIELDS)
    if unknown:
        raise KeyCodecError(
            f"Filter {name!r} has unsupported range fields: {sorted(unknown)}"
        )
    parts = [f"{f}={escape_component(bounds[f])}" for f in RANGE_FIELDS if f in bounds]
    return "{" + ",".join(parts) + "}"


def _render_filter_value(name: str, value: Any) -> str:
    if isinstance(value, Mapping):
        return _render_range(name, value)
    if isinstance(value, (str, bytes)):
        return escape_component(value)
    if isinstance(value, Sequence):
        return _render_sequence(value)
    return escape_component(value)


def render_filters(filters: Mapping[str, Any] | None) -> str:
    """Render a filter map canonically; equal maps give equal strings.

    Insertion order does not matter: entries are sorted by key.

    Raises:
        KeyCodecError: If a key is not a string or a value has an unsupported shape.
    """
    if not filters:
        return "{}"
    for name in filters:
        if not isinstance(name, str):
            raise KeyCodecError(f"Filter names must be strings, got {type(name).__name__}")
    parts = [
        f"{escape_component(name)}={_render_filter_value(name, filters[name])}"
        for name in sorted(filters)
    ]
    return "{" + ",".join(parts) + "}"


def build_key(prefix: str, *args: Any) -> str:
    """Join prefix and rendered scalar args with CACHE_KEY_SEP."""
    return CACHE_KEY_SEP.join([prefix, *(render_scalar(a) for a in args)])


# Items


def item_key(item_id: UUID) -> str:
    """Cache key for a single item."""
    return build_key(CACHE_PREFIX_ITEM, item_id)


def items_list_key(page: int, size: int) -> str:
    return build_key(CACHE_PREFIX_ITEMS_LIST, page, size)


def items_search_key(query: str, page: int, size: int) -> str:
    return build_key(CACHE_PREFIX_ITEMS_SEARCH, query, page, size)


def items_related_key(item_id: UUID) -> str:
    return build_key(CACHE_PREFIX_ITEMS_RELATED, item_id)


def items_label_key(label: str, page: int, size: int) -> str:
    return build_key(CACHE_PREFIX_ITEMS_LABEL, label, page, size)


def items_category_key(
    slug: str, page: int, size: int, filters: Mapping[str, Any] | None, sort: str
) -> str:
    """Cache key for a category's item listing, including filter map and sort."""
    return CACHE_KEY_SEP.join(
        [
            build_key(CACHE_PREFIX_ITEMS_CATEGORY, escape_component(slug), page, size),
            render_filters(filters),
            escape_component(sort),
        ]
    )


def items_attr_search_key(query: str, page: int, size: int) -> str:
    return build_key(CACHE_PREFIX_ITEMS_ATTR_SEARCH, query, page, size)


def items_hit_key(page: int, size: int) -> str:
    return build_key(CACHE_PREFIX_ITEMS_HIT, page, size)


def items_rec_key(page: int, size: int) -> str:
    return build_key(CACHE_PREFIX_ITEMS_REC, page, size)


def items_promos_key(slug: str, page: int, size: int) -> str:
    """Cache key for the items of a promotion (item-derived family)."""
    return build_key(CACHE_PREFIX_ITEMS_PROMOS, slug, page, size)


# Categories


def category_key(slug: str) -> str:
    """Cache key for a single category."""
    return build_key(CACHE_PREFIX_CATEGORY, slug)


def categories_list_key(page: int, size: int) -> str:
    return build_key(CACHE_PREFIX_CATEGORIES_LIST, page, size)


def categories_search_key(query: str, page: int, size: int) -> str:
    return build_key(CACHE_PREFIX_CATEGORIES_SEARCH, query, page, size)


def category_filters_key(slug: str) -> str:
    return build_key(CACHE_PREFIX_CATEGORIES_FILTERS_LIST, slug)


def category_filters_search_key(query: str, page: int, size: int) -> str:
    return build_key(CACHE_PREFIX_CATEGORIES_FILTERS_SEARCH, query, page, size)


# Promotions


def promotion_key(slug: str) -> str:
    """Cache key for a single promotion."""
    return build_key(CACHE_PREFIX_PROMOTION, slug)


def promotions_list_key(page: int, size: int) -> str:
    return build_key(CACHE_PREFIX_PROMOS_LIST, page, size)


def promotions_search_key(query: str, page: int, size: int) -> str:
    return build_key(CACHE_PREFIX_PROMOS_SEARCH, query, page, size)


# Orders and favorites


def order_key(order_id: int) -> str:
    """Cache key for a single order."""
    return build_key(CACHE_PREFIX_ORDER, order_id)


def user_orders_key(user_id: UUID, page: int, size: int) -> str:
    return build_key(CACHE_PREFIX_ORDERS_USER, user_id, page, size)


def favorites_key(user_id: UUID) -> str:
    """Cache key for a user's favorites list."""
    return build_key(CACHE_PREFIX_FAVORITE, user_id)
