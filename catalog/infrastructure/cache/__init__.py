"""Cache: Redis adapter, key builders and value codec.

RedisCache implements ICacheService; key format lives in keys.py and value
serialization in codec.py (DRY).
"""

from catalog.infrastructure.cache.codec import ValueCodec, codec_for
from catalog.infrastructure.cache.errors import (
    CacheError,
    CacheMissError,
    CacheUnavailableError,
    CodecError,
    KeyCodecError,
    ValueDecodeError,
    ValueEncodeError,
)
from catalog.infrastructure.cache.redis_cache import RedisCache

__all__ = [
    "CacheError",
    "CacheMissError",
    "CacheUnavailableError",
    "CodecError",
    "KeyCodecError",
    "RedisCache",
    "ValueCodec",
    "ValueDecodeError",
    "ValueEncodeError",
    "codec_for",
]
