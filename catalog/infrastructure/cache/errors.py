"""Errors raised by the cache adapter and its codecs.

Services treat every CacheError as a miss (reads) or log and suppress it
(writes); they never reach callers.
"""


class CacheError(Exception):
    """Base class for cache transport and protocol failures."""


class CacheMissError(CacheError):
    """The key is absent (or expired). Not a failure."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Cache miss: {key}")


class CacheUnavailableError(CacheError):
    """No usable connection to the cache server."""


class CodecError(Exception):
    """Base class for value codec failures."""


class ValueEncodeError(CodecError):
    """A value could not be serialized."""


class ValueDecodeError(CodecError):
    """Cached bytes could not be deserialized into the expected type."""


class KeyCodecError(ValueError):
    """An argument cannot be rendered into a cache key."""
