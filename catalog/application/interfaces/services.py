"""Service interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
"""

from __future__ import annotations

from typing import Protocol, TypeVar

T = TypeVar("T")


class IValueCodec(Protocol[T]):
    """Encodes values to an opaque byte string and back."""

    def encode(self, value: T) -> bytes:
        """Serialize value; raises ValueEncodeError."""

    def decode(self, data: bytes) -> T:
        """Deserialize data; raises ValueDecodeError."""


class ICacheService(Protocol):
    """Remote key/value cache used for read-through caching.

    Every method except is_available may raise CacheError; a miss on
    get_into is the CacheMissError subclass so callers can tell absence
    apart from transport or decode failures.
    """

    def is_available(self) -> bool:
        """Return True if cache is connected (informational; callers still try)."""

    async def get_into(self, key: str, codec: IValueCodec[T]) -> T:
        """Fetch key and decode it with codec. Raises CacheMissError when absent."""

    async def set(self, key: str, value: bytes, ttl: int) -> None:
        """Store value under key with a TTL in seconds (overwrites)."""

    async def delete(self, key: str) -> None:
        """Remove key; absent keys are not an error."""

    async def delete_pattern(self, pattern: str) -> int:
        """Remove every key matching a glob pattern. Returns count deleted."""

    async def close(self) -> None:
        """Release connections."""
