"""Value codec: DTOs <-> JSON bytes via pydantic TypeAdapter.

Works for the frozen dataclass DTOs in catalog.application.dtos, lists of
them and plain scalars. decode(encode(v)) == v for every repository result.
"""

from functools import lru_cache
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from catalog.infrastructure.cache.errors import ValueDecodeError, ValueEncodeError

T = TypeVar("T")


class ValueCodec(Generic[T]):
    """Encodes values of one type to JSON bytes and back."""

    def __init__(self, value_type: type[T] | Any) -> None:
        self.value_type = value_type
        self._adapter: TypeAdapter[T] = TypeAdapter(value_type)

    def encode(self, value: T) -> bytes:
        try:
            return self._adapter.dump_json(value)
        except PydanticSerializationError as e:
            raise ValueEncodeError(f"Cannot encode {self.value_type!r}: {e}") from e

    def decode(self, data: bytes) -> T:
        try:
            return self._adapter.validate_json(data)
        except ValidationError as e:
            raise ValueDecodeError(f"Cannot decode {self.value_type!r}: {e}") from e

    def __repr__(self) -> str:
        return f"ValueCodec({self.value_type!r})"


@lru_cache(maxsize=128)
def codec_for(value_type: Any) -> ValueCodec[Any]:
    """Return a shared codec for value_type (e.g. ItemResult, list[FilterResult])."""
    return ValueCodec(value_type)
