"""Wire arrays whose elements carry their own key, held as mappings."""
from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any, TypeVar, get_args

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")


def decode_keyed(items: Iterable[T], key: Callable[[T], K]) -> dict[K, T]:
    """Key every item by ``key(item)``. A repeated key keeps the last item."""
    return {key(item): item for item in items}


def encode_keyed(mapping: Mapping[Any, T]) -> list[T]:
    return list(mapping.values())


@dataclass(frozen=True, slots=True)
class KeyedCollection:
    """``Annotated`` marker for a ``dict[K, T]`` field sent as a JSON array of ``T``.

    Absent or null decodes to an empty mapping. A mapping given directly (for
    example when copying a model) is re-keyed from its values.
    """

    key: Callable[[Any], Any]

    def __get_pydantic_core_schema__(
        self,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        _, item_type = get_args(source_type)
        items_schema = core_schema.list_schema(handler.generate_schema(item_type))

        return core_schema.no_info_before_validator_function(
            _as_items,
            core_schema.no_info_after_validator_function(self._decode, items_schema),
            serialization=core_schema.plain_serializer_function_ser_schema(
                encode_keyed,
                return_schema=items_schema,
            ),
        )

    def _decode(self, items: list[Any]) -> dict[Any, Any]:
        return decode_keyed(items, self.key)


def _as_items(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, Mapping):
        return list(value.values())
    return value
