from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Literal

from tableview.exceptions import ErrorCatalog, SchemaError

Accessor = Callable[[Any], Any]
Renderer = Callable[[Any, Any], Any]
Align = Literal["left", "center", "right"]


def field_accessor(name: str) -> Accessor:
    def _read(record: Any) -> Any:
        if isinstance(record, Mapping):
            return record.get(name)
        return getattr(record, name, None)

    return _read


@dataclass(frozen=True)
class ColumnDescriptor:
    key: str
    header: str
    accessor: Accessor | str | None = None
    sortable: bool = False
    renderer: Renderer | None = None
    align: Align | None = None
    width: str | None = None

    def value(self, record: Any) -> Any:
        accessor = self.accessor
        if accessor is None:
            return field_accessor(self.key)(record)
        if isinstance(accessor, str):
            return field_accessor(accessor)(record)
        return accessor(record)

    def render(self, record: Any) -> Any:
        value = self.value(record)
        if self.renderer is None:
            return value
        return self.renderer(value, record)


class ColumnSchema:
    """Ordered column descriptors with unique keys."""

    def __init__(self, columns: Iterable[ColumnDescriptor]) -> None:
        self._columns = tuple(columns)
        if not self._columns:
            raise SchemaError(ErrorCatalog.EMPTY_SCHEMA)
        self._by_key: dict[str, ColumnDescriptor] = {}
        for column in self._columns:
            if column.key in self._by_key:
                raise SchemaError(ErrorCatalog.DUPLICATE_COLUMN_KEY, details=column.key)
            self._by_key[column.key] = column

    @property
    def keys(self) -> list[str]:
        return [column.key for column in self._columns]

    def find(self, key: str | None) -> ColumnDescriptor | None:
        if key is None:
            return None
        return self._by_key.get(key)

    def require(self, key: str) -> ColumnDescriptor:
        column = self._by_key.get(key)
        if column is None:
            raise SchemaError(ErrorCatalog.UNKNOWN_COLUMN, details=key)
        return column

    def __iter__(self) -> Iterator[ColumnDescriptor]:
        return iter(self._columns)

    def __len__(self) -> int:
        return len(self._columns)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key
