from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Union

from tableview.schema import ColumnSchema

Predicate = Callable[[Any], bool]
FilterState = Union[str, Predicate, None]


def stringify(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def is_blank(query: FilterState) -> bool:
    if query is None:
        return True
    return isinstance(query, str) and not query.strip()


def matches_query(record: Any, needle: str, schema: ColumnSchema) -> bool:
    """True when any column's accessor output contains ``needle`` (already casefolded)."""
    return any(needle in stringify(column.value(record)).casefold() for column in schema)


def filter_records(records: Sequence[Any], query: FilterState, schema: ColumnSchema) -> list[Any]:
    if is_blank(query):
        return list(records)
    if isinstance(query, str):
        needle = query.casefold()
        return [record for record in records if matches_query(record, needle, schema)]
    return [record for record in records if query(record)]
