from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal
from functools import cmp_to_key
from typing import Any, Literal

from tableview.schema import ColumnDescriptor, ColumnSchema

SortDirection = Literal["asc", "desc"]


@dataclass(frozen=True)
class SortState:
    column_key: str | None = None
    direction: SortDirection = "asc"

    @property
    def active(self) -> bool:
        return self.column_key is not None


def next_sort_state(current: SortState, column_key: str) -> SortState:
    """Same column flips the direction, a new column starts ascending."""
    if current.column_key == column_key:
        return SortState(column_key=column_key, direction="desc" if current.direction == "asc" else "asc")
    return SortState(column_key=column_key, direction="asc")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def compare_values(left: Any, right: Any) -> int:
    # Missing values sink to the end of an ascending sort.
    if left is None or right is None:
        if left is None and right is None:
            return 0
        return 1 if left is None else -1
    if _is_number(left) and _is_number(right):
        return (left > right) - (left < right)
    left_text, right_text = str(left), str(right)
    return (left_text > right_text) - (left_text < right_text)


def sortable_column(state: SortState, schema: ColumnSchema) -> ColumnDescriptor | None:
    column = schema.find(state.column_key)
    if column is None or not column.sortable:
        return None
    return column


def sort_records(records: Sequence[Any], state: SortState, schema: ColumnSchema) -> list[Any]:
    column = sortable_column(state, schema)
    if column is None:
        return list(records)

    sign = -1 if state.direction == "desc" else 1
    keyed = [(column.value(record), record) for record in records]
    ordered = sorted(keyed, key=cmp_to_key(lambda a, b: sign * compare_values(a[0], b[0])))
    return [record for _, record in ordered]
