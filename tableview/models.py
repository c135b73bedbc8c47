from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict

from tableview.pagination import PaginationState
from tableview.sorting import SortState
from tableview.store import RowId


class RangeSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: int
    end: int
    total: int

    def label(self) -> str:
        return f"Showing {self.start} to {self.end} of {self.total} results"


class SelectionSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    selected_ids: frozenset[RowId]
    all_page_selected: bool
    some_page_selected: bool
    selected_matching_count: int

    @property
    def count(self) -> int:
        return len(self.selected_ids)


class ViewDescriptor(BaseModel):
    """Render-ready description of one table state.

    Rebuilt from scratch on every compose; the presentation layer reads it
    and never recomputes filtering, sorting or paging on its own.
    """

    model_config = ConfigDict(frozen=True)

    row_ids: list[RowId]
    matching_ids: list[RowId]
    total_count: int
    filtered_count: int
    sort: SortState
    pagination: PaginationState
    page_count: int
    page_window: list[Union[int, str]]
    range: RangeSummary
    selection: SelectionSnapshot

    @property
    def is_empty(self) -> bool:
        return not self.row_ids
