from __future__ import annotations

from collections.abc import Callable, Collection
from typing import Any

from tableview.config import settings
from tableview.filtering import FilterState, filter_records, is_blank
from tableview.logger import get_logger, log_event
from tableview.models import RangeSummary, SelectionSnapshot, ViewDescriptor
from tableview.pagination import (
    PaginationState,
    goto_page,
    next_page,
    page_range,
    page_window,
    paginate,
    prev_page,
    require_max_visible,
    require_page_size,
)
from tableview.schema import ColumnSchema
from tableview.selection import SelectionCallback, SelectionManager, page_selection_flags
from tableview.sorting import SortDirection, SortState, next_sort_state, sortable_column, sort_records
from tableview.state import StateSlot
from tableview.store import RecordStore, RowId

logger = get_logger(__name__)

_UNSET: Any = object()


def compose(
    store: RecordStore,
    schema: ColumnSchema,
    filter_state: FilterState,
    sort_state: SortState,
    pagination: PaginationState,
    selected: Collection[RowId] = frozenset(),
    *,
    max_visible_pages: int | None = None,
) -> ViewDescriptor:
    """Filter, sort and paginate ``store`` and describe the resulting page.

    Selection flags are computed against the filtered and sorted rows, and
    ids missing from the store are left out of the snapshot.
    """
    matching = sort_records(filter_records(store.records, filter_state, schema), sort_state, schema)
    sliced = paginate(matching, pagination.page_index, pagination.page_size)

    page_ids = [store.row_id(record) for record in sliced.page]
    matching_ids = [store.row_id(record) for record in matching]
    live_selection = frozenset(row_id for row_id in selected if row_id in store)
    start, end = page_range(sliced.clamped_page_index, pagination.page_size, len(matching))
    all_page_selected, some_page_selected = page_selection_flags(live_selection, page_ids)

    return ViewDescriptor(
        row_ids=page_ids,
        matching_ids=matching_ids,
        total_count=len(store),
        filtered_count=len(matching),
        sort=sort_state,
        pagination=PaginationState(page_index=sliced.clamped_page_index, page_size=pagination.page_size),
        page_count=sliced.page_count,
        page_window=page_window(
            sliced.clamped_page_index,
            sliced.page_count,
            settings.max_visible_pages if max_visible_pages is None else max_visible_pages,
        ),
        range=RangeSummary(start=start, end=end, total=len(matching)),
        selection=SelectionSnapshot(
            selected_ids=live_selection,
            all_page_selected=all_page_selected,
            some_page_selected=some_page_selected,
            selected_matching_count=sum(1 for row_id in matching_ids if row_id in live_selection),
        ),
    )


class TableView:
    """Stateful front for ``compose`` that owns or forwards each piece of view state.

    Filter, sort, page and selection state are each uncontrolled by default.
    Supplying the initial value together with its change callback hands that
    piece to the caller: the view then only proposes changes and waits for
    the caller to ``sync`` the next value back.
    """

    def __init__(
        self,
        store: RecordStore,
        schema: ColumnSchema,
        *,
        query: FilterState = None,
        sort: SortState | None = None,
        page_index: int | None = None,
        page_size: int | None = None,
        selected: Collection[RowId] | None = None,
        on_sort: Callable[[str, SortDirection], None] | None = None,
        on_filter_change: Callable[[FilterState], None] | None = None,
        on_page_change: Callable[[int], None] | None = None,
        on_selection_change: SelectionCallback | None = None,
        max_visible_pages: int | None = None,
    ) -> None:
        self.store = store
        self.schema = schema
        self.page_size = settings.default_page_size if page_size is None else page_size
        require_page_size(self.page_size)
        self.max_visible_pages = settings.max_visible_pages if max_visible_pages is None else max_visible_pages
        require_max_visible(self.max_visible_pages)
        self._on_sort = on_sort

        self._filter: StateSlot[FilterState] = StateSlot(
            query,
            controlled=query is not None and on_filter_change is not None,
            on_change=on_filter_change,
        )
        self._sort: StateSlot[SortState] = StateSlot(
            sort or SortState(),
            controlled=sort is not None and on_sort is not None,
        )
        self._page: StateSlot[int] = StateSlot(
            page_index or 1,
            controlled=page_index is not None and on_page_change is not None,
            on_change=on_page_change,
        )
        self.selection = SelectionManager(store, selected=selected, on_change=on_selection_change)

    @property
    def query(self) -> FilterState:
        return self._filter.value

    @property
    def sort_state(self) -> SortState:
        return self._sort.value

    @property
    def page_index(self) -> int:
        return self._page.value

    def descriptor(self) -> ViewDescriptor:
        return compose(
            self.store,
            self.schema,
            self._filter.value,
            self._sort.value,
            PaginationState(page_index=self._page.value, page_size=self.page_size),
            self.selection.selected_ids,
            max_visible_pages=self.max_visible_pages,
        )

    def page_records(self, descriptor: ViewDescriptor | None = None) -> list[Any]:
        current = descriptor or self.descriptor()
        return [self.store.get(row_id) for row_id in current.row_ids]

    def matching_records(self, descriptor: ViewDescriptor | None = None) -> list[Any]:
        current = descriptor or self.descriptor()
        return [self.store.get(row_id) for row_id in current.matching_ids]

    def sync(
        self,
        *,
        query: FilterState = _UNSET,
        sort: SortState | None = None,
        page_index: int | None = None,
        selected: Collection[RowId] | None = None,
    ) -> None:
        """Accept the caller's next state. ``query=None`` clears the filter."""
        if query is not _UNSET:
            self._filter.sync(query)
        if sort is not None:
            self._sort.sync(sort)
        if page_index is not None:
            self._page.sync(page_index)
        if selected is not None:
            self.selection.sync(selected)

    def request_sort(self, column_key: str) -> None:
        self.schema.require(column_key)
        proposed = next_sort_state(self._sort.value, column_key)
        if sortable_column(proposed, self.schema) is None:
            log_event(logger, "view.sort_ignored", column_key=column_key)
            return
        self._sort.propose(proposed)
        log_event(logger, "view.sort", column_key=column_key, direction=proposed.direction)
        if self._on_sort is not None:
            self._on_sort(column_key, proposed.direction)

    def set_query(self, query: FilterState) -> None:
        current = self._filter.value
        if query == current or (is_blank(query) and is_blank(current)):
            return
        self._filter.propose(query)
        log_event(logger, "view.filter", query=query if isinstance(query, str) or query is None else "<predicate>")
        self.go_to_page(1)

    def _move_to(self, target: PaginationState) -> None:
        if target.page_index == self._page.value:
            return
        self._page.propose(target.page_index)
        log_event(logger, "view.page", page_index=target.page_index)

    def go_to_page(self, page_index: int) -> None:
        descriptor = self.descriptor()
        self._move_to(goto_page(descriptor.pagination, page_index, descriptor.page_count))

    def next_page(self) -> None:
        descriptor = self.descriptor()
        self._move_to(next_page(descriptor.pagination, descriptor.page_count))

    def prev_page(self) -> None:
        self._move_to(prev_page(self.descriptor().pagination))

    def set_page_size(self, page_size: int) -> None:
        require_page_size(page_size)
        self.page_size = page_size
        self.go_to_page(1)

    def toggle_row(self, row_id: RowId) -> None:
        self.selection.toggle(row_id)

    def select_page(self) -> None:
        self.selection.select_all(self.descriptor().row_ids)

    def select_all_matching(self) -> None:
        self.selection.select_all(self.descriptor().matching_ids)

    def toggle_page_selection(self) -> None:
        descriptor = self.descriptor()
        if descriptor.selection.all_page_selected:
            self.selection.deselect(descriptor.row_ids)
        else:
            self.selection.select_all(descriptor.row_ids)

    def clear_selection(self) -> None:
        self.selection.select_none()

    def set_store(self, store: RecordStore, *, keep_selection: bool = False) -> None:
        """Swap in a new record snapshot.

        Selection is cleared unless ``keep_selection`` vouches that row ids
        are stable across the swap, in which case only stale ids are dropped.
        """
        self.store = store
        self.selection.rebind(store)
        if keep_selection:
            self.selection.prune()
        elif self.selection.selected_ids:
            self.selection.select_none()
