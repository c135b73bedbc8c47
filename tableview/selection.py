from __future__ import annotations

from collections.abc import Callable, Collection, Iterable
from typing import Any

from tableview.logger import get_logger, log_event
from tableview.state import StateSlot
from tableview.store import RecordStore, RowId

logger = get_logger(__name__)

SelectionCallback = Callable[[frozenset], None]


def page_selection_flags(selected: Collection[RowId], visible_ids: Iterable[RowId]) -> tuple[bool, bool]:
    """``(all_selected, some_selected)`` for the visible rows; an empty page is never all selected."""
    visible = list(visible_ids)
    hits = sum(1 for row_id in visible if row_id in selected)
    return bool(visible) and hits == len(visible), hits > 0


class SelectionManager:
    """Row selection keyed by row id, never by record reference.

    Passing ``selected`` together with ``on_change`` puts the manager in
    controlled mode: the caller's collection is read as-is and every change
    is only proposed through the callback. The next state arrives via
    ``sync``.
    """

    def __init__(
        self,
        store: RecordStore,
        *,
        selected: Collection[RowId] | None = None,
        on_change: SelectionCallback | None = None,
    ) -> None:
        self.store = store
        controlled = selected is not None and on_change is not None
        initial: Collection[RowId] = selected if controlled else frozenset(selected or ())
        self._slot: StateSlot[Collection[RowId]] = StateSlot(initial, controlled=controlled, on_change=on_change)

    @property
    def controlled(self) -> bool:
        return self._slot.controlled

    @property
    def selected_ids(self) -> frozenset:
        return frozenset(self._slot.value)

    def sync(self, selected: Collection[RowId]) -> None:
        self._slot.sync(selected)

    def rebind(self, store: RecordStore) -> None:
        self.store = store

    def is_selected(self, row_id: RowId) -> bool:
        return row_id in self._slot.value

    def is_record_selected(self, record: Any) -> bool:
        return self.is_selected(self.store.row_id(record))

    def is_all_selected(self, visible_ids: Iterable[RowId]) -> bool:
        return page_selection_flags(self._slot.value, visible_ids)[0]

    def is_some_selected(self, visible_ids: Iterable[RowId]) -> bool:
        return page_selection_flags(self._slot.value, visible_ids)[1]

    def select_all(self, ids: Iterable[RowId]) -> None:
        self._propose(frozenset(row_id for row_id in ids if row_id in self.store))

    def select_none(self) -> None:
        self._propose(frozenset())

    def deselect(self, ids: Iterable[RowId]) -> None:
        dropped = set(ids)
        self._propose(frozenset(row_id for row_id in self._slot.value if row_id not in dropped))

    def toggle(self, row_id: RowId) -> None:
        if row_id not in self.store:
            log_event(logger, "selection.stale_toggle", row_id=row_id)
            return
        current = frozenset(self._slot.value)
        self._propose(current - {row_id} if row_id in current else current | {row_id})

    def toggle_record(self, record: Any) -> None:
        self.toggle(self.store.row_id(record))

    def prune(self) -> None:
        """Drop ids no longer present in the store."""
        current = frozenset(self._slot.value)
        kept = frozenset(row_id for row_id in current if row_id in self.store)
        if kept != current:
            self._propose(kept)

    def selected_records(self) -> list[Any]:
        current = self._slot.value
        return [record for row_id, record in zip(self.store.ids, self.store.records) if row_id in current]

    def _propose(self, selection: frozenset) -> None:
        log_event(logger, "selection.change", count=len(selection), controlled=self.controlled)
        self._slot.propose(selection)
