from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Literal

from tableview.store import RowId


@dataclass(frozen=True)
class RowAction:
    id: str
    label: str
    handler: Callable[[Any], None]
    variant: Literal["default", "destructive"] = "default"


class RowActionMenu:
    """Tracks which row has its action menu open; at most one at a time."""

    def __init__(self, actions: Iterable[RowAction]) -> None:
        self.actions = tuple(actions)
        self._by_id = {action.id: action for action in self.actions}
        self.open_row_id: RowId | None = None

    def is_open(self, row_id: RowId) -> bool:
        return self.open_row_id == row_id

    def toggle(self, row_id: RowId) -> None:
        self.open_row_id = None if self.open_row_id == row_id else row_id

    def close(self) -> None:
        self.open_row_id = None

    def invoke(self, action_id: str, record: Any) -> None:
        action = self._by_id.get(action_id)
        if action is None:
            raise KeyError(action_id)
        action.handler(record)
        self.close()
