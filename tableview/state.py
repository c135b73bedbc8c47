from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class StateSlot(Generic[T]):
    """One piece of view state that is either engine-owned or caller-owned.

    Uncontrolled slots store every proposed value and then notify the
    listener. Controlled slots only notify: the caller decides what the next
    value is and hands it back through ``sync``.
    """

    def __init__(
        self,
        initial: T,
        *,
        controlled: bool = False,
        on_change: Callable[[T], None] | None = None,
    ) -> None:
        self._value = initial
        self.controlled = controlled
        self._on_change = on_change

    @property
    def value(self) -> T:
        return self._value

    def propose(self, value: T) -> None:
        if not self.controlled:
            self._value = value
        if self._on_change is not None:
            self._on_change(value)

    def sync(self, value: T) -> None:
        self._value = value
