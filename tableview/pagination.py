from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, replace
from typing import Any

from tableview.exceptions import ErrorCatalog, PaginationError

PAGE_GAP = "..."


@dataclass(frozen=True)
class PaginationState:
    page_index: int = 1
    page_size: int = 10


@dataclass(frozen=True)
class PageSlice:
    page: list[Any]
    page_count: int
    clamped_page_index: int


def require_page_size(page_size: int) -> None:
    if page_size <= 0:
        raise PaginationError(ErrorCatalog.INVALID_PAGE_SIZE, details=page_size)


def require_max_visible(max_visible: int) -> None:
    if max_visible <= 0:
        raise PaginationError(ErrorCatalog.INVALID_PAGE_WINDOW, details=max_visible)


def page_count_for(total: int, page_size: int) -> int:
    require_page_size(page_size)
    return max(1, math.ceil(total / page_size))


def clamp_page_index(page_index: int, page_count: int) -> int:
    return min(max(1, page_index), page_count)


def paginate(records: Sequence[Any], page_index: int, page_size: int) -> PageSlice:
    page_count = page_count_for(len(records), page_size)
    current = clamp_page_index(page_index, page_count)
    start = (current - 1) * page_size
    return PageSlice(page=list(records[start : start + page_size]), page_count=page_count, clamped_page_index=current)


def page_range(page_index: int, page_size: int, total: int) -> tuple[int, int]:
    """1-based inclusive bounds of the rows shown on a page, ``(0, 0)`` when empty."""
    if total <= 0:
        return (0, 0)
    current = clamp_page_index(page_index, page_count_for(total, page_size))
    return ((current - 1) * page_size + 1, min(current * page_size, total))


def page_window(current: int, page_count: int, max_visible: int = 5) -> list[int | str]:
    """Page buttons to show, with ``PAGE_GAP`` standing in for skipped runs.

    The first and last pages stay pinned once the count exceeds
    ``max_visible``; the pages around ``current`` fill the middle.
    """
    require_max_visible(max_visible)
    if page_count <= max_visible:
        return list(range(1, page_count + 1))

    half = max_visible // 2
    if current <= half + 1:
        return [*range(1, max_visible), PAGE_GAP, page_count]
    if current >= page_count - half:
        return [1, PAGE_GAP, *range(page_count - max_visible + 2, page_count + 1)]
    return [1, PAGE_GAP, *range(current - half + 1, current + half), PAGE_GAP, page_count]


def next_page(state: PaginationState, page_count: int) -> PaginationState:
    if state.page_index >= page_count:
        return state
    return replace(state, page_index=state.page_index + 1)


def prev_page(state: PaginationState) -> PaginationState:
    return replace(state, page_index=max(1, state.page_index - 1))


def goto_page(state: PaginationState, page: int, page_count: int) -> PaginationState:
    return replace(state, page_index=clamp_page_index(page, page_count))
