from .composer import TableView, compose
from .config import TableViewSettings, load_settings, settings
from .exceptions import PaginationError, RecordStoreError, SchemaError, TableViewError
from .filtering import filter_records
from .models import RangeSummary, SelectionSnapshot, ViewDescriptor
from .pagination import PAGE_GAP, PageSlice, PaginationState, page_range, page_window, paginate
from .row_actions import RowAction, RowActionMenu
from .schema import ColumnDescriptor, ColumnSchema
from .selection import SelectionManager
from .sorting import SortState, next_sort_state, sort_records
from .store import RecordStore

__all__ = [
    "ColumnDescriptor",
    "ColumnSchema",
    "PAGE_GAP",
    "PageSlice",
    "PaginationError",
    "PaginationState",
    "RangeSummary",
    "RecordStore",
    "RecordStoreError",
    "RowAction",
    "RowActionMenu",
    "SchemaError",
    "SelectionManager",
    "SelectionSnapshot",
    "SortState",
    "TableView",
    "TableViewError",
    "TableViewSettings",
    "ViewDescriptor",
    "compose",
    "filter_records",
    "load_settings",
    "next_sort_state",
    "page_range",
    "page_window",
    "paginate",
    "settings",
    "sort_records",
]
