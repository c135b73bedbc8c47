from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorDefinition:
    code: str
    message: str


class ErrorCatalog:
    DUPLICATE_COLUMN_KEY = ErrorDefinition("DUPLICATE_COLUMN_KEY", "Column keys must be unique within a schema")
    UNKNOWN_COLUMN = ErrorDefinition("UNKNOWN_COLUMN", "Column is not part of the schema")
    EMPTY_SCHEMA = ErrorDefinition("EMPTY_SCHEMA", "Schema needs at least one column")
    DUPLICATE_ROW_ID = ErrorDefinition("DUPLICATE_ROW_ID", "Row id is not unique within the record store")
    INVALID_ROW_ID = ErrorDefinition("INVALID_ROW_ID", "Row id must be a string or an integer")
    INVALID_PAGE_SIZE = ErrorDefinition("INVALID_PAGE_SIZE", "Page size must be greater than zero")
    INVALID_PAGE_WINDOW = ErrorDefinition("INVALID_PAGE_WINDOW", "Visible page count must be greater than zero")


class TableViewError(ValueError):
    def __init__(self, definition: ErrorDefinition, details: object | None = None) -> None:
        self.code = definition.code
        self.message = definition.message
        self.details = details
        super().__init__(str(self))

    def __str__(self) -> str:
        suffix = f" ({self.details})" if self.details is not None else ""
        return f"{self.code}: {self.message}{suffix}"


class SchemaError(TableViewError):
    """Column schema is malformed or references a missing column."""


class RecordStoreError(TableViewError):
    """Record identities cannot be resolved to unique primitive row ids."""


class PaginationError(TableViewError):
    pass
