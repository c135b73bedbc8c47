from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any

from tableview.exceptions import ErrorCatalog, RecordStoreError

RowId = str | int
IdExtractor = Callable[[Any], RowId]


def default_row_id(record: Any) -> RowId:
    try:
        if isinstance(record, Mapping):
            return record["id"]
        return record.id
    except (KeyError, AttributeError) as exc:
        raise RecordStoreError(ErrorCatalog.INVALID_ROW_ID, details=f"record has no id: {record!r}") from exc


def _validate_row_id(value: object) -> RowId:
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise RecordStoreError(ErrorCatalog.INVALID_ROW_ID, details=repr(value))
    return value


class RecordStore:
    """Immutable, ordered snapshot of caller records indexed by row id.

    Records are held by reference and never copied or mutated. The id
    extractor is resolved once per record when the store is built, so every
    later lookup goes through the same identity.
    """

    def __init__(self, records: Iterable[Any], id_of: IdExtractor | None = None) -> None:
        self._id_of = id_of or default_row_id
        self._records = tuple(records)
        self._ids: tuple[RowId, ...] = tuple(_validate_row_id(self._id_of(record)) for record in self._records)
        self._by_id: dict[RowId, Any] = {}
        for row_id, record in zip(self._ids, self._records):
            if row_id in self._by_id:
                raise RecordStoreError(ErrorCatalog.DUPLICATE_ROW_ID, details=row_id)
            self._by_id[row_id] = record

    @property
    def records(self) -> tuple[Any, ...]:
        return self._records

    @property
    def ids(self) -> tuple[RowId, ...]:
        return self._ids

    def row_id(self, record: Any) -> RowId:
        return _validate_row_id(self._id_of(record))

    def get(self, row_id: RowId) -> Any | None:
        return self._by_id.get(row_id)

    def __contains__(self, row_id: object) -> bool:
        return row_id in self._by_id

    def __iter__(self) -> Iterator[Any]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)
