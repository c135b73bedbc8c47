from __future__ import annotations

import pytest

from tableview.schema import ColumnDescriptor, ColumnSchema
from tableview.store import RecordStore


@pytest.fixture()
def letters_store() -> RecordStore:
    return RecordStore([{"id": 1, "name": "B"}, {"id": 2, "name": "A"}, {"id": 3, "name": "A"}])


@pytest.fixture()
def letters_schema() -> ColumnSchema:
    return ColumnSchema([ColumnDescriptor(key="name", header="Name", sortable=True)])


@pytest.fixture()
def grantees() -> list[dict]:
    return [
        {"id": "g-1", "name": "Harbor Arts", "city": "Oakland", "budget": 1200, "status": "active"},
        {"id": "g-2", "name": "Riverbend Food Bank", "city": "Sacramento", "budget": 800, "status": "pending"},
        {"id": "g-3", "name": "Lumen Youth", "city": "Oakland", "budget": 15000, "status": "active"},
        {"id": "g-4", "name": "Cedar Clinic", "city": "Fresno", "budget": None, "status": "inactive"},
        {"id": "g-5", "name": "Atlas Literacy", "city": "San Jose", "budget": 800, "status": "active"},
    ]


@pytest.fixture()
def grantee_schema() -> ColumnSchema:
    return ColumnSchema(
        [
            ColumnDescriptor(key="name", header="Organization", sortable=True),
            ColumnDescriptor(key="city", header="City", sortable=True),
            ColumnDescriptor(key="budget", header="Budget", sortable=True, align="right"),
            ColumnDescriptor(key="status", header="Status", renderer=lambda value, _row: str(value).upper()),
        ]
    )


@pytest.fixture()
def grantee_store(grantees) -> RecordStore:
    return RecordStore(grantees)
