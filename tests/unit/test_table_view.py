import pytest

from tableview.composer import TableView
from tableview.exceptions import PaginationError, SchemaError
from tableview.sorting import SortState
from tableview.store import RecordStore


def test_request_sort_toggles_and_fires_callback(grantee_store, grantee_schema) -> None:
    events = []
    view = TableView(grantee_store, grantee_schema, on_sort=lambda key, direction: events.append((key, direction)))

    view.request_sort("name")
    view.request_sort("name")
    view.request_sort("city")

    assert events == [("name", "asc"), ("name", "desc"), ("city", "asc")]
    assert view.sort_state == SortState("city", "asc")


def test_request_sort_on_unsortable_column_is_ignored(grantee_store, grantee_schema) -> None:
    events = []
    view = TableView(grantee_store, grantee_schema, on_sort=lambda *args: events.append(args))

    view.request_sort("status")

    assert events == []
    assert view.sort_state == SortState()


def test_request_sort_on_unknown_column_raises(grantee_store, grantee_schema) -> None:
    view = TableView(grantee_store, grantee_schema)

    with pytest.raises(SchemaError):
        view.request_sort("missing")


def test_filter_change_resets_to_first_page(grantee_store, grantee_schema) -> None:
    pages = []
    queries = []
    view = TableView(
        grantee_store,
        grantee_schema,
        page_size=2,
        on_page_change=pages.append,
        on_filter_change=queries.append,
    )
    view.go_to_page(3)

    view.set_query("a")

    assert queries == ["a"]
    assert pages == [3, 1]
    assert view.page_index == 1


def test_blank_query_change_is_not_a_transition(grantee_store, grantee_schema) -> None:
    queries = []
    view = TableView(grantee_store, grantee_schema, on_filter_change=queries.append)

    view.set_query("   ")

    assert queries == []


def test_page_navigation_stays_in_bounds(grantee_store, grantee_schema) -> None:
    view = TableView(grantee_store, grantee_schema, page_size=2)

    view.prev_page()
    assert view.page_index == 1

    view.next_page()
    view.next_page()
    view.next_page()
    assert view.page_index == 3
    assert view.descriptor().row_ids == ["g-5"]


def test_invalid_page_size_is_rejected(grantee_store, grantee_schema) -> None:
    with pytest.raises(PaginationError):
        TableView(grantee_store, grantee_schema, page_size=-3)

    view = TableView(grantee_store, grantee_schema)
    with pytest.raises(PaginationError):
        view.set_page_size(0)


def test_default_page_size_comes_from_settings(grantee_store, grantee_schema) -> None:
    view = TableView(grantee_store, grantee_schema)

    assert view.page_size == 10


def test_selection_survives_sort_filter_and_paging(grantee_store, grantee_schema) -> None:
    view = TableView(grantee_store, grantee_schema, page_size=2)
    view.toggle_row("g-5")

    view.request_sort("budget")
    view.set_query("a")
    view.go_to_page(2)

    assert view.selection.is_selected("g-5")
    assert "g-5" in view.descriptor().selection.selected_ids


def test_select_page_selects_only_visible_rows(grantee_store, grantee_schema) -> None:
    view = TableView(grantee_store, grantee_schema, page_size=2)
    view.go_to_page(2)

    view.select_page()

    assert view.selection.selected_ids == frozenset({"g-3", "g-4"})
    assert view.descriptor().selection.all_page_selected


def test_select_all_matching_uses_filtered_rows(grantee_store, grantee_schema) -> None:
    view = TableView(grantee_store, grantee_schema, page_size=1)
    view.set_query("active")

    view.select_all_matching()

    assert view.selection.selected_ids == frozenset({"g-1", "g-3", "g-4", "g-5"})


def test_toggle_page_selection_round_trip(grantee_store, grantee_schema) -> None:
    view = TableView(grantee_store, grantee_schema, page_size=2)
    view.toggle_row("g-5")

    view.toggle_page_selection()
    assert view.selection.selected_ids == frozenset({"g-1", "g-2"})

    view.toggle_page_selection()
    assert view.selection.selected_ids == frozenset()


def test_selection_callback_receives_new_ids(grantee_store, grantee_schema) -> None:
    changes = []
    view = TableView(grantee_store, grantee_schema, on_selection_change=changes.append)

    view.toggle_row("g-2")
    view.clear_selection()

    assert changes == [frozenset({"g-2"}), frozenset()]


def test_controlled_page_waits_for_caller_echo(grantee_store, grantee_schema) -> None:
    requested = []
    view = TableView(grantee_store, grantee_schema, page_size=2, page_index=1, on_page_change=requested.append)

    view.next_page()
    assert requested == [2]
    assert view.page_index == 1

    view.sync(page_index=requested[-1])
    assert view.descriptor().row_ids == ["g-3", "g-4"]


def test_controlled_sort_waits_for_caller_echo(grantee_store, grantee_schema) -> None:
    requested = []
    view = TableView(
        grantee_store,
        grantee_schema,
        sort=SortState(),
        on_sort=lambda key, direction: requested.append(SortState(key, direction)),
    )

    view.request_sort("budget")
    assert view.sort_state == SortState()

    view.sync(sort=requested[-1])
    assert view.descriptor().row_ids[0] == "g-2"


def test_controlled_selection_reads_caller_state(grantee_store, grantee_schema) -> None:
    owned = frozenset({"g-1"})
    proposals = []
    view = TableView(grantee_store, grantee_schema, selected=owned, on_selection_change=proposals.append)

    view.toggle_row("g-2")

    assert proposals == [frozenset({"g-1", "g-2"})]
    assert view.descriptor().selection.selected_ids == frozenset({"g-1"})


def test_set_store_clears_selection_by_default(grantee_store, grantee_schema, grantees) -> None:
    view = TableView(grantee_store, grantee_schema)
    view.toggle_row("g-1")

    view.set_store(RecordStore([dict(row) for row in grantees]))

    assert view.selection.selected_ids == frozenset()


def test_set_store_with_stable_ids_prunes_stale_selection(grantee_store, grantee_schema, grantees) -> None:
    view = TableView(grantee_store, grantee_schema)
    view.selection.select_all(["g-1", "g-2"])

    view.set_store(RecordStore(grantees[1:]), keep_selection=True)

    assert view.selection.selected_ids == frozenset({"g-2"})


def test_page_records_resolve_through_store(grantee_store, grantee_schema, grantees) -> None:
    view = TableView(grantee_store, grantee_schema, page_size=2)

    assert view.page_records() == grantees[:2]
    assert view.page_records()[0] is grantees[0]


def test_zero_page_size_is_rejected_not_defaulted(grantee_store, grantee_schema) -> None:
    with pytest.raises(PaginationError) as excinfo:
        TableView(grantee_store, grantee_schema, page_size=0)

    assert excinfo.value.code == "INVALID_PAGE_SIZE"


def test_zero_visible_pages_is_rejected_not_defaulted(grantee_store, grantee_schema) -> None:
    with pytest.raises(PaginationError) as excinfo:
        TableView(grantee_store, grantee_schema, max_visible_pages=0)

    assert excinfo.value.code == "INVALID_PAGE_WINDOW"
    assert TableView(grantee_store, grantee_schema, max_visible_pages=3).max_visible_pages == 3


def test_repeated_query_fires_filter_callback_once(grantee_store, grantee_schema) -> None:
    queries = []
    view = TableView(grantee_store, grantee_schema, on_filter_change=queries.append)

    view.set_query("oak")
    view.set_query("oak")

    assert queries == ["oak"]


def test_controlled_filter_can_be_synced_back_to_none(grantee_store, grantee_schema) -> None:
    requested = []

    def only_active(record) -> bool:
        return record["status"] == "active"

    view = TableView(grantee_store, grantee_schema, query=only_active, on_filter_change=requested.append)
    assert view.descriptor().filtered_count == 3

    view.set_query(None)
    assert requested == [None]
    assert view.query is only_active

    view.sync(query=requested[-1])
    assert view.query is None
    assert view.descriptor().filtered_count == 5


def test_sync_without_query_keeps_controlled_filter(grantee_store, grantee_schema) -> None:
    view = TableView(grantee_store, grantee_schema, query="oakland", on_filter_change=lambda query: None)

    view.sync(page_index=1)

    assert view.query == "oakland"


def test_next_page_on_last_page_proposes_nothing(grantee_store, grantee_schema) -> None:
    pages = []
    view = TableView(grantee_store, grantee_schema, page_size=2, on_page_change=pages.append)
    view.go_to_page(9)

    view.next_page()
    view.prev_page()

    assert pages == [3, 2]
