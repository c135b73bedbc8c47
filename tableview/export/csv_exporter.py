from __future__ import annotations

import csv
from datetime import datetime
from pathlib import Path

from tableview.composer import TableView
from tableview.config import settings
from tableview.logger import get_logger, log_event
from tableview.table_printer import cell_text

logger = get_logger(__name__)


def export_current_view(
    view: TableView,
    *,
    module: str,
    output_dir: str | None = None,
) -> Path:
    """Write every row matching the current filter, in the current sort order."""
    descriptor = view.descriptor()
    destination = Path(output_dir or settings.export_dir)
    destination.mkdir(parents=True, exist_ok=True)

    now = datetime.now().astimezone()
    path = destination / f"{module}_{now.strftime('%Y%m%d_%H%M%S')}.csv"
    columns = list(view.schema)
    query = view.query if isinstance(view.query, str) or view.query is None else "<predicate>"

    with path.open("w", newline="", encoding="utf-8-sig") as handle:
        handle.write(f"# timestamp_local: {now.isoformat()}\n")
        handle.write(f"# module: {module}\n")
        handle.write(f"# query: {query or ''}\n")
        handle.write(f"# sort: {descriptor.sort.column_key or 'none'} {descriptor.sort.direction}\n")
        writer = csv.writer(handle)
        writer.writerow([column.header for column in columns])
        for record in view.matching_records(descriptor):
            writer.writerow([cell_text(column.render(record)) for column in columns])

    log_event(logger, "export.csv", module=module, rows=descriptor.filtered_count, path=str(path))
    return path
