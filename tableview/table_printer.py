from __future__ import annotations

from typing import Any

from tableview.composer import TableView
from tableview.config import settings
from tableview.models import ViewDescriptor

EMPTY_MESSAGE = "No data available"


def cell_text(value: Any) -> str:
    if value is None:
        return settings.empty_value
    text = str(value).strip()
    return text or settings.empty_value


def format_table(view: TableView, descriptor: ViewDescriptor | None = None, *, selectable: bool = True) -> str:
    current = descriptor or view.descriptor()
    columns = list(view.schema)
    headers = [column.header for column in columns]
    body = [[cell_text(column.render(record)) for column in columns] for record in view.page_records(current)]

    if selectable:
        headers = ["[x]" if current.selection.all_page_selected else "[ ]", *headers]
        body = [
            ["[x]" if row_id in current.selection.selected_ids else "[ ]", *cells]
            for row_id, cells in zip(current.row_ids, body)
        ]

    widths = [max(len(header), *(len(row[idx]) for row in body)) if body else len(header) for idx, header in enumerate(headers)]
    lines = [
        " | ".join(header.ljust(widths[idx]) for idx, header in enumerate(headers)),
        "-+-".join("-" * width for width in widths),
    ]
    if not body:
        lines.append(EMPTY_MESSAGE)
    for row in body:
        lines.append(" | ".join(cell.ljust(widths[idx]) for idx, cell in enumerate(row)))

    if current.page_count > 1:
        lines.append(current.range.label())
    if current.selection.count:
        lines.append(f"{current.selection.count} of {current.total_count} selected")
    return "\n".join(lines)


def print_table(title: str, view: TableView) -> None:
    print(f"\n{title}")
    print(format_table(view))
