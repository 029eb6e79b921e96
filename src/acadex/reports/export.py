"""Tabular export rows, CSV flattening, and pagination for reports."""

from __future__ import annotations

import csv
import math
from datetime import date
from typing import Iterable, Sequence, TextIO, TypeVar

from acadex.catalog.models import AcademicWork

from .models import ExportRow, Page

T = TypeVar("T")

EXPORT_HEADERS: tuple[str, ...] = (
    "Nombre",
    "Materia",
    "Tipo",
    "Profesor",
    "Semestre",
    "Fecha",
    "Formato",
)

DEFAULT_PAGE_SIZE = 10


def export_rows(works: Iterable[AcademicWork]) -> list[ExportRow]:
    """Return one export row per work, preserving order.

    Args:
        works: Works to flatten, typically the filtered collection.

    Returns:
        list[ExportRow]: Rows carrying human-readable type and format labels.
    """

    return [
        ExportRow(
            name=work.name,
            subject=work.subject,
            work_type_label=work.work_type_label,
            professor=work.professor,
            semester=work.semester,
            date=work.date,
            document_type_label=work.document_type_label,
        )
        for work in works
    ]


def write_csv(
    rows: Iterable[ExportRow],
    stream: TextIO,
    *,
    delimiter: str = ",",
    include_headers: bool = True,
) -> int:
    """Write ``rows`` to ``stream`` as delimited text.

    Args:
        rows: Export rows to write.
        stream: Text stream opened with ``newline=""`` when backed by a file.
        delimiter: Field separator.
        include_headers: Whether to emit the header line first.

    Returns:
        int: Number of data rows written.
    """

    writer = csv.writer(stream, delimiter=delimiter, lineterminator="\n")
    if include_headers:
        writer.writerow(EXPORT_HEADERS)
    count = 0
    for row in rows:
        writer.writerow(row.as_list())
        count += 1
    return count


def default_export_filename(today: date | None = None) -> str:
    """Return the suggested CSV file name for a report exported on ``today``."""

    stamp = (today or date.today()).isoformat()
    return f"reporte_trabajos_{stamp}.csv"


def paginate(items: Sequence[T], page: int = 1, per_page: int = DEFAULT_PAGE_SIZE) -> Page[T]:
    """Return the requested 1-based page of ``items``.

    Out-of-range page numbers are clamped to the first or last page.

    Args:
        items: Full sequence to paginate.
        page: Requested page number.
        per_page: Maximum items per page.

    Returns:
        Page[T]: Page slice plus totals.

    Raises:
        ValueError: If ``per_page`` is not positive.
    """

    if per_page < 1:
        raise ValueError("per_page must be a positive integer")

    total_items = len(items)
    total_pages = math.ceil(total_items / per_page)
    current = min(max(page, 1), max(total_pages, 1))
    start = (current - 1) * per_page
    return Page(
        items=list(items[start : start + per_page]),
        page=current,
        per_page=per_page,
        total_items=total_items,
        total_pages=total_pages,
    )


__all__ = [
    "EXPORT_HEADERS",
    "DEFAULT_PAGE_SIZE",
    "export_rows",
    "write_csv",
    "default_export_filename",
    "paginate",
]
