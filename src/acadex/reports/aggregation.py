"""Pure aggregations turning a work collection into chart-ready series.

Every function accepts any iterable of works, never mutates its input and
returns freshly built values, so results can be recomputed on each render.
"""

from __future__ import annotations

import logging
from collections import Counter
from datetime import date
from typing import Hashable, Iterable, Optional

from acadex.catalog.dates import parse_iso_date
from acadex.catalog.models import (
    DOCUMENT_TYPE_LABELS,
    WORK_TYPE_LABELS,
    AcademicWork,
    ChartDataPoint,
    MonthlyTrendPoint,
    StatsData,
)

from .models import TemplateSummary

LOGGER = logging.getLogger(__name__)

MONTH_ABBREVIATIONS: tuple[str, ...] = (
    "Ene",
    "Feb",
    "Mar",
    "Abr",
    "May",
    "Jun",
    "Jul",
    "Ago",
    "Sep",
    "Oct",
    "Nov",
    "Dic",
)

DEFAULT_TREND_MONTHS = 12


def compute_stats(works: Iterable[AcademicWork], *, today: Optional[date] = None) -> StatsData:
    """Return dashboard counters for ``works``.

    Args:
        works: Works to summarize.
        today: Reference date for the "this month" counter; defaults to the
            current local date at call time.

    Returns:
        StatsData: Totals, distinct counts, works dated this month and templates.
    """

    items = list(works)
    reference = today or date.today()
    this_month = 0
    for work in items:
        work_date = parse_iso_date(work.date)
        if work_date is not None and (work_date.year, work_date.month) == (
            reference.year,
            reference.month,
        ):
            this_month += 1

    return StatsData(
        total_works=len(items),
        total_subjects=len({work.subject for work in items}),
        total_semesters=len({work.semester for work in items}),
        total_professors=len({work.professor for work in items}),
        works_this_month=this_month,
        templates_count=sum(1 for work in items if work.is_template),
    )


def group_by_subject(works: Iterable[AcademicWork]) -> list[ChartDataPoint]:
    """Return work counts per subject, largest first.

    Ties keep the order in which subjects first appear in ``works``.
    """

    return _ranked(Counter(work.subject for work in works))


def group_by_type(works: Iterable[AcademicWork]) -> list[ChartDataPoint]:
    """Return work counts per work type label, largest first."""

    counts = Counter(work.work_type for work in works)
    return _ranked(counts, labels=WORK_TYPE_LABELS)


def group_by_document_type(works: Iterable[AcademicWork]) -> list[ChartDataPoint]:
    """Return work counts per document format label in first-seen order."""

    counts = Counter(work.document_type for work in works)
    return [
        ChartDataPoint(name=DOCUMENT_TYPE_LABELS[key], value=value) for key, value in counts.items()
    ]


def monthly_trend(
    works: Iterable[AcademicWork],
    *,
    months: int = DEFAULT_TREND_MONTHS,
) -> list[MonthlyTrendPoint]:
    """Bucket works by calendar month of their date.

    Args:
        works: Works to bucket. Works with unparseable dates are skipped.
        months: Number of most recent buckets to keep.

    Returns:
        list[MonthlyTrendPoint]: Chronologically ascending buckets labelled
        like ``"Nov 24"``, truncated to the latest ``months`` months present.
    """

    counts: Counter[tuple[int, int]] = Counter()
    for work in works:
        work_date = parse_iso_date(work.date)
        if work_date is None:
            LOGGER.debug("Skipping work %s with unparseable date %r.", work.id, work.date)
            continue
        counts[(work_date.year, work_date.month)] += 1

    if months <= 0:
        return []

    keys = sorted(counts)[-months:]
    return [
        MonthlyTrendPoint(month=month_label(year, month), count=counts[(year, month)])
        for year, month in keys
    ]


def month_label(year: int, month: int) -> str:
    """Return the short label for a calendar month, e.g. ``"Ene 24"``."""

    return f"{MONTH_ABBREVIATIONS[month - 1]} {year % 100:02d}"


def templates_by_subject(works: Iterable[AcademicWork]) -> dict[str, list[AcademicWork]]:
    """Return template works grouped by subject in first-seen order."""

    grouped: dict[str, list[AcademicWork]] = {}
    for work in works:
        if work.is_template:
            grouped.setdefault(work.subject, []).append(work)
    return grouped


def template_summary(works: Iterable[AcademicWork]) -> TemplateSummary:
    """Return template counters and the per-subject grouping."""

    grouped = templates_by_subject(works)
    templates = [work for group in grouped.values() for work in group]
    return TemplateSummary(
        total=len(templates),
        subjects=len(grouped),
        versioned=sum(1 for work in templates if work.version > 1),
        by_subject=grouped,
    )


def _ranked(
    counts: Counter,
    *,
    labels: Optional[dict] = None,
) -> list[ChartDataPoint]:
    # sorted() is stable, so equal counts keep first-appearance order.
    ordered = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [ChartDataPoint(name=_label(key, labels), value=value) for key, value in ordered]


def _label(key: Hashable, labels: Optional[dict]) -> str:
    if labels is None:
        return str(key)
    return labels.get(key, str(key))


__all__ = [
    "MONTH_ABBREVIATIONS",
    "DEFAULT_TREND_MONTHS",
    "compute_stats",
    "group_by_subject",
    "group_by_type",
    "group_by_document_type",
    "monthly_trend",
    "month_label",
    "templates_by_subject",
    "template_summary",
]
