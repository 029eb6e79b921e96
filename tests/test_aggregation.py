"""Aggregation tests for dashboard and report series."""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Any

from acadex.catalog import AcademicWork, ChartDataPoint, seeded_store
from acadex.reports import (
    compute_stats,
    group_by_document_type,
    group_by_subject,
    group_by_type,
    month_label,
    monthly_trend,
    template_summary,
)


def _work(work_id: str, **overrides: Any) -> AcademicWork:
    stamp = datetime(2024, 1, 1, tzinfo=timezone.utc)
    fields: dict[str, Any] = {
        "id": work_id,
        "name": f"Trabajo {work_id}",
        "subject": "Física",
        "work_type": "homework",
        "document_type": "word",
        "professor": "Dra. López Herrera",
        "university": "Instituto Politécnico Nacional",
        "semester": "2024-1",
        "date": "2024-01-10",
        "file_name": f"trabajo_{work_id}.docx",
        "file_size": 512,
        "created_at": stamp,
        "updated_at": stamp,
    }
    fields.update(overrides)
    return AcademicWork.model_validate(fields)


def test_compute_stats_over_seed_catalog() -> None:
    works = seeded_store().get_works()

    stats = compute_stats(works, today=date(2024, 11, 20))

    assert stats.total_works == 20
    assert stats.total_subjects == 12
    assert stats.total_semesters == 4
    assert stats.total_professors == 8
    assert stats.works_this_month == 4
    assert stats.templates_count == 5


def test_compute_stats_on_empty_collection() -> None:
    stats = compute_stats([], today=date(2024, 11, 20))

    assert stats.total_works == 0
    assert stats.works_this_month == 0
    assert stats.templates_count == 0


def test_groupings_sum_to_collection_size() -> None:
    works = seeded_store().get_works()

    for series in (group_by_subject(works), group_by_type(works), group_by_document_type(works)):
        assert sum(point.value for point in series) == len(works)
        assert all(point.value > 0 for point in series)


def test_group_by_subject_sorts_descending_with_stable_ties() -> None:
    works = [
        _work("1", subject="Química"),
        _work("2", subject="Historia"),
        _work("3", subject="Historia"),
        _work("4", subject="Inglés"),
    ]

    assert group_by_subject(works) == [
        ChartDataPoint(name="Historia", value=2),
        ChartDataPoint(name="Química", value=1),
        ChartDataPoint(name="Inglés", value=1),
    ]


def test_group_by_type_uses_display_labels() -> None:
    works = seeded_store().get_works()

    series = group_by_type(works)

    assert series[0] == ChartDataPoint(name="Proyecto", value=6)
    assert {point.name for point in series} == {
        "Ensayo",
        "Informe",
        "Presentación",
        "Proyecto",
        "Tarea",
        "Examen",
    }


def test_group_by_document_type_keeps_first_seen_order() -> None:
    works = [
        _work("1", document_type="excel"),
        _work("2", document_type="pdf"),
        _work("3", document_type="pdf"),
    ]

    assert group_by_document_type(works) == [
        ChartDataPoint(name="Excel", value=1),
        ChartDataPoint(name="PDF", value=2),
    ]


def test_aggregations_are_idempotent_and_do_not_mutate_input() -> None:
    works = seeded_store().get_works()
    snapshot = list(works)

    assert group_by_subject(works) == group_by_subject(works)
    assert monthly_trend(works) == monthly_trend(works)
    assert compute_stats(works, today=date(2024, 1, 1)) == compute_stats(
        works, today=date(2024, 1, 1)
    )
    assert works == snapshot


def test_monthly_trend_keeps_last_months_in_ascending_order() -> None:
    works = [
        _work(str(index), date=f"{2023 + (index // 12)}-{index % 12 + 1:02d}-05")
        for index in range(14)
    ]

    trend = monthly_trend(works, months=12)

    assert len(trend) == 12
    assert trend[0].month == "Mar 23"
    assert trend[-1].month == "Feb 24"
    assert all(point.count == 1 for point in trend)


def test_monthly_trend_counts_per_month_and_skips_bad_dates() -> None:
    works = [
        _work("1", date="2024-11-15"),
        _work("2", date="2024-11-02"),
        _work("3", date="2024-10-22"),
        _work("4", date="sin fecha"),
    ]

    trend = monthly_trend(works)

    assert [(point.month, point.count) for point in trend] == [("Oct 24", 1), ("Nov 24", 2)]
    assert monthly_trend(works, months=0) == []


def test_month_label_uses_spanish_abbreviations() -> None:
    assert month_label(2024, 1) == "Ene 24"
    assert month_label(2023, 12) == "Dic 23"
    assert month_label(2005, 8) == "Ago 05"


def test_template_summary_over_seed_catalog() -> None:
    summary = template_summary(seeded_store().get_works())

    assert summary.total == 5
    assert summary.subjects == 5
    assert summary.versioned == 4
    assert list(summary.by_subject) == [
        "Química",
        "Filosofía",
        "Economía",
        "Física",
        "Programación",
    ]
