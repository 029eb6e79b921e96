"""Catalog view tests."""

from __future__ import annotations

from datetime import date

from acadex.catalog import FilterState, WorkDraft, seeded_store
from acadex.catalog.view import AggregationScope, CatalogView


def _draft(**overrides: object) -> WorkDraft:
    fields: dict[str, object] = {
        "name": "Proyecto de Redes",
        "subject": "Programación",
        "work_type": "project",
        "document_type": "pdf",
        "professor": "Ing. Rodríguez Paz",
        "university": "Instituto Politécnico Nacional",
        "semester": "2024-2",
        "date": "2024-11-20",
        "file_name": "proyecto_redes.pdf",
        "file_size": 4096,
    }
    fields.update(overrides)
    return WorkDraft.model_validate(fields)


def test_filtered_works_follow_store_mutations() -> None:
    store = seeded_store()
    view = CatalogView(store, FilterState(subject="Programación"))
    assert [work.id for work in view.filtered_works] == ["1", "14", "20"]

    added = store.add_work(_draft())
    store.delete_work("14")

    assert [work.id for work in view.filtered_works] == [added.id, "1", "20"]


def test_set_and_clear_filters_recompute_results() -> None:
    view = CatalogView(seeded_store())

    view.set_filters(FilterState(semester="2023-1"))
    assert len(view.filtered_works) == 4
    assert view.active_filter_count == 1

    view.clear_filters()
    assert len(view.filtered_works) == 20
    assert view.filters.is_empty


def test_filtered_works_returns_a_copy() -> None:
    view = CatalogView(seeded_store())

    view.filtered_works.clear()

    assert len(view.filtered_works) == 20


def test_dashboard_aggregates_full_store_by_default() -> None:
    view = CatalogView(seeded_store(), FilterState(semester="2024-1"), recent_limit=3)

    snapshot = view.dashboard(today=date(2024, 11, 20))

    assert snapshot.scope is AggregationScope.ALL
    assert snapshot.stats.total_works == 20
    assert sum(point.value for point in snapshot.by_subject) == 20
    assert snapshot.filtered_count == 4
    assert [work.id for work in snapshot.recent] == ["9", "10", "11"]
    assert snapshot.has_active_filters


def test_dashboard_can_aggregate_filtered_collection() -> None:
    view = CatalogView(seeded_store(), FilterState(semester="2024-1"))

    snapshot = view.dashboard(AggregationScope.FILTERED, today=date(2024, 5, 1))

    assert snapshot.stats.total_works == 4
    assert snapshot.stats.works_this_month == 2
    assert [point.month for point in snapshot.trend] == ["Abr 24", "May 24"]


def test_report_is_independent_of_view_filters() -> None:
    view = CatalogView(seeded_store(), FilterState(subject="Química"))

    report = view.report("2023-2")

    assert [work.id for work in report.works] == ["13", "14", "15", "16"]
    assert [row.name for row in report.rows] == [work.name for work in report.works]
    assert sum(point.value for point in report.by_document_type) == 4
    assert view.report().works == view.store.get_works()


def test_templates_ignore_filters() -> None:
    view = CatalogView(seeded_store(), FilterState(subject="Historia"))

    assert view.templates().total == 5


def test_suggestions_draw_from_filtered_works() -> None:
    view = CatalogView(seeded_store(), FilterState(subject="Matemáticas"))

    suggestions = view.suggestions("examen")

    assert suggestions == [
        "Examen Parcial - Cálculo Diferencial",
        "Examen Final - Álgebra Lineal",
    ]
    assert view.suggestions("e") == []


def test_close_detaches_from_store() -> None:
    store = seeded_store()
    view = CatalogView(store)
    assert len(view.filtered_works) == 20

    view.close()
    store.delete_work("1")

    assert len(view.filtered_works) == 20
