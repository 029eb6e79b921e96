"""Filter engine tests."""

from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Any

import pytest

from acadex.catalog import AcademicWork, FilterState, Tag, seeded_store
from acadex.catalog.dates import parse_iso_date
from acadex.search import (
    active_filter_count,
    compile_filter,
    filter_works,
    matches,
    suggest_terms,
    toggle_tag,
)

_TAG_A = Tag(id="tag-a", name="Alfa", color="red")
_TAG_B = Tag(id="tag-b", name="Beta", color="blue")
_TAG_C = Tag(id="tag-c", name="Gamma", color="green")
_TAG_D = Tag(id="tag-d", name="Delta", color="grey")


def _work(work_id: str, **overrides: Any) -> AcademicWork:
    """Return a stored work with ``overrides`` applied to sample values."""

    stamp = datetime(2024, 11, 1, tzinfo=timezone.utc)
    fields: dict[str, Any] = {
        "id": work_id,
        "name": f"Trabajo {work_id}",
        "subject": "Programación",
        "work_type": "project",
        "document_type": "pdf",
        "professor": "Ing. Rodríguez Paz",
        "university": "Instituto Politécnico Nacional",
        "semester": "2024-2",
        "date": "2024-11-15",
        "file_name": f"trabajo_{work_id}.pdf",
        "file_size": 1000,
        "created_at": stamp,
        "updated_at": stamp,
    }
    fields.update(overrides)
    return AcademicWork.model_validate(fields)


def test_empty_filter_passes_everything() -> None:
    works = seeded_store().get_works()

    assert filter_works(works, FilterState()) == works


@pytest.mark.parametrize(
    ("filters", "expected"),
    [
        (FilterState(semester="2024-1"), ["9", "10", "11", "12"]),
        (FilterState(subject="Matemáticas"), ["7", "15"]),
        (FilterState(work_type="exam"), ["7", "15"]),
        (FilterState(document_type="excel"), ["4", "9", "17"]),
        (FilterState(professor="Mtro. Sánchez Mora"), ["9", "12", "17"]),
    ],
)
def test_single_field_filters(filters: FilterState, expected: list[str]) -> None:
    works = seeded_store().get_works()

    assert [work.id for work in filter_works(works, filters)] == expected


def test_constraints_compose_with_and() -> None:
    works = seeded_store().get_works()
    filters = FilterState(subject="Programación", semester="2023-1", document_type="pdf")

    assert [work.id for work in filter_works(works, filters)] == ["20"]


def test_tags_match_when_any_selected_tag_is_present() -> None:
    work = _work("w1", tags=(_TAG_A, _TAG_B))

    assert matches(work, FilterState(tags=("tag-b", "tag-c")))
    assert not matches(work, FilterState(tags=("tag-c", "tag-d")))


def test_date_from_keeps_works_on_or_after_bound() -> None:
    early = _work("w1", date="2024-10-15")
    late = _work("w2", date="2024-11-15")

    result = filter_works([late, early], FilterState(date_from="2024-11-01"))

    assert result == [late]


def test_date_bounds_are_inclusive() -> None:
    work = _work("w1", date="2024-11-15")

    assert matches(work, FilterState(date_from="2024-11-15", date_to="2024-11-15"))


def test_inverted_date_range_matches_nothing() -> None:
    works = seeded_store().get_works()

    assert filter_works(works, FilterState(date_from="2024-12-01", date_to="2024-01-01")) == []


def test_unparseable_bound_is_ignored_with_warning(caplog: pytest.LogCaptureFixture) -> None:
    works = seeded_store().get_works()

    with caplog.at_level(logging.WARNING, logger="acadex.search.filters"):
        result = filter_works(works, FilterState(date_from="not-a-date"))

    assert result == works
    assert "not-a-date" in caplog.text


def test_unparseable_work_date_fails_active_bounds_only() -> None:
    broken = _work("w1", date="someday")

    assert matches(broken, FilterState())
    assert not matches(broken, FilterState(date_to="2030-01-01"))


def test_search_query_is_case_insensitive_substring() -> None:
    works = seeded_store().get_works()

    result = filter_works(works, FilterState(search_query="álgebra"))

    assert [work.name for work in result] == ["Examen Final - Álgebra Lineal"]


def test_search_query_covers_description_university_and_tags() -> None:
    work = _work(
        "w1",
        description="Comparación de algoritmos",
        tags=(_TAG_C,),
    )

    assert matches(work, FilterState(search_query="ALGORITMOS"))
    assert matches(work, FilterState(search_query="politécnico"))
    assert matches(work, FilterState(search_query="gamma"))
    assert not matches(work, FilterState(search_query="semestre"))


def test_filter_result_is_subset_in_original_order() -> None:
    works = seeded_store().get_works()
    filters = FilterState(tags=("tag-1",), date_from="2023-06-01")

    result = filter_works(works, filters)
    positions = [works.index(work) for work in result]

    assert positions == sorted(positions)
    assert all(compile_filter(filters)(work) for work in result)


def test_active_filter_count_excludes_search_query() -> None:
    filters = FilterState(
        semester="2024-2",
        work_type="essay",
        date_from="2024-01-01",
        search_query="ensayo",
        tags=("tag-1", "tag-2"),
    )

    assert active_filter_count(filters) == 5
    assert active_filter_count(FilterState(search_query="x")) == 0


def test_toggle_tag_adds_then_removes() -> None:
    filters = FilterState(tags=("tag-1",))

    added = toggle_tag(filters, "tag-2")
    removed = toggle_tag(added, "tag-1")

    assert added.tags == ("tag-1", "tag-2")
    assert removed.tags == ("tag-2",)
    assert filters.tags == ("tag-1",)


def test_suggest_terms_requires_minimum_length_and_limits_results() -> None:
    works = seeded_store().get_works()

    assert suggest_terms(works, "a") == []
    suggestions = suggest_terms(works, "an", limit=3)
    assert len(suggestions) == 3
    assert len(set(suggestions)) == 3
    assert all("an" in term.lower() for term in suggestions)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2024-11-15", date(2024, 11, 15)),
        ("2024-11-15T10:30:00Z", date(2024, 11, 15)),
        (" 2024-02-29 ", date(2024, 2, 29)),
        ("2023-02-29", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_iso_date(value: str | None, expected: date | None) -> None:
    assert parse_iso_date(value) == expected


def test_datetime_work_dates_compare_by_calendar_day() -> None:
    work = _work("w1", date="2024-11-15T23:59:00Z")

    assert matches(work, FilterState(date_to="2024-11-15"))
    assert not matches(work, FilterState(date_from="2024-11-16"))
