"""Predicate engine deciding whether a work passes a filter state."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from acadex.catalog.dates import parse_iso_date
from acadex.catalog.models import AcademicWork, FilterState

from .text import searchable_text

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CompiledFilter:
    """Filter state with its date bounds parsed once.

    Attributes:
        filters: Source filter state.
        date_from: Parsed lower bound, or None when unset or unparseable.
        date_to: Parsed upper bound, or None when unset or unparseable.
        tag_ids: Selected tag ids.
        query: Lowercased search query.
    """

    filters: FilterState
    date_from: Optional[date]
    date_to: Optional[date]
    tag_ids: frozenset[str]
    query: str

    def __call__(self, work: AcademicWork) -> bool:
        filters = self.filters
        if filters.semester and work.semester != filters.semester:
            return False
        if filters.subject and work.subject != filters.subject:
            return False
        if filters.work_type and work.work_type != filters.work_type:
            return False
        if filters.document_type and work.document_type != filters.document_type:
            return False
        if filters.professor and work.professor != filters.professor:
            return False

        if self.date_from is not None or self.date_to is not None:
            work_date = parse_iso_date(work.date)
            if work_date is None:
                return False
            if self.date_from is not None and work_date < self.date_from:
                return False
            if self.date_to is not None and work_date > self.date_to:
                return False

        if self.tag_ids and self.tag_ids.isdisjoint(work.tag_ids):
            return False

        if self.query and self.query not in searchable_text(work):
            return False

        return True


def compile_filter(filters: FilterState) -> CompiledFilter:
    """Prepare ``filters`` for repeated evaluation.

    Unparseable date bounds impose no constraint; a warning is logged for each.

    Args:
        filters: Filter state to compile.

    Returns:
        CompiledFilter: Callable predicate over works.
    """

    return CompiledFilter(
        filters=filters,
        date_from=_parse_bound("date_from", filters.date_from),
        date_to=_parse_bound("date_to", filters.date_to),
        tag_ids=frozenset(filters.tags),
        query=filters.search_query.lower(),
    )


def matches(work: AcademicWork, filters: FilterState) -> bool:
    """Return True when ``work`` satisfies every active constraint in ``filters``."""

    return compile_filter(filters)(work)


def filter_works(works: Iterable[AcademicWork], filters: FilterState) -> list[AcademicWork]:
    """Return the works passing ``filters`` in their original order.

    Args:
        works: Works to evaluate.
        filters: Active filter state.

    Returns:
        list[AcademicWork]: Matching works, order preserved.
    """

    predicate = compile_filter(filters)
    return [work for work in works if predicate(work)]


def active_filter_count(filters: FilterState) -> int:
    """Return the number of active constraints, excluding the search query.

    Each selected tag counts as one constraint.
    """

    scalars = [
        filters.semester,
        filters.subject,
        filters.work_type,
        filters.document_type,
        filters.professor,
        filters.date_from,
        filters.date_to,
    ]
    return sum(1 for value in scalars if value) + len(filters.tags)


def toggle_tag(filters: FilterState, tag_id: str) -> FilterState:
    """Return a new filter state with ``tag_id`` added or removed."""

    if tag_id in filters.tags:
        remaining = tuple(value for value in filters.tags if value != tag_id)
        return filters.with_changes(tags=remaining)
    return filters.with_changes(tags=(*filters.tags, tag_id))


def _parse_bound(field: str, value: str) -> Optional[date]:
    if not value:
        return None
    parsed = parse_iso_date(value)
    if parsed is None:
        LOGGER.warning("Ignoring unparseable %s bound %r.", field, value)
    return parsed


__all__ = [
    "CompiledFilter",
    "compile_filter",
    "matches",
    "filter_works",
    "active_filter_count",
    "toggle_tag",
]
