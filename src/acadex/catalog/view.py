"""Derived view keeping filtered works and aggregates in sync with the store."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from acadex.reports.aggregation import (
    DEFAULT_TREND_MONTHS,
    compute_stats,
    group_by_document_type,
    group_by_subject,
    group_by_type,
    monthly_trend,
    template_summary,
)
from acadex.reports.export import export_rows
from acadex.reports.models import ExportRow, TemplateSummary
from acadex.search.filters import active_filter_count, filter_works
from acadex.search.text import suggest_terms

from .models import AcademicWork, ChartDataPoint, FilterState, MonthlyTrendPoint, StatsData
from .store import WorkStore

LOGGER = logging.getLogger(__name__)


class AggregationScope(str, Enum):
    """Collection a consumer aggregates over."""

    ALL = "all"
    FILTERED = "filtered"


@dataclass(slots=True)
class DashboardSnapshot:
    """Dashboard data derived from the store and the active filter.

    Attributes:
        scope: Collection the charts and counters were computed from.
        stats: Summary counters.
        by_subject: Work counts per subject.
        by_type: Work counts per work type label.
        trend: Monthly counts, oldest first.
        recent: Leading works of the filtered collection.
        filtered_count: Number of works passing the active filter.
        has_active_filters: Whether any filter constraint is set.
    """

    scope: AggregationScope
    stats: StatsData
    by_subject: list[ChartDataPoint]
    by_type: list[ChartDataPoint]
    trend: list[MonthlyTrendPoint]
    recent: list[AcademicWork]
    filtered_count: int
    has_active_filters: bool


@dataclass(slots=True)
class ReportSnapshot:
    """Report data for one semester (or every semester when empty).

    Attributes:
        semester: Semester the report is scoped to; empty for all.
        works: Works in scope, store order.
        by_subject: Work counts per subject.
        by_type: Work counts per work type label.
        by_document_type: Work counts per document format label.
        trend: Monthly counts, oldest first.
        rows: Tabular export rows for ``works``.
    """

    semester: str
    works: list[AcademicWork]
    by_subject: list[ChartDataPoint]
    by_type: list[ChartDataPoint]
    by_document_type: list[ChartDataPoint]
    trend: list[MonthlyTrendPoint]
    rows: list[ExportRow]


class CatalogView:
    """Pull-based projection of a :class:`WorkStore` under a filter state.

    The filtered collection is cached and dropped whenever the store reports a
    mutation or the filter state is replaced; the next read recomputes it.
    """

    def __init__(
        self,
        store: WorkStore,
        filters: Optional[FilterState] = None,
        *,
        recent_limit: int = 6,
        trend_months: int = DEFAULT_TREND_MONTHS,
        suggestion_limit: int = 5,
        suggestion_min_length: int = 2,
    ) -> None:
        """Attach the view to ``store``.

        Args:
            store: Store providing the authoritative collection.
            filters: Initial filter state; defaults to no constraints.
            recent_limit: Number of filtered works listed on the dashboard.
            trend_months: Number of months kept in trend series.
            suggestion_limit: Maximum autocomplete suggestions.
            suggestion_min_length: Minimum query length for suggestions.
        """
        self._store = store
        self._filters = filters or FilterState()
        self._recent_limit = recent_limit
        self._trend_months = trend_months
        self._suggestion_limit = suggestion_limit
        self._suggestion_min_length = suggestion_min_length
        self._filtered: Optional[list[AcademicWork]] = None
        self._unsubscribe = store.subscribe(self._on_store_changed)

    @property
    def store(self) -> WorkStore:
        """Return the underlying store."""
        return self._store

    @property
    def filters(self) -> FilterState:
        """Return the active filter state."""
        return self._filters

    def set_filters(self, filters: FilterState) -> None:
        """Replace the active filter state wholesale."""
        self._filters = filters
        self._filtered = None

    def clear_filters(self) -> None:
        """Remove every filter constraint."""
        self.set_filters(FilterState())

    @property
    def filtered_works(self) -> list[AcademicWork]:
        """Return works passing the active filter, store order preserved."""
        if self._filtered is None:
            self._filtered = filter_works(self._store.get_works(), self._filters)
            LOGGER.debug(
                "Recomputed filtered view at revision %s: %s works.",
                self._store.revision,
                len(self._filtered),
            )
        return list(self._filtered)

    @property
    def active_filter_count(self) -> int:
        """Return the number of active non-search constraints."""
        return active_filter_count(self._filters)

    def works_for(self, scope: AggregationScope) -> list[AcademicWork]:
        """Return the collection a consumer with ``scope`` aggregates over."""
        if scope is AggregationScope.FILTERED:
            return self.filtered_works
        return self._store.get_works()

    def dashboard(
        self,
        scope: AggregationScope = AggregationScope.ALL,
        *,
        today: Optional[date] = None,
    ) -> DashboardSnapshot:
        """Return dashboard counters and charts.

        Charts and counters aggregate the full store unless ``scope`` asks for
        the filtered collection; the recent list always follows the filter.

        Args:
            scope: Collection the charts aggregate over.
            today: Reference date for the monthly counter.

        Returns:
            DashboardSnapshot: Derived dashboard data.
        """
        works = self.works_for(scope)
        filtered = self.filtered_works
        return DashboardSnapshot(
            scope=scope,
            stats=compute_stats(works, today=today),
            by_subject=group_by_subject(works),
            by_type=group_by_type(works),
            trend=monthly_trend(works, months=self._trend_months),
            recent=filtered[: self._recent_limit],
            filtered_count=len(filtered),
            has_active_filters=not self._filters.is_empty,
        )

    def report(self, semester: str = "") -> ReportSnapshot:
        """Return report aggregates scoped to ``semester``.

        The report scope is independent of the view's filter state.

        Args:
            semester: Semester to report on; empty for every semester.

        Returns:
            ReportSnapshot: Aggregates and export rows for the semester.
        """
        works = self._store.get_filtered_works(FilterState(semester=semester))
        return ReportSnapshot(
            semester=semester,
            works=works,
            by_subject=group_by_subject(works),
            by_type=group_by_type(works),
            by_document_type=group_by_document_type(works),
            trend=monthly_trend(works, months=self._trend_months),
            rows=export_rows(works),
        )

    def templates(self) -> TemplateSummary:
        """Return template counters grouped by subject over the full store."""
        return template_summary(self._store.get_works())

    def suggestions(self, query: str) -> list[str]:
        """Return autocomplete suggestions drawn from the filtered works."""
        return suggest_terms(
            self.filtered_works,
            query,
            limit=self._suggestion_limit,
            min_length=self._suggestion_min_length,
        )

    def close(self) -> None:
        """Detach the view from its store."""
        self._unsubscribe()

    def _on_store_changed(self, _store: WorkStore) -> None:
        self._filtered = None


__all__ = ["AggregationScope", "CatalogView", "DashboardSnapshot", "ReportSnapshot"]
