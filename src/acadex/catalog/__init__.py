"""Catalog domain: work models, the in-memory store, and seed data."""

from .errors import CatalogError, WorkNotFoundError
from .models import (
    DOCUMENT_TYPE_EXTENSIONS,
    DOCUMENT_TYPE_LABELS,
    WORK_TYPE_LABELS,
    AcademicWork,
    ChartDataPoint,
    DocumentType,
    FilterState,
    MonthlyTrendPoint,
    StatsData,
    Tag,
    WorkDraft,
    WorkType,
)
from .seed import SEED_WORKS, SEMESTERS, seeded_store
from .store import MutationOutcome, WorkStore

__all__ = [
    "CatalogError",
    "WorkNotFoundError",
    "AcademicWork",
    "WorkDraft",
    "Tag",
    "WorkType",
    "DocumentType",
    "FilterState",
    "StatsData",
    "ChartDataPoint",
    "MonthlyTrendPoint",
    "WORK_TYPE_LABELS",
    "DOCUMENT_TYPE_LABELS",
    "DOCUMENT_TYPE_EXTENSIONS",
    "MutationOutcome",
    "WorkStore",
    "SEED_WORKS",
    "SEMESTERS",
    "seeded_store",
]
