"""Report data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Generic, List, TypeVar

from acadex.catalog.models import AcademicWork, CatalogBaseModel

T = TypeVar("T")


class ExportRow(CatalogBaseModel):
    """One flattened row of the tabular report export."""

    name: str
    subject: str
    work_type_label: str
    professor: str
    semester: str
    date: str
    document_type_label: str

    def as_list(self) -> list[str]:
        """Return the row values in export column order."""
        return [
            self.name,
            self.subject,
            self.work_type_label,
            self.professor,
            self.semester,
            self.date,
            self.document_type_label,
        ]


class TemplateSummary(CatalogBaseModel):
    """Templates grouped by subject with headline counters.

    Attributes:
        total: Number of works flagged as templates.
        subjects: Number of distinct subjects among templates.
        versioned: Number of templates with a version above 1.
        by_subject: Templates grouped by subject in first-seen order.
    """

    total: int
    subjects: int
    versioned: int
    by_subject: Dict[str, List[AcademicWork]]


@dataclass(slots=True)
class Page(Generic[T]):
    """One page of a paginated sequence.

    Attributes:
        items: Items on this page.
        page: 1-based page number after clamping.
        per_page: Maximum items per page.
        total_items: Length of the full sequence.
        total_pages: Number of pages; zero for an empty sequence.
    """

    items: list[T] = field(default_factory=list)
    page: int = 1
    per_page: int = 10
    total_items: int = 0
    total_pages: int = 0

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


__all__ = ["ExportRow", "TemplateSummary", "Page"]
