"""Catalog data models for academic works, tags, and filter state."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class WorkType(str, Enum):
    """Kind of academic work."""

    ESSAY = "essay"
    REPORT = "report"
    PRESENTATION = "presentation"
    PROJECT = "project"
    HOMEWORK = "homework"
    EXAM = "exam"


class DocumentType(str, Enum):
    """Document format of the file attached to a work."""

    PDF = "pdf"
    WORD = "word"
    EXCEL = "excel"
    POWERPOINT = "powerpoint"


WORK_TYPE_LABELS: dict[WorkType, str] = {
    WorkType.ESSAY: "Ensayo",
    WorkType.REPORT: "Informe",
    WorkType.PRESENTATION: "Presentación",
    WorkType.PROJECT: "Proyecto",
    WorkType.HOMEWORK: "Tarea",
    WorkType.EXAM: "Examen",
}

DOCUMENT_TYPE_LABELS: dict[DocumentType, str] = {
    DocumentType.PDF: "PDF",
    DocumentType.WORD: "Word",
    DocumentType.EXCEL: "Excel",
    DocumentType.POWERPOINT: "PowerPoint",
}

DOCUMENT_TYPE_EXTENSIONS: dict[DocumentType, str] = {
    DocumentType.PDF: ".pdf",
    DocumentType.WORD: ".docx",
    DocumentType.EXCEL: ".xlsx",
    DocumentType.POWERPOINT: ".pptx",
}


class CatalogBaseModel(BaseModel):
    """Shared configuration for immutable catalog models."""

    model_config = ConfigDict(extra="forbid", frozen=True)


class Tag(CatalogBaseModel):
    """Label attached to works by value.

    Attributes:
        id: Unique tag identifier.
        name: Display name; not unique across the vocabulary.
        color: CSS color used by presentation layers.
    """

    id: str
    name: str
    color: str


class WorkDraft(CatalogBaseModel):
    """Caller-supplied fields for a new academic work.

    Attributes:
        name: Title of the work.
        subject: Subject the work belongs to.
        work_type: Kind of work.
        document_type: Format of the attached file.
        professor: Professor who assigned the work.
        university: Institution where the work was produced.
        semester: Academic period label such as ``2024-2``.
        date: User-supplied ISO date of the work.
        file_name: Name of the attached file.
        file_size: Size of the attached file in bytes.
        tags: Tags embedded by value.
        is_template: Whether the work is flagged for reuse.
        version: Caller-controlled version number.
        description: Optional free-text description.
    """

    name: str
    subject: str
    work_type: WorkType
    document_type: DocumentType
    professor: str
    university: str
    semester: str
    date: str
    file_name: str
    file_size: int = Field(ge=0)
    tags: Tuple[Tag, ...] = ()
    is_template: bool = False
    version: int = Field(default=1, ge=1)
    description: Optional[str] = None

    @property
    def work_type_label(self) -> str:
        """Return the human-readable label for the work type."""
        return WORK_TYPE_LABELS[self.work_type]

    @property
    def document_type_label(self) -> str:
        """Return the human-readable label for the document type."""
        return DOCUMENT_TYPE_LABELS[self.document_type]

    @property
    def tag_ids(self) -> frozenset[str]:
        """Return the ids of the embedded tags."""
        return frozenset(tag.id for tag in self.tags)


class AcademicWork(WorkDraft):
    """Catalogued academic work with system-assigned identity and timestamps.

    Attributes:
        id: Unique identifier assigned by the store.
        created_at: Creation timestamp; never modified.
        updated_at: Timestamp of the most recent mutation.
    """

    id: str
    created_at: datetime
    updated_at: datetime


class FilterState(CatalogBaseModel):
    """Full set of active constraints applied to the work collection.

    Every scalar field uses the empty string for "no constraint"; ``tags`` holds
    tag ids and is unconstrained when empty.
    """

    semester: str = ""
    subject: str = ""
    work_type: Union[Literal[""], WorkType] = ""
    document_type: Union[Literal[""], DocumentType] = ""
    professor: str = ""
    date_from: str = ""
    date_to: str = ""
    search_query: str = ""
    tags: Tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        """Return True when no field constrains the collection."""
        return self == FilterState()

    def with_changes(self, **fields: Any) -> "FilterState":
        """Return a new filter state with ``fields`` replaced.

        Args:
            **fields: Field values overriding the current ones.

        Returns:
            FilterState: Validated replacement filter state.
        """
        data = self.model_dump()
        data.update(fields)
        return FilterState.model_validate(data)


class StatsData(CatalogBaseModel):
    """Summary counters shown on the dashboard."""

    total_works: int
    total_subjects: int
    total_semesters: int
    total_professors: int
    works_this_month: int
    templates_count: int


class ChartDataPoint(CatalogBaseModel):
    """Grouped count for a categorical chart."""

    name: str
    value: int


class MonthlyTrendPoint(CatalogBaseModel):
    """Count of works dated within one calendar month."""

    month: str
    count: int


__all__ = [
    "WorkType",
    "DocumentType",
    "WORK_TYPE_LABELS",
    "DOCUMENT_TYPE_LABELS",
    "DOCUMENT_TYPE_EXTENSIONS",
    "CatalogBaseModel",
    "Tag",
    "WorkDraft",
    "AcademicWork",
    "FilterState",
    "StatsData",
    "ChartDataPoint",
    "MonthlyTrendPoint",
]
