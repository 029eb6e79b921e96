"""Metadata helpers used when a new work is uploaded."""

from __future__ import annotations

import re
from pathlib import PurePath
from typing import Any, Iterable, Mapping, Optional

from pydantic import BaseModel

from acadex.catalog.models import DocumentType, WorkType

_EXTENSION_TYPES: dict[str, DocumentType] = {
    "pdf": DocumentType.PDF,
    "doc": DocumentType.WORD,
    "docx": DocumentType.WORD,
    "xls": DocumentType.EXCEL,
    "xlsx": DocumentType.EXCEL,
    "ppt": DocumentType.POWERPOINT,
    "pptx": DocumentType.POWERPOINT,
}

# Checked in enum order; the first type with a matching keyword wins.
WORK_TYPE_KEYWORDS: dict[WorkType, tuple[str, ...]] = {
    WorkType.ESSAY: ("ensayo", "essay"),
    WorkType.REPORT: ("informe", "reporte", "report"),
    WorkType.PRESENTATION: ("presentacion", "ppt", "slides"),
    WorkType.PROJECT: ("proyecto", "project", "final"),
    WorkType.HOMEWORK: ("tarea", "homework", "ejercicio"),
    WorkType.EXAM: ("examen", "parcial", "final", "quiz"),
}

REQUIRED_FIELDS: dict[str, str] = {
    "name": "El nombre es requerido",
    "subject": "La materia es requerida",
    "work_type": "El tipo de trabajo es requerido",
    "document_type": "El formato es requerido",
    "professor": "El profesor es requerido",
    "university": "La universidad es requerida",
    "semester": "El semestre es requerido",
    "date": "La fecha es requerida",
    "file_name": "Debes subir un archivo",
}

_SEPARATORS = re.compile(r"[_-]")


class ExtractedMetadata(BaseModel):
    """Fields guessed from an uploaded file name.

    Attributes:
        name: Readable title derived from the file stem.
        subject: First known subject mentioned in the name, if any.
        work_type: Work type inferred from keywords, if any.
        document_type: Document type inferred from the extension, if any.
    """

    name: str
    subject: Optional[str] = None
    work_type: Optional[WorkType] = None
    document_type: Optional[DocumentType] = None


def detect_document_type(file_name: str) -> Optional[DocumentType]:
    """Return the document type implied by the extension of ``file_name``."""

    suffix = PurePath(file_name).suffix.lower().lstrip(".")
    return _EXTENSION_TYPES.get(suffix)


def extract_metadata(file_name: str, subjects: Iterable[str] = ()) -> ExtractedMetadata:
    """Guess work metadata from ``file_name``.

    Args:
        file_name: Name of the uploaded file.
        subjects: Known subjects, checked in order for a case-insensitive mention.

    Returns:
        ExtractedMetadata: Derived name plus any detected subject and types.
    """

    clean = _SEPARATORS.sub(" ", PurePath(file_name).stem)
    lowered = clean.lower()

    subject = next((value for value in subjects if value.lower() in lowered), None)
    work_type = next(
        (
            kind
            for kind, keywords in WORK_TYPE_KEYWORDS.items()
            if any(keyword in lowered for keyword in keywords)
        ),
        None,
    )

    return ExtractedMetadata(
        name=clean[:1].upper() + clean[1:],
        subject=subject,
        work_type=work_type,
        document_type=detect_document_type(file_name),
    )


def validate_draft_fields(fields: Mapping[str, Any]) -> dict[str, str]:
    """Return messages for required upload fields that are missing or blank.

    Args:
        fields: Candidate work fields as entered by the user.

    Returns:
        dict[str, str]: Field name to error message; empty when complete.
    """

    errors: dict[str, str] = {}
    for key, message in REQUIRED_FIELDS.items():
        value = fields.get(key)
        if value is None or (isinstance(value, str) and not value.strip()):
            errors[key] = message
    return errors


def format_file_size(num_bytes: int) -> str:
    """Return ``num_bytes`` as a short human-readable size."""

    if num_bytes < 1024:
        return f"{num_bytes} B"
    if num_bytes < 1024 * 1024:
        return f"{num_bytes / 1024:.1f} KB"
    return f"{num_bytes / (1024 * 1024):.1f} MB"


__all__ = [
    "WORK_TYPE_KEYWORDS",
    "REQUIRED_FIELDS",
    "ExtractedMetadata",
    "detect_document_type",
    "extract_metadata",
    "validate_draft_fields",
    "format_file_size",
]
