"""Upload metadata helper tests."""

from __future__ import annotations

import pytest

from acadex.catalog import DocumentType, WorkType
from acadex.catalog.seed import SUBJECTS
from acadex.ingestion import (
    REQUIRED_FIELDS,
    detect_document_type,
    extract_metadata,
    format_file_size,
    validate_draft_fields,
)


@pytest.mark.parametrize(
    ("file_name", "expected"),
    [
        ("informe.PDF", DocumentType.PDF),
        ("tarea.doc", DocumentType.WORD),
        ("tarea.docx", DocumentType.WORD),
        ("datos.xlsx", DocumentType.EXCEL),
        ("slides.ppt", DocumentType.POWERPOINT),
        ("notas.txt", None),
        ("sin_extension", None),
    ],
)
def test_detect_document_type(file_name: str, expected: DocumentType | None) -> None:
    assert detect_document_type(file_name) == expected


def test_extract_metadata_derives_name_subject_and_types() -> None:
    metadata = extract_metadata("informe_laboratorio-física.docx", SUBJECTS)

    assert metadata.name == "Informe laboratorio física"
    assert metadata.subject == "Física"
    assert metadata.work_type is WorkType.REPORT
    assert metadata.document_type is DocumentType.WORD


def test_extract_metadata_prefers_first_type_in_enum_order() -> None:
    metadata = extract_metadata("examen_final_programacion.pdf", SUBJECTS)

    assert metadata.work_type is WorkType.PROJECT
    assert metadata.subject is None


def test_extract_metadata_without_hints() -> None:
    metadata = extract_metadata("apuntes.txt")

    assert metadata.name == "Apuntes"
    assert metadata.subject is None
    assert metadata.work_type is None
    assert metadata.document_type is None


def test_validate_draft_fields_reports_blank_and_missing_values() -> None:
    errors = validate_draft_fields({"name": "  ", "subject": "Historia"})

    assert errors["name"] == REQUIRED_FIELDS["name"]
    assert "subject" not in errors
    assert set(errors) == set(REQUIRED_FIELDS) - {"subject"}


def test_validate_draft_fields_accepts_complete_fields() -> None:
    fields = {key: "valor" for key in REQUIRED_FIELDS}

    assert validate_draft_fields(fields) == {}


@pytest.mark.parametrize(
    ("size", "expected"),
    [
        (0, "0 B"),
        (1023, "1023 B"),
        (1024, "1.0 KB"),
        (2_457_600, "2.3 MB"),
    ],
)
def test_format_file_size(size: int, expected: str) -> None:
    assert format_file_size(size) == expected
