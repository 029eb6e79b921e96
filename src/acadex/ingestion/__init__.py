"""Upload-side helpers for new works."""

from .metadata import (
    REQUIRED_FIELDS,
    WORK_TYPE_KEYWORDS,
    ExtractedMetadata,
    detect_document_type,
    extract_metadata,
    format_file_size,
    validate_draft_fields,
)

__all__ = [
    "REQUIRED_FIELDS",
    "WORK_TYPE_KEYWORDS",
    "ExtractedMetadata",
    "detect_document_type",
    "extract_metadata",
    "format_file_size",
    "validate_draft_fields",
]
