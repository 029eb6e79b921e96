"""Aggregations and exports consumed by dashboard and report views."""

from .aggregation import (
    compute_stats,
    group_by_document_type,
    group_by_subject,
    group_by_type,
    month_label,
    monthly_trend,
    template_summary,
    templates_by_subject,
)
from .export import EXPORT_HEADERS, default_export_filename, export_rows, paginate, write_csv
from .models import ExportRow, Page, TemplateSummary

__all__ = [
    "compute_stats",
    "group_by_subject",
    "group_by_type",
    "group_by_document_type",
    "monthly_trend",
    "month_label",
    "templates_by_subject",
    "template_summary",
    "EXPORT_HEADERS",
    "export_rows",
    "write_csv",
    "default_export_filename",
    "paginate",
    "ExportRow",
    "Page",
    "TemplateSummary",
]
