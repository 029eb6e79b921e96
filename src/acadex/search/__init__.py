"""Filtering and free-text search over catalog works."""

from .filters import (
    CompiledFilter,
    active_filter_count,
    compile_filter,
    filter_works,
    matches,
    toggle_tag,
)
from .text import matches_query, searchable_text, suggest_terms

__all__ = [
    "CompiledFilter",
    "compile_filter",
    "matches",
    "filter_works",
    "active_filter_count",
    "toggle_tag",
    "searchable_text",
    "matches_query",
    "suggest_terms",
]
