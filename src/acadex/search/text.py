"""Free-text matching helpers for catalog search."""

from __future__ import annotations

from typing import Iterable

from acadex.catalog.models import AcademicWork


def searchable_text(work: AcademicWork) -> str:
    """Return the lowercase haystack used by the search query.

    Args:
        work: Work whose descriptive fields should be searchable.

    Returns:
        str: Name, subject, professor, university, description and tag names
        joined by single spaces and lowercased.
    """

    parts = [
        work.name,
        work.subject,
        work.professor,
        work.university,
        work.description or "",
        *(tag.name for tag in work.tags),
    ]
    return " ".join(parts).lower()


def matches_query(work: AcademicWork, query: str) -> bool:
    """Return True when ``query`` is a case-insensitive substring of the work text."""

    if not query:
        return True
    return query.lower() in searchable_text(work)


def suggest_terms(
    works: Iterable[AcademicWork],
    query: str,
    *,
    limit: int = 5,
    min_length: int = 2,
) -> list[str]:
    """Return autocomplete candidates containing ``query``.

    Names, subjects, professors and tag names are considered in collection
    order; each distinct term is reported once.

    Args:
        works: Works to draw candidate terms from.
        query: Partial text typed by the user.
        limit: Maximum number of suggestions returned.
        min_length: Queries shorter than this produce no suggestions.

    Returns:
        list[str]: Distinct matching terms in first-seen order.
    """

    if not query or len(query) < min_length or limit <= 0:
        return []

    needle = query.lower()
    found: dict[str, None] = {}
    for work in works:
        candidates = [work.name, work.subject, work.professor, *(tag.name for tag in work.tags)]
        for term in candidates:
            if needle in term.lower():
                found.setdefault(term, None)
    return list(found)[:limit]


__all__ = ["searchable_text", "matches_query", "suggest_terms"]
