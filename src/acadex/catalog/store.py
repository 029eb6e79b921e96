"""In-memory work store owning works, tags, and reference vocabularies."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any, Callable, Iterable, Mapping, Optional

from .errors import WorkNotFoundError
from .models import AcademicWork, FilterState, Tag, WorkDraft

LOGGER = logging.getLogger(__name__)

Clock = Callable[[], datetime]
Listener = Callable[["WorkStore"], None]

_PROTECTED_FIELDS = frozenset({"id", "created_at", "updated_at"})


class MutationOutcome(str, Enum):
    """Result of a mutation addressed to a work id."""

    FOUND = "found"
    NOT_FOUND = "not_found"

    @property
    def found(self) -> bool:
        """Return True when the targeted work existed."""
        return self is MutationOutcome.FOUND


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class WorkStore:
    """Single source of truth for catalog state within one session.

    Works are kept most-recent-first. Every effective mutation bumps
    :attr:`revision` and notifies subscribers synchronously.
    """

    def __init__(
        self,
        works: Iterable[AcademicWork] = (),
        *,
        tags: Iterable[Tag] = (),
        subjects: Iterable[str] = (),
        professors: Iterable[str] = (),
        universities: Iterable[str] = (),
        strict: bool = False,
        clock: Clock | None = None,
    ) -> None:
        """Initialize the store with seed data.

        Args:
            works: Initial works, in display order.
            tags: Initial tag vocabulary.
            subjects: Initial subject vocabulary.
            professors: Initial professor vocabulary.
            universities: Initial university vocabulary.
            strict: Raise :class:`WorkNotFoundError` for unknown ids instead of
                silently ignoring them.
            clock: Callable returning the current time; defaults to UTC now.
        """
        self._works: list[AcademicWork] = list(works)
        self._tags: list[Tag] = list(tags)
        self._subjects: list[str] = list(dict.fromkeys(subjects))
        self._professors: list[str] = list(dict.fromkeys(professors))
        self._universities: list[str] = list(dict.fromkeys(universities))
        self._strict = strict
        self._clock = clock or _utcnow
        self._issued_ids: set[str] = {work.id for work in self._works}
        self._issued_ids.update(tag.id for tag in self._tags)
        self._listeners: list[Listener] = []
        self._revision = 0

    @property
    def strict(self) -> bool:
        """Return whether unknown ids raise instead of being ignored."""
        return self._strict

    @property
    def revision(self) -> int:
        """Return a counter incremented after every effective mutation."""
        return self._revision

    # Queries -----------------------------------------------------------

    def get_works(self) -> list[AcademicWork]:
        """Return all works, most recent first."""
        return list(self._works)

    def get_work(self, work_id: str) -> Optional[AcademicWork]:
        """Return the work with ``work_id`` or None when absent."""
        index = self._index_of(work_id)
        return None if index is None else self._works[index]

    def get_filtered_works(self, filters: FilterState) -> list[AcademicWork]:
        """Return works passing ``filters``, preserving store order."""
        from acadex.search.filters import filter_works

        return filter_works(self._works, filters)

    def get_tags(self) -> list[Tag]:
        """Return the tag vocabulary."""
        return list(self._tags)

    def get_subjects(self) -> list[str]:
        """Return the subject vocabulary."""
        return list(self._subjects)

    def get_professors(self) -> list[str]:
        """Return the professor vocabulary."""
        return list(self._professors)

    def get_universities(self) -> list[str]:
        """Return the university vocabulary."""
        return list(self._universities)

    # Mutations ---------------------------------------------------------

    def add_work(self, draft: WorkDraft | Mapping[str, Any]) -> AcademicWork:
        """Create a work from ``draft`` and insert it at the front.

        Args:
            draft: Caller-supplied work fields. No validation beyond model typing
                is applied.

        Returns:
            AcademicWork: Newly created work with id and timestamps assigned.
        """
        if not isinstance(draft, WorkDraft):
            draft = WorkDraft.model_validate(draft)
        now = self._clock()
        payload = draft.model_dump()
        payload.update(id=self._new_id("work"), created_at=now, updated_at=now)
        work = AcademicWork.model_validate(payload)
        self._works.insert(0, work)
        LOGGER.debug("Added work %s (%s).", work.id, work.name)
        self._changed()
        return work

    def update_work(self, work_id: str, **fields: Any) -> MutationOutcome:
        """Merge ``fields`` into the work identified by ``work_id``.

        ``id``, ``created_at`` and ``updated_at`` are managed by the store and
        ignored when supplied. ``version`` is left to the caller.

        Args:
            work_id: Identifier of the work to update.
            **fields: Field values to merge.

        Returns:
            MutationOutcome: Whether the work was found.

        Raises:
            WorkNotFoundError: If the store is strict and the id is unknown.
        """
        index = self._require(work_id, "update")
        if index is None:
            return MutationOutcome.NOT_FOUND

        ignored = _PROTECTED_FIELDS.intersection(fields)
        if ignored:
            LOGGER.debug("Ignoring store-managed fields %s for %s.", sorted(ignored), work_id)
        current = self._works[index]
        payload = current.model_dump()
        payload.update({key: value for key, value in fields.items() if key not in ignored})
        payload["updated_at"] = self._next_timestamp(current)
        self._works[index] = AcademicWork.model_validate(payload)
        LOGGER.debug("Updated work %s: %s.", work_id, sorted(set(fields) - ignored))
        self._changed()
        return MutationOutcome.FOUND

    def delete_work(self, work_id: str) -> MutationOutcome:
        """Remove the work identified by ``work_id`` permanently.

        Raises:
            WorkNotFoundError: If the store is strict and the id is unknown.
        """
        index = self._require(work_id, "delete")
        if index is None:
            return MutationOutcome.NOT_FOUND
        del self._works[index]
        LOGGER.debug("Deleted work %s.", work_id)
        self._changed()
        return MutationOutcome.FOUND

    def toggle_template(self, work_id: str) -> MutationOutcome:
        """Flip the template flag of the work identified by ``work_id``.

        Raises:
            WorkNotFoundError: If the store is strict and the id is unknown.
        """
        index = self._require(work_id, "toggle")
        if index is None:
            return MutationOutcome.NOT_FOUND
        current = self._works[index]
        self._works[index] = current.model_copy(
            update={
                "is_template": not current.is_template,
                "updated_at": self._next_timestamp(current),
            }
        )
        LOGGER.debug("Template flag for %s set to %s.", work_id, not current.is_template)
        self._changed()
        return MutationOutcome.FOUND

    def add_tag(self, name: str, color: str) -> Tag:
        """Append a new tag to the vocabulary; names are not deduplicated."""
        tag = Tag(id=self._new_id("tag"), name=name, color=color)
        self._tags.append(tag)
        LOGGER.debug("Added tag %s (%s).", tag.id, name)
        self._changed()
        return tag

    def add_subject(self, name: str) -> bool:
        """Append ``name`` to the subjects unless already present."""
        return self._append_unique(self._subjects, name)

    def add_professor(self, name: str) -> bool:
        """Append ``name`` to the professors unless already present."""
        return self._append_unique(self._professors, name)

    def add_university(self, name: str) -> bool:
        """Append ``name`` to the universities unless already present."""
        return self._append_unique(self._universities, name)

    # Subscriptions -----------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` to run after every effective mutation.

        Args:
            listener: Callable receiving the store.

        Returns:
            Callable[[], None]: Function removing the subscription.
        """
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    # Internal helpers -------------------------------------------------

    def _index_of(self, work_id: str) -> Optional[int]:
        for index, work in enumerate(self._works):
            if work.id == work_id:
                return index
        return None

    def _require(self, work_id: str, action: str) -> Optional[int]:
        index = self._index_of(work_id)
        if index is None:
            if self._strict:
                raise WorkNotFoundError(work_id)
            LOGGER.info("Skipping %s for unknown work %s.", action, work_id)
        return index

    def _new_id(self, prefix: str) -> str:
        while True:
            candidate = f"{prefix}-{uuid.uuid4().hex[:12]}"
            if candidate not in self._issued_ids:
                self._issued_ids.add(candidate)
                return candidate

    def _next_timestamp(self, work: AcademicWork) -> datetime:
        now = self._clock()
        floor = work.updated_at + timedelta(microseconds=1)
        return now if now >= floor else floor

    def _append_unique(self, vocabulary: list[str], name: str) -> bool:
        if name in vocabulary:
            return False
        vocabulary.append(name)
        self._changed()
        return True

    def _changed(self) -> None:
        self._revision += 1
        for listener in list(self._listeners):
            listener(self)


__all__ = ["WorkStore", "MutationOutcome", "Clock", "Listener"]
