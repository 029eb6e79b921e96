"""Catalog errors."""


class CatalogError(Exception):
    """Base exception for work store operations."""


class WorkNotFoundError(CatalogError):
    """Raised by strict stores when a work id is not present."""

    def __init__(self, work_id: str) -> None:
        super().__init__(f"No work with id {work_id!r} in the catalog")
        self.work_id = work_id
