"""Configuration models describing Acadex settings."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class AcadexBaseModel(BaseModel):
    """Shared configuration for Acadex settings models."""

    model_config = ConfigDict(extra="forbid")


class CatalogOptions(AcadexBaseModel):
    """Work store and dashboard behaviour.

    Attributes:
        strict_ids: Raise on update/delete/toggle of unknown work ids instead of
            ignoring them.
        recent_limit: Number of filtered works listed on the dashboard.
    """

    strict_ids: bool = False
    recent_limit: int = Field(default=6, ge=0)


class SearchOptions(AcadexBaseModel):
    """Autocomplete settings.

    Attributes:
        suggestion_limit: Maximum suggestions returned for a query.
        suggestion_min_length: Minimum query length before suggesting.
    """

    suggestion_limit: int = Field(default=5, ge=0)
    suggestion_min_length: int = Field(default=2, ge=0)


class ReportOptions(AcadexBaseModel):
    """Report rendering and export settings.

    Attributes:
        trend_months: Number of most recent months kept in trend series.
        page_size: Rows per page in the report table.
        csv_delimiter: Field separator for CSV exports.
    """

    trend_months: int = Field(default=12, ge=1)
    page_size: int = Field(default=10, ge=1)
    csv_delimiter: str = Field(default=",", min_length=1, max_length=1)


class LoggingSettings(AcadexBaseModel):
    """Runtime logging configuration.

    Attributes:
        level: Logging verbosity level.
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"


class CLIOptions(AcadexBaseModel):
    """CLI presentation defaults.

    Attributes:
        quiet_default: Whether commands suppress non-error output by default.
    """

    quiet_default: bool = False


class AcadexConfig(AcadexBaseModel):
    """Top-level configuration struct for Acadex.

    Attributes:
        catalog: Work store and dashboard settings.
        search: Autocomplete settings.
        reports: Report settings.
        logging: Logging configuration.
        cli: CLI presentation defaults.
    """

    catalog: CatalogOptions = Field(default_factory=CatalogOptions)
    search: SearchOptions = Field(default_factory=SearchOptions)
    reports: ReportOptions = Field(default_factory=ReportOptions)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    cli: CLIOptions = Field(default_factory=CLIOptions)


__all__ = [
    "AcadexBaseModel",
    "CatalogOptions",
    "SearchOptions",
    "ReportOptions",
    "LoggingSettings",
    "CLIOptions",
    "AcadexConfig",
]
