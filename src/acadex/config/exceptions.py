"""Configuration errors."""

from __future__ import annotations


class ConfigError(Exception):
    """Raised when configuration data cannot be read, parsed, or applied."""


class ConfigValidationError(ConfigError):
    """Raised when merged settings fail model validation.

    Attributes:
        problems: ``"section.key: reason"`` entries, one per failing field.
    """

    def __init__(self, problems: list[str]) -> None:
        super().__init__("Invalid configuration values: " + "; ".join(problems))
        self.problems = problems


__all__ = ["ConfigError", "ConfigValidationError"]
