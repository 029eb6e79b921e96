"""Configuration management for Acadex.

Settings live in ``~/.acadex/config.yaml``. ``ACADEX__SECTION__KEY``
environment variables override the file and command line values override both.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping

import yaml

from .exceptions import ConfigError, ConfigValidationError
from .models import AcadexConfig
from .resolver import (
    ENV_PREFIX,
    flatten_for_env,
    parse_env_overrides,
    resolve_with_precedence,
)

LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("~/.acadex/config.yaml")
_HEADER_LINES = (
    "# Acadex configuration file",
    "# Edit with `acadex config set SECTION.KEY --value VALUE`.",
)
_STAMP_PREFIX = "# Last updated: "


class ConfigManager:
    """Read, validate, and persist the Acadex configuration file."""

    def __init__(
        self,
        config_path: Path | None = None,
        *,
        env: Mapping[str, str] | None = None,
    ) -> None:
        """Bind the manager to a file and an environment.

        Args:
            config_path: Location of the YAML file; defaults to
                ``~/.acadex/config.yaml`` resolved at construction time.
            env: Environment consulted for overrides; defaults to ``os.environ``.
        """
        self._config_path = (config_path or DEFAULT_CONFIG_PATH).expanduser()
        self._env = os.environ if env is None else env

    @property
    def config_path(self) -> Path:
        """Return the resolved configuration path."""
        return self._config_path

    def load(
        self,
        *,
        cli_overrides: Mapping[str, Any] | None = None,
        include_env: bool = True,
        ensure_file: bool = True,
        env_overrides: Mapping[str, str] | None = None,
    ) -> AcadexConfig:
        """Return the effective configuration.

        Args:
            cli_overrides: Dotted-key overrides with the highest precedence.
            include_env: Whether ``ACADEX__`` variables are applied.
            ensure_file: Create the file with defaults when it is missing.
            env_overrides: Environment mapping used instead of the bound one.

        Returns:
            AcadexConfig: Validated configuration.

        Raises:
            ConfigError: If the file or any override is invalid.
        """
        if ensure_file:
            self.ensure_exists()

        env_layer = None
        if include_env:
            env_layer = parse_env_overrides(
                self._env if env_overrides is None else env_overrides
            )
            if env_layer:
                LOGGER.debug("Applying environment overrides for %s.", sorted(env_layer))

        return resolve_with_precedence(
            defaults=AcadexConfig(),
            file_overrides=self._read_file(),
            env_overrides=env_layer or None,
            cli_overrides=cli_overrides,
        )

    def load_file_overrides(self) -> dict[str, Any]:
        """Return the raw mapping stored on disk, or an empty dict."""
        return self._read_file()

    def save(self, config: AcadexConfig | Mapping[str, Any]) -> None:
        """Write ``config`` to disk with a fresh timestamp header."""
        if isinstance(config, AcadexConfig):
            data = config.model_dump(mode="python")
        else:
            data = dict(config)
        self._write_file(data)

    def ensure_exists(self) -> Path:
        """Create the file with default values when it does not exist yet."""
        if not self._config_path.exists():
            LOGGER.info("Creating default configuration at %s.", self._config_path)
            self._write_file(AcadexConfig().model_dump(mode="python"))
        return self._config_path

    def read_text(self) -> str:
        """Return the current file contents, or an empty string."""
        if not self._config_path.exists():
            return ""
        return self._config_path.read_text(encoding="utf-8")

    def set_value(self, key: str, raw_value: str) -> AcadexConfig:
        """Persist ``raw_value`` under the dotted ``key`` after validating it.

        Args:
            key: Dotted path such as ``reports.page_size``.
            raw_value: YAML literal parsed into the stored value.

        Returns:
            AcadexConfig: Configuration the file now resolves to, without
            environment overrides.

        Raises:
            ConfigError: If the key is empty, the value is not valid YAML, the
                path crosses a non-mapping, or the result fails validation.
        """
        segments = [segment.strip() for segment in key.split(".") if segment.strip()]
        if not segments:
            raise ConfigError("KEY must specify a dotted path such as 'reports.page_size'.")
        try:
            value = yaml.safe_load(raw_value)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Unable to parse value: {exc}") from exc

        self.ensure_exists()
        data = self._read_file()
        node = data
        for segment in segments[:-1]:
            child = node.setdefault(segment, {})
            if not isinstance(child, dict):
                raise ConfigError(
                    f"Cannot assign into '{segment}' because it is not a mapping "
                    "in the config file."
                )
            node = child
        node[segments[-1]] = value

        updated = resolve_with_precedence(defaults=AcadexConfig(), file_overrides=data)
        self._write_file(data)
        return updated

    # Internal helpers -------------------------------------------------

    def _read_file(self) -> dict[str, Any]:
        if not self._config_path.exists():
            return {}
        try:
            raw = yaml.safe_load(self._config_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            raise ConfigError(f"Failed to parse configuration file: {exc}") from exc
        if raw is None:
            return {}
        if not isinstance(raw, dict):
            raise ConfigError("Configuration file must contain a mapping at the top level.")
        return raw

    def _write_file(self, data: Mapping[str, Any]) -> None:
        stamp = datetime.now(timezone.utc).isoformat(timespec="seconds").replace("+00:00", "Z")
        body = yaml.safe_dump(dict(data), sort_keys=False, allow_unicode=True)
        text = "\n".join((*_HEADER_LINES, _STAMP_PREFIX + stamp, body))

        path = self._config_path
        path.parent.mkdir(parents=True, exist_ok=True)
        staging = path.with_name(path.name + ".tmp")
        staging.write_text(text, encoding="utf-8")
        staging.replace(path)


__all__ = [
    "ConfigManager",
    "DEFAULT_CONFIG_PATH",
    "ENV_PREFIX",
    "AcadexConfig",
    "ConfigError",
    "ConfigValidationError",
    "resolve_with_precedence",
    "parse_env_overrides",
    "flatten_for_env",
]
