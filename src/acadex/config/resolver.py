"""Layered configuration resolution.

Sources are plain mappings merged in order (defaults, file, environment, CLI)
and validated once at the end.
"""

from __future__ import annotations

from collections.abc import Mapping as MappingABC
from copy import deepcopy
from typing import Any, Dict, Mapping

import yaml
from pydantic import ValidationError

from .exceptions import ConfigError, ConfigValidationError
from .models import AcadexConfig

ENV_PREFIX = "ACADEX__"


def resolve_with_precedence(
    *,
    defaults: AcadexConfig,
    file_overrides: Mapping[str, Any] | None = None,
    env_overrides: Mapping[str, Any] | None = None,
    cli_overrides: Mapping[str, Any] | None = None,
) -> AcadexConfig:
    """Merge configuration sources: defaults < file < environment < CLI.

    Args:
        defaults: Baseline configuration.
        file_overrides: Values read from the YAML file.
        env_overrides: Nested values derived from ``ACADEX__`` variables.
        cli_overrides: Values passed on the command line; keys may be dotted.

    Returns:
        AcadexConfig: Validated merged configuration.

    Raises:
        ConfigError: If a source is malformed or the merged values are invalid.
    """
    layers = [
        expand_dotted(source, source_name=name)
        for name, source in (
            ("file", file_overrides),
            ("environment", env_overrides),
            ("cli", cli_overrides),
        )
        if source is not None
    ]
    merged = merge_layers(defaults.model_dump(mode="python"), *layers)

    try:
        return AcadexConfig.model_validate(merged)
    except ValidationError as exc:
        problems = [
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in exc.errors()
        ]
        raise ConfigValidationError(problems) from exc


def parse_env_overrides(env: Mapping[str, str]) -> dict[str, Any]:
    """Return nested overrides for every ``ACADEX__SECTION__KEY`` variable.

    Values are parsed as YAML scalars so ``true`` or ``12`` arrive typed; text
    that is not valid YAML is kept verbatim.
    """
    overrides: dict[str, Any] = {}
    for key, raw_value in env.items():
        if not key.startswith(ENV_PREFIX):
            continue
        path = [segment.lower() for segment in key[len(ENV_PREFIX) :].split("__") if segment]
        if not path:
            continue
        try:
            value = yaml.safe_load(raw_value)
        except yaml.YAMLError:
            value = raw_value
        node = overrides
        for segment in path[:-1]:
            child = node.get(segment)
            if not isinstance(child, dict):
                child = node[segment] = {}
            node = child
        node[path[-1]] = value
    return overrides


def flatten_for_env(config: AcadexConfig) -> Dict[str, str]:
    """Render ``config`` as ``ACADEX__SECTION__KEY`` environment assignments."""
    flat: Dict[str, str] = {}
    pending: list[tuple[tuple[str, ...], Any]] = [((), config.model_dump(mode="python"))]
    while pending:
        path, value = pending.pop()
        if isinstance(value, dict):
            pending.extend((path + (str(key),), child) for key, child in value.items())
            continue
        flat[ENV_PREFIX + "__".join(part.upper() for part in path)] = _render_env_value(value)
    return dict(sorted(flat.items()))


def expand_dotted(source: Mapping[str, Any], *, source_name: str) -> dict[str, Any]:
    """Return ``source`` as a nested dict, splitting dotted keys into sections.

    Raises:
        ConfigError: If ``source`` is not a mapping, a key is not a string, or a
            dotted key runs through a non-mapping value.
    """
    label = source_name.capitalize()
    if not isinstance(source, MappingABC):
        raise ConfigError(f"{label} overrides must be a mapping.")

    result: dict[str, Any] = {}
    for key, value in source.items():
        if not isinstance(key, str):
            raise ConfigError(f"{label} override keys must be strings.")
        *parents, leaf = key.split(".")
        node = result
        for segment in parents:
            child = node.setdefault(segment, {})
            if not isinstance(child, dict):
                raise ConfigError(f"{label} override for {key} conflicts with existing value.")
            node = child
        if isinstance(value, MappingABC):
            nested = expand_dotted(value, source_name=source_name)
            current = node.get(leaf)
            node[leaf] = merge_layers(current if isinstance(current, dict) else {}, nested)
        else:
            node[leaf] = value
    return result


def merge_layers(base: Mapping[str, Any], *layers: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge ``layers`` onto a copy of ``base``; later layers win."""
    merged = deepcopy(dict(base))
    for layer in layers:
        for key, value in layer.items():
            current = merged.get(key)
            if isinstance(value, MappingABC) and isinstance(current, MappingABC):
                merged[key] = merge_layers(current, value)
            else:
                merged[key] = deepcopy(value)
    return merged


def _render_env_value(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return yaml.safe_dump(list(value), default_flow_style=True).strip()
    return str(value)


__all__ = [
    "ENV_PREFIX",
    "resolve_with_precedence",
    "parse_env_overrides",
    "flatten_for_env",
    "expand_dotted",
    "merge_layers",
]
