"""Unit tests for configuration management."""

from pathlib import Path

import pytest

from acadex.config import (
    AcadexConfig,
    ConfigError,
    ConfigValidationError,
    ConfigManager,
    flatten_for_env,
    parse_env_overrides,
    resolve_with_precedence,
)


def _fresh_manager(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> ConfigManager:
    monkeypatch.setenv("HOME", str(tmp_path))
    return ConfigManager()


def test_ensure_exists_creates_default_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    manager = _fresh_manager(tmp_path, monkeypatch)

    path = manager.ensure_exists()

    assert path == tmp_path / ".acadex" / "config.yaml"
    text = path.read_text(encoding="utf-8")
    assert "Acadex configuration file" in text
    assert "Last updated:" in text

    config = manager.load(include_env=False)
    assert config == AcadexConfig()


def test_resolve_with_precedence_respects_order(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    manager = _fresh_manager(tmp_path, monkeypatch)
    manager.ensure_exists()

    manager.save({"reports": {"page_size": 25, "trend_months": 6}, "catalog": {"strict_ids": True}})

    env = {"ACADEX__REPORTS__TREND_MONTHS": "9", "UNRELATED": "1"}
    cli = {"reports.trend_months": 3}

    config = manager.load(cli_overrides=cli, env_overrides=env)

    assert config.reports.page_size == 25
    assert config.catalog.strict_ids is True
    # CLI overrides take precedence over environment
    assert config.reports.trend_months == 3

    assert manager.load(env_overrides=env).reports.trend_months == 9


def test_environment_values_are_parsed_as_yaml(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    manager = _fresh_manager(tmp_path, monkeypatch)

    config = manager.load(
        env_overrides={
            "ACADEX__CATALOG__STRICT_IDS": "true",
            "ACADEX__REPORTS__CSV_DELIMITER": ";",
        }
    )

    assert config.catalog.strict_ids is True
    assert config.reports.csv_delimiter == ";"


def test_include_env_false_ignores_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    manager = _fresh_manager(tmp_path, monkeypatch)
    monkeypatch.setenv("ACADEX__SEARCH__SUGGESTION_LIMIT", "9")

    assert ConfigManager().load().search.suggestion_limit == 9
    assert manager.load(include_env=False).search.suggestion_limit == 5


def test_invalid_yaml_raises_config_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    manager = _fresh_manager(tmp_path, monkeypatch)
    manager.ensure_exists()

    manager.config_path.write_text("- not-a-mapping", encoding="utf-8")

    with pytest.raises(ConfigError):
        manager.load()


def test_unknown_keys_are_rejected(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    manager = _fresh_manager(tmp_path, monkeypatch)
    manager.save({"reports": {"colour": "blue"}})

    with pytest.raises(ConfigError):
        manager.load(include_env=False)


def test_flatten_for_env_round_trips_defaults() -> None:
    flat = flatten_for_env(AcadexConfig())

    assert flat["ACADEX__CATALOG__STRICT_IDS"] == "false"
    assert flat["ACADEX__REPORTS__PAGE_SIZE"] == "10"
    assert flat["ACADEX__LOGGING__LEVEL"] == "WARNING"


def test_resolve_with_precedence_invalid_value_raises() -> None:
    with pytest.raises(ConfigError):
        resolve_with_precedence(
            defaults=AcadexConfig(),
            file_overrides={"reports": {"page_size": "not-an-int"}},
        )


def test_csv_delimiter_must_be_single_character() -> None:
    with pytest.raises(ConfigError):
        resolve_with_precedence(
            defaults=AcadexConfig(),
            cli_overrides={"reports.csv_delimiter": "::"},
        )


def test_parse_env_overrides_nests_prefixed_variables() -> None:
    overrides = parse_env_overrides(
        {
            "ACADEX__REPORTS__PAGE_SIZE": "20",
            "ACADEX__CLI__QUIET_DEFAULT": "yes",
            "ACADEX__": "ignored",
            "PATH": "/usr/bin",
        }
    )

    assert overrides == {"reports": {"page_size": 20}, "cli": {"quiet_default": True}}


def test_set_value_persists_validated_value(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    manager = _fresh_manager(tmp_path, monkeypatch)

    updated = manager.set_value("search.suggestion_limit", "8")

    assert updated.search.suggestion_limit == 8
    assert manager.load_file_overrides()["search"]["suggestion_limit"] == 8


def test_set_value_rejects_invalid_value_without_writing(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    manager = _fresh_manager(tmp_path, monkeypatch)
    manager.ensure_exists()
    before = manager.read_text()

    with pytest.raises(ConfigError):
        manager.set_value("reports.trend_months", "0")
    with pytest.raises(ConfigError):
        manager.set_value("reports.page_size.inner", "1")
    with pytest.raises(ConfigError):
        manager.set_value(" . ", "1")

    assert manager.read_text() == before


def test_validation_error_lists_failing_fields() -> None:
    with pytest.raises(ConfigValidationError) as excinfo:
        resolve_with_precedence(
            defaults=AcadexConfig(),
            file_overrides={"reports": {"page_size": 0}, "catalog": {"recent_limit": "many"}},
        )

    fields = sorted(problem.split(":")[0] for problem in excinfo.value.problems)
    assert fields == ["catalog.recent_limit", "reports.page_size"]


def test_logging_level_must_be_known() -> None:
    config = resolve_with_precedence(
        defaults=AcadexConfig(), env_overrides={"logging": {"level": "DEBUG"}}
    )
    assert config.logging.level == "DEBUG"

    with pytest.raises(ConfigValidationError):
        resolve_with_precedence(defaults=AcadexConfig(), cli_overrides={"logging.level": "loud"})
