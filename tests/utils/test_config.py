"""Tests for the persisted settings store in utf8sweep.utils.config."""

from pathlib import Path

import pytest

from utf8sweep.models.settings import DEFAULT_EXCLUDED_EXTENSIONS, Settings
from utf8sweep.utils import config as cfg


def test_first_load_seeds_defaults(config_dir: Path) -> None:
    settings = cfg.load_settings()

    assert settings == Settings()
    assert cfg.IGNORE_FILE.exists()
    lines = cfg.IGNORE_FILE.read_text(encoding="utf-8").splitlines()
    assert lines == DEFAULT_EXCLUDED_EXTENSIONS
    assert cfg.CONFIG_FILE.exists()


def test_save_and_load_round_trip(config_dir: Path) -> None:
    settings = Settings(
        excluded_extensions=[".log", ".bin"],
        whitelist_extensionless=True,
        add_bom=False,
    )
    cfg.save_settings(settings)

    assert cfg.load_settings() == settings


def test_ignore_file_is_newline_delimited(config_dir: Path) -> None:
    cfg.save_settings(Settings(excluded_extensions=[".a", ".b"]))
    assert cfg.IGNORE_FILE.read_bytes() == b".a\n.b\n"


def test_hand_edited_ignore_file(config_dir: Path) -> None:
    config_dir.mkdir(parents=True)
    cfg.IGNORE_FILE.write_text("\ufeff.LOG\r\n\r\ntmp\n.log\n", encoding="utf-8")

    settings = cfg.load_settings()

    assert settings.excluded_extensions == [".log", ".tmp"]


def test_save_preserves_unrelated_config(config_dir: Path) -> None:
    config_dir.mkdir(parents=True)
    cfg.CONFIG_FILE.write_text('[other]\nkey = "value"\n')

    cfg.save_settings(Settings())

    text = cfg.CONFIG_FILE.read_text()
    assert "[other]" in text
    assert "[convert]" in text


def test_corrupt_toml_falls_back_to_defaults(
    config_dir: Path, caplog: pytest.LogCaptureFixture
) -> None:
    cfg.save_settings(Settings(excluded_extensions=[".log"], add_bom=False))
    cfg.CONFIG_FILE.write_text("this is [not toml")

    settings = cfg.load_settings()

    assert settings.excluded_extensions == [".log"]
    assert settings.add_bom is True
    assert "Cannot read" in caplog.text


def test_invalid_flag_type_falls_back(config_dir: Path) -> None:
    cfg.save_settings(Settings(excluded_extensions=[".log"]))
    cfg.CONFIG_FILE.write_text("[convert]\nadd_bom = [1, 2]\n")

    settings = cfg.load_settings()

    assert settings.excluded_extensions == [".log"]
    assert settings.add_bom is True


def test_undecodable_ignore_file_falls_back(config_dir: Path) -> None:
    config_dir.mkdir(parents=True)
    cfg.IGNORE_FILE.write_bytes(b"\xff\xfe\xfa")

    settings = cfg.load_settings()

    assert settings.excluded_extensions == DEFAULT_EXCLUDED_EXTENSIONS


def test_reset_settings(config_dir: Path) -> None:
    cfg.save_settings(
        Settings(excluded_extensions=[], whitelist_extensionless=True, add_bom=False)
    )

    settings = cfg.reset_settings()

    assert settings == Settings()
    assert cfg.load_settings() == Settings()


def test_resolve_setting_cli_over_env_over_config(
    config_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("UTF8SWEEP_CONVERT_ADD_BOM", "0")
    cfg.save_settings(Settings(add_bom=True))

    assert cfg.resolve_setting("convert.add_bom", default=True, cli_value=True) is True
    assert cfg.resolve_setting("convert.add_bom", default=True) is False


def test_resolve_setting_config_when_no_env(config_dir: Path) -> None:
    cfg.save_settings(Settings(whitelist_extensionless=True))
    result = cfg.resolve_setting("convert.whitelist_extensionless", default=False)
    assert result is True


def test_resolve_setting_default_when_missing(config_dir: Path) -> None:
    assert cfg.resolve_setting("missing.key", default="fallback") == "fallback"


def test_resolve_invalid_int_env_falls_back(
    config_dir: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("UTF8SWEEP_LIMIT", "notanint")
    assert cfg.resolve_setting("limit", default=30) == 30


def test_env_var_name() -> None:
    assert cfg._make_env_var_name("convert.add_bom") == "UTF8SWEEP_CONVERT_ADD_BOM"
