"""Tests for chat_markup.config loading and environment overrides."""

import configparser

import pytest

from chat_markup import config as config_module
from chat_markup.config import (
    PROJECT_ROOT,
    MarkupConfig,
    PlaceholderSettings,
    _load_from_ini,
    get_config_status,
    load_config,
    print_config_summary,
)


@pytest.fixture
def no_config_files(tmp_path, monkeypatch):
    """Point both config file paths at a directory with no files in it."""
    monkeypatch.setattr(config_module, "CONFIG_FILE", tmp_path / "markup.ini")
    monkeypatch.setattr(config_module, "CONFIG_EXAMPLE", tmp_path / "markup.example.ini")
    return tmp_path


@pytest.mark.unit
def test_defaults(no_config_files):
    cfg = load_config()

    assert cfg.placeholders.provider == "none"
    assert cfg.placeholders.plugin_name == "PlaceholderAPI"
    assert cfg.placeholders.timeout_seconds == 2.0
    assert cfg.logging.level == "INFO"
    assert cfg.logging.format == "detailed"


@pytest.mark.unit
def test_config_file_preferred_over_example(no_config_files):
    (no_config_files / "markup.example.ini").write_text("[placeholders]\nprovider = http\n")
    (no_config_files / "markup.ini").write_text("[placeholders]\nprovider = static\n")

    assert load_config().placeholders.provider == "static"


@pytest.mark.unit
def test_example_used_when_no_config_file(no_config_files):
    (no_config_files / "markup.example.ini").write_text("[logging]\nlevel = debug\n")

    assert load_config().logging.level == "DEBUG"


@pytest.mark.unit
def test_placeholder_ini_overrides():
    """Placeholder settings should load from the INI [placeholders] section."""
    parser = configparser.ConfigParser()
    parser.read_dict(
        {
            "placeholders": {
                "provider": "HTTP",
                "plugin_name": "RemotePlaceholders",
                "base_url": "https://placeholders.pipe-works.org",
                "timeout_seconds": "4.25",
                "static_path": "/etc/placeholders.yaml",
            }
        }
    )

    cfg = MarkupConfig()
    _load_from_ini(parser, cfg)

    assert cfg.placeholders.provider == "http"
    assert cfg.placeholders.plugin_name == "RemotePlaceholders"
    assert cfg.placeholders.base_url == "https://placeholders.pipe-works.org"
    assert cfg.placeholders.timeout_seconds == 4.25
    assert cfg.placeholders.static_path == "/etc/placeholders.yaml"


@pytest.mark.unit
def test_unknown_provider_kind_ignored():
    parser = configparser.ConfigParser()
    parser.read_dict({"placeholders": {"provider": "carrier-pigeon"}})

    cfg = MarkupConfig()
    _load_from_ini(parser, cfg)

    assert cfg.placeholders.provider == "none"


@pytest.mark.unit
def test_logging_ini_overrides():
    parser = configparser.ConfigParser()
    parser.read_dict({"logging": {"level": "warning", "format": "SIMPLE"}})

    cfg = MarkupConfig()
    _load_from_ini(parser, cfg)

    assert cfg.logging.level == "WARNING"
    assert cfg.logging.format == "simple"


@pytest.mark.unit
def test_invalid_logging_format_ignored():
    parser = configparser.ConfigParser()
    parser.read_dict({"logging": {"format": "json"}})

    cfg = MarkupConfig()
    _load_from_ini(parser, cfg)

    assert cfg.logging.format == "detailed"


@pytest.mark.unit
def test_placeholder_env_overrides(no_config_files, monkeypatch):
    monkeypatch.setenv("CHAT_MARKUP_PROVIDER", "static")
    monkeypatch.setenv("CHAT_MARKUP_PLUGIN_NAME", "LocalPlaceholders")
    monkeypatch.setenv("CHAT_MARKUP_PROVIDER_URL", "http://10.0.0.5:8765")
    monkeypatch.setenv("CHAT_MARKUP_PROVIDER_TIMEOUT", "7.5")
    monkeypatch.setenv("CHAT_MARKUP_STATIC_PATH", "/srv/placeholders.yaml")
    monkeypatch.setenv("CHAT_MARKUP_LOG_LEVEL", "debug")

    cfg = load_config()

    assert cfg.placeholders.provider == "static"
    assert cfg.placeholders.plugin_name == "LocalPlaceholders"
    assert cfg.placeholders.base_url == "http://10.0.0.5:8765"
    assert cfg.placeholders.timeout_seconds == 7.5
    assert cfg.placeholders.static_path == "/srv/placeholders.yaml"
    assert cfg.logging.level == "DEBUG"


@pytest.mark.unit
def test_env_beats_config_file(no_config_files, monkeypatch):
    (no_config_files / "markup.ini").write_text("[placeholders]\nprovider = http\n")
    monkeypatch.setenv("CHAT_MARKUP_PROVIDER", "none")

    assert load_config().placeholders.provider == "none"


@pytest.mark.unit
def test_static_path_resolution():
    assert PlaceholderSettings(static_path="/abs/p.yaml").absolute_static_path.as_posix() == (
        "/abs/p.yaml"
    )
    assert PlaceholderSettings(static_path="config/p.yaml").absolute_static_path == (
        PROJECT_ROOT / "config" / "p.yaml"
    )


@pytest.mark.unit
def test_config_status_keys():
    status = get_config_status()
    assert set(status) == {
        "config_file_exists",
        "config_file_path",
        "using_example",
        "provider",
        "plugin_name",
    }


@pytest.mark.unit
def test_print_config_summary(capsys):
    print_config_summary()
    out = capsys.readouterr().out
    assert "CHAT MARKUP CONFIGURATION" in out
    assert "Provider:" in out
