"""
Chat markup configuration management.

This module handles loading and accessing configuration from multiple sources
with a clear priority order:

    1. Environment variables (highest priority) - for containerized deployments
    2. Config file (config/markup.ini) - for static deployments
    3. Built-in defaults (lowest priority) - sensible fallbacks

Configuration is loaded once at module import time and cached. The MarkupConfig
dataclass provides typed access to all settings.

Usage:
    from chat_markup.config import config

    print(config.placeholders.provider)
    print(config.logging.level)

Environment Variable Mapping:
    CHAT_MARKUP_PROVIDER          -> placeholders.provider
    CHAT_MARKUP_PLUGIN_NAME       -> placeholders.plugin_name
    CHAT_MARKUP_PROVIDER_URL      -> placeholders.base_url
    CHAT_MARKUP_PROVIDER_TIMEOUT  -> placeholders.timeout_seconds
    CHAT_MARKUP_STATIC_PATH       -> placeholders.static_path
    CHAT_MARKUP_LOG_LEVEL         -> logging.level
"""

import configparser
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

# =============================================================================
# PATH CONFIGURATION
# =============================================================================

# Project root directory (contains src/, config/)
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Config file paths
CONFIG_DIR = PROJECT_ROOT / "config"
CONFIG_FILE = CONFIG_DIR / "markup.ini"
CONFIG_EXAMPLE = CONFIG_DIR / "markup.example.ini"

ProviderKind = Literal["none", "http", "static"]

_PROVIDER_KINDS = ("none", "http", "static")


# =============================================================================
# CONFIGURATION DATACLASSES
# =============================================================================


@dataclass
class PlaceholderSettings:
    """Placeholder provider configuration."""

    provider: ProviderKind = "none"
    plugin_name: str = "PlaceholderAPI"
    base_url: str = "http://localhost:8765"
    timeout_seconds: float = 2.0
    static_path: str = "config/placeholders.yaml"

    @property
    def absolute_static_path(self) -> Path:
        """Get absolute path to the static placeholder definitions."""
        p = Path(self.static_path)
        if p.is_absolute():
            return p
        return PROJECT_ROOT / p


@dataclass
class LoggingSettings:
    """Logging configuration."""

    level: str = "INFO"
    format: Literal["simple", "detailed"] = "detailed"


@dataclass
class MarkupConfig:
    """
    Complete chat markup configuration.

    Aggregates all settings sections. Access via the module-level `config`
    singleton.
    """

    placeholders: PlaceholderSettings = field(default_factory=PlaceholderSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)


# =============================================================================
# CONFIGURATION LOADING
# =============================================================================


def _parse_provider(value: str) -> ProviderKind | None:
    """Normalise a provider kind, returning None for unrecognised values."""
    val = value.strip().lower()
    if val in _PROVIDER_KINDS:
        return val  # type: ignore[return-value]
    return None


def _load_from_ini(parser: configparser.ConfigParser, cfg: MarkupConfig) -> None:
    """Load configuration from parsed INI file into MarkupConfig."""
    # Placeholders section
    if parser.has_section("placeholders"):
        if parser.has_option("placeholders", "provider"):
            kind = _parse_provider(parser.get("placeholders", "provider"))
            if kind is not None:
                cfg.placeholders.provider = kind
        if parser.has_option("placeholders", "plugin_name"):
            cfg.placeholders.plugin_name = parser.get("placeholders", "plugin_name")
        if parser.has_option("placeholders", "base_url"):
            cfg.placeholders.base_url = parser.get("placeholders", "base_url")
        if parser.has_option("placeholders", "timeout_seconds"):
            cfg.placeholders.timeout_seconds = parser.getfloat("placeholders", "timeout_seconds")
        if parser.has_option("placeholders", "static_path"):
            cfg.placeholders.static_path = parser.get("placeholders", "static_path")

    # Logging section
    if parser.has_section("logging"):
        if parser.has_option("logging", "level"):
            cfg.logging.level = parser.get("logging", "level").upper()
        if parser.has_option("logging", "format"):
            val = parser.get("logging", "format").lower()
            if val in ("simple", "detailed"):
                cfg.logging.format = val  # type: ignore[assignment]


def _apply_env_overrides(cfg: MarkupConfig) -> None:
    """Apply environment variable overrides to configuration."""
    # Placeholder settings
    if env_provider := os.getenv("CHAT_MARKUP_PROVIDER"):
        kind = _parse_provider(env_provider)
        if kind is not None:
            cfg.placeholders.provider = kind
    if env_plugin := os.getenv("CHAT_MARKUP_PLUGIN_NAME"):
        cfg.placeholders.plugin_name = env_plugin
    if env_url := os.getenv("CHAT_MARKUP_PROVIDER_URL"):
        cfg.placeholders.base_url = env_url
    if env_timeout := os.getenv("CHAT_MARKUP_PROVIDER_TIMEOUT"):
        cfg.placeholders.timeout_seconds = float(env_timeout)
    if env_static := os.getenv("CHAT_MARKUP_STATIC_PATH"):
        cfg.placeholders.static_path = env_static

    # Logging settings
    if env_log := os.getenv("CHAT_MARKUP_LOG_LEVEL"):
        cfg.logging.level = env_log.upper()


def load_config() -> MarkupConfig:
    """
    Load configuration from all sources with proper priority.

    Priority (highest wins):
        1. Environment variables
        2. config/markup.ini
        3. config/markup.example.ini (fallback for development)
        4. Built-in defaults

    Returns:
        MarkupConfig: Fully populated configuration object.
    """
    cfg = MarkupConfig()

    # Determine which config file to use
    config_file = None
    if CONFIG_FILE.exists():
        config_file = CONFIG_FILE
    elif CONFIG_EXAMPLE.exists():
        config_file = CONFIG_EXAMPLE

    if config_file:
        parser = configparser.ConfigParser()
        parser.read(config_file)
        _load_from_ini(parser, cfg)

    # Apply environment variable overrides (highest priority)
    _apply_env_overrides(cfg)

    return cfg


def reload_config() -> "MarkupConfig":
    """
    Reload configuration from disk and environment.

    This updates the module-level `config` singleton. Modules that imported
    the singleton by name keep the old object.

    Returns:
        MarkupConfig: The newly loaded configuration.
    """
    global config
    config = load_config()
    return config


# =============================================================================
# MODULE-LEVEL SINGLETON
# =============================================================================

# Load configuration once at module import time
config = load_config()


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def get_config_status() -> dict:
    """
    Get configuration status for diagnostics.

    Returns a dictionary with configuration source information.
    """
    return {
        "config_file_exists": CONFIG_FILE.exists(),
        "config_file_path": str(CONFIG_FILE),
        "using_example": not CONFIG_FILE.exists() and CONFIG_EXAMPLE.exists(),
        "provider": config.placeholders.provider,
        "plugin_name": config.placeholders.plugin_name,
    }


def print_config_summary() -> None:
    """Print a summary of current configuration to stdout."""
    status = get_config_status()
    print("\n" + "=" * 60)
    print("CHAT MARKUP CONFIGURATION")
    print("=" * 60)
    print(f"Config file: {status['config_file_path']}")
    print(f"File exists: {status['config_file_exists']}")
    if status["using_example"]:
        print("NOTE: Using example config (copy to markup.ini to customise)")
    print("-" * 60)
    print(f"Provider:    {config.placeholders.provider} ({config.placeholders.plugin_name})")
    if config.placeholders.provider == "http":
        print(f"Service URL: {config.placeholders.base_url}")
        print(f"Timeout:     {config.placeholders.timeout_seconds}s")
    elif config.placeholders.provider == "static":
        print(f"Definitions: {config.placeholders.absolute_static_path}")
    print(f"Log level:   {config.logging.level}")
    print("=" * 60 + "\n")
