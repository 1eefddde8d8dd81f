"""
Shared pytest fixtures for the chat markup test suite.

This module provides fixtures that are automatically available to all test files:
- Stub placeholder providers that record what they were called with
- Isolation of the process-wide registry and default dispatcher
- Temporary static placeholder definition files

Fixtures are function-scoped so every test starts from an empty registry.
"""

from collections.abc import Generator
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import yaml

from chat_markup.placeholders.dispatcher import reset_default_dispatcher
from chat_markup.placeholders.provider import PlaceholderProvider
from chat_markup.placeholders.registry import default_registry
from chat_markup.text.actors import OfflinePlayer

# ============================================================================
# ISOLATION FIXTURES
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_default_registry() -> Generator[None, None, None]:
    """
    Clear the process-wide registry and cached default dispatcher around each test.

    The default dispatcher caches its provider handle on first use, so a
    provider registered by one test would otherwise leak into the next.
    """
    default_registry.clear()
    reset_default_dispatcher()
    yield
    default_registry.clear()
    reset_default_dispatcher()


# ============================================================================
# PROVIDER FIXTURES
# ============================================================================


def make_stub_provider(*, enabled: bool = True) -> MagicMock:
    """
    Build a MagicMock provider that tags its output with the operation used.

    ``set_placeholders`` returns ``"percent:<text>"`` and
    ``set_bracket_placeholders`` returns ``"bracket:<text>"`` so tests can
    tell which operation was delegated to.
    """
    provider = MagicMock(spec=PlaceholderProvider)
    provider.is_enabled.return_value = enabled
    provider.set_placeholders.side_effect = lambda player, text: f"percent:{text}"
    provider.set_bracket_placeholders.side_effect = lambda player, text: f"bracket:{text}"
    return provider


@pytest.fixture
def stub_provider() -> MagicMock:
    """An enabled stub provider."""
    return make_stub_provider()


@pytest.fixture
def disabled_provider() -> MagicMock:
    """A registered-but-disabled stub provider."""
    return make_stub_provider(enabled=False)


@pytest.fixture
def player() -> OfflinePlayer:
    """A sample offline-capable player."""
    return OfflinePlayer(uuid="5f1c2a9e-0000-4000-8000-000000000001", name="Mira")


# ============================================================================
# STATIC DEFINITION FIXTURES
# ============================================================================


@pytest.fixture
def placeholder_file(tmp_path: Path) -> Path:
    """Write a valid static placeholder definitions file and return its path."""
    path = tmp_path / "placeholders.yaml"
    path.write_text(
        yaml.dump(
            {
                "version": "1.0",
                "placeholders": {
                    "server_name": "&6Pipeworks",
                    "player_name": "{player_name}",
                    "player_uuid": "{player_uuid}",
                    "max_players": 20,
                },
            }
        ),
        encoding="utf-8",
    )
    return path
