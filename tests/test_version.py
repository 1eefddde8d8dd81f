"""Tests for dynamic version management.

Verifies that ``chat_markup.__version__`` is resolved from the installed
package metadata (``pyproject.toml``).
"""

from __future__ import annotations

import re
from importlib.metadata import version

import pytest

import chat_markup

# Matches semver-ish strings: major.minor.patch with optional pre-release
# suffix (e.g. "0.1.0", "1.0.0-rc.1").
_SEMVER_RE = re.compile(
    r"^\d+\.\d+\.\d+"  # major.minor.patch
    r"(-[A-Za-z0-9]+(\.[A-Za-z0-9]+)*)?$"  # optional pre-release
)


@pytest.mark.unit
class TestVersionAttribute:
    """Verify the ``chat_markup.__version__`` package attribute."""

    def test_version_is_a_string(self) -> None:
        assert isinstance(chat_markup.__version__, str)
        assert len(chat_markup.__version__) > 0

    def test_version_matches_semver(self) -> None:
        assert _SEMVER_RE.match(chat_markup.__version__), (
            f"__version__ {chat_markup.__version__!r} does not match "
            f"expected semver pattern (major.minor.patch[-prerelease])"
        )

    def test_version_matches_distribution_metadata(self) -> None:
        """In an installed environment the attribute mirrors pyproject.toml."""
        assert chat_markup.__version__ == version("chat-markup")
