"""Chat Markup: color-code translation and placeholder dispatch for chat text.

Chat and console text in the game carries color/format codes in two
conventions: the *trigger* form players can type (``&c``) and the *native*
form the renderer understands (``§c``).  This package translates between the
two and routes placeholder substitution (``%player_name%``, ``[hp]``) to an
optional external provider, falling back to plain colorizing when no provider
is available.

Package structure
-----------------
text/colors.py               colorize / decolorize and the marker constants.
text/actors.py               Actor identities (anonymous, offline player, other).
text/messaging.py            send_message helper for recipients.
placeholders/provider.py     PlaceholderProvider protocol.
placeholders/registry.py     ProviderRegistry and startup bootstrapping.
placeholders/dispatcher.py   PlaceholderDispatcher and the module-level entry points.
placeholders/http_provider.py    requests-backed remote provider.
placeholders/static_provider.py  YAML-backed local provider.

Version Management
------------------
``__version__`` is read from the installed package metadata at import time.
The single source of truth is the ``version`` field in ``pyproject.toml``.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

# ---------------------------------------------------------------------------
# Package version, read from pyproject.toml via importlib.metadata.
#
# If the package is imported without being installed we fall back to the
# version pinned below so the CLI can still report something sensible.
# ---------------------------------------------------------------------------
try:
    __version__: str = version("chat-markup")
except PackageNotFoundError:
    __version__ = "0.1.0"
