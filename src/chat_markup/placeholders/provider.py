"""Placeholder provider protocol.

A provider resolves placeholders inside a piece of text.  Two syntaxes are
supported and each is its own operation:

- free-form  ``%player_name%``  → :meth:`PlaceholderProvider.set_placeholders`
- bracket    ``[player_name]``  → :meth:`PlaceholderProvider.set_bracket_placeholders`

Both receive the player the text is rendered for, or ``None`` for an
anonymous lookup.  Providers own their liveness: :meth:`is_enabled` may
change between calls (a plugin can be registered but disabled), and the
dispatcher asks it afresh every time.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from chat_markup.text.actors import OfflinePlayer


@runtime_checkable
class PlaceholderProvider(Protocol):
    """Interface every placeholder provider implements."""

    def is_enabled(self) -> bool:
        """Return whether the provider is currently able to serve requests."""
        ...

    def set_placeholders(self, player: OfflinePlayer | None, text: str | None) -> str | None:
        """Resolve ``%name%`` placeholders in *text* for *player*."""
        ...

    def set_bracket_placeholders(
        self, player: OfflinePlayer | None, text: str | None
    ) -> str | None:
        """Resolve ``[name]`` placeholders in *text* for *player*."""
        ...
