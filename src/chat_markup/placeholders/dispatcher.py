"""Placeholder dispatch with colorize fallback.

``PlaceholderDispatcher`` decides, per call, whether placeholder resolution
goes to the external provider or falls back to plain colorizing:

1. CHECK     provider handle is not ``None`` and ``provider.is_enabled()``.
2. DELEGATE  offline player → ``(player, text)``; any other actor → ``(None, text)``.
             The provider's result is returned verbatim.
3. FALLBACK  the actor is ignored and ``colorize(text)`` is returned, so
             ``%name%`` and ``[name]`` stay literal while ``&c`` still
             becomes ``§c``.

The check is repeated on every call; only the provider reference is held.
The dispatcher neither raises nor catches: provider errors reach the caller
unchanged.

Process-wide default
--------------------
Most callers use the module-level :func:`set_placeholders` and
:func:`set_bracket_placeholders`.  These share one default dispatcher whose
provider handle is looked up in :data:`~chat_markup.placeholders.registry.default_registry`
under ``config.placeholders.plugin_name`` the first time either is called.
Providers must therefore be registered at startup, before the first chat
line is rendered.  :func:`reset_default_dispatcher` drops the cached
handle (tests, hot reloads).
"""

from __future__ import annotations

import logging

from chat_markup.config import config
from chat_markup.placeholders.provider import PlaceholderProvider
from chat_markup.placeholders.registry import default_registry
from chat_markup.text.actors import Actor, as_offline_player
from chat_markup.text.colors import colorize

logger = logging.getLogger(__name__)


class PlaceholderDispatcher:
    """Routes placeholder requests to a provider or to colorize.

    Attributes:
        _provider: Provider handle resolved at construction; ``None`` when
                   no provider is installed.
    """

    def __init__(self, provider: PlaceholderProvider | None = None) -> None:
        self._provider = provider

    @property
    def provider(self) -> PlaceholderProvider | None:
        return self._provider

    def is_provider_available(self) -> bool:
        """Return whether the provider is present and enabled right now."""
        return self._provider is not None and self._provider.is_enabled()

    def set_placeholders(self, text: str | None, actor: Actor | None = None) -> str | None:
        """Resolve ``%name%`` placeholders, or just colorize without a provider.

        Args:
            text:  Text to process.  ``None`` is handed to the provider as-is,
                   and returned as ``None`` on the fallback path.
            actor: Who the text is rendered for.  Only offline players are
                   forwarded; every other actor becomes an anonymous lookup.

        Returns:
            The provider's result, or the colorized text.
        """
        if not self.is_provider_available():
            logger.debug("Placeholder provider unavailable; colorizing only")
            return colorize(text)

        player = as_offline_player(actor)
        logger.debug(
            "Delegating %%placeholder%% resolution (player=%s)",
            player.uuid if player is not None else "anonymous",
        )
        return self._provider.set_placeholders(player, text)  # type: ignore[union-attr]

    def set_bracket_placeholders(
        self, text: str | None, actor: Actor | None = None
    ) -> str | None:
        """Resolve ``[name]`` placeholders, or just colorize without a provider.

        Same routing as :meth:`set_placeholders`, delegating to the
        provider's bracket operation instead.
        """
        if not self.is_provider_available():
            logger.debug("Placeholder provider unavailable; colorizing only")
            return colorize(text)

        player = as_offline_player(actor)
        logger.debug(
            "Delegating [placeholder] resolution (player=%s)",
            player.uuid if player is not None else "anonymous",
        )
        return self._provider.set_bracket_placeholders(player, text)  # type: ignore[union-attr]


# =============================================================================
# MODULE-LEVEL DEFAULT
# =============================================================================

_default_dispatcher: PlaceholderDispatcher | None = None


def get_default_dispatcher() -> PlaceholderDispatcher:
    """Return the process-wide dispatcher, resolving its provider on first use."""
    global _default_dispatcher
    if _default_dispatcher is None:
        name = config.placeholders.plugin_name
        _default_dispatcher = PlaceholderDispatcher(default_registry.get(name))
        logger.debug(
            "Resolved placeholder provider %r: %s",
            name,
            "present" if _default_dispatcher.provider is not None else "absent",
        )
    return _default_dispatcher


def reset_default_dispatcher() -> None:
    """Forget the cached default dispatcher so the next call re-resolves it."""
    global _default_dispatcher
    _default_dispatcher = None


def set_placeholders(text: str | None, actor: Actor | None = None) -> str | None:
    """Resolve ``%name%`` placeholders through the default dispatcher."""
    return get_default_dispatcher().set_placeholders(text, actor)


def set_bracket_placeholders(text: str | None, actor: Actor | None = None) -> str | None:
    """Resolve ``[name]`` placeholders through the default dispatcher."""
    return get_default_dispatcher().set_bracket_placeholders(text, actor)
