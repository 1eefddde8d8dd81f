"""Placeholder resolution with a colorize fallback.

Typical call flow
-----------------
1. At startup the host calls ``bootstrap_registry(config.placeholders,
   default_registry)`` (the CLI does this) or registers its own provider.
2. Chat code calls ``set_placeholders(text, actor)`` or
   ``set_bracket_placeholders(text, actor)``.
3. The default dispatcher looks the provider up once, then on each call
   checks ``is_enabled()`` and either delegates or colorizes.
"""

from chat_markup.placeholders.dispatcher import (
    PlaceholderDispatcher,
    get_default_dispatcher,
    reset_default_dispatcher,
    set_bracket_placeholders,
    set_placeholders,
)
from chat_markup.placeholders.provider import PlaceholderProvider
from chat_markup.placeholders.registry import (
    ProviderRegistry,
    bootstrap_registry,
    build_provider,
    default_registry,
)

__all__ = [
    "PlaceholderDispatcher",
    "PlaceholderProvider",
    "ProviderRegistry",
    "bootstrap_registry",
    "build_provider",
    "default_registry",
    "get_default_dispatcher",
    "reset_default_dispatcher",
    "set_bracket_placeholders",
    "set_placeholders",
]
