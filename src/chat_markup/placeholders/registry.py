"""Named registry of placeholder providers.

The registry stands in for the host's plugin manager: providers register
under a plugin name (``"PlaceholderAPI"`` by default) and the dispatcher
looks them up once by that name.  Registration happens at startup via
:func:`bootstrap_registry`, which reads the ``[placeholders]`` config
section and builds the matching adapter.
"""

from __future__ import annotations

import logging

from chat_markup.config import PlaceholderSettings
from chat_markup.errors import ProviderRegistrationError
from chat_markup.placeholders.provider import PlaceholderProvider

logger = logging.getLogger(__name__)


class ProviderRegistry:
    """Plugin-name → provider mapping.

    This class only tracks presence; liveness belongs to each provider
    and is read through :meth:`is_enabled`.
    """

    def __init__(self) -> None:
        self._providers: dict[str, PlaceholderProvider] = {}

    def register(self, name: str, provider: PlaceholderProvider) -> None:
        """Register *provider* under *name*.

        Raises:
            ProviderRegistrationError: If *name* is already registered.
        """
        if name in self._providers:
            raise ProviderRegistrationError(f"Provider already registered: {name}")
        self._providers[name] = provider
        logger.info("Registered placeholder provider %r (%s)", name, type(provider).__name__)

    def unregister(self, name: str) -> PlaceholderProvider | None:
        """Remove and return the provider under *name*, if any."""
        provider = self._providers.pop(name, None)
        if provider is not None:
            logger.info("Unregistered placeholder provider %r", name)
        return provider

    def get(self, name: str) -> PlaceholderProvider | None:
        """Return the provider registered under *name*, or ``None``."""
        return self._providers.get(name)

    def is_enabled(self, name: str) -> bool:
        """Return whether *name* is registered and currently enabled."""
        provider = self._providers.get(name)
        return provider is not None and provider.is_enabled()

    def names(self) -> list[str]:
        """Return registered plugin names in registration order."""
        return list(self._providers)

    def clear(self) -> None:
        """Drop every registration (used for tests or hot reloads)."""
        self._providers.clear()


def build_provider(settings: PlaceholderSettings) -> PlaceholderProvider | None:
    """Construct the provider selected by ``settings.provider``.

    Returns ``None`` for ``provider = none``.

    Raises:
        ProviderConfigError: If the static definitions file is invalid.
        FileNotFoundError:   If the static definitions file is missing.
    """
    if settings.provider == "http":
        from chat_markup.placeholders.http_provider import HttpPlaceholderProvider

        return HttpPlaceholderProvider(
            base_url=settings.base_url,
            timeout_seconds=settings.timeout_seconds,
            name=settings.plugin_name,
        )
    if settings.provider == "static":
        from chat_markup.placeholders.static_provider import StaticPlaceholderProvider

        return StaticPlaceholderProvider.from_yaml(settings.absolute_static_path)
    return None


def bootstrap_registry(settings: PlaceholderSettings, registry: ProviderRegistry) -> None:
    """Register the configured provider (if any) under ``settings.plugin_name``."""
    provider = build_provider(settings)
    if provider is None:
        logger.info("No placeholder provider configured; placeholders will only be colorized")
        return
    registry.register(settings.plugin_name, provider)


#: Process-wide registry consulted by the default dispatcher.
default_registry = ProviderRegistry()
