"""Typed exceptions for the placeholder layer.

The dispatcher itself never raises or catches; these exceptions come from
the bundled providers and the registry, and reach callers unchanged.

Design intent:
    - Network and payload failures inside a provider raise
      :class:`PlaceholderProviderError` carrying structured context, rather
      than returning ``None`` and leaving callers to guess.
    - Configuration mistakes surface at load time as
      :class:`ProviderConfigError`, not on the first chat message.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ProviderOperationContext:
    """Structured operation metadata carried by provider exceptions.

    Attributes:
        provider: Registered plugin name (for example ``"PlaceholderAPI"``).
        operation: Stable operation identifier (for example
            ``"set_bracket_placeholders"``).
        details: Optional human-readable context for logs and debugging.
    """

    provider: str
    operation: str
    details: str | None = None


class ChatMarkupError(RuntimeError):
    """Base exception for chat_markup failures."""


class PlaceholderProviderError(ChatMarkupError):
    """A provider could not complete a substitution.

    Args:
        context: Structured operation metadata.
        cause: Optional underlying exception.
    """

    def __init__(
        self,
        *,
        context: ProviderOperationContext,
        cause: Exception | None = None,
    ) -> None:
        message = f"{context.provider}.{context.operation}"
        if context.details:
            message = f"{message}: {context.details}"
        super().__init__(message)
        self.context = context
        self.cause = cause


class ProviderConfigError(ChatMarkupError, ValueError):
    """A provider definition (static YAML, settings) is invalid."""


class ProviderRegistrationError(ChatMarkupError):
    """A plugin name is already taken in the registry."""
