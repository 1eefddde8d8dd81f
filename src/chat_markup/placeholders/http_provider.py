"""HTTP placeholder provider.

``HttpPlaceholderProvider`` is a thin, synchronous wrapper around a remote
placeholder service.  It is the only place in the package that makes a
network call.

Wire contract
-------------
Both operations POST the same JSON body and differ only in path::

    POST <base_url>/placeholders          free-form  %name%
    POST <base_url>/placeholders/bracket  bracket    [name]

    {"player": {"uuid": "...", "name": "..."} | null, "text": "..."}

and expect ``{"text": "..."}`` back.  ``GET <base_url>/health`` answers
2xx while the service is up.

Liveness
--------
The provider owns its enabled flag.  :meth:`check_health` polls the
service and updates the flag; :meth:`enable` / :meth:`disable` set it
directly.  :meth:`is_enabled` only reads the flag, so the dispatcher's
per-call check never touches the network.

Failures
--------
Unlike a best-effort renderer, substitution failures are not turned into
``None``: timeouts, connection errors, non-2xx statuses and malformed
payloads raise :class:`~chat_markup.errors.PlaceholderProviderError`
after being logged.
"""

from __future__ import annotations

import logging

import requests

from chat_markup.errors import PlaceholderProviderError, ProviderOperationContext
from chat_markup.text.actors import OfflinePlayer

logger = logging.getLogger(__name__)

# Seconds to wait on a single placeholder request when none is configured.
_DEFAULT_TIMEOUT = 2.0


class HttpPlaceholderProvider:
    """Provider backed by a remote placeholder service.

    Attributes:
        _base_url:  Service root, without trailing slash.
        _timeout:   HTTP request timeout in seconds.
        _name:      Plugin name used in log lines and error context.
        _enabled:   Liveness flag read by :meth:`is_enabled`.
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: float = _DEFAULT_TIMEOUT,
        name: str = "PlaceholderAPI",
        enabled: bool = True,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds
        self._name = name
        self._enabled = enabled

    # ── Liveness ──────────────────────────────────────────────────────────────

    def is_enabled(self) -> bool:
        return self._enabled

    def enable(self) -> None:
        self._enabled = True

    def disable(self) -> None:
        self._enabled = False

    def check_health(self) -> bool:
        """Call ``/health`` and update the enabled flag from the result."""
        try:
            response = requests.get(f"{self._base_url}/health", timeout=self._timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as exc:
            logger.warning("%s: health check failed (%s); disabling", self._name, exc)
            self._enabled = False
            return False

        if not self._enabled:
            logger.info("%s: health check passed; re-enabling", self._name)
        self._enabled = True
        return True

    # ── Substitution ──────────────────────────────────────────────────────────

    def set_placeholders(self, player: OfflinePlayer | None, text: str | None) -> str | None:
        return self._substitute("set_placeholders", "/placeholders", player, text)

    def set_bracket_placeholders(
        self, player: OfflinePlayer | None, text: str | None
    ) -> str | None:
        return self._substitute(
            "set_bracket_placeholders", "/placeholders/bracket", player, text
        )

    # ── Internal helpers ──────────────────────────────────────────────────────

    def _substitute(
        self,
        operation: str,
        path: str,
        player: OfflinePlayer | None,
        text: str | None,
    ) -> str | None:
        """POST one substitution request and return the ``text`` field.

        Raises:
            PlaceholderProviderError: On any transport, HTTP or payload error.
        """
        url = f"{self._base_url}{path}"
        try:
            response = requests.post(
                url,
                json=self._build_payload(player, text),
                timeout=self._timeout,
            )
            response.raise_for_status()
        except requests.exceptions.Timeout as exc:
            logger.warning("%s: request timed out after %.1fs (%s)", self._name, self._timeout, url)
            raise self._error(operation, f"timed out after {self._timeout}s", exc) from exc
        except requests.exceptions.ConnectionError as exc:
            logger.warning("%s: cannot connect to %s", self._name, url)
            raise self._error(operation, f"cannot connect to {url}", exc) from exc
        except requests.exceptions.RequestException as exc:
            logger.error("%s: request failed: %s", self._name, exc)
            raise self._error(operation, str(exc), exc) from exc

        # requests.exceptions.JSONDecodeError is a ValueError.
        try:
            data = response.json()
        except ValueError as exc:
            logger.error("%s: response was not JSON", self._name)
            raise self._error(operation, "response was not JSON", exc) from exc

        if not isinstance(data, dict) or "text" not in data:
            raise self._error(operation, "response is missing the 'text' field")
        result = data["text"]
        if result is not None and not isinstance(result, str):
            raise self._error(operation, "'text' field must be a string or null")
        return result

    def _error(
        self, operation: str, details: str, cause: Exception | None = None
    ) -> PlaceholderProviderError:
        return PlaceholderProviderError(
            context=ProviderOperationContext(
                provider=self._name, operation=operation, details=details
            ),
            cause=cause,
        )

    @staticmethod
    def _build_payload(player: OfflinePlayer | None, text: str | None) -> dict:
        """Construct the substitution request body."""
        return {
            "player": None if player is None else {"uuid": player.uuid, "name": player.name},
            "text": text,
        }
