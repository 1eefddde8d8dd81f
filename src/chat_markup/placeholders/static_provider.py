"""YAML-backed local placeholder provider.

For servers without a remote placeholder service, a fixed set of
placeholders can be declared in a YAML file::

    version: "1.0"
    placeholders:
      server_name: "&6Pipeworks"
      player_name: "{player_name}"
      welcome: "&aWelcome, {player_name}!"

Each value is a template that may reference ``{player_name}`` and
``{player_uuid}``.  Resolution rules:

- ``%server_name%`` and ``[server_name]`` both resolve against the same table.
- Unknown placeholders are left in the text untouched.
- A template that needs player fields is left untouched on an anonymous
  lookup, since there is nobody to fill it in for.
- Codes in the input text and in templates come out in native form.
  Player names and UUIDs are inserted as-is and never colorized.

Design notes:
- :meth:`StaticPlaceholderProvider.from_yaml` raises :exc:`FileNotFoundError`
  if the file is absent and :exc:`~chat_markup.errors.ProviderConfigError`
  on schema problems.  Neither is caught here.
"""

from __future__ import annotations

import re
import string
from collections.abc import Mapping
from pathlib import Path

import yaml

from chat_markup.errors import ProviderConfigError
from chat_markup.text.actors import OfflinePlayer
from chat_markup.text.colors import colorize

#: Template fields a placeholder value may reference.
PLAYER_FIELDS: frozenset[str] = frozenset({"player_name", "player_uuid"})

_PERCENT_PATTERN = re.compile(r"%([^%\s]+)%")
_BRACKET_PATTERN = re.compile(r"\[([^\[\]\s]+)\]")


def _template_fields(template: str) -> set[str]:
    """Return the ``{field}`` names referenced by *template*."""
    return {name for _, name, _, _ in string.Formatter().parse(template) if name}


class StaticPlaceholderProvider:
    """Provider resolving placeholders from an in-memory template table.

    Attributes:
        _templates: Placeholder name → template.
        _enabled:   Liveness flag read by :meth:`is_enabled`.
    """

    def __init__(self, templates: Mapping[str, str], *, enabled: bool = True) -> None:
        for name, template in templates.items():
            try:
                fields = _template_fields(template)
            except ValueError as exc:
                raise ProviderConfigError(
                    f"placeholder {name!r} has a malformed template: {exc}"
                ) from exc
            unknown = fields - PLAYER_FIELDS
            if unknown:
                raise ProviderConfigError(
                    f"placeholder {name!r} references unknown fields: {sorted(unknown)}"
                )
        # Colorized once here; substituted player values stay as given.
        self._templates = {name: colorize(template) for name, template in templates.items()}
        self._enabled = enabled

    @classmethod
    def from_yaml(cls, path: Path) -> StaticPlaceholderProvider:
        """Load a provider from a placeholder definitions file.

        Raises:
            FileNotFoundError:   If *path* does not exist.
            ProviderConfigError: If the file is not a mapping with a
                                 ``placeholders`` mapping of string values.
        """
        if not path.exists():
            raise FileNotFoundError(f"Placeholder definitions not found: {path}")

        try:
            with path.open(encoding="utf-8") as fh:
                raw = yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            raise ProviderConfigError(f"{path.name} is not valid YAML: {exc}") from exc

        if not isinstance(raw, dict):
            raise ProviderConfigError(f"{path.name} must be a YAML mapping at the top level.")

        placeholders = raw.get("placeholders")
        if not isinstance(placeholders, dict):
            raise ProviderConfigError(
                f"{path.name}: missing required field 'placeholders' (must be a mapping)."
            )

        templates: dict[str, str] = {}
        for name, value in placeholders.items():
            # Scalars like numbers are accepted and stringified; nested
            # structures are not.
            if isinstance(value, (dict, list)) or value is None:
                raise ProviderConfigError(
                    f"{path.name}: placeholder {name!r} must be a scalar value."
                )
            templates[str(name)] = str(value)
        return cls(templates)

    # ── Liveness ──────────────────────────────────────────────────────────────

    def is_enabled(self) -> bool:
        return self._enabled

    def enable(self) -> None:
        self._enabled = True

    def disable(self) -> None:
        self._enabled = False

    # ── Substitution ──────────────────────────────────────────────────────────

    def set_placeholders(self, player: OfflinePlayer | None, text: str | None) -> str | None:
        return self._substitute(_PERCENT_PATTERN, player, text)

    def set_bracket_placeholders(
        self, player: OfflinePlayer | None, text: str | None
    ) -> str | None:
        return self._substitute(_BRACKET_PATTERN, player, text)

    def _substitute(
        self, pattern: re.Pattern[str], player: OfflinePlayer | None, text: str | None
    ) -> str | None:
        if text is None:
            return None

        values = {}
        if player is not None:
            values = {"player_name": player.name, "player_uuid": player.uuid}

        def replace(match: re.Match[str]) -> str:
            template = self._templates.get(match.group(1))
            if template is None:
                return match.group(0)
            if _template_fields(template) - values.keys():
                return match.group(0)
            return template.format_map(values)

        return pattern.sub(replace, colorize(text))
