"""Color-code translation between the trigger and native marker conventions.

Players type color codes with the ampersand (``&c``, ``&l``); the renderer
understands the section sign (``§c``, ``§l``).  A marker only counts as a
color code when it is immediately followed by a character from the code
alphabet: ``0-9``, ``a-f``, ``k-o`` and ``r`` in either case.  Everything
else, including a trailing marker, passes through untouched.

Translation is a single left-to-right pass over a copy of the input.  Each
position is tested once; a rewritten pair is never rescanned, so the output
always has the same length as the input.

Usage::

    from chat_markup.text.colors import colorize, decolorize

    colorize("&cHello &lworld")    # "§cHello §lworld"
    decolorize("§cHello")          # "&cHello"
    colorize("AT&T")               # unchanged, "T" is not a code
"""

from __future__ import annotations

from collections.abc import Iterable

# ---------------------------------------------------------------------------
# Marker constants
# ---------------------------------------------------------------------------

#: Native marker understood by the text renderer.
NATIVE_CHAR = "\u00a7"  # §

#: Human-typable marker used in config files and chat input.
TRIGGER_CHAR = "&"

#: Characters that turn a preceding marker into a color/format code.
CODE_ALPHABET = "0123456789AaBbCcDdEeFfKkLlMmNnOoRr"


def translate_alternate_color_codes(from_char: str, to_char: str, text: str) -> str:
    """Rewrite every ``from_char`` + code pair as ``to_char`` + lower-cased code.

    The scan stops one short of the end because the last character has no
    successor to validate.  The index always advances by one, so a pair is
    examined exactly once.

    Args:
        from_char: Marker to look for.
        to_char:   Marker to write in its place.
        text:      Text to translate.  Must not be ``None``; callers guard.

    Returns:
        A new string of the same length as *text*.
    """
    chars = list(text)
    for i in range(len(chars) - 1):
        if chars[i] == from_char and chars[i + 1] in CODE_ALPHABET:
            chars[i] = to_char
            chars[i + 1] = chars[i + 1].lower()
    return "".join(chars)


def colorize(text: str | None) -> str | None:
    """Translate trigger codes (``&c``) into native codes (``§c``).

    ``None`` is passed straight through.
    """
    if text is None:
        return None
    return translate_alternate_color_codes(TRIGGER_CHAR, NATIVE_CHAR, text)


def decolorize(text: str | None) -> str | None:
    """Translate native codes (``§c``) back into trigger codes (``&c``).

    ``None`` is passed straight through.
    """
    if text is None:
        return None
    return translate_alternate_color_codes(NATIVE_CHAR, TRIGGER_CHAR, text)


def join_newline(*strings: str) -> str:
    """Join the given lines with ``\\n``."""
    return join_newline_iter(strings)


def join_newline_iter(strings: Iterable[str]) -> str:
    """Join lines from any iterable with ``\\n``."""
    return "\n".join(strings)
