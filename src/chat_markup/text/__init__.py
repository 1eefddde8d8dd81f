"""Plain text helpers: color-code translation, actor identities, delivery."""

from chat_markup.text.actors import ANONYMOUS, ActorKind, Anonymous, OfflinePlayer, OtherActor
from chat_markup.text.colors import (
    CODE_ALPHABET,
    NATIVE_CHAR,
    TRIGGER_CHAR,
    colorize,
    decolorize,
    join_newline,
    join_newline_iter,
    translate_alternate_color_codes,
)
from chat_markup.text.messaging import MessageRecipient, send_message

__all__ = [
    "ANONYMOUS",
    "CODE_ALPHABET",
    "NATIVE_CHAR",
    "TRIGGER_CHAR",
    "ActorKind",
    "Anonymous",
    "MessageRecipient",
    "OfflinePlayer",
    "OtherActor",
    "colorize",
    "decolorize",
    "join_newline",
    "join_newline_iter",
    "send_message",
    "translate_alternate_color_codes",
]
