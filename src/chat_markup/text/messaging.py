"""Deliver colorized text to one or many recipients.

A recipient is anything with a ``send_message(text)`` method: a connected
player session, the console, a test double.  Text is colorized once before
delivery so every recipient sees the same native-coded string.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from chat_markup.text.colors import colorize


@runtime_checkable
class MessageRecipient(Protocol):
    """Anything that can receive a line of chat text."""

    def send_message(self, text: str) -> None: ...


def send_message(recipients: MessageRecipient | Iterable[MessageRecipient], text: str) -> None:
    """Colorize *text* and send it to a single recipient or each of several.

    Errors raised by a recipient propagate; recipients later in the
    iterable are not reached in that case.
    """
    rendered = colorize(text) or ""
    if isinstance(recipients, MessageRecipient):
        recipients.send_message(rendered)
        return
    for recipient in recipients:
        recipient.send_message(rendered)
