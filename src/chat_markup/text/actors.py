"""Actor identities on whose behalf placeholders are resolved.

An actor is whoever a piece of text is being rendered for.  Only one kind
matters to a placeholder provider: the offline-capable player, which can be
looked up by UUID whether or not the player is currently connected.  Every
other kind (the console, a command block, an NPC) is treated as anonymous.

Each identity carries an :class:`ActorKind` tag so callers classify actors
by comparing tags rather than probing types.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ActorKind(Enum):
    """Tag identifying which variant an actor identity is."""

    ANONYMOUS = "anonymous"
    OFFLINE_PLAYER = "offline_player"
    OTHER = "other"


@dataclass(frozen=True)
class Anonymous:
    """No particular actor; placeholders resolve without player context."""

    kind: ActorKind = field(default=ActorKind.ANONYMOUS, init=False)


@dataclass(frozen=True)
class OfflinePlayer:
    """A player identity usable for lookups even while disconnected.

    Attributes:
        uuid: Stable player UUID, the lookup key for providers.
        name: Last known display name.
    """

    uuid: str
    name: str
    kind: ActorKind = field(default=ActorKind.OFFLINE_PLAYER, init=False)


@dataclass(frozen=True)
class OtherActor:
    """Any non-player actor (console, command block, NPC).

    Attributes:
        kind_name: Free-form description used only for logging.
    """

    kind_name: str
    kind: ActorKind = field(default=ActorKind.OTHER, init=False)


#: Union of every actor identity variant.
Actor = Anonymous | OfflinePlayer | OtherActor

#: Shared instance for callers that want an explicit anonymous actor.
ANONYMOUS = Anonymous()


def as_offline_player(actor: Actor | None) -> OfflinePlayer | None:
    """Return *actor* if it is an offline-capable player, else ``None``."""
    if actor is not None and actor.kind is ActorKind.OFFLINE_PLAYER:
        return actor  # type: ignore[return-value]
    return None
