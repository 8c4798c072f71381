from __future__ import annotations

from enum import IntEnum, StrEnum


class ActivityKind(IntEnum):
    """Activity type codes, numbered by declaration order."""

    PLAYING = 0
    STREAMING = 1
    LISTENING = 2
    WATCHING = 3
    CUSTOM = 4
    COMPETING = 5
    UNKNOWN = -1

    @classmethod
    def _missing_(cls, value: object) -> ActivityKind | None:
        # Any integer outside the published table is a code added upstream later.
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.UNKNOWN
        return None


class OnlineStatus(StrEnum):
    DND = "dnd"
    IDLE = "idle"
    INVISIBLE = "invisible"
    OFFLINE = "offline"
    ONLINE = "online"
