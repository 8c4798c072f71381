from __future__ import annotations

from typing import NewType

ChannelId = NewType("ChannelId", int)
UserId = NewType("UserId", int)
