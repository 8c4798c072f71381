from __future__ import annotations

from typing import Annotated

from pydantic import Field

from presence_gateway.codecs.keyed import KeyedCollection
from presence_gateway.domain.value_objects.ids import ChannelId, UserId
from presence_gateway.schemas.common import FrozenWireModel, Snowflake, WireInt
from presence_gateway.schemas.presence import Presence
from presence_gateway.schemas.user import CurrentUser, User


class PartialCurrentApplicationInfo(FrozenWireModel):
    id: Snowflake
    flags: WireInt | None = None


class UnavailableGuild(FrozenWireModel):
    """Guild the session will fill in later with a guild create event."""

    id: Snowflake
    unavailable: bool = False


class PrivateChannel(FrozenWireModel):
    id: Snowflake
    kind: WireInt = Field(default=1, alias="type")
    last_message_id: Snowflake | None = None
    recipients: list[User] = Field(default_factory=list)


PresenceMap = Annotated[dict[UserId, Presence], KeyedCollection(key=lambda presence: presence.user.id)]
PrivateChannelMap = Annotated[dict[ChannelId, PrivateChannel], KeyedCollection(key=lambda channel: channel.id)]


class Ready(FrozenWireModel):
    """First dispatch of a session, sent once the identify handshake succeeds."""

    application: PartialCurrentApplicationInfo
    guilds: list[UnavailableGuild]
    presences: PresenceMap = Field(default_factory=dict)
    private_channels: PrivateChannelMap = Field(default_factory=dict)
    # Needed to resume the session after a disconnect.
    session_id: str
    # (shard id, shard count)
    shard: tuple[WireInt, WireInt] | None = None
    trace: list[str] = Field(default_factory=list, alias="_trace")
    user: CurrentUser
    version: WireInt = Field(alias="v")
