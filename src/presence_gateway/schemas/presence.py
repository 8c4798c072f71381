from __future__ import annotations

from pydantic import Field

from presence_gateway.domain.value_objects.enums import OnlineStatus
from presence_gateway.schemas.activity import Activity
from presence_gateway.schemas.common import Snowflake, WireModel
from presence_gateway.schemas.user import PresenceUser


class ClientStatus(WireModel):
    """Per-platform status; a platform the user is not on is null."""

    desktop: OnlineStatus | None = None
    mobile: OnlineStatus | None = None
    web: OnlineStatus | None = None


class Presence(WireModel):
    activities: list[Activity] = Field(default_factory=list)
    client_status: ClientStatus | None = None
    guild_id: Snowflake | None = None
    status: OnlineStatus
    user: PresenceUser
