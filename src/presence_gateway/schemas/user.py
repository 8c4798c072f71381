from __future__ import annotations

from typing import Any

from pydantic import Field, SerializerFunctionWrapHandler, model_serializer

from presence_gateway.schemas.common import (
    Discriminator,
    FrozenWireModel,
    Snowflake,
    UserPublicFlagsField,
    WireInt,
    WireModel,
)


class PartialMember(FrozenWireModel):
    """Guild membership attached to a user seen inside a guild."""

    nick: str | None = None
    roles: list[Snowflake] = Field(default_factory=list)
    joined_at: str | None = None
    premium_since: str | None = None
    deaf: bool = False
    mute: bool = False
    pending: bool = False
    permissions: str | None = None


class User(FrozenWireModel):
    id: Snowflake
    name: str = Field(alias="username")
    discriminator: Discriminator
    bot: bool = False
    avatar: str | None = None
    public_flags: UserPublicFlagsField | None = None
    banner: str | None = None
    accent_colour: WireInt | None = Field(default=None, alias="accent_color")
    member: PartialMember | None = None


class CurrentUser(User):
    """The account the session is authenticated as."""

    email: str | None = None
    mfa_enabled: bool = False
    verified: bool | None = None


class PresenceUser(WireModel):
    """User fields carried by a presence update.

    Only ``id`` is guaranteed; everything else is sent only when it changed
    since the client last saw the full user. Instances are updated in place
    by :func:`presence_gateway.services.user_projection.merge_canonical_into`.
    """

    id: Snowflake
    avatar: str | None = None
    bot: bool | None = None
    discriminator: Discriminator | None = None
    email: str | None = None
    mfa_enabled: bool | None = None
    name: str | None = Field(default=None, alias="username")
    verified: bool | None = None
    public_flags: UserPublicFlagsField | None = None

    @model_serializer(mode="wrap")
    def _omit_absent_discriminator(self, handler: SerializerFunctionWrapHandler) -> Any:
        data = handler(self)
        if self.discriminator is None and isinstance(data, dict):
            data.pop("discriminator", None)
        return data
