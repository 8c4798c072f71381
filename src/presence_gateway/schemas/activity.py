from __future__ import annotations

from typing import Annotated

from pydantic import AnyUrl, BeforeValidator, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from presence_gateway.application.exceptions import ValidationError
from presence_gateway.codecs.buttons import decode_buttons
from presence_gateway.config import settings
from presence_gateway.domain.value_objects.enums import ActivityKind
from presence_gateway.schemas.button import ActivityButton
from presence_gateway.schemas.common import (
    ActivityFlagsField,
    ActivityKindField,
    FrozenWireModel,
    Snowflake,
    WireInt,
)

_URL = TypeAdapter(AnyUrl)

CUSTOM_STATUS_NAME = "Custom Status"


class ActivityAssets(FrozenWireModel):
    large_image: str | None = None
    large_text: str | None = None
    small_image: str | None = None
    small_text: str | None = None


class ActivityParty(FrozenWireModel):
    id: str | None = None
    # (current size, max size)
    size: tuple[WireInt, WireInt] | None = None


class ActivitySecrets(FrozenWireModel):
    join: str | None = None
    match_: str | None = Field(default=None, alias="match")
    spectate: str | None = None


class ActivityEmoji(FrozenWireModel):
    name: str
    id: Snowflake | None = None
    animated: bool | None = None


class ActivityTimestamps(FrozenWireModel):
    """Unix milliseconds."""

    start: WireInt | None = None
    end: WireInt | None = None


class Activity(FrozenWireModel):
    """What an account is doing, as shown next to its name.

    Build one with the named constructors (``Activity.playing("chess")``) to
    send it, or decode it from a presence payload.
    """

    application_id: Snowflake | None = None
    assets: ActivityAssets | None = None
    details: str | None = None
    flags: ActivityFlagsField | None = None
    instance: bool | None = None
    kind: ActivityKindField = Field(default=ActivityKind.PLAYING, alias="type")
    # The service caps this at 128 characters.
    name: str
    party: ActivityParty | None = None
    secrets: ActivitySecrets | None = None
    state: str | None = None
    emoji: ActivityEmoji | None = None
    timestamps: ActivityTimestamps | None = None
    # Only set for STREAMING.
    url: str | None = None
    buttons: Annotated[list[ActivityButton], BeforeValidator(decode_buttons)] = Field(default_factory=list)

    @classmethod
    def playing(cls, name: str) -> Activity:
        return cls(name=name, kind=ActivityKind.PLAYING)

    @classmethod
    def streaming(cls, name: str, url: str) -> Activity:
        try:
            _URL.validate_python(url)
        except PydanticValidationError as exc:
            raise ValidationError(f"invalid stream url: {url!r}") from exc
        return cls(name=name, kind=ActivityKind.STREAMING, url=url)

    @classmethod
    def listening(cls, name: str) -> Activity:
        return cls(name=name, kind=ActivityKind.LISTENING)

    @classmethod
    def watching(cls, name: str) -> Activity:
        return cls(name=name, kind=ActivityKind.WATCHING)

    @classmethod
    def competing(cls, name: str) -> Activity:
        return cls(name=name, kind=ActivityKind.COMPETING)

    @classmethod
    def custom(cls, state: str) -> Activity:
        return cls(name=CUSTOM_STATUS_NAME, kind=ActivityKind.CUSTOM, state=state)

    def with_buttons(self, *buttons: ActivityButton) -> Activity:
        """Return a copy carrying ``buttons``."""
        if len(buttons) > settings.ACTIVITY_MAX_BUTTONS:
            raise ValidationError(
                f"an activity has at most {settings.ACTIVITY_MAX_BUTTONS} buttons, got {len(buttons)}"
            )
        return self.model_copy(update={"buttons": list(buttons)})
