from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer, PlainValidator

from presence_gateway.application.exceptions import DecodeError
from presence_gateway.codecs.discriminator import decode_discriminator, encode_discriminator
from presence_gateway.codecs.flags import decode_flags, encode_flags
from presence_gateway.codecs.kind import decode_kind, encode_kind
from presence_gateway.domain.value_objects.enums import ActivityKind
from presence_gateway.domain.value_objects.flags import ActivityFlags, UserPublicFlags


class WireModel(BaseModel):
    """Base for gateway payload records.

    Fields the service adds later are dropped on input instead of failing.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class FrozenWireModel(WireModel):
    model_config = ConfigDict(frozen=True)


def _reject_bool(value: Any) -> Any:
    # JSON true/false would otherwise coerce to 1/0.
    if isinstance(value, bool):
        raise DecodeError(f"expected an integer, got {str(value).lower()}")
    return value


WireInt = Annotated[int, BeforeValidator(_reject_bool)]

# Snowflakes arrive as strings (sometimes integers) and go back out as strings.
Snowflake = Annotated[
    int,
    BeforeValidator(_reject_bool),
    PlainSerializer(lambda value: str(value), return_type=str, when_used="json"),
]

Discriminator = Annotated[
    int,
    PlainValidator(decode_discriminator),
    PlainSerializer(encode_discriminator, return_type=str),
]

# Encoding UNKNOWN raises EncodeError, which pydantic wraps when dumping directly;
# encode_model is the supported encode path.
ActivityKindField = Annotated[
    ActivityKind,
    PlainValidator(decode_kind),
    PlainSerializer(encode_kind, return_type=int),
]

ActivityFlagsField = Annotated[
    ActivityFlags,
    PlainValidator(lambda value: decode_flags(ActivityFlags, value)),
    PlainSerializer(encode_flags, return_type=int),
]

UserPublicFlagsField = Annotated[
    UserPublicFlags,
    PlainValidator(lambda value: decode_flags(UserPublicFlags, value)),
    PlainSerializer(encode_flags, return_type=int),
]
