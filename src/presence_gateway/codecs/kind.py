from __future__ import annotations

import logging
from typing import Any

from presence_gateway.application.exceptions import DecodeError, EncodeError
from presence_gateway.config import settings
from presence_gateway.domain.value_objects.enums import ActivityKind

logger = logging.getLogger(__name__)


def decode_kind(value: Any) -> ActivityKind:
    """Map a wire ``type`` code to an :class:`ActivityKind`.

    Absent means the default kind (``PLAYING``); an integer the table does not
    list means ``UNKNOWN``. Only a value that is not an integer at all fails.
    """
    if value is None:
        return ActivityKind.PLAYING
    if isinstance(value, ActivityKind):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"activity type must be an integer, got {type(value).__name__}")

    kind = ActivityKind(value)
    if kind is ActivityKind.UNKNOWN and settings.LOG_UNKNOWN_CODES:
        logger.debug("Unknown activity type code %d", value)
    return kind


def encode_kind(kind: ActivityKind) -> int:
    if kind is ActivityKind.UNKNOWN:
        raise EncodeError("activity type UNKNOWN has no wire code")
    return int(kind)
