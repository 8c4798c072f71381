from __future__ import annotations

from enum import IntFlag
from typing import Any, TypeVar

from presence_gateway.application.exceptions import DecodeError

F = TypeVar("F", bound=IntFlag)


def decode_flags(flag_type: type[F], value: Any) -> F:
    """Decode a wire bitfield, keeping bits ``flag_type`` does not name."""
    if value is None:
        return flag_type(0)
    if isinstance(value, flag_type):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"{flag_type.__name__} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise DecodeError(f"{flag_type.__name__} must not be negative, got {value}")
    return flag_type(value)


def encode_flags(flags: IntFlag) -> int:
    return int(flags)
