from __future__ import annotations

from typing import Any

from presence_gateway.application.exceptions import DecodeError

WIDTH = 4


def decode_discriminator(value: Any) -> int:
    """``"0042"`` -> ``42``. Plain integers are accepted as well."""
    if isinstance(value, bool):
        raise DecodeError("discriminator must be a numeric string, got bool")
    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and value.isascii() and value.isdigit() and len(value) <= WIDTH:
        number = int(value)
    else:
        raise DecodeError(f"discriminator must be up to {WIDTH} digits, got {value!r}")
    if not 0 <= number < 10**WIDTH:
        raise DecodeError(f"discriminator out of range: {number}")
    return number


def encode_discriminator(value: int) -> str:
    return f"{value:0{WIDTH}d}"
