from __future__ import annotations

from typing import Any

from presence_gateway.application.exceptions import DecodeError
from presence_gateway.schemas.button import ActivityButton


def decode_buttons(value: Any) -> list[ActivityButton]:
    """Normalize the ``buttons`` field to a list of :class:`ActivityButton`.

    Older payloads send bare labels (``["Join"]``), newer ones send
    ``{"label": ..., "url": ...}`` objects. Absent or null is an empty list.
    """
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise DecodeError(f"buttons must be an array, got {type(value).__name__}")
    return [_decode_button(item, index) for index, item in enumerate(value)]


def _decode_button(item: Any, index: int) -> ActivityButton:
    match item:
        case ActivityButton():
            return item
        case str():
            return ActivityButton(label=item, url="")
        case {"label": str() as label, **rest}:
            url = rest.get("url")
            if url is not None and not isinstance(url, str):
                raise DecodeError(f"buttons[{index}].url must be a string, got {type(url).__name__}")
            return ActivityButton(label=label, url=url or "")
        case _:
            raise DecodeError(f"buttons[{index}] must be a label or a label/url object, got {item!r}")
