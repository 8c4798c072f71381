from __future__ import annotations

from presence_gateway.schemas.common import FrozenWireModel


class ActivityButton(FrozenWireModel):
    label: str
    # The service never sends the real target to bot accounts.
    url: str = ""
