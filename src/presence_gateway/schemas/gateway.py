from __future__ import annotations

from presence_gateway.schemas.common import FrozenWireModel, WireInt


class SessionStartLimit(FrozenWireModel):
    """How many sessions may still be started in the current window."""

    remaining: WireInt
    # Milliseconds until the window resets.
    reset_after: WireInt
    total: WireInt
    # Identify requests allowed per 5 seconds.
    max_concurrency: WireInt


class Gateway(FrozenWireModel):
    url: str


class BotGateway(Gateway):
    """Gateway endpoint response for bot accounts, with the recommended shard count."""

    shards: WireInt
    session_start_limit: SessionStartLimit
