from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from presence_gateway.infrastructure.wire.serializer import decode_model, encode_model
from presence_gateway.schemas.activity import Activity
from presence_gateway.schemas.gateway import BotGateway
from presence_gateway.schemas.presence import Presence
from presence_gateway.schemas.ready import Ready

logger = logging.getLogger(__name__)

Payload = Mapping[str, Any] | str | bytes


def load_ready(raw: Payload) -> Ready:
    """Decode the READY dispatch that opens a session."""
    ready = decode_model(Ready, raw)
    logger.info(
        "Session %s ready (v%d, shard=%s): %d guilds, %d presences, %d private channels",
        ready.session_id,
        ready.version,
        ready.shard,
        len(ready.guilds),
        len(ready.presences),
        len(ready.private_channels),
    )
    return ready


def load_presence(raw: Payload) -> Presence:
    presence = decode_model(Presence, raw)
    logger.debug("Presence update for user %d: %s", presence.user.id, presence.status)
    return presence


def load_bot_gateway(raw: Payload) -> BotGateway:
    gateway = decode_model(BotGateway, raw)
    limit = gateway.session_start_limit
    logger.info(
        "Gateway %s recommends %d shards (%d/%d session starts left)",
        gateway.url,
        gateway.shards,
        limit.remaining,
        limit.total,
    )
    return gateway


def load_activity(raw: Payload) -> Activity:
    return decode_model(Activity, raw)


def dump_activity(activity: Activity) -> dict[str, Any]:
    """Wire form of an activity for an outgoing presence update."""
    return encode_model(activity)
