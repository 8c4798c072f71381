"""Shared payload builders and fixtures."""
from __future__ import annotations

from typing import Any

import pytest

from presence_gateway.schemas.user import PresenceUser, User


def make_user_payload(
    *,
    user_id: str = "80351110224678912",
    username: str = "nelly",
    discriminator: str = "1337",
    **extra: Any,
) -> dict[str, Any]:
    return {
        "id": user_id,
        "username": username,
        "discriminator": discriminator,
        "avatar": "8342729096ea3675442027381ff50dfe",
        **extra,
    }


def make_presence_payload(
    *,
    user_id: str = "7",
    status: str = "online",
    activities: list[dict[str, Any]] | None = None,
    **user_fields: Any,
) -> dict[str, Any]:
    return {
        "user": {"id": user_id, **user_fields},
        "status": status,
        "activities": activities if activities is not None else [],
        "client_status": {"desktop": status},
        "guild_id": "41771983423143937",
    }


def make_ready_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "v": 10,
        "user": make_user_payload(bot=True, verified=True, mfa_enabled=False, email=None),
        "guilds": [],
        "presences": [],
        "private_channels": [],
        "session_id": "d2ef5f3bde9d4c3e1a4a6b1b2e0e8c7f",
        "shard": [0, 1],
        "application": {"id": "80351110224678912", "flags": 8388608},
        "_trace": ['["gateway-prd-main-abcd",{"micros":1234}]'],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def partial_view() -> PresenceUser:
    return PresenceUser(id=7, avatar="old")


@pytest.fixture
def canonical_user() -> User:
    return User(id=7, name="nelly", discriminator=42, bot=False, avatar=None, public_flags=None)
