"""Conversions between the partial user of a presence update and the full user record."""
from __future__ import annotations

from presence_gateway.schemas.user import PresenceUser, User


def narrow(view: PresenceUser) -> User | None:
    """Build a full :class:`User` from a presence view.

    Returns ``None`` when the view lacks ``bot``, ``discriminator`` or
    ``name``; presence deltas routinely leave those out.
    """
    if view.bot is None or view.discriminator is None or view.name is None:
        return None
    return User(
        id=view.id,
        name=view.name,
        discriminator=view.discriminator,
        bot=view.bot,
        avatar=view.avatar,
        public_flags=view.public_flags,
        banner=None,
        accent_colour=None,
        member=None,
    )


def narrow_cloned(view: PresenceUser) -> User | None:
    """Like :func:`narrow`, on a deep copy of ``view``."""
    return narrow(view.model_copy(deep=True))


def merge_canonical_into(view: PresenceUser, user: User) -> None:
    """Refresh a cached presence view in place from a full user record.

    A null avatar or public flags on ``user`` leaves the cached value alone.
    """
    view.id = user.id
    if user.avatar is not None:
        view.avatar = user.avatar
    view.bot = user.bot
    view.discriminator = user.discriminator
    view.name = user.name
    if user.public_flags is not None:
        view.public_flags = user.public_flags
