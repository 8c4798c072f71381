from __future__ import annotations

from presence_gateway.domain.value_objects.flags import UserPublicFlags
from presence_gateway.schemas.user import PresenceUser, User
from presence_gateway.services.user_projection import merge_canonical_into, narrow, narrow_cloned


def _complete_view(**overrides) -> PresenceUser:
    fields = dict(
        id=7,
        avatar="abc",
        bot=False,
        discriminator=42,
        name="nelly",
        public_flags=UserPublicFlags.VERIFIED_BOT,
    )
    fields.update(overrides)
    return PresenceUser(**fields)


def test_narrow_without_name_gives_nothing():
    assert narrow(_complete_view(name=None)) is None


def test_narrow_without_bot_or_discriminator_gives_nothing():
    assert narrow(_complete_view(bot=None)) is None
    assert narrow(_complete_view(discriminator=None)) is None


def test_narrow_matches_direct_construction():
    expected = User(
        id=7,
        name="nelly",
        discriminator=42,
        bot=False,
        avatar="abc",
        public_flags=UserPublicFlags.VERIFIED_BOT,
        banner=None,
        accent_colour=None,
        member=None,
    )

    assert narrow(_complete_view()) == expected


def test_narrow_allows_missing_avatar_and_flags():
    user = narrow(_complete_view(avatar=None, public_flags=None))

    assert user is not None
    assert user.avatar is None
    assert user.public_flags is None


def test_narrow_cloned_leaves_view_untouched():
    view = _complete_view()

    user = narrow_cloned(view)

    assert user is not None
    assert user.name == view.name
    assert view.name == "nelly"
    assert view.bot is False


def test_merge_keeps_avatar_when_incoming_is_null(partial_view, canonical_user):
    merge_canonical_into(partial_view, canonical_user)

    assert partial_view.avatar == "old"


def test_merge_overwrites_avatar_when_incoming_is_present(partial_view, canonical_user):
    merge_canonical_into(partial_view, canonical_user.model_copy(update={"avatar": "new"}))

    assert partial_view.avatar == "new"


def test_merge_overwrites_required_fields(partial_view, canonical_user):
    merge_canonical_into(partial_view, canonical_user)

    assert partial_view.id == 7
    assert partial_view.bot is False
    assert partial_view.discriminator == 42
    assert partial_view.name == "nelly"
    assert narrow(partial_view) is not None


def test_merge_public_flags_only_when_present(partial_view, canonical_user):
    partial_view.public_flags = UserPublicFlags.PARTNER

    merge_canonical_into(partial_view, canonical_user)
    assert partial_view.public_flags == UserPublicFlags.PARTNER

    merge_canonical_into(partial_view, canonical_user.model_copy(update={"public_flags": UserPublicFlags.STAFF}))
    assert partial_view.public_flags == UserPublicFlags.STAFF


def test_merge_leaves_view_only_fields_alone(canonical_user):
    view = PresenceUser(id=7, email="nelly@example.com", verified=True)

    merge_canonical_into(view, canonical_user)

    assert view.email == "nelly@example.com"
    assert view.verified is True
