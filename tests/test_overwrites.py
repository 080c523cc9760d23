import hikari
import pytest
from conftest import CHANNEL_ID, GUILD_ID

from permcache import CachedChannel, ChannelError, ChannelUnavailable, InMemoryStore
from permcache.overwrites import resolve_overwrites

THREAD_ID = hikari.Snowflake(5)


def overwrite(id: int, deny: hikari.Permissions) -> hikari.PermissionOverwrite:
    return hikari.PermissionOverwrite(
        id=hikari.Snowflake(id),
        type=hikari.PermissionOverwriteType.ROLE,
        deny=deny,
    )


def insert_thread(
    store: InMemoryStore,
    overwrites: list[hikari.PermissionOverwrite] | None,
    guild_id: hikari.Snowflake | None = GUILD_ID,
) -> None:
    store.insert_channel(
        CachedChannel(
            id=THREAD_ID,
            guild_id=guild_id,
            type=hikari.ChannelType.GUILD_PRIVATE_THREAD,
            permission_overwrites=overwrites,
            parent_id=CHANNEL_ID,
        )
    )


def test_own_followed_by_parent(store: InMemoryStore) -> None:
    own = [overwrite(GUILD_ID, hikari.Permissions.SEND_MESSAGES)]
    parent = [
        overwrite(GUILD_ID, hikari.Permissions.EMBED_LINKS),
        overwrite(3, hikari.Permissions.ATTACH_FILES),
    ]
    insert_thread(store, own)
    assert resolve_overwrites(store, THREAD_ID, parent) == own + parent


def test_own_only(store: InMemoryStore) -> None:
    own = [overwrite(GUILD_ID, hikari.Permissions.SEND_MESSAGES)]
    insert_thread(store, own)
    assert resolve_overwrites(store, THREAD_ID) == own
    assert resolve_overwrites(store, THREAD_ID, []) == own


def test_no_own_overwrites(store: InMemoryStore) -> None:
    parent = [overwrite(GUILD_ID, hikari.Permissions.EMBED_LINKS)]
    insert_thread(store, None)
    assert resolve_overwrites(store, THREAD_ID) == []
    assert resolve_overwrites(store, THREAD_ID, parent) == parent


def test_result_is_a_copy(store: InMemoryStore) -> None:
    own = [overwrite(GUILD_ID, hikari.Permissions.SEND_MESSAGES)]
    insert_thread(store, own)
    resolve_overwrites(store, THREAD_ID, own).clear()
    assert len(own) == 1


def test_thread_unavailable(store: InMemoryStore) -> None:
    with pytest.raises(ChannelError) as exc_info:
        resolve_overwrites(store, THREAD_ID)
    assert exc_info.value.kind == ChannelUnavailable(channel_id=THREAD_ID)


def test_thread_not_in_guild(store: InMemoryStore) -> None:
    insert_thread(store, [], guild_id=None)
    with pytest.raises(ChannelError) as exc_info:
        resolve_overwrites(store, THREAD_ID)
    assert exc_info.value.kind == ChannelUnavailable(channel_id=THREAD_ID)
