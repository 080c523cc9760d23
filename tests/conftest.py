import hikari
import pytest

from permcache import (
    CachedChannel,
    CachedGuild,
    CachedMember,
    CachedRole,
    CachePermissions,
    InMemoryStore,
)

GUILD_ID = hikari.Snowflake(1)
OWNER_ID = hikari.Snowflake(10)
USER_ID = hikari.Snowflake(2)
ROLE_ID = hikari.Snowflake(3)
CHANNEL_ID = hikari.Snowflake(4)


@pytest.fixture()
def store() -> InMemoryStore:
    store = InMemoryStore()
    store.insert_guild(CachedGuild(id=GUILD_ID, owner_id=OWNER_ID))
    store.insert_role(
        CachedRole(
            id=GUILD_ID,
            guild_id=GUILD_ID,
            permissions=hikari.Permissions.CREATE_INSTANT_INVITE
            | hikari.Permissions.VIEW_AUDIT_LOG,
        )
    )
    store.insert_role(
        CachedRole(
            id=ROLE_ID, guild_id=GUILD_ID, permissions=hikari.Permissions.SEND_MESSAGES
        )
    )
    store.insert_member(CachedMember(guild_id=GUILD_ID, user_id=USER_ID))
    store.insert_channel(
        CachedChannel(
            id=CHANNEL_ID,
            guild_id=GUILD_ID,
            type=hikari.ChannelType.GUILD_TEXT,
            permission_overwrites=[],
        )
    )
    return store


@pytest.fixture()
def permissions(store: InMemoryStore) -> CachePermissions:
    return CachePermissions(store)
