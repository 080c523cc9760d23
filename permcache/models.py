from __future__ import annotations

import typing
from datetime import datetime

import hikari


class CachedGuild(typing.NamedTuple):
    id: hikari.Snowflake
    owner_id: hikari.Snowflake

    @property
    def everyone_role_id(self) -> hikari.Snowflake:
        return self.id


class CachedRole(typing.NamedTuple):
    id: hikari.Snowflake
    guild_id: hikari.Snowflake
    permissions: hikari.Permissions


class CachedMember(typing.NamedTuple):
    guild_id: hikari.Snowflake
    user_id: hikari.Snowflake
    role_ids: typing.Sequence[hikari.Snowflake] = ()
    # naive values are read as UTC
    communication_disabled_until: datetime | None = None


class CachedChannel(typing.NamedTuple):
    id: hikari.Snowflake
    # None for DMs and group DMs
    guild_id: hikari.Snowflake | None
    type: hikari.ChannelType
    permission_overwrites: typing.Sequence[hikari.PermissionOverwrite] | None = None
    parent_id: hikari.Snowflake | None = None

    @property
    def is_thread(self) -> bool:
        return self.type in THREAD_TYPES


PRIVATE_THREAD_TYPES: typing.Final = frozenset(
    {hikari.ChannelType.GUILD_PRIVATE_THREAD}
)
PUBLIC_THREAD_TYPES: typing.Final = frozenset(
    {hikari.ChannelType.GUILD_PUBLIC_THREAD, hikari.ChannelType.GUILD_NEWS_THREAD}
)
THREAD_TYPES: typing.Final = PRIVATE_THREAD_TYPES | PUBLIC_THREAD_TYPES
