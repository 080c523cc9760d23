from __future__ import annotations

import logging
import threading
import typing

import hikari
from hikari.api.cache import Cache

from .models import CachedChannel, CachedGuild, CachedMember, CachedRole

logger = logging.getLogger(__name__)


class StateStore(typing.Protocol):
    def get_guild(self, guild_id: hikari.Snowflakeish) -> CachedGuild | None:
        ...

    def get_role(self, role_id: hikari.Snowflakeish) -> CachedRole | None:
        ...

    def get_member(
        self, guild_id: hikari.Snowflakeish, user_id: hikari.Snowflakeish
    ) -> CachedMember | None:
        ...

    def get_channel(self, channel_id: hikari.Snowflakeish) -> CachedChannel | None:
        ...


class InMemoryStore:
    guilds: dict[hikari.Snowflake, CachedGuild]
    roles: dict[hikari.Snowflake, CachedRole]
    members: dict[tuple[hikari.Snowflake, hikari.Snowflake], CachedMember]
    channels: dict[hikari.Snowflake, CachedChannel]

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self.guilds = {}
        self.roles = {}
        self.members = {}
        self.channels = {}

    def get_guild(self, guild_id: hikari.Snowflakeish) -> CachedGuild | None:
        with self._lock:
            return self.guilds.get(hikari.Snowflake(guild_id))

    def get_role(self, role_id: hikari.Snowflakeish) -> CachedRole | None:
        with self._lock:
            return self.roles.get(hikari.Snowflake(role_id))

    def get_member(
        self, guild_id: hikari.Snowflakeish, user_id: hikari.Snowflakeish
    ) -> CachedMember | None:
        with self._lock:
            key = (hikari.Snowflake(guild_id), hikari.Snowflake(user_id))
            return self.members.get(key)

    def get_channel(self, channel_id: hikari.Snowflakeish) -> CachedChannel | None:
        with self._lock:
            return self.channels.get(hikari.Snowflake(channel_id))

    def insert_guild(self, guild: CachedGuild) -> None:
        with self._lock:
            self.guilds[guild.id] = guild

    def insert_role(self, role: CachedRole) -> None:
        with self._lock:
            self.roles[role.id] = role

    def insert_member(self, member: CachedMember) -> None:
        with self._lock:
            self.members[(member.guild_id, member.user_id)] = member

    def insert_channel(self, channel: CachedChannel) -> None:
        with self._lock:
            self.channels[channel.id] = channel

    def remove_guild(self, guild_id: hikari.Snowflakeish) -> CachedGuild | None:
        guild_id = hikari.Snowflake(guild_id)
        with self._lock:
            guild = self.guilds.pop(guild_id, None)
            self.roles = {
                k: v for k, v in self.roles.items() if v.guild_id != guild_id
            }
            self.members = {
                k: v for k, v in self.members.items() if v.guild_id != guild_id
            }
            self.channels = {
                k: v for k, v in self.channels.items() if v.guild_id != guild_id
            }
        logger.debug(f"removed guild {guild_id} and its entities")
        return guild

    def remove_role(self, role_id: hikari.Snowflakeish) -> CachedRole | None:
        with self._lock:
            return self.roles.pop(hikari.Snowflake(role_id), None)

    def remove_member(
        self, guild_id: hikari.Snowflakeish, user_id: hikari.Snowflakeish
    ) -> CachedMember | None:
        key = (hikari.Snowflake(guild_id), hikari.Snowflake(user_id))
        with self._lock:
            return self.members.pop(key, None)

    def remove_channel(self, channel_id: hikari.Snowflakeish) -> CachedChannel | None:
        with self._lock:
            return self.channels.pop(hikari.Snowflake(channel_id), None)


class HikariCacheStore:
    """Read-only view over a running bot's cache.

    Requires the ``GUILDS``, ``GUILD_CHANNELS``, ``GUILD_THREADS``, ``ROLES``
    and ``MEMBERS`` cache components to be enabled.

    hikari threads carry no permission overwrites, so threads are returned
    with none and the parent channel's overwrites are not merged in; a
    thread is calculated from the member's roles alone. ``parent_id`` is kept
    on the record for callers that want to look the parent up themselves.
    """

    def __init__(self, cache: Cache) -> None:
        self.cache = cache

    def get_guild(self, guild_id: hikari.Snowflakeish) -> CachedGuild | None:
        guild = self.cache.get_guild(guild_id)
        if guild is None:
            return None
        return CachedGuild(id=guild.id, owner_id=guild.owner_id)

    def get_role(self, role_id: hikari.Snowflakeish) -> CachedRole | None:
        role = self.cache.get_role(role_id)
        if role is None:
            return None
        return CachedRole(
            id=role.id, guild_id=role.guild_id, permissions=role.permissions
        )

    def get_member(
        self, guild_id: hikari.Snowflakeish, user_id: hikari.Snowflakeish
    ) -> CachedMember | None:
        member = self.cache.get_member(guild_id, user_id)
        if member is None:
            return None
        # hikari may list the @everyone role among the member's roles
        role_ids = tuple(x for x in member.role_ids if x != member.guild_id)
        return CachedMember(
            guild_id=member.guild_id,
            user_id=member.id,
            role_ids=role_ids,
            communication_disabled_until=member.raw_communication_disabled_until,
        )

    def get_channel(self, channel_id: hikari.Snowflakeish) -> CachedChannel | None:
        thread = self.cache.get_thread(channel_id)
        if thread is not None:
            return CachedChannel(
                id=thread.id,
                guild_id=thread.guild_id,
                type=thread.type,
                permission_overwrites=None,
                parent_id=thread.parent_id,
            )

        channel = self.cache.get_guild_channel(channel_id)
        if channel is None:
            return None
        return CachedChannel(
            id=channel.id,
            guild_id=channel.guild_id,
            type=channel.type,
            permission_overwrites=list(channel.permission_overwrites.values()),
            parent_id=channel.parent_id,
        )
