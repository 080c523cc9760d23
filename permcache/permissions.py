from __future__ import annotations

import logging
import typing
from datetime import timezone

import hikari
from hikari.internal.time import utc_datetime

from . import flags
from .calculator import PermissionCalculator
from .config import PermissionsConfig
from .errors import (
    ChannelError,
    ChannelNotInGuild,
    ChannelUnavailable,
    MemberRolesError,
    RootError,
)
from .models import PRIVATE_THREAD_TYPES, PUBLIC_THREAD_TYPES, CachedMember
from .overwrites import resolve_overwrites
from .roles import resolve_member_roles
from .store import StateStore

logger = logging.getLogger(__name__)


class CachePermissions:
    """Calculate the permissions of members from cached state.

    Both entry points only read from the store. A member or role that is
    missing from the store raises instead of falling back to a default, so
    callers decide whether to deny or retry once the cache is warmer.
    """

    def __init__(
        self, store: StateStore, *, check_member_communication_disabled: bool = True
    ) -> None:
        self.store = store
        self._check_member_communication_disabled = check_member_communication_disabled

    @classmethod
    def from_config(
        cls, store: StateStore, config: PermissionsConfig
    ) -> CachePermissions:
        return cls(
            store,
            check_member_communication_disabled=(
                config.check_member_communication_disabled
            ),
        )

    def check_member_communication_disabled(self, enabled: bool) -> CachePermissions:
        """Restrict timed out members to read-only permissions. On by default."""
        self._check_member_communication_disabled = enabled
        return self

    def root(
        self, user_id: hikari.Snowflakeish, guild_id: hikari.Snowflakeish
    ) -> hikari.Permissions:
        """Calculate the guild level permissions of a member.

        Returns all permissions if the user owns the guild.

        Raises
        ------
        RootError
            If the member or one of their roles is not cached.
        """
        user_id = hikari.Snowflake(user_id)
        guild_id = hikari.Snowflake(guild_id)

        if self._is_owner(user_id, guild_id):
            return flags.ALL_PERMISSIONS

        try:
            member_roles = resolve_member_roles(self.store, guild_id, user_id)
        except MemberRolesError as e:
            raise RootError.from_member_roles(e) from e

        calculator = PermissionCalculator(
            guild_id, user_id, member_roles.everyone, member_roles.assigned
        )
        permissions = calculator.root()

        return self._disable_member_communication(member_roles.member, permissions)

    def in_channel(
        self, user_id: hikari.Snowflakeish, channel_id: hikari.Snowflakeish
    ) -> hikari.Permissions:
        """Calculate the permissions of a member in a guild channel or thread.

        Returns all permissions if the user owns the channel's guild.

        Raises
        ------
        ChannelError
            If the channel is not cached or not in a guild, or if the member
            or one of their roles is not cached.
        """
        user_id = hikari.Snowflake(user_id)
        channel_id = hikari.Snowflake(channel_id)

        channel = self.store.get_channel(channel_id)
        if channel is None:
            logger.debug(f"channel {channel_id} is not cached")
            raise ChannelError(ChannelUnavailable(channel_id=channel_id))

        guild_id = channel.guild_id
        if guild_id is None:
            logger.debug(f"channel {channel_id} is not in a guild")
            raise ChannelError(ChannelNotInGuild(channel_id=channel_id))

        if self._is_owner(user_id, guild_id):
            return flags.ALL_PERMISSIONS

        try:
            member_roles = resolve_member_roles(self.store, guild_id, user_id)
        except MemberRolesError as e:
            raise ChannelError.from_member_roles(e) from e

        overwrites: typing.Sequence[hikari.PermissionOverwrite]
        if channel.type in PRIVATE_THREAD_TYPES:
            overwrites = resolve_overwrites(
                self.store, channel_id, channel.permission_overwrites
            )
        elif channel.type in PUBLIC_THREAD_TYPES:
            overwrites = resolve_overwrites(self.store, channel_id)
        else:
            overwrites = channel.permission_overwrites or ()

        calculator = PermissionCalculator(
            guild_id, user_id, member_roles.everyone, member_roles.assigned
        )
        permissions = calculator.in_channel(channel.type, overwrites)

        return self._disable_member_communication(member_roles.member, permissions)

    def _is_owner(self, user_id: hikari.Snowflake, guild_id: hikari.Snowflake) -> bool:
        guild = self.store.get_guild(guild_id)
        return guild is not None and guild.owner_id == user_id

    def _disable_member_communication(
        self, member: CachedMember, permissions: hikari.Permissions
    ) -> hikari.Permissions:
        # administrators are never restricted
        if not self._check_member_communication_disabled or flags.is_administrator(
            permissions
        ):
            return permissions

        until = member.communication_disabled_until
        if until is None:
            return permissions
        # naive timestamps are taken as UTC
        if until.tzinfo is None:
            until = until.replace(tzinfo=timezone.utc)
        if until < utc_datetime():
            return permissions

        logger.debug(
            f"communication of member {member.user_id} in guild {member.guild_id} "
            f"is disabled until {until.isoformat()}"
        )
        return permissions & flags.MEMBER_COMMUNICATION_DISABLED_ALLOWLIST
