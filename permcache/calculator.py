from __future__ import annotations

import logging
import typing

import hikari

from . import flags

logger = logging.getLogger(__name__)

MemberRolePermissions = typing.Sequence[tuple[hikari.Snowflake, hikari.Permissions]]


class PermissionCalculator:
    """Combine role permissions and channel overwrites of a single member.

    Overwrites are applied in the order Discord documents: the ``@everyone``
    overwrite, then all overwrites of the member's roles at once, then the
    member's own overwrite.
    """

    __slots__ = ("guild_id", "user_id", "everyone_role", "member_roles", "_owner_id")

    def __init__(
        self,
        guild_id: hikari.Snowflakeish,
        user_id: hikari.Snowflakeish,
        everyone_role: hikari.Permissions,
        member_roles: MemberRolePermissions,
    ) -> None:
        self.guild_id = hikari.Snowflake(guild_id)
        self.user_id = hikari.Snowflake(user_id)
        self.everyone_role = everyone_role
        self.member_roles = member_roles
        self._owner_id: hikari.Snowflake | None = None

    def __repr__(self) -> str:
        return (
            f"PermissionCalculator(guild_id={self.guild_id}, user_id={self.user_id}, "
            f"everyone_role={self.everyone_role!r}, member_roles={self.member_roles!r})"
        )

    def owner_id(self, owner_id: hikari.Snowflakeish) -> PermissionCalculator:
        self._owner_id = hikari.Snowflake(owner_id)
        return self

    def _is_owner(self) -> bool:
        return self._owner_id is not None and self._owner_id == self.user_id

    def root(self) -> hikari.Permissions:
        if self._is_owner():
            return flags.ALL_PERMISSIONS

        permissions = self.everyone_role
        for _, role_permissions in self.member_roles:
            permissions = flags.insert(permissions, role_permissions)

        if flags.is_administrator(permissions):
            return flags.ALL_PERMISSIONS

        return permissions

    def in_channel(
        self,
        channel_type: hikari.ChannelType | int,
        overwrites: typing.Iterable[hikari.PermissionOverwrite],
    ) -> hikari.Permissions:
        # channel_type does not narrow the result
        permissions = self.root()
        if flags.is_administrator(permissions):
            return flags.ALL_PERMISSIONS

        return apply_overwrites(
            permissions,
            overwrites,
            {role_id for role_id, _ in self.member_roles},
            self.guild_id,
            self.user_id,
        )


def apply_overwrites(
    permissions: hikari.Permissions,
    overwrites: typing.Iterable[hikari.PermissionOverwrite],
    role_ids: typing.Collection[hikari.Snowflake],
    guild_id: hikari.Snowflake,
    user_id: hikari.Snowflake,
) -> hikari.Permissions:
    roles_allow = roles_deny = hikari.Permissions.NONE
    member_allow = member_deny = hikari.Permissions.NONE

    for overwrite in overwrites:
        if overwrite.type == hikari.PermissionOverwriteType.ROLE:
            if overwrite.id == guild_id:
                # @everyone, applied before any role or member overwrite
                permissions = flags.remove(permissions, overwrite.deny)
                permissions = flags.insert(permissions, overwrite.allow)
            elif overwrite.id in role_ids:
                roles_allow = flags.insert(roles_allow, overwrite.allow)
                roles_deny = flags.insert(roles_deny, overwrite.deny)

        elif overwrite.type == hikari.PermissionOverwriteType.MEMBER:
            if overwrite.id == user_id:
                member_allow = flags.insert(member_allow, overwrite.allow)
                member_deny = flags.insert(member_deny, overwrite.deny)

        else:
            logger.debug(f"ignoring overwrite {overwrite.id} of unknown type")

    permissions = flags.remove(permissions, roles_deny)
    permissions = flags.insert(permissions, roles_allow)

    permissions = flags.remove(permissions, member_deny)
    permissions = flags.insert(permissions, member_allow)

    return permissions
