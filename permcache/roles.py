from __future__ import annotations

import logging
import typing

import hikari

from .errors import MemberRolesError, MemberUnavailable, RoleUnavailable
from .models import CachedMember
from .store import StateStore

logger = logging.getLogger(__name__)


class MemberRoles(typing.NamedTuple):
    member: CachedMember
    # the member's assigned roles and their permissions, @everyone excluded
    assigned: list[tuple[hikari.Snowflake, hikari.Permissions]]
    everyone: hikari.Permissions


def resolve_member_roles(
    store: StateStore, guild_id: hikari.Snowflakeish, user_id: hikari.Snowflakeish
) -> MemberRoles:
    guild_id = hikari.Snowflake(guild_id)
    user_id = hikari.Snowflake(user_id)

    member = store.get_member(guild_id, user_id)
    if member is None:
        logger.debug(f"member {user_id} of guild {guild_id} is not cached")
        raise MemberRolesError(MemberUnavailable(guild_id=guild_id, user_id=user_id))

    assigned = []
    for role_id in member.role_ids:
        role = store.get_role(role_id)
        if role is None:
            logger.debug(f"role {role_id} of member {user_id} is not cached")
            raise MemberRolesError(RoleUnavailable(role_id=hikari.Snowflake(role_id)))
        assigned.append((hikari.Snowflake(role_id), role.permissions))

    # @everyone shares the guild's id, looked up last
    everyone_role = store.get_role(guild_id)
    if everyone_role is None:
        logger.debug(f"@everyone role of guild {guild_id} is not cached")
        raise MemberRolesError(RoleUnavailable(role_id=guild_id))

    return MemberRoles(
        member=member, assigned=assigned, everyone=everyone_role.permissions
    )
