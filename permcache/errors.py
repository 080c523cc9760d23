from __future__ import annotations

import typing
from dataclasses import dataclass

import hikari

__all__ = [
    "ChannelError",
    "ChannelErrorType",
    "ChannelNotInGuild",
    "ChannelUnavailable",
    "MemberRolesError",
    "MemberUnavailable",
    "PermissionsError",
    "RoleUnavailable",
    "RootError",
    "RootErrorType",
]


@dataclass(frozen=True)
class ChannelNotInGuild:
    """Channel is not in a guild, likely because it is a private channel."""

    channel_id: hikari.Snowflake

    def describe(self) -> str:
        return f"channel {self.channel_id} is not in a guild"


@dataclass(frozen=True)
class ChannelUnavailable:
    """Guild channel is not present in the cache."""

    channel_id: hikari.Snowflake

    def describe(self) -> str:
        return (
            f"channel {self.channel_id} is either not in the cache "
            "or is not a guild channel"
        )


@dataclass(frozen=True)
class MemberUnavailable:
    """The user is not a member of the guild or the member was never cached."""

    guild_id: hikari.Snowflake
    user_id: hikari.Snowflake

    def describe(self) -> str:
        return (
            f"member (guild: {self.guild_id}; user: {self.user_id}) "
            "is not present in the cache"
        )


@dataclass(frozen=True)
class RoleUnavailable:
    """One of the member's roles is missing, e.g. a dropped role create event."""

    role_id: hikari.Snowflake

    def describe(self) -> str:
        return f"member has role {self.role_id} but it is not present in the cache"


# New variants may be added, so callers should always keep a fallback branch.
RootErrorType = typing.Union[MemberUnavailable, RoleUnavailable]
ChannelErrorType = typing.Union[
    ChannelNotInGuild, ChannelUnavailable, MemberUnavailable, RoleUnavailable
]


class PermissionsError(Exception):
    """Permissions could not be calculated from the cached state."""

    kinds: typing.ClassVar[tuple[type, ...]] = ()
    kind: typing.Any
    source: BaseException | None

    def __init__(self, kind: typing.Any, source: BaseException | None = None) -> None:
        if self.kinds and not isinstance(kind, self.kinds):
            raise TypeError(f"{type(self).__name__} can not carry {kind!r}")
        super().__init__(kind)
        self.kind = kind
        self.source = source

    def __str__(self) -> str:
        return typing.cast(str, self.kind.describe())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.kind == other.kind  # type: ignore

    def __hash__(self) -> int:
        return hash((type(self), self.kind))

    def into_parts(self) -> tuple[typing.Any, BaseException | None]:
        return self.kind, self.source


class MemberRolesError(PermissionsError):
    """Raised while collecting a member's role permissions."""

    kinds = (MemberUnavailable, RoleUnavailable)
    kind: MemberUnavailable | RoleUnavailable


class RootError(PermissionsError):
    kinds = (MemberUnavailable, RoleUnavailable)
    kind: RootErrorType

    @classmethod
    def from_member_roles(cls, error: MemberRolesError) -> RootError:
        return cls(error.kind, error.source)


class ChannelError(PermissionsError):
    kinds = (ChannelNotInGuild, ChannelUnavailable, MemberUnavailable, RoleUnavailable)
    kind: ChannelErrorType

    @classmethod
    def from_member_roles(cls, error: MemberRolesError) -> ChannelError:
        return cls(error.kind, error.source)
