from .calculator import PermissionCalculator
from .config import PermissionsConfig, configure_logging, load_config
from .errors import (
    ChannelError,
    ChannelErrorType,
    ChannelNotInGuild,
    ChannelUnavailable,
    MemberUnavailable,
    PermissionsError,
    RoleUnavailable,
    RootError,
    RootErrorType,
)
from .flags import ALL_PERMISSIONS, MEMBER_COMMUNICATION_DISABLED_ALLOWLIST
from .models import CachedChannel, CachedGuild, CachedMember, CachedRole
from .permissions import CachePermissions
from .store import HikariCacheStore, InMemoryStore, StateStore

__all__ = [
    "ALL_PERMISSIONS",
    "MEMBER_COMMUNICATION_DISABLED_ALLOWLIST",
    "CachePermissions",
    "CachedChannel",
    "CachedGuild",
    "CachedMember",
    "CachedRole",
    "ChannelError",
    "ChannelErrorType",
    "ChannelNotInGuild",
    "ChannelUnavailable",
    "HikariCacheStore",
    "InMemoryStore",
    "MemberUnavailable",
    "PermissionCalculator",
    "PermissionsConfig",
    "PermissionsError",
    "RoleUnavailable",
    "RootError",
    "RootErrorType",
    "StateStore",
    "configure_logging",
    "load_config",
]
