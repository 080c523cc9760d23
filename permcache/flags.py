import typing

import hikari

ALL_PERMISSIONS: typing.Final = hikari.Permissions.all_permissions()

# read-only access left to a member whose communication is disabled
MEMBER_COMMUNICATION_DISABLED_ALLOWLIST: typing.Final = (
    hikari.Permissions.VIEW_CHANNEL | hikari.Permissions.READ_MESSAGE_HISTORY
)


def insert(
    permissions: hikari.Permissions, other: hikari.Permissions
) -> hikari.Permissions:
    return permissions | other


def remove(
    permissions: hikari.Permissions, other: hikari.Permissions
) -> hikari.Permissions:
    return permissions & ~other


def is_administrator(permissions: hikari.Permissions) -> bool:
    return bool(permissions & hikari.Permissions.ADMINISTRATOR)
