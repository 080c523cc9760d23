from __future__ import annotations

import logging
import typing

import hikari

from .errors import ChannelError, ChannelUnavailable
from .store import StateStore

logger = logging.getLogger(__name__)


def resolve_overwrites(
    store: StateStore,
    channel_id: hikari.Snowflakeish,
    parent_overwrites: typing.Sequence[hikari.PermissionOverwrite] | None = None,
) -> list[hikari.PermissionOverwrite]:
    """Collect the overwrites in effect for a thread.

    The thread's own overwrites come first, followed by ``parent_overwrites``
    when any are given. Raises :class:`ChannelError` when the thread is not
    cached or does not belong to a guild.
    """
    channel_id = hikari.Snowflake(channel_id)
    channel = store.get_channel(channel_id)
    if channel is None or channel.guild_id is None:
        logger.debug(f"thread {channel_id} is not a cached guild channel")
        raise ChannelError(ChannelUnavailable(channel_id=channel_id))

    overwrites = list(channel.permission_overwrites or ())
    if parent_overwrites:
        overwrites.extend(parent_overwrites)

    return overwrites
