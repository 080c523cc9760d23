from __future__ import annotations

import logging
import os
import typing

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

TRUTHY: typing.Final = frozenset({"1", "true", "yes", "on"})
FALSY: typing.Final = frozenset({"0", "false", "no", "off"})


class PermissionsConfig(typing.NamedTuple):
    check_member_communication_disabled: bool = True
    log_level: str = "INFO"


def parse_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    value = value.strip().lower()
    if value in TRUTHY:
        return True
    elif value in FALSY:
        return False
    raise ValueError(f"not a boolean: {value!r}")


def load_config(*, dotenv: bool = True) -> PermissionsConfig:
    if dotenv:
        load_dotenv()

    return PermissionsConfig(
        check_member_communication_disabled=parse_bool(
            os.getenv("PERMCACHE_CHECK_COMMUNICATION_DISABLED"), True
        ),
        log_level=os.getenv("PERMCACHE_LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(config: PermissionsConfig) -> None:
    logging.getLogger("permcache").setLevel(config.log_level)
    logger.debug(f"log level set to {config.log_level}")
