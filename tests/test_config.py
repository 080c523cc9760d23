import logging

import pytest

from permcache.config import (
    PermissionsConfig,
    configure_logging,
    load_config,
    parse_bool,
)


@pytest.mark.parametrize(
    "value,default,expected",
    (
        (None, True, True),
        (None, False, False),
        ("1", False, True),
        ("TRUE", False, True),
        (" yes ", False, True),
        ("off", True, False),
        ("0", True, False),
    ),
)
def test_parse_bool(value: str | None, default: bool, expected: bool) -> None:
    assert parse_bool(value, default) is expected


def test_parse_bool_invalid() -> None:
    with pytest.raises(ValueError):
        parse_bool("maybe", True)


def test_load_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PERMCACHE_CHECK_COMMUNICATION_DISABLED", raising=False)
    monkeypatch.delenv("PERMCACHE_LOG_LEVEL", raising=False)
    assert load_config(dotenv=False) == PermissionsConfig()


def test_load_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PERMCACHE_CHECK_COMMUNICATION_DISABLED", "false")
    monkeypatch.setenv("PERMCACHE_LOG_LEVEL", "debug")
    assert load_config(dotenv=False) == PermissionsConfig(
        check_member_communication_disabled=False, log_level="DEBUG"
    )


def test_configure_logging() -> None:
    logger = logging.getLogger("permcache")
    previous = logger.level
    try:
        configure_logging(PermissionsConfig(log_level="DEBUG"))
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(previous)
