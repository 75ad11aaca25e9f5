"""Unit tests for structlog configuration."""

import json

import pytest
import structlog

from soage.config import ServiceConfig, LogFormat
from soage.exceptions import ConfigError
from soage.logging import configure_logging, get_logger


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


def test_json_format(capsys):
    configure_logging(ServiceConfig(log_format=LogFormat.JSON))

    get_logger("test").info("lookup_complete", matches=2)

    line = capsys.readouterr().out.strip().splitlines()[-1]
    event = json.loads(line)
    assert event["event"] == "lookup_complete"
    assert event["matches"] == 2
    assert event["logger_name"] == "test"
    assert event["level"] == "info"
    assert "timestamp" in event


def test_level_filtering(capsys):
    configure_logging(ServiceConfig(log_format=LogFormat.JSON, log_level="WARNING"))

    get_logger().info("hidden")

    assert "hidden" not in capsys.readouterr().out


def test_unknown_level():
    with pytest.raises(ConfigError):
        configure_logging(ServiceConfig(log_level="LOUD"))
