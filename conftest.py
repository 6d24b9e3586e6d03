"""Root conftest for the ip_port tests."""

import sys
from collections.abc import Iterator

import pytest
from click.testing import CliRunner
from loguru import logger

from imbue.ip_port.config import IP_PORT_MAX_INC_ENV_VAR
from imbue.ip_port.config import IP_PORT_MIN_INC_ENV_VAR


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI runner for testing CLI commands."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_ip_port_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's IP_PORT_* settings out of tests."""
    for env_var in (IP_PORT_MIN_INC_ENV_VAR, IP_PORT_MAX_INC_ENV_VAR, "IP_PORT_LOG_LEVEL"):
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture(autouse=True)
def reset_loguru_handlers() -> Iterator[None]:
    """Restore a plain stderr handler after tests that call setup_logging().

    setup_logging() binds the sys.stderr of the moment, which may be a capture
    stream that is closed once the test ends.
    """
    yield
    logger.remove()
    logger.add(sys.stderr, level="WARNING")
