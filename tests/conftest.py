from __future__ import annotations

from typing import Any

import pytest

from ccapictl import CCAPI
from ccapictl.cli import configure_logging
from tests.fakes import FakeSession


@pytest.fixture(autouse=True, scope="session")
def _stdlib_logging():
    # Unconfigured structlog prints to stdout, which the CLI tests read.
    configure_logging()


@pytest.fixture
def make_ccapi():
    def _make(*replies: Any, ip: str = "192.168.1.20", **kwargs: Any):
        session = FakeSession(*replies)
        return CCAPI(ip, session=session, **kwargs), session

    return _make
