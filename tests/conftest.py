"""Global pytest configuration and fixtures."""

from collections.abc import Generator
from typing import Any

import pytest
import respx

from tests.fixtures.env_helpers import capture_env_vars, empty_capture_env
from tests.fixtures.http_helpers import common_http_errors, http_mock_helpers
from tests.fixtures.mock_http_server import MockHttpServer, mock_http_server
from tests.fixtures.sample_data import (
    json_body,
    orders_descriptor,
    sample_response,
    yaml_body,
)
from testcase_capture.utils.constants import DEFAULT_PDP


@pytest.fixture
def respx_mock() -> Generator[Any, None, None]:
    """Provide respx mock for testing HTTP requests."""
    with respx.mock(assert_all_called=False) as mock:
        yield mock


@pytest.fixture
def default_pdp() -> str:
    """Default endpoint root used when descriptors omit one."""
    return DEFAULT_PDP
