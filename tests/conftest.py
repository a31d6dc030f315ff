"""Shared fixtures for hcloud_client tests.

Every test talks to a respx-mocked endpoint; no request leaves the process.
"""

import pytest
import pytest_asyncio
import respx

from hcloud_client import Client, ClientSettings

ENDPOINT = "https://api.hcloud.test/v1"
TOKEN = "test-token"  # noqa: S105


@pytest.fixture
def settings() -> ClientSettings:
    return ClientSettings(_env_file=None, token=TOKEN, endpoint=ENDPOINT, timeout_seconds=5)


@pytest_asyncio.fixture
async def client(settings):
    client = Client(settings=settings)
    yield client
    await client.aclose()


@pytest.fixture
def api_mock():
    with respx.mock(base_url=ENDPOINT, assert_all_called=False) as respx_mock:
        yield respx_mock
