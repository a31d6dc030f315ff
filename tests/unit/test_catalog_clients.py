"""Tests for the read-only clients: server types, locations, datacenters."""

import httpx
import pytest
from fixtures.payloads import error_response, server_payload

LOCATION = server_payload()["datacenter"]["location"]
DATACENTER = server_payload()["datacenter"]
SERVER_TYPE = server_payload()["server_type"]


@pytest.mark.asyncio
class TestServerTypeClient:
    async def test_get(self, client, api_mock):
        api_mock.get("/server_types/1").mock(
            return_value=httpx.Response(200, json={"server_type": SERVER_TYPE})
        )

        server_type = await client.server_type.get(1)

        assert server_type.name == "cx11"
        assert server_type.cores == 1
        assert server_type.disk == 25  # noqa: PLR2004
        assert server_type.storage_type == "local"

    async def test_get_not_found(self, client, api_mock):
        api_mock.get("/server_types/1").mock(return_value=error_response(404, "not_found"))

        assert await client.server_type.get(1) is None

    async def test_get_by_name(self, client, api_mock):
        route = api_mock.get("/server_types").mock(
            return_value=httpx.Response(200, json={"server_types": [SERVER_TYPE]})
        )

        server_type = await client.server_type.get_by_name("cx11")

        assert server_type.id == 1
        assert route.calls.last.request.url.params["name"] == "cx11"


@pytest.mark.asyncio
class TestLocationClient:
    async def test_get(self, client, api_mock):
        api_mock.get("/locations/1").mock(
            return_value=httpx.Response(200, json={"location": LOCATION})
        )

        location = await client.location.get(1)

        assert location.name == "fsn1"
        assert location.country == "DE"
        assert location.latitude == pytest.approx(50.47612)

    async def test_all(self, client, api_mock):
        api_mock.get("/locations").mock(
            return_value=httpx.Response(200, json={"locations": [LOCATION, LOCATION | {"id": 2}]})
        )

        locations = await client.location.all()

        assert [loc.id for loc in locations] == [1, 2]


@pytest.mark.asyncio
class TestDatacenterClient:
    async def test_get(self, client, api_mock):
        api_mock.get("/datacenters/1").mock(
            return_value=httpx.Response(200, json={"datacenter": DATACENTER})
        )

        datacenter = await client.datacenter.get(1)

        assert datacenter.name == "fsn1-dc8"
        assert datacenter.location.city == "Falkenstein"
        assert datacenter.server_types.available == (1, 2)

    async def test_list(self, client, api_mock):
        route = api_mock.get("/datacenters").mock(
            return_value=httpx.Response(200, json={"datacenters": [DATACENTER]})
        )

        page = await client.datacenter.list()

        assert [dc.id for dc in page] == [1]
        assert route.called
