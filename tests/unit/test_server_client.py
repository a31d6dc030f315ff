"""Tests for ServerClient."""

import json

import httpx
import pytest
from fixtures.payloads import action_payload, error_response, pagination_meta, server_payload

from hcloud_client import (
    APIError,
    Image,
    ImageType,
    RescueType,
    Server,
    ServerChangeTypeOpts,
    ServerCreateImageOpts,
    ServerCreateOpts,
    ServerEnableRescueOpts,
    ServerListOpts,
    ServerRebuildOpts,
    ServerStatus,
    ServerType,
    ServerUpdateOpts,
    SSHKey,
    ValidationError,
)


@pytest.mark.asyncio
class TestServerGet:
    async def test_get(self, client, api_mock):
        api_mock.get("/servers/1").mock(
            return_value=httpx.Response(200, json={"server": server_payload(1)})
        )

        server = await client.server.get(1)

        assert server is not None
        assert server.id == 1
        assert server.name == "my-server"
        assert server.status == ServerStatus.RUNNING
        assert server.public_net.ipv4.ip == "1.2.3.4"
        assert server.server_type.name == "cx11"
        assert server.datacenter.location.name == "fsn1"
        assert server.image.name == "ubuntu-22.04"

    async def test_get_not_found_returns_none(self, client, api_mock):
        api_mock.get("/servers/1").mock(return_value=error_response(404, "not_found"))

        server = await client.server.get(1)

        assert server is None

    async def test_get_other_errors_propagate(self, client, api_mock):
        api_mock.get("/servers/1").mock(
            return_value=error_response(403, "forbidden", "insufficient permissions")
        )

        with pytest.raises(APIError) as exc_info:
            await client.server.get(1)

        assert exc_info.value.code == "forbidden"

    async def test_get_by_name(self, client, api_mock):
        route = api_mock.get("/servers").mock(
            return_value=httpx.Response(200, json={"servers": [server_payload(7, "web")]})
        )

        server = await client.server.get_by_name("web")

        assert server.id == 7  # noqa: PLR2004
        assert route.calls.last.request.url.params["name"] == "web"

    async def test_get_by_name_no_match(self, client, api_mock):
        api_mock.get("/servers").mock(return_value=httpx.Response(200, json={"servers": []}))

        assert await client.server.get_by_name("missing") is None


@pytest.mark.asyncio
class TestServerList:
    async def test_list_encodes_page_and_per_page(self, client, api_mock):
        route = api_mock.get("/servers").mock(
            return_value=httpx.Response(
                200,
                json={
                    "servers": [{"id": 1}, {"id": 2}],
                    "meta": pagination_meta(page=2, last_page=3, per_page=50, total_entries=102),
                },
            )
        )

        page = await client.server.list(ServerListOpts(page=2, per_page=50))

        params = route.calls.last.request.url.params
        assert params["page"] == "2"
        assert params["per_page"] == "50"
        assert [s.id for s in page.items] == [1, 2]
        assert len(page) == 2  # noqa: PLR2004
        assert page.pagination.total_entries == 102  # noqa: PLR2004

    async def test_list_without_options_sends_no_query(self, client, api_mock):
        route = api_mock.get("/servers").mock(
            return_value=httpx.Response(200, json={"servers": []})
        )

        page = await client.server.list()

        assert route.calls.last.request.url.query == b""
        assert page.items == []

    async def test_list_status_filter(self, client, api_mock):
        route = api_mock.get("/servers").mock(
            return_value=httpx.Response(200, json={"servers": []})
        )

        await client.server.list(ServerListOpts(status=[ServerStatus.RUNNING, "off"]))

        assert route.calls.last.request.url.params.get_list("status") == ["running", "off"]


@pytest.mark.asyncio
class TestServerCreate:
    async def test_create(self, client, api_mock):
        route = api_mock.post("/servers").mock(
            return_value=httpx.Response(
                201,
                json={
                    "server": server_payload(1, "test"),
                    "action": action_payload(10, "create_server"),
                    "root_password": "YItygq1v3GYjjMomLaKc",
                },
            )
        )

        result = await client.server.create(
            ServerCreateOpts(
                name="test",
                server_type=ServerType(id=1),
                image="ubuntu-22.04",
                ssh_keys=[SSHKey(id=3), 4],
                location="fsn1",
                user_data="#cloud-config\n",
            )
        )

        assert result.server.id == 1
        assert result.action.id == 10  # noqa: PLR2004
        assert result.root_password == "YItygq1v3GYjjMomLaKc"  # noqa: S105
        assert json.loads(route.calls.last.request.content) == {
            "name": "test",
            "server_type": 1,
            "image": "ubuntu-22.04",
            "ssh_keys": [3, 4],
            "location": "fsn1",
            "user_data": "#cloud-config\n",
        }

    async def test_create_references_by_name_when_id_unset(self, client, api_mock):
        route = api_mock.post("/servers").mock(
            return_value=httpx.Response(201, json={"server": {"id": 1}})
        )

        result = await client.server.create(
            ServerCreateOpts(name="test", server_type=ServerType(id=0, name="cx21"), image=2)
        )

        body = json.loads(route.calls.last.request.content)
        assert body["server_type"] == "cx21"
        assert body["image"] == 2  # noqa: PLR2004
        assert result.action is None
        assert result.root_password == ""

    @pytest.mark.parametrize(
        ("opts", "message"),
        [
            (ServerCreateOpts(server_type=1, image=1), "missing name"),
            (ServerCreateOpts(name="test", image=1), "missing server type"),
            (ServerCreateOpts(name="test", server_type=1), "missing image"),
            (
                ServerCreateOpts(
                    name="test", server_type=1, image=1, location="fsn1", datacenter="fsn1-dc8"
                ),
                "mutually exclusive",
            ),
        ],
    )
    async def test_create_validation_fails_without_request(
        self, client, api_mock, opts, message
    ):
        route = api_mock.post("/servers")

        with pytest.raises(ValidationError, match=message):
            await client.server.create(opts)

        assert not route.called


@pytest.mark.asyncio
class TestServerUpdateDelete:
    async def test_update(self, client, api_mock):
        route = api_mock.put("/servers/1").mock(
            return_value=httpx.Response(200, json={"server": server_payload(1, "renamed")})
        )

        server = await client.server.update(1, ServerUpdateOpts(name="renamed"))

        assert server.name == "renamed"
        assert json.loads(route.calls.last.request.content) == {"name": "renamed"}

    async def test_delete(self, client, api_mock):
        route = api_mock.delete("/servers/1").mock(return_value=httpx.Response(204))

        await client.server.delete(Server(id=1))

        assert route.called

    async def test_delete_error_propagates(self, client, api_mock):
        api_mock.delete("/servers/1").mock(return_value=error_response(423, "locked"))

        with pytest.raises(APIError) as exc_info:
            await client.server.delete(1)

        assert exc_info.value.code == "locked"


@pytest.mark.asyncio
class TestServerActions:
    @pytest.mark.parametrize(
        ("method", "path"),
        [
            ("poweron", "poweron"),
            ("poweroff", "poweroff"),
            ("reboot", "reboot"),
            ("reset", "reset"),
            ("shutdown", "shutdown"),
            ("disable_rescue", "disable_rescue"),
        ],
    )
    async def test_simple_actions(self, client, api_mock, method, path):
        route = api_mock.post(f"/servers/1/actions/{path}").mock(
            return_value=httpx.Response(201, json={"action": action_payload(13)})
        )

        action = await getattr(client.server, method)(Server(id=1))

        assert action.id == 13  # noqa: PLR2004
        assert route.calls.last.request.method == "POST"

    async def test_action_error(self, client, api_mock):
        api_mock.post("/servers/1/actions/poweron").mock(
            return_value=error_response(423, "locked", "server is locked")
        )

        with pytest.raises(APIError) as exc_info:
            await client.server.poweron(1)

        assert exc_info.value.code == "locked"

    async def test_reset_password(self, client, api_mock):
        api_mock.post("/servers/1/actions/reset_password").mock(
            return_value=httpx.Response(
                201, json={"action": action_payload(1), "root_password": "secret"}
            )
        )

        result = await client.server.reset_password(1)

        assert result.action.id == 1
        assert result.root_password == "secret"  # noqa: S105

    async def test_create_image_without_options(self, client, api_mock):
        route = api_mock.post("/servers/1/actions/create_image").mock(
            return_value=httpx.Response(
                201, json={"action": action_payload(1), "image": {"id": 2, "type": "snapshot"}}
            )
        )

        result = await client.server.create_image(Server(id=1))

        assert result.action.id == 1
        assert result.image.id == 2  # noqa: PLR2004
        assert result.image.type == ImageType.SNAPSHOT
        assert json.loads(route.calls.last.request.content) == {}

    async def test_create_image_with_options(self, client, api_mock):
        route = api_mock.post("/servers/1/actions/create_image").mock(
            return_value=httpx.Response(
                201, json={"action": action_payload(1), "image": {"id": 1}}
            )
        )

        opts = ServerCreateImageOpts(type=ImageType.BACKUP, description="my backup")
        result = await client.server.create_image(1, opts)

        assert result.image.id == 1
        assert json.loads(route.calls.last.request.content) == {
            "type": "backup",
            "description": "my backup",
        }

    async def test_create_image_rejects_system_type(self, client, api_mock):
        route = api_mock.post("/servers/1/actions/create_image")

        with pytest.raises(ValidationError):
            await client.server.create_image(1, ServerCreateImageOpts(type=ImageType.SYSTEM))

        assert not route.called

    async def test_enable_rescue(self, client, api_mock):
        route = api_mock.post("/servers/1/actions/enable_rescue").mock(
            return_value=httpx.Response(
                201, json={"action": action_payload(5), "root_password": "rescue"}
            )
        )

        result = await client.server.enable_rescue(
            1, ServerEnableRescueOpts(type=RescueType.LINUX64, ssh_keys=[SSHKey(id=2)])
        )

        assert result.action.id == 5  # noqa: PLR2004
        assert result.root_password == "rescue"  # noqa: S105
        assert json.loads(route.calls.last.request.content) == {
            "type": "linux64",
            "ssh_keys": [2],
        }

    async def test_rebuild(self, client, api_mock):
        route = api_mock.post("/servers/1/actions/rebuild").mock(
            return_value=httpx.Response(201, json={"action": action_payload(6)})
        )

        action = await client.server.rebuild(1, ServerRebuildOpts(image="debian-12"))

        assert action.id == 6  # noqa: PLR2004
        assert json.loads(route.calls.last.request.content) == {"image": "debian-12"}

    async def test_rebuild_requires_image(self, client, api_mock):
        with pytest.raises(ValidationError, match="missing image"):
            await client.server.rebuild(1, ServerRebuildOpts())

    async def test_change_type(self, client, api_mock):
        route = api_mock.post("/servers/1/actions/change_type").mock(
            return_value=httpx.Response(201, json={"action": action_payload(7)})
        )

        action = await client.server.change_type(
            1, ServerChangeTypeOpts(server_type=ServerType(id=2, name="cx21"), upgrade_disk=True)
        )

        assert action.id == 7  # noqa: PLR2004
        assert json.loads(route.calls.last.request.content) == {
            "server_type": 2,
            "upgrade_disk": True,
        }


@pytest.mark.asyncio
class TestServerOptionValidation:
    async def test_unknown_image_type_fails_without_request(self, client, api_mock):
        route = api_mock.post("/servers/1/actions/create_image")

        with pytest.raises(ValidationError, match="invalid image type"):
            await client.server.create_image(1, ServerCreateImageOpts(type="bogus"))

        assert not route.called

    async def test_unknown_rescue_type_fails_without_request(self, client, api_mock):
        route = api_mock.post("/servers/1/actions/enable_rescue")

        with pytest.raises(ValidationError, match="invalid rescue type"):
            await client.server.enable_rescue(1, ServerEnableRescueOpts(type="windows"))

        assert not route.called

    async def test_unknown_status_filter_fails_without_request(self, client, api_mock):
        route = api_mock.get("/servers")

        with pytest.raises(ValidationError, match="invalid server status"):
            await client.server.list(ServerListOpts(status=["sleeping"]))

        assert not route.called

    @pytest.mark.parametrize(
        ("call", "message"),
        [
            (
                lambda c: c.server.create(
                    ServerCreateOpts(name="test", server_type=ServerType(id=0), image=1)
                ),
                "missing server type",
            ),
            (
                lambda c: c.server.create(
                    ServerCreateOpts(name="test", server_type=1, image=Image(id=0))
                ),
                "missing image",
            ),
            (lambda c: c.server.rebuild(1, ServerRebuildOpts(image=Image(id=0))), "missing image"),
            (
                lambda c: c.server.change_type(
                    1, ServerChangeTypeOpts(server_type=ServerType(id=0))
                ),
                "missing server type",
            ),
        ],
    )
    async def test_reference_without_id_or_name_is_missing(
        self, client, api_mock, call, message
    ):
        route = api_mock.route(method="POST")

        with pytest.raises(ValidationError, match=message):
            await call(client)

        assert not route.called
