"""Tests for the page walking behind every ``all()`` call."""

import httpx
import pytest
from fixtures.payloads import error_response, pagination_meta

from hcloud_client import APIError, ListOpts, Response, ServerListOpts
from hcloud_client.clients.base import ALL_PAGE_SIZE


def _paged_servers(total: int, per_page: int = ALL_PAGE_SIZE):
    """respx side effect serving ``total`` servers in pages of ``per_page``."""
    last_page = max(1, -(-total // per_page))

    def handler(request: httpx.Request) -> httpx.Response:
        page = int(request.url.params.get("page", "1"))
        start = (page - 1) * per_page
        ids = range(start + 1, min(start + per_page, total) + 1)
        return httpx.Response(
            200,
            json={
                "servers": [{"id": i, "name": f"server-{i}"} for i in ids],
                "meta": pagination_meta(page, last_page, per_page, total),
            },
        )

    return handler


class TestListOpts:
    def test_zero_values_are_omitted(self):
        assert ListOpts().to_params() == {}

    def test_page_and_per_page(self):
        assert ListOpts(page=3, per_page=25).to_params() == {"page": 3, "per_page": 25}


@pytest.mark.asyncio
class TestAllPages:
    async def test_all_returns_every_page_in_order(self, client, api_mock):
        route = api_mock.get("/servers").mock(side_effect=_paged_servers(total=175))

        servers = await client.server.all()

        assert [s.id for s in servers] == list(range(1, 176))
        assert len({s.id for s in servers}) == 175  # noqa: PLR2004
        assert route.call_count == 4  # noqa: PLR2004
        pages = [call.request.url.params["page"] for call in route.calls]
        assert pages == ["1", "2", "3", "4"]
        assert all(call.request.url.params["per_page"] == "50" for call in route.calls)

    async def test_single_page(self, client, api_mock):
        route = api_mock.get("/servers").mock(
            return_value=httpx.Response(
                200,
                json={
                    "servers": [{"id": 1}, {"id": 2}, {"id": 3}],
                    "meta": pagination_meta(page=1, last_page=1, per_page=3, total_entries=3),
                },
            )
        )

        servers = await client.server.all()

        assert [s.id for s in servers] == [1, 2, 3]
        assert route.call_count == 1

    async def test_response_without_pagination_meta_stops(self, client, api_mock):
        route = api_mock.get("/server_types").mock(
            return_value=httpx.Response(200, json={"server_types": [{"id": 1}, {"id": 2}]})
        )

        server_types = await client.server_type.all()

        assert [t.id for t in server_types] == [1, 2]
        assert route.call_count == 1

    async def test_error_on_later_page_aborts(self, client, api_mock):
        first_page = httpx.Response(
            200,
            json={
                "servers": [{"id": i} for i in range(1, 51)],
                "meta": pagination_meta(page=1, last_page=3, per_page=50, total_entries=150),
            },
        )
        route = api_mock.get("/servers").mock(
            side_effect=[first_page, error_response(503, "service_error", "try again")]
        )

        with pytest.raises(APIError) as exc_info:
            await client.server.all()

        assert exc_info.value.code == "service_error"
        assert route.call_count == 2  # noqa: PLR2004

    async def test_callback_receives_consecutive_pages(self, client, api_mock):
        api_mock.get("/servers").mock(side_effect=_paged_servers(total=120))
        seen: list[int] = []

        async def fetch_page(page: int) -> Response:
            seen.append(page)
            return await client.request("GET", "/servers", params={"page": page, "per_page": 50})

        last = await client.all_pages(fetch_page)

        assert seen == [1, 2, 3]
        assert last.pagination.page == 3  # noqa: PLR2004

    async def test_all_does_not_modify_caller_opts(self, client, api_mock):
        api_mock.get("/servers").mock(side_effect=_paged_servers(total=60))
        opts = ServerListOpts(name="server-1")

        await client.server.all(opts)

        assert opts.page == 0
        assert opts.per_page == 0

    async def test_pagination_without_next_page_walks_to_last_page(self, client, api_mock):
        def handler(request: httpx.Request) -> httpx.Response:
            page = int(request.url.params["page"])
            return httpx.Response(
                200,
                json={
                    "servers": [{"id": page}],
                    "meta": {
                        "pagination": {
                            "page": page,
                            "per_page": 50,
                            "last_page": 2,
                            "total_entries": 2,
                        }
                    },
                },
            )

        route = api_mock.get("/servers").mock(side_effect=handler)

        servers = await client.server.all()

        assert [s.id for s in servers] == [1, 2]
        assert route.call_count == 2  # noqa: PLR2004
