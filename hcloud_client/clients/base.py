"""Transport shared by all resource clients.

``Client.request`` is the only place that talks HTTP: it attaches the token,
encodes the JSON body, decodes the response and maps failures onto the
exceptions in ``hcloud_client.errors``. ``Client.all_pages`` walks list
endpoints page by page.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Generic, TypeVar

import httpx
from pydantic import BaseModel, ValidationError as PydanticValidationError

from hcloud_client import schemas
from hcloud_client.config import ClientSettings, get_settings
from hcloud_client.errors import APIError, ErrorCode, TransportError, ValidationError, is_error
from hcloud_client.logging import get_logger
from hcloud_client.version import __version__

logger = get_logger(__name__)

T = TypeVar("T")
ModelT = TypeVar("ModelT", bound=BaseModel)
OptsT = TypeVar("OptsT", bound="ListOpts")
EnumT = TypeVar("EnumT", bound=Enum)

ALL_PAGE_SIZE = 50


def enum_option(enum_cls: type[EnumT], value: Any, option: str) -> EnumT:
    """Convert an option value to ``enum_cls``; unknown values are a ``ValidationError``."""
    try:
        return enum_cls(value)
    except ValueError as exc:
        raise ValidationError(f"invalid {option}: {value!r}") from exc


@dataclass
class ListOpts:
    """Paging options shared by all list endpoints. Zero means API default."""

    page: int = 0
    per_page: int = 0

    def to_params(self) -> dict[str, Any]:
        params: dict[str, Any] = {}
        if self.page > 0:
            params["page"] = self.page
        if self.per_page > 0:
            params["per_page"] = self.per_page
        return params


@dataclass(frozen=True)
class Response:
    """Raw HTTP response plus the decoded body and ``meta`` block."""

    http_response: httpx.Response
    body: dict[str, Any] = field(default_factory=dict)
    meta: schemas.Meta = field(default_factory=schemas.Meta)

    @property
    def status_code(self) -> int:
        return self.http_response.status_code

    @property
    def pagination(self) -> schemas.MetaPagination | None:
        return self.meta.pagination

    def parse(self, model: type[ModelT]) -> ModelT:
        """Validate the body against a wire schema."""
        try:
            return model.model_validate(self.body)
        except PydanticValidationError as exc:
            logger.warning(
                "hcloud_response_invalid",
                schema=model.__name__,
                status=self.status_code,
                errors=exc.error_count(),
            )
            raise TransportError(f"Unexpected response body for {model.__name__}: {exc}") from exc


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a list endpoint."""

    items: list[T]
    response: Response

    @property
    def pagination(self) -> schemas.MetaPagination | None:
        return self.response.pagination

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


class Client:
    """Entry point of the library.

    Holds the HTTP connection pool and one resource client per API resource:

        async with Client(token="...") as client:
            server = await client.server.get(42)
            action = await client.server.poweron(42)
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        endpoint: str | None = None,
        settings: ClientSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
        application_name: str | None = None,
        application_version: str | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            token: API token. Defaults to HCLOUD_TOKEN.
            endpoint: API base URL. Defaults to HCLOUD_ENDPOINT or the public API.
            settings: Settings to read defaults from instead of the environment.
            http_client: Externally managed ``httpx.AsyncClient``; not closed by ``aclose``.
            application_name: Appended to the User-Agent.
            application_version: Version for ``application_name``.
        """
        # Local import: resource modules import this module
        from hcloud_client.clients.action import ActionClient
        from hcloud_client.clients.datacenter import DatacenterClient
        from hcloud_client.clients.image import ImageClient
        from hcloud_client.clients.location import LocationClient
        from hcloud_client.clients.server import ServerClient
        from hcloud_client.clients.server_type import ServerTypeClient
        from hcloud_client.clients.ssh_key import SSHKeyClient

        settings = settings or get_settings()
        self.token = token or settings.token
        self.endpoint = (endpoint or settings.endpoint).rstrip("/")
        self.timeout = settings.timeout_seconds
        self.user_agent = self._build_user_agent(
            application_name or settings.application_name,
            application_version or settings.application_version,
        )
        self._http_client = http_client
        self._owns_http_client = http_client is None

        if not self.token:
            logger.warning("hcloud_token_missing", env_var="HCLOUD_TOKEN")

        self.action = ActionClient(self)
        self.datacenter = DatacenterClient(self)
        self.image = ImageClient(self)
        self.location = LocationClient(self)
        self.server = ServerClient(self)
        self.server_type = ServerTypeClient(self)
        self.ssh_key = SSHKeyClient(self)

    @staticmethod
    def _build_user_agent(name: str | None, version: str | None) -> str:
        user_agent = f"hcloud-client/{__version__}"
        if name:
            user_agent += f" {name}/{version}" if version else f" {name}"
        return user_agent

    def _headers(self) -> dict[str, str]:
        if not self.token:
            raise ValueError("Hetzner Cloud token not set (HCLOUD_TOKEN)")
        return {
            "Authorization": f"Bearer {self.token}",
            "User-Agent": self.user_agent,
            "Accept": "application/json",
        }

    def _get_http_client(self) -> httpx.AsyncClient:
        if self._http_client is None or self._http_client.is_closed:
            self._http_client = httpx.AsyncClient(timeout=self.timeout)
            self._owns_http_client = True
        return self._http_client

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Response:
        """Send a request and return the decoded response.

        Raises:
            TransportError: The request could not be encoded or sent, or the
                response body is not JSON.
            APIError: The API answered with a non-2xx status.
        """
        headers = self._headers()
        client = self._get_http_client()
        url = f"{self.endpoint}{path}"

        try:
            request = client.build_request(
                method, url, params=params, json=json, headers=headers, timeout=self.timeout
            )
        except (TypeError, ValueError) as exc:
            raise TransportError(f"Failed to encode {method} {path} request: {exc}") from exc

        try:
            http_response = await client.send(request)
        except httpx.HTTPError as exc:
            logger.warning(
                "hcloud_transport_error",
                method=method,
                path=path,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            raise TransportError(f"{method} {path} failed: {exc}") from exc

        logger.debug(
            "hcloud_request",
            method=method,
            path=path,
            status=http_response.status_code,
        )

        body = self._decode_body(http_response)
        if http_response.is_error:
            raise self._api_error(http_response, body)

        try:
            meta = schemas.Meta.model_validate(body.get("meta") or {})
        except PydanticValidationError as exc:
            logger.warning(
                "hcloud_response_invalid",
                schema="Meta",
                status=http_response.status_code,
                errors=exc.error_count(),
            )
            raise TransportError(
                f"Unexpected meta block in {method} {path} response: {exc}"
            ) from exc
        return Response(http_response=http_response, body=body, meta=meta)

    @staticmethod
    def _decode_body(http_response: httpx.Response) -> dict[str, Any]:
        if not http_response.content:
            return {}
        try:
            body = http_response.json()
        except ValueError as exc:
            if http_response.is_error:
                # Proxies answer with HTML; reported as an API error below
                return {}
            raise TransportError(
                f"Response body is not JSON (status {http_response.status_code})"
            ) from exc
        if not isinstance(body, dict):
            if http_response.is_error:
                return {}
            raise TransportError(f"Response body is not a JSON object: {type(body).__name__}")
        return body

    def _api_error(self, http_response: httpx.Response, body: dict[str, Any]) -> APIError:
        response = Response(http_response=http_response, body=body)
        try:
            error = schemas.ErrorResponse.model_validate(body).error
        except PydanticValidationError:
            error = schemas.Error(
                code=ErrorCode.UNKNOWN_ERROR.value,
                message=f"server responded with status code {http_response.status_code}",
            )

        logger.warning(
            "hcloud_api_error",
            method=http_response.request.method,
            path=http_response.request.url.path,
            status=http_response.status_code,
            code=error.code,
            message=error.message,
        )
        return APIError(error.code, error.message, details=error.details, response=response)

    async def all_pages(self, fetch_page: Callable[[int], Awaitable[Response]]) -> Response:
        """Call ``fetch_page`` with page 1, 2, 3, ... until the last page.

        ``fetch_page`` collects the items itself; the first exception it raises
        aborts the walk. Returns the response of the last page fetched.
        """
        page = 1
        while True:
            response = await fetch_page(page)
            pagination = response.pagination
            if pagination is None or pagination.page >= pagination.last_page:
                return response
            page += 1

    async def aclose(self) -> None:
        if self._http_client is not None and self._owns_http_client:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


class ResourceClient:
    """Base for the per-resource clients."""

    def __init__(self, client: Client) -> None:
        self._client = client

    async def _get_or_none(self, path: str) -> Response | None:
        """GET a single resource; a ``not_found`` error means it does not exist."""
        try:
            return await self._client.request("GET", path)
        except APIError as exc:
            if is_error(exc, ErrorCode.NOT_FOUND):
                logger.debug("hcloud_resource_not_found", path=path)
                return None
            raise

    async def _collect_all(
        self,
        list_page: Callable[[OptsT], Awaitable[Page[T]]],
        opts: OptsT,
    ) -> list[T]:
        """Walk every page of ``list_page`` with a fixed page size."""
        opts = replace(opts, page=1, per_page=ALL_PAGE_SIZE)
        items: list[T] = []

        async def fetch_page(page: int) -> Response:
            opts.page = page
            result = await list_page(opts)
            items.extend(result.items)
            return result.response

        await self._client.all_pages(fetch_page)
        return items
