"""JSON transport used by the services.

The services depend only on the `Transport` protocol; `HttpxTransport`
is the default implementation. Retries and redirects are the
transport's concern, not the services'.
"""

from collections.abc import Callable
from typing import Any, Protocol

import httpx

from kycsdk.api.auth import Authorization
from kycsdk.exceptions import (
    AuthenticationError,
    BackendError,
    InvalidSessionError,
    JsonError,
    NetworkError,
)
from kycsdk.observability.logging import get_logger

logger = get_logger(__name__)


class Transport(Protocol):
    """Async JSON transport.

    `filter_invalid_token_result` asks the transport to treat a
    rejected user token as a session expiry (side effects included)
    rather than a plain authentication failure.
    """

    base_url: str

    async def get(
        self,
        url: str,
        authorization: Authorization,
        parameters: dict[str, Any] | None = None,
        *,
        filter_invalid_token_result: bool = True,
    ) -> Any: ...

    async def post(
        self,
        url: str,
        authorization: Authorization,
        parameters: dict[str, Any] | None = None,
        *,
        filter_invalid_token_result: bool = True,
    ) -> Any: ...

    async def put(
        self,
        url: str,
        authorization: Authorization,
        parameters: dict[str, Any] | None = None,
        *,
        filter_invalid_token_result: bool = True,
    ) -> Any: ...


class HttpxTransport:
    """Transport backed by `httpx.AsyncClient`.

    Attributes:
        base_url: Base URL of the onboarding API
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        on_invalid_session: Callable[[], None] | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            base_url: Base URL of the onboarding API
            timeout: Request timeout in seconds
            on_invalid_session: Called when a filtered request is rejected
                for an invalid user token
            client: Preconfigured httpx client (tests, custom pools)
        """
        self.base_url = base_url.rstrip("/")
        self._on_invalid_session = on_invalid_session
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def get(
        self,
        url: str,
        authorization: Authorization,
        parameters: dict[str, Any] | None = None,
        *,
        filter_invalid_token_result: bool = True,
    ) -> Any:
        return await self._request(
            "GET",
            url,
            authorization,
            params=parameters,
            filter_invalid_token_result=filter_invalid_token_result,
        )

    async def post(
        self,
        url: str,
        authorization: Authorization,
        parameters: dict[str, Any] | None = None,
        *,
        filter_invalid_token_result: bool = True,
    ) -> Any:
        return await self._request(
            "POST",
            url,
            authorization,
            json=parameters,
            filter_invalid_token_result=filter_invalid_token_result,
        )

    async def put(
        self,
        url: str,
        authorization: Authorization,
        parameters: dict[str, Any] | None = None,
        *,
        filter_invalid_token_result: bool = True,
    ) -> Any:
        return await self._request(
            "PUT",
            url,
            authorization,
            json=parameters,
            filter_invalid_token_result=filter_invalid_token_result,
        )

    async def _request(
        self,
        method: str,
        url: str,
        authorization: Authorization,
        *,
        json: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
        filter_invalid_token_result: bool,
    ) -> Any:
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        headers.update(authorization.headers())

        logger.debug("http_request", method=method, url=url)
        try:
            response = await self._client.request(
                method=method,
                url=url,
                headers=headers,
                json=json,
                params=params,
            )
        except httpx.TransportError as e:
            logger.warning("http_request_failed", method=method, url=url, error=str(e))
            raise NetworkError(f"{method} {url} failed: {e}") from e

        if response.status_code == 401:
            if filter_invalid_token_result:
                if self._on_invalid_session is not None:
                    self._on_invalid_session()
                raise InvalidSessionError("User session is no longer valid", status_code=401)
            raise AuthenticationError("Request credentials rejected", status_code=401)

        if response.status_code >= 400:
            raise self._backend_error(response)

        if response.status_code == 204 or not response.content:
            return {}

        try:
            return response.json()
        except ValueError as e:
            raise JsonError(f"Response from {url} is not valid JSON") from e

    @staticmethod
    def _backend_error(response: httpx.Response) -> BackendError:
        try:
            error_data = response.json()
        except ValueError:
            error_data = None

        if isinstance(error_data, dict):
            code = error_data.get("code", response.status_code)
            reason = error_data.get("message") or error_data.get("reason")
        else:
            code = response.status_code
            reason = response.text or None

        logger.warning(
            "backend_error",
            status_code=response.status_code,
            code=code,
            reason=reason,
        )
        return BackendError(code=code, reason=reason, status_code=response.status_code)
