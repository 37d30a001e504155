"""RPC transport interface and HTTP implementation."""

import time
from abc import ABC, abstractmethod
from typing import Any

import httpx

from sajari_sdk.config import ClientSettings, get_settings
from sajari_sdk.exceptions import ErrorCode, ValidationError
from sajari_sdk.logging_config import get_logger
from sajari_sdk.observability.metrics import track_rpc_request
from sajari_sdk.transport.credentials import Credentials

logger = get_logger(__name__)


class RPCTransport(ABC):
    """Abstract base class for RPC transports.

    A transport sends one JSON-mapped request message to a fully
    qualified method and returns the JSON-mapped response message.
    """

    @abstractmethod
    async def call(
        self,
        method: str,
        request: dict[str, Any],
        metadata: dict[str, str],
    ) -> dict[str, Any]:
        """Issue a single unary call.

        Args:
            method: Fully qualified method, e.g. ``sajari.engine.schema.Schema/GetFields``.
            request: Request message in JSON form.
            metadata: Per-call metadata (project, collection).

        Returns:
            Response message in JSON form.

        Raises:
            ValidationError: If the response body is not valid JSON.
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release transport resources."""
        ...


class HTTPTransport(RPCTransport):
    """Transport posting JSON messages to the service's RPC gateway.

    Each call is ``POST {endpoint}/{method}``. Metadata travels as
    headers. Transport failures are raised unchanged.
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        credentials: Credentials | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the HTTP transport.

        Args:
            settings: Client configuration. Uses defaults if not provided.
            credentials: Credentials attached to every call.
            client: HTTP client. Creates new one if not provided.
        """
        self._settings = settings or get_settings().client
        self._credentials = credentials
        self._client = client
        self._owns_client = client is None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._settings.timeout)
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if we own it."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    def _headers(self, metadata: dict[str, str]) -> dict[str, str]:
        headers = {"user-agent": self._settings.user_agent}
        headers.update(metadata)
        if self._credentials is not None:
            headers["authorization"] = self._credentials.authorization()
        return headers

    async def call(
        self,
        method: str,
        request: dict[str, Any],
        metadata: dict[str, str],
    ) -> dict[str, Any]:
        client = await self._get_client()
        url = f"{self._settings.endpoint.rstrip('/')}/{method}"

        start = time.perf_counter()
        try:
            response = await client.post(url, json=request, headers=self._headers(metadata))
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            track_rpc_request(method, time.perf_counter() - start, success=False)
            logger.error(
                f"RPC {method} failed: {e.response.status_code}",
                extra={"method": method, "status": e.response.status_code},
            )
            raise
        except httpx.RequestError as e:
            track_rpc_request(method, time.perf_counter() - start, success=False)
            logger.error(f"RPC {method} error: {e}", extra={"method": method})
            raise

        try:
            data = response.json() if response.content else {}
        except ValueError as e:
            track_rpc_request(method, time.perf_counter() - start, success=False)
            logger.error(f"RPC {method} returned malformed JSON: {e}", extra={"method": method})
            raise ValidationError(
                f"Invalid response from {method}: body is not JSON",
                code=ErrorCode.INVALID_RESPONSE,
                details={"method": method},
            ) from e

        track_rpc_request(method, time.perf_counter() - start)
        return data
