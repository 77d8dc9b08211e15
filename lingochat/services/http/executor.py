"""Timed request executor.

Every outbound call goes through execute(): credentials are validated first,
then the request races a cancellation timer. Outcomes are normalised into the
transport taxonomy of app exceptions:

    timer fires / transport timeout → RequestTimeoutError(timeout_ms)
    connection cannot be opened     → OfflineError
    non-2xx status                  → HttpStatusError(status)

asyncio.wait_for owns the timer, so it is released on every exit path.
"""

from __future__ import annotations

import asyncio
from typing import Any

import httpx
import structlog

from lingochat.core.environment import EnvironmentValidator
from lingochat.core.exceptions import (
    HttpStatusError,
    OfflineError,
    RequestTimeoutError,
)

logger = structlog.get_logger(__name__)

_DEFAULT_TIMEOUT_MS = 5000


class TimedRequestExecutor:
    """Sends httpx requests with a hard timeout and error normalisation."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        validator: EnvironmentValidator,
        default_timeout_ms: int = _DEFAULT_TIMEOUT_MS,
    ) -> None:
        self._client = client
        self._validator = validator
        self._default_timeout_ms = default_timeout_ms

    @property
    def default_timeout_ms(self) -> int:
        return self._default_timeout_ms

    def build_request(self, method: str, url: str, **kwargs: Any) -> httpx.Request:
        """Describe a request without sending it."""
        return self._client.build_request(method, url, **kwargs)

    async def execute(
        self,
        request: httpx.Request,
        timeout_ms: int | None = None,
    ) -> httpx.Response:
        """Send *request* and return the fully read response.

        Args:
            request: Pending request built with build_request().
            timeout_ms: Cancellation deadline. Defaults to the executor's.

        Returns:
            The response, guaranteed to have a 2xx status.

        Raises:
            ConfigurationError: A credential is missing. Nothing is sent.
            RequestTimeoutError: The deadline passed before the response settled.
            OfflineError: The transport could not reach the remote host.
            HttpStatusError: The response status is outside 2xx.
        """
        timeout_ms = timeout_ms if timeout_ms is not None else self._default_timeout_ms
        self._validator.validate()

        try:
            response = await asyncio.wait_for(
                self._client.send(request),
                timeout=timeout_ms / 1000,
            )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            logger.warning(
                "request_timeout",
                method=request.method,
                host=request.url.host,
                timeout_ms=timeout_ms,
            )
            raise RequestTimeoutError(timeout_ms) from e
        except httpx.ConnectError as e:
            logger.warning(
                "request_offline",
                method=request.method,
                host=request.url.host,
                error=str(e),
            )
            raise OfflineError() from e

        if not response.is_success:
            logger.warning(
                "request_http_error",
                method=request.method,
                host=request.url.host,
                status_code=response.status_code,
            )
            raise HttpStatusError(response.status_code)

        logger.debug(
            "request_ok",
            method=request.method,
            host=request.url.host,
            status_code=response.status_code,
        )
        return response

    async def aclose(self) -> None:
        await self._client.aclose()
