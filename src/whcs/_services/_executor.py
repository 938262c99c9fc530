import asyncio
import random
from datetime import datetime
from email.utils import parsedate_to_datetime
from logging import getLogger
from typing import Any, Dict, Optional, Protocol, runtime_checkable

from httpx import (
    AsyncClient,
    ConnectError,
    ConnectTimeout,
    Headers,
    Response,
    TimeoutException,
)
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from .._utils._auth import Authenticator, NoAuthAuthenticator
from .._utils._headers import get_header, merge_headers
from .._utils._logs import masked_headers
from .._utils._request_spec import RequestSpec
from .._utils._ssl_context import get_httpx_client_kwargs
from .._utils.constants import CONTENT_TYPE_MULTIPART, HEADER_CONTENT_TYPE
from ..models.errors import ApiError
from ..models.response import DetailedResponse

RETRYABLE_STATUS_CODES = frozenset({502, 503, 504})


def is_retryable_exception(exception: BaseException) -> bool:
    if isinstance(exception, (ConnectTimeout, TimeoutException, ConnectError)):
        return True
    return (
        isinstance(exception, ApiError)
        and exception.status_code in RETRYABLE_STATUS_CODES
    )


@runtime_checkable
class RequestExecutor(Protocol):
    """Performs the network I/O for a resolved request."""

    async def execute(self, spec: RequestSpec) -> DetailedResponse: ...


class HttpRequestExecutor:
    """Default executor sending requests with ``httpx``.

    Connection errors, timeouts and gateway errors are retried with
    exponential backoff, ``429`` responses are retried after the delay the
    server asks for. Any other non-2xx response raises :class:`ApiError`.
    """

    MAX_RATE_LIMIT_RETRIES = 3

    def __init__(
        self,
        service_url: str,
        authenticator: Optional[Authenticator] = None,
        *,
        timeout: float = 60.0,
        max_retries: int = 3,
        disable_ssl_verification: bool = False,
        client: Optional[AsyncClient] = None,
    ) -> None:
        self._logger = getLogger("whcs.executor")
        self._service_url = service_url.rstrip("/")
        self._authenticator = authenticator or NoAuthAuthenticator()
        self._max_retries = max_retries
        self._retry_wait = wait_exponential(multiplier=1, min=1, max=10)

        if client is None:
            client = AsyncClient(
                base_url=self._service_url,
                **get_httpx_client_kwargs(
                    timeout=timeout,
                    disable_ssl_verification=disable_ssl_verification,
                ),
            )
        self._client = client

    @property
    def service_url(self) -> str:
        return self._service_url

    def _parse_retry_after(self, headers: Headers) -> float:
        """Parse a Retry-After header (RFC 7231).

        Returns:
            float: Seconds to wait, never negative; 1.0 when the header is
            missing or invalid.
        """
        DEFAULT_RETRY_AFTER = 1.0
        retry_after = headers.get("Retry-After")
        if not retry_after:
            return DEFAULT_RETRY_AFTER

        try:
            return max(float(retry_after), 0.0)
        except ValueError:
            pass

        try:
            retry_date = parsedate_to_datetime(retry_after)
            delta = (retry_date - datetime.now(retry_date.tzinfo)).total_seconds()
            return max(delta, 0.0)
        except (ValueError, TypeError):
            return DEFAULT_RETRY_AFTER

    def _request_kwargs(self, spec: RequestSpec) -> Dict[str, Any]:
        headers = merge_headers(
            self._authenticator.authentication_headers(), None, spec.headers
        )

        if spec.files:
            # httpx has to generate the multipart boundary itself
            content_type = get_header(headers, HEADER_CONTENT_TYPE)
            if content_type and content_type.strip().lower() == CONTENT_TYPE_MULTIPART:
                headers = {
                    name: value
                    for name, value in headers.items()
                    if name.lower() != HEADER_CONTENT_TYPE.lower()
                }

        kwargs: Dict[str, Any] = {"headers": headers}
        if spec.params:
            kwargs["params"] = spec.params
        if spec.json is not None:
            kwargs["json"] = spec.json
        if spec.content is not None:
            kwargs["content"] = spec.content
        if spec.files:
            kwargs["files"] = spec.files
        return kwargs

    async def _send(self, spec: RequestSpec, kwargs: Dict[str, Any]) -> Response:
        url = spec.url
        for attempt in range(self.MAX_RATE_LIMIT_RETRIES + 1):
            response = await self._client.request(spec.method, url, **kwargs)

            if response.status_code == 429 and attempt < self.MAX_RATE_LIMIT_RETRIES:
                retry_after = self._parse_retry_after(response.headers)
                sleep_time = retry_after + random.uniform(0, 0.1 * retry_after)
                self._logger.warning(
                    f"Rate limited (429). Retrying after {sleep_time:.2f}s "
                    f"(attempt {attempt + 1}/{self.MAX_RATE_LIMIT_RETRIES})"
                )
                await response.aclose()
                await asyncio.sleep(sleep_time)
                continue
            break

        if response.is_error:
            await response.aread()
            raise ApiError.from_response(response)
        return response

    async def execute(self, spec: RequestSpec) -> DetailedResponse:
        kwargs = self._request_kwargs(spec)
        self._logger.debug(f"Request: {spec.method} {self._service_url}{spec.url}")
        self._logger.debug(f"HEADERS: {masked_headers(kwargs['headers'])}")

        async for attempt in AsyncRetrying(
            retry=retry_if_exception(is_retryable_exception),
            stop=stop_after_attempt(self._max_retries + 1),
            wait=self._retry_wait,
            reraise=True,
        ):
            with attempt:
                response = await self._send(spec, kwargs)
                self._logger.debug(
                    f"Response: {response.status_code} {spec.operation_id}"
                )
                return DetailedResponse.from_response(response)

        raise RuntimeError(f"No attempt was made for {spec.operation_id}")

    async def aclose(self) -> None:
        await self._client.aclose()
