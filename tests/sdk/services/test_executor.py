import logging
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, patch

import httpx
import pytest
from httpx import Headers
from pytest_httpx import HTTPXMock
from tenacity import wait_none

from whcs._services._executor import HttpRequestExecutor, is_retryable_exception
from whcs._utils._auth import BearerTokenAuthenticator
from whcs._utils._request_spec import RequestSpec
from whcs.models.errors import ApiError


@pytest.fixture
def executor(service_url: str, secret: str) -> HttpRequestExecutor:
    executor = HttpRequestExecutor(
        service_url, BearerTokenAuthenticator(secret), max_retries=2
    )
    executor._retry_wait = wait_none()
    return executor


class TestHttpRequestExecutor:
    class TestExecute:
        @pytest.mark.anyio
        async def test_simple_request(
            self,
            httpx_mock: HTTPXMock,
            executor: HttpRequestExecutor,
            service_url: str,
            secret: str,
        ):
            httpx_mock.add_response(status_code=200, json={"id": "p 1"})
            spec = RequestSpec(
                method="GET",
                url_template="/v1/profiles/{id}",
                path_params={"id": "p 1"},
                params={"version": "2023-01-01"},
                headers={"Accept": "application/json"},
            )

            response = await executor.execute(spec)

            sent_request = httpx_mock.get_request()
            if sent_request is None:
                raise Exception("No request was sent")

            assert sent_request.method == "GET"
            assert sent_request.url == f"{service_url}/v1/profiles/p%201?version=2023-01-01"
            assert sent_request.headers["Authorization"] == f"Bearer {secret}"
            assert sent_request.headers["Accept"] == "application/json"

            assert response.status == 200
            assert response.status_text == "OK"
            assert response.result == {"id": "p 1"}

        @pytest.mark.anyio
        async def test_repeated_query_keys(
            self, httpx_mock: HTTPXMock, executor: HttpRequestExecutor
        ):
            httpx_mock.add_response(status_code=200, json=[])
            spec = RequestSpec(
                method="GET",
                url_template="/v1/corpora/c/search/typeahead",
                params={"version": "v", "ontologies": ["concepts", "mesh"]},
            )

            await executor.execute(spec)

            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert sent_request.url.params.get_list("ontologies") == ["concepts", "mesh"]

        @pytest.mark.anyio
        async def test_caller_authorization_wins(
            self, httpx_mock: HTTPXMock, executor: HttpRequestExecutor
        ):
            httpx_mock.add_response(status_code=200)
            spec = RequestSpec(
                method="GET",
                url_template="/v1/flows",
                headers={"authorization": "Bearer other"},
            )

            await executor.execute(spec)

            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert sent_request.headers["Authorization"] == "Bearer other"

        @pytest.mark.anyio
        async def test_raw_content_is_sent_unchanged(
            self, httpx_mock: HTTPXMock, executor: HttpRequestExecutor
        ):
            httpx_mock.add_response(status_code=200, json={})
            spec = RequestSpec(
                method="POST",
                url_template="/v1/analyze/flow",
                headers={"Content-Type": "text/plain"},
                content="Patient has diabetes.",
            )

            await executor.execute(spec)

            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert sent_request.content == b"Patient has diabetes."
            assert sent_request.headers["Content-Type"] == "text/plain"

        @pytest.mark.anyio
        async def test_multipart_boundary_is_generated(
            self, httpx_mock: HTTPXMock, executor: HttpRequestExecutor
        ):
            httpx_mock.add_response(status_code=202, json={"status": "processing"})
            spec = RequestSpec(
                method="POST",
                url_template="/v1/cartridges",
                headers={"Content-Type": "multipart/form-data"},
                files={"archive_file": ("archive_file", b"zip", "application/zip")},
            )

            response = await executor.execute(spec)

            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            content_type = sent_request.headers["Content-Type"]
            assert content_type.startswith("multipart/form-data; boundary=")
            assert b'name="archive_file"' in sent_request.content
            assert response.status == 202

        @pytest.mark.anyio
        async def test_text_and_empty_bodies(
            self, httpx_mock: HTTPXMock, executor: HttpRequestExecutor
        ):
            httpx_mock.add_response(
                status_code=200, text="<status/>", headers={"Content-Type": "application/xml"}
            )
            httpx_mock.add_response(status_code=204)
            spec = RequestSpec(method="GET", url_template="/v1/status/health_check")

            xml = await executor.execute(spec)
            empty = await executor.execute(spec)

            assert xml.result == "<status/>"
            assert empty.result is None
            assert empty.status == 204

        @pytest.mark.anyio
        async def test_malformed_json_falls_back_to_text(
            self, httpx_mock: HTTPXMock, executor: HttpRequestExecutor
        ):
            httpx_mock.add_response(
                status_code=200,
                content=b"{not json",
                headers={"Content-Type": "application/json"},
            )
            spec = RequestSpec(method="GET", url_template="/v1/flows")

            response = await executor.execute(spec)

            assert response.result == "{not json"
            assert response.status == 200
            assert len(httpx_mock.get_requests()) == 1

        @pytest.mark.anyio
        async def test_debug_log_masks_authorization(
            self,
            httpx_mock: HTTPXMock,
            executor: HttpRequestExecutor,
            caplog: pytest.LogCaptureFixture,
            secret: str,
        ):
            httpx_mock.add_response(status_code=200)

            with caplog.at_level(logging.DEBUG, logger="whcs"):
                await executor.execute(RequestSpec(method="GET", url_template="/v1/flows"))

            assert "Request: GET" in caplog.text
            assert "Authorization" in caplog.text
            assert secret not in caplog.text

    class TestErrors:
        @pytest.mark.anyio
        async def test_api_error(
            self, httpx_mock: HTTPXMock, executor: HttpRequestExecutor
        ):
            httpx_mock.add_response(
                status_code=404, json={"code": 404, "message": "Profile not found"}
            )
            spec = RequestSpec(method="GET", url_template="/v1/profiles/missing")

            with pytest.raises(ApiError) as exc_info:
                await executor.execute(spec)

            error = exc_info.value
            assert error.status_code == 404
            assert error.message == "Profile not found"
            assert error.response_body == {"code": 404, "message": "Profile not found"}
            assert "API error 404: Profile not found" in str(error)

        @pytest.mark.anyio
        async def test_server_error_is_not_retried(
            self, httpx_mock: HTTPXMock, executor: HttpRequestExecutor
        ):
            httpx_mock.add_response(status_code=500, text="boom")
            spec = RequestSpec(method="GET", url_template="/v1/status/health_check")

            with pytest.raises(ApiError) as exc_info:
                await executor.execute(spec)

            assert exc_info.value.status_code == 500
            assert exc_info.value.message == "boom"
            assert len(httpx_mock.get_requests()) == 1

        @pytest.mark.anyio
        async def test_gateway_errors_are_retried(
            self, httpx_mock: HTTPXMock, executor: HttpRequestExecutor
        ):
            httpx_mock.add_response(status_code=503)
            httpx_mock.add_response(status_code=502)
            httpx_mock.add_response(status_code=200, json={"ok": True})
            spec = RequestSpec(method="GET", url_template="/v1/flows")

            response = await executor.execute(spec)

            assert response.result == {"ok": True}
            assert len(httpx_mock.get_requests()) == 3

        @pytest.mark.anyio
        async def test_retries_are_bounded(
            self, httpx_mock: HTTPXMock, executor: HttpRequestExecutor
        ):
            for _ in range(3):
                httpx_mock.add_exception(httpx.ConnectTimeout("timed out"))
            spec = RequestSpec(method="GET", url_template="/v1/flows")

            with pytest.raises(httpx.ConnectTimeout):
                await executor.execute(spec)

            assert len(httpx_mock.get_requests()) == 3

        def test_is_retryable_exception(self):
            assert is_retryable_exception(httpx.ReadTimeout("slow"))
            assert is_retryable_exception(ApiError(504))
            assert not is_retryable_exception(ApiError(500))
            assert not is_retryable_exception(ValueError("nope"))

    class TestRetryAfterParsing:
        def test_parse_retry_after_with_seconds(self, executor: HttpRequestExecutor):
            assert executor._parse_retry_after(Headers({"Retry-After": "5"})) == 5.0

        def test_parse_retry_after_with_date(self, executor: HttpRequestExecutor):
            future_time = datetime.now(timezone.utc) + timedelta(seconds=10)
            retry_after_date = future_time.strftime("%a, %d %b %Y %H:%M:%S GMT")
            result = executor._parse_retry_after(Headers({"Retry-After": retry_after_date}))
            assert 9.0 <= result <= 11.0

        def test_parse_retry_after_with_past_date(self, executor: HttpRequestExecutor):
            past_time = datetime.now(timezone.utc) - timedelta(seconds=10)
            retry_after_date = past_time.strftime("%a, %d %b %Y %H:%M:%S GMT")
            assert executor._parse_retry_after(Headers({"Retry-After": retry_after_date})) == 0.0

        def test_parse_retry_after_missing_or_invalid(self, executor: HttpRequestExecutor):
            assert executor._parse_retry_after(Headers({})) == 1.0
            assert executor._parse_retry_after(Headers({"Retry-After": "invalid"})) == 1.0

        def test_parse_retry_after_negative(self, executor: HttpRequestExecutor):
            assert executor._parse_retry_after(Headers({"Retry-After": "-5"})) == 0.0

    class TestRateLimit:
        @pytest.mark.anyio
        async def test_429_retry_honours_retry_after(
            self, httpx_mock: HTTPXMock, executor: HttpRequestExecutor
        ):
            httpx_mock.add_response(status_code=429, headers={"Retry-After": "2"})
            httpx_mock.add_response(status_code=200, json={"test": "success"})
            spec = RequestSpec(method="GET", url_template="/v1/annotators")

            with (
                patch(
                    "whcs._services._executor.asyncio.sleep", new_callable=AsyncMock
                ) as mock_sleep,
                patch("whcs._services._executor.random.uniform", return_value=0.1),
            ):
                response = await executor.execute(spec)

            assert response.result == {"test": "success"}
            mock_sleep.assert_awaited_once_with(2.1)

        @pytest.mark.anyio
        async def test_429_gives_up_after_max_retries(
            self, httpx_mock: HTTPXMock, executor: HttpRequestExecutor
        ):
            for _ in range(HttpRequestExecutor.MAX_RATE_LIMIT_RETRIES + 1):
                httpx_mock.add_response(status_code=429, headers={"Retry-After": "0"})
            spec = RequestSpec(method="GET", url_template="/v1/annotators")

            with pytest.raises(ApiError) as exc_info:
                await executor.execute(spec)

            assert exc_info.value.status_code == 429
