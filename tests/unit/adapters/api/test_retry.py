"""
Tests unitaires pour l'execution des requetes sortantes et le retry sur 429.

Ces tests verifient:
- RateLimitError capture le header Retry-After
- with_retry relance sur RateLimitError apres la duree Retry-After,
  ou avec backoff exponentiel a defaut
- request_with_retry traduit chaque echec en UpstreamError
- Sans configuration explicite, un 429 n'est jamais relance
"""

from unittest.mock import MagicMock

import httpx
import pytest
import respx

from src.adapters.api.retry import (
    RateLimitError,
    _parse_retry_after,
    request_with_retry,
    wait_retry_after,
    with_retry,
)
from src.core.errors import UpstreamError

URL = "https://api.example.com/data"


class TestRateLimitError:
    """Tests pour l'exception RateLimitError."""

    def test_rate_limit_error_stores_retry_after(self) -> None:
        error = RateLimitError(retry_after=60)
        assert error.retry_after == 60
        assert "60" in str(error)

    def test_rate_limit_error_without_retry_after(self) -> None:
        error = RateLimitError(retry_after=None)
        assert error.retry_after is None


class TestWithRetryDecorator:
    """Tests pour le decorateur with_retry."""

    @pytest.mark.asyncio
    async def test_with_retry_retries_on_rate_limit_error(self) -> None:
        call_count = 0

        @with_retry(max_attempts=2, max_wait=1)
        async def flaky_function() -> str:
            nonlocal call_count
            call_count += 1
            if call_count < 2:
                raise RateLimitError(retry_after=1)
            return "success"

        assert await flaky_function() == "success"
        assert call_count == 2

    @pytest.mark.asyncio
    async def test_with_retry_does_not_retry_other_exceptions(self) -> None:
        call_count = 0

        @with_retry(max_attempts=3, max_wait=1)
        async def raises_value_error() -> str:
            nonlocal call_count
            call_count += 1
            raise ValueError("not a rate limit error")

        with pytest.raises(ValueError):
            await raises_value_error()
        assert call_count == 1


class TestWaitRetryAfter:
    """Tests pour la strategie d'attente basee sur Retry-After."""

    @staticmethod
    def _state(error: Exception, attempt: int = 1) -> MagicMock:
        state = MagicMock()
        state.outcome.exception.return_value = error
        state.attempt_number = attempt
        return state

    def test_uses_retry_after_header_value(self) -> None:
        wait = wait_retry_after(max_wait=60)
        assert wait(self._state(RateLimitError(retry_after=7))) == 7.0

    def test_retry_after_is_capped(self) -> None:
        wait = wait_retry_after(max_wait=10)
        assert wait(self._state(RateLimitError(retry_after=300))) == 10.0

    def test_falls_back_to_exponential_backoff(self) -> None:
        wait = wait_retry_after(max_wait=10)
        delay = wait(self._state(RateLimitError(retry_after=None)))
        assert 0 <= delay <= 10


class TestRequestWithRetry:
    """Tests pour request_with_retry avec httpx."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_success_is_returned(self, respx_mock: respx.Router) -> None:
        route = respx_mock.get(URL).mock(return_value=httpx.Response(200, json={"data": "value"}))

        async with httpx.AsyncClient() as client:
            response = await request_with_retry(client, "GET", URL, source="test")

        assert response.json() == {"data": "value"}
        assert route.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_429_not_retried_by_default(self, respx_mock: respx.Router) -> None:
        route = respx_mock.get(URL).mock(
            return_value=httpx.Response(429, headers={"Retry-After": "30"})
        )

        async with httpx.AsyncClient() as client:
            with pytest.raises(UpstreamError) as exc_info:
                await request_with_retry(client, "GET", URL, source="test")

        assert exc_info.value.status_code == 429
        assert isinstance(exc_info.value.__cause__, RateLimitError)
        assert exc_info.value.__cause__.retry_after == 30
        assert route.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_429_retried_when_configured(self, respx_mock: respx.Router) -> None:
        route = respx_mock.get(URL).mock(
            side_effect=[
                httpx.Response(429),
                httpx.Response(200, json={"status": "ok"}),
            ]
        )

        async with httpx.AsyncClient() as client:
            response = await request_with_retry(client, "GET", URL, source="test", max_attempts=3)

        assert response.status_code == 200
        assert route.call_count == 2

    @pytest.mark.asyncio
    @respx.mock
    async def test_retry_after_zero_retries_immediately(self, respx_mock: respx.Router) -> None:
        route = respx_mock.get(URL).mock(
            side_effect=[
                httpx.Response(429, headers={"Retry-After": "0"}),
                httpx.Response(200, json={"status": "ok"}),
            ]
        )

        async with httpx.AsyncClient() as client:
            response = await request_with_retry(client, "GET", URL, source="test", max_attempts=2)

        assert response.status_code == 200
        assert route.call_count == 2

    def test_non_ascii_retry_after_is_ignored(self) -> None:
        assert _parse_retry_after("\u00b2") is None
        assert _parse_retry_after("12") == 12

    @pytest.mark.asyncio
    @respx.mock
    async def test_other_errors_raise_upstream_error(self, respx_mock: respx.Router) -> None:
        route = respx_mock.get(URL).mock(
            return_value=httpx.Response(500, text="Internal Server Error")
        )

        async with httpx.AsyncClient() as client:
            with pytest.raises(UpstreamError) as exc_info:
                await request_with_retry(client, "GET", URL, source="test", max_attempts=3)

        assert exc_info.value.status_code == 500
        assert exc_info.value.source == "test"
        assert route.call_count == 1  # Pas de retry sur 500

    @pytest.mark.asyncio
    @respx.mock
    async def test_transport_error_raises_upstream_error(self, respx_mock: respx.Router) -> None:
        respx_mock.get(URL).mock(side_effect=httpx.ConnectTimeout("timeout"))

        async with httpx.AsyncClient() as client:
            with pytest.raises(UpstreamError) as exc_info:
                await request_with_retry(client, "GET", URL, source="test")

        assert exc_info.value.status_code is None
        assert "ConnectTimeout" in str(exc_info.value)
