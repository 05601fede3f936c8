# Copyright 2025 Lunch Pail Labs, LLC
# Licensed under the Apache License, Version 2.0

"""
Tests for the client's transport, authentication and error mapping.
"""

import json
import os
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from dailyco import (
    Client,
    ClientUsageError,
    DailyCoError,
    DailyCoErrorInfo,
    DailyCoErrorKind,
    ServiceError,
    TransportError,
)


class TestClientSetup:
    """Construction and authentication header."""

    def test_bearer_prefix_is_added(self) -> None:
        client = Client("abc123")
        assert client._get_headers()["Authorization"] == "Bearer abc123"

    def test_existing_bearer_prefix_is_kept(self) -> None:
        client = Client("Bearer abc123")
        assert client._get_headers()["Authorization"] == "Bearer abc123"

    def test_headers(self) -> None:
        headers = Client("abc123")._get_headers()
        assert headers["Accept"] == "application/json"
        assert headers["Content-Type"] == "application/json"

    @pytest.mark.parametrize("api_key", ["", "   "])
    def test_empty_key_is_rejected(self, api_key: str) -> None:
        with pytest.raises(ClientUsageError, match="must not be empty"):
            Client(api_key)

    def test_non_ascii_key_is_rejected(self) -> None:
        with pytest.raises(ClientUsageError, match="ASCII"):
            Client("clé-secrète")

    @pytest.mark.asyncio
    async def test_non_ascii_key_fails_before_any_request(self, mock_http) -> None:
        mock_http.request = AsyncMock()

        with pytest.raises(ClientUsageError):
            await Client("🔑").get_rooms()

        mock_http.request.assert_not_called()

    def test_repr_hides_key(self) -> None:
        assert "abc123" not in repr(Client("abc123"))

    def test_base_url_gets_trailing_slash(self) -> None:
        client = Client("abc123", base_url="http://localhost:8080/v1")
        assert client.base_url == "http://localhost:8080/v1/"

    @pytest.mark.asyncio
    async def test_custom_base_url(self, mock_http) -> None:
        mock_http.request = AsyncMock(return_value=httpx.Response(200, json={}))
        client = Client("abc123", base_url="http://localhost:8080/v1/")

        await client.delete_room("r")

        args, _ = mock_http.request.call_args
        assert args == ("DELETE", "http://localhost:8080/v1/rooms/r")

    @pytest.mark.asyncio
    async def test_timeout_is_passed_to_httpx(self) -> None:
        client = Client("abc123", timeout=5.0)
        with patch("dailyco.client.httpx.AsyncClient") as mock_client:
            mock_client_instance = AsyncMock()
            mock_client_instance.__aenter__ = AsyncMock(return_value=mock_client_instance)
            mock_client_instance.__aexit__ = AsyncMock(return_value=None)
            mock_client_instance.request = AsyncMock(return_value=httpx.Response(200, json={}))
            mock_client.return_value = mock_client_instance

            await client.delete_room("r")

        mock_client.assert_called_once_with(timeout=5.0)

    def test_from_env(self) -> None:
        env = {
            "DAILY_API_KEY": "env-key",
            "DAILY_API_URL": "http://localhost:9000/v1/",
            "DAILY_API_TIMEOUT": "12.5",
        }
        with patch.dict(os.environ, env, clear=True), patch("dailyco.config.load_dotenv"):
            client = Client.from_env()

        assert client._get_headers()["Authorization"] == "Bearer env-key"
        assert client.base_url == "http://localhost:9000/v1/"
        assert client.timeout == 12.5


class TestErrorMapping:
    """How failed requests surface to callers."""

    @pytest.mark.asyncio
    async def test_structured_error_becomes_service_error(self, client, mock_http) -> None:
        mock_http.request = AsyncMock(
            return_value=httpx.Response(
                404, json={"error": "not-found", "info": "room not found"}
            )
        )

        with pytest.raises(ServiceError) as exc_info:
            await client.get_room("missing")

        error = exc_info.value
        assert error.kind is DailyCoErrorKind.NOT_FOUND
        assert error.info.info == "room not found"
        assert error.is_not_found()
        assert isinstance(error, DailyCoError)

    @pytest.mark.asyncio
    async def test_service_error_message_shows_pretty_json(self, client, mock_http) -> None:
        mock_http.request = AsyncMock(
            return_value=httpx.Response(
                401, json={"error": "authentication-error", "info": "bad key"}
            )
        )

        with pytest.raises(ServiceError) as exc_info:
            await client.get_room("any")

        message = str(exc_info.value)
        assert message.startswith("daily request returned an error: ")
        assert '"error": "authentication-error"' in message
        assert '\n  "info": "bad key"' in message

    @pytest.mark.asyncio
    async def test_unknown_error_kind_is_kept(self, client, mock_http) -> None:
        mock_http.request = AsyncMock(
            return_value=httpx.Response(
                409, json={"error": "conflict-error", "info": "already exists"}
            )
        )

        with pytest.raises(ServiceError) as exc_info:
            await client.get_room("any")

        assert exc_info.value.kind == "conflict-error"
        assert not exc_info.value.is_not_found()

    @pytest.mark.asyncio
    async def test_unreadable_error_body_is_transport_error(self, client, mock_http) -> None:
        mock_http.request = AsyncMock(
            return_value=httpx.Response(502, text="<html>Bad Gateway</html>")
        )

        with pytest.raises(TransportError, match="502"):
            await client.get_room("any")

    @pytest.mark.asyncio
    async def test_connection_failure_is_transport_error(self, client, mock_http) -> None:
        mock_http.request = AsyncMock(side_effect=httpx.ConnectError("connection refused"))

        with pytest.raises(TransportError, match="failure making the request") as exc_info:
            await client.get_room("any")

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_timeout_is_transport_error(self, client, mock_http) -> None:
        mock_http.request = AsyncMock(side_effect=httpx.ReadTimeout("timed out"))

        with pytest.raises(TransportError):
            await client.get_rooms()

    @pytest.mark.asyncio
    async def test_success_body_with_wrong_shape(self, client, mock_http) -> None:
        mock_http.request = AsyncMock(
            return_value=httpx.Response(200, json={"unexpected": True})
        )

        with pytest.raises(TransportError, match="did not match Room"):
            await client.get_room("any")

    @pytest.mark.asyncio
    async def test_success_body_not_json(self, client, mock_http) -> None:
        mock_http.request = AsyncMock(return_value=httpx.Response(200, text="ok"))

        with pytest.raises(TransportError, match="not valid JSON"):
            await client.get_room("any")


class TestDailyCoErrorInfo:
    def test_str_is_indented_json(self) -> None:
        info = DailyCoErrorInfo(error=DailyCoErrorKind.RATE_LIMIT_ERROR, info="slow down")
        assert json.loads(str(info)) == {"error": "rate-limit-error", "info": "slow down"}
        assert str(info).startswith("{\n  ")

    def test_missing_fields(self) -> None:
        info = DailyCoErrorInfo.model_validate({})
        assert info.error is None
        assert info.info is None
