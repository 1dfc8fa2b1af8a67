from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from creation_hub.config import settings
from creation_hub.connectors.supabase_client import (
    SupabaseClient,
    SupabaseError,
    get_supabase_client,
)


def response(status_code=200, body=None, text="", json_error=False):
    mock = MagicMock()
    mock.status_code = status_code
    mock.text = text
    if json_error:
        mock.json.side_effect = ValueError("bad json")
    else:
        mock.json.return_value = body
    return mock


@pytest.fixture
def client():
    return SupabaseClient(base_url="https://proj.supabase.co/", api_key="anon")


class TestSelectAll:
    @pytest.mark.asyncio
    async def test_returns_rows(self, client):
        rows = [{"id": 1, "title": "Hello"}, {"id": 2, "title": "World"}]
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.get.return_value = response(body=rows)

            result = await client.select_all("website_blog")

        assert result == rows
        args, kwargs = mock_client.get.call_args
        assert args[0] == "/rest/v1/website_blog"
        assert kwargs["params"] == {"select": "*"}

    @pytest.mark.asyncio
    async def test_table_names_with_spaces_are_encoded(self, client):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.get.return_value = response(body=[])

            await client.select_all("Content Post Information")

        assert mock_client.get.call_args.args[0] == "/rest/v1/Content%20Post%20Information"

    @pytest.mark.asyncio
    async def test_sends_api_key_headers(self, client):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.get.return_value = response(body=[])

            await client.select_all("carousel")

        kwargs = mock_client_class.call_args.kwargs
        assert kwargs["base_url"] == "https://proj.supabase.co"
        assert kwargs["headers"]["apikey"] == "anon"
        assert kwargs["headers"]["Authorization"] == "Bearer anon"

    @pytest.mark.asyncio
    async def test_null_body_is_empty(self, client):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.get.return_value = response(body=None)

            assert await client.select_all("carousel") == []

    @pytest.mark.asyncio
    async def test_http_error_raises(self, client):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.get.return_value = response(status_code=404, text="relation does not exist")

            with pytest.raises(SupabaseError) as exc_info:
                await client.select_all("missing_table")

        assert exc_info.value.status_code == 404
        assert "relation does not exist" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_transport_error_raises(self, client):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.get.side_effect = httpx.ConnectError("unreachable")

            with pytest.raises(SupabaseError) as exc_info:
                await client.select_all("carousel")

        assert exc_info.value.status_code == 502

    @pytest.mark.asyncio
    async def test_invalid_json_raises(self, client):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.get.return_value = response(json_error=True)

            with pytest.raises(SupabaseError, match="invalid JSON"):
                await client.select_all("carousel")

    @pytest.mark.asyncio
    async def test_non_list_body_raises(self, client):
        with patch("httpx.AsyncClient") as mock_client_class:
            mock_client = AsyncMock()
            mock_client_class.return_value.__aenter__.return_value = mock_client
            mock_client.get.return_value = response(body={"message": "oops"})

            with pytest.raises(SupabaseError, match="expected a list"):
                await client.select_all("carousel")


def test_missing_url_is_rejected(monkeypatch):
    monkeypatch.setattr(settings, "supabase_url", None)
    with pytest.raises(ValueError):
        get_supabase_client()


def test_settings_provide_defaults():
    client = get_supabase_client()
    assert client.base_url == "https://example.supabase.co"
    assert client.is_available
