"""Tests for GitHubAPIClient status handling."""

from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import pytest

from common.exception.exceptions import AuthError, NotFoundError, RemoteCallError
from ghsweep.services.github.api.client import GitHubAPIClient


def _mock_http_client(method: str, status_code: int, json_body=None, content: bytes = b"{}"):
    mock_response = MagicMock()
    mock_response.status_code = status_code
    mock_response.content = content
    mock_response.text = content.decode("utf-8", errors="replace")
    mock_response.json.return_value = json_body if json_body is not None else {}

    mock_client = AsyncMock()
    getattr(mock_client, method).return_value = mock_response
    mock_client.__aenter__.return_value = mock_client
    mock_client.__aexit__.return_value = None
    return mock_client


class TestGitHubAPIClient:
    """Tests for GitHubAPIClient."""

    def test_missing_token_raises_auth_error(self):
        with pytest.raises(AuthError):
            GitHubAPIClient(token=None)

        with pytest.raises(AuthError):
            GitHubAPIClient(token="")

    def test_headers_carry_bearer_token(self):
        client = GitHubAPIClient(token="secret")

        headers = client._get_headers()

        assert headers["Authorization"] == "Bearer secret"
        assert headers["Accept"] == "application/vnd.github+json"
        assert "X-GitHub-Api-Version" in headers

    @pytest.mark.asyncio
    async def test_get_returns_json(self):
        mock_client = _mock_http_client("get", 200, {"login": "octocat"})

        with patch("httpx.AsyncClient", return_value=mock_client):
            client = GitHubAPIClient(token="secret", base_url="https://ghe.example.com/api/v3/")
            data = await client.get("user")

        assert data == {"login": "octocat"}
        url = mock_client.get.call_args.args[0]
        assert url == "https://ghe.example.com/api/v3/user"

    @pytest.mark.asyncio
    async def test_patch_sends_json_body(self):
        mock_client = _mock_http_client("patch", 200, {"ref": "refs/heads/x"})

        with patch("httpx.AsyncClient", return_value=mock_client):
            client = GitHubAPIClient(token="secret")
            await client.patch("repos/acme/widgets/git/refs/heads/x", data={"sha": "abc", "force": False})

        assert mock_client.patch.call_args.kwargs["json"] == {"sha": "abc", "force": False}

    @pytest.mark.asyncio
    async def test_404_raises_not_found(self):
        mock_client = _mock_http_client("get", 404, content=b'{"message": "Not Found"}')

        with patch("httpx.AsyncClient", return_value=mock_client):
            client = GitHubAPIClient(token="secret")
            with pytest.raises(NotFoundError):
                await client.get("repos/acme/widgets/git/ref/heads/missing")

    @pytest.mark.asyncio
    async def test_401_raises_auth_error(self):
        mock_client = _mock_http_client("get", 401, content=b'{"message": "Bad credentials"}')

        with patch("httpx.AsyncClient", return_value=mock_client):
            client = GitHubAPIClient(token="secret")
            with pytest.raises(AuthError):
                await client.get("user")

    @pytest.mark.asyncio
    async def test_422_raises_remote_call_error_with_status(self):
        mock_client = _mock_http_client("post", 422, content=b'{"message": "Reference already exists"}')

        with patch("httpx.AsyncClient", return_value=mock_client):
            client = GitHubAPIClient(token="secret")
            with pytest.raises(RemoteCallError) as exc_info:
                await client.post("repos/acme/widgets/git/refs", data={"ref": "refs/heads/x", "sha": "a"})

        assert exc_info.value.status_code == 422

    @pytest.mark.asyncio
    async def test_transport_error_raises_remote_call_error(self):
        mock_client = AsyncMock()
        mock_client.get.side_effect = httpx.ConnectError("connection refused")
        mock_client.__aenter__.return_value = mock_client
        mock_client.__aexit__.return_value = None

        with patch("httpx.AsyncClient", return_value=mock_client):
            client = GitHubAPIClient(token="secret")
            with pytest.raises(RemoteCallError):
                await client.get("user")

    @pytest.mark.asyncio
    async def test_get_raw_returns_bytes_and_requests_raw_media_type(self):
        mock_client = _mock_http_client("get", 200, content=b"\x00binary\xff")

        with patch("httpx.AsyncClient", return_value=mock_client):
            client = GitHubAPIClient(token="secret")
            data = await client.get_raw("repos/acme/widgets/git/blobs/abc")

        assert data == b"\x00binary\xff"
        headers = mock_client.get.call_args.kwargs["headers"]
        assert headers["Accept"] == "application/vnd.github.raw"

    @pytest.mark.asyncio
    async def test_empty_body_returns_empty_dict(self):
        mock_client = _mock_http_client("get", 204, content=b"")

        with patch("httpx.AsyncClient", return_value=mock_client):
            client = GitHubAPIClient(token="secret")
            assert await client.get("anything") == {}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["PUT", "DELETE"])
    async def test_unused_methods_are_rejected(self, method):
        mock_client = _mock_http_client("get", 200)

        with patch("httpx.AsyncClient", return_value=mock_client):
            client = GitHubAPIClient(token="secret")
            with pytest.raises(ValueError, match="Unsupported HTTP method"):
                await client.request(method, "repos/acme/widgets")
