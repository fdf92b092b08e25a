"""
GitHub API client for making authenticated requests.
The access token is injected explicitly at construction time.
"""

import logging
from typing import Optional, Dict, Any

import httpx

from common.config.config import (
    GITHUB_API_URL,
    GITHUB_API_VERSION,
    GH_REQUEST_TIMEOUT,
)
from common.exception.exceptions import AuthError, NotFoundError, RemoteCallError

logger = logging.getLogger(__name__)

RAW_MEDIA_TYPE = "application/vnd.github.raw"


class GitHubAPIClient:
    """Base client for GitHub API interactions using a bearer token."""

    def __init__(
        self,
        token: Optional[str],
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize GitHub API client.

        Args:
            token: GitHub personal access token
            base_url: API base URL (override for GitHub Enterprise)
            timeout: Request timeout in seconds

        Raises:
            AuthError: If no token is given
        """
        if not token:
            raise AuthError("GitHub access token is required")

        self.token = token
        self.base_url = (base_url or GITHUB_API_URL).rstrip("/")
        self.timeout = timeout or GH_REQUEST_TIMEOUT

    def _get_headers(self, accept: str = "application/vnd.github+json") -> Dict[str, str]:
        """Get headers for GitHub API requests.

        Args:
            accept: Media type to request

        Returns:
            Headers dictionary
        """
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": accept,
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
            "Content-Type": "application/json",
        }

    async def request(
        self,
        method: str,
        path: str,
        data: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make a GitHub API request.

        Args:
            method: HTTP method (GET, POST, PATCH)
            path: API path (without base URL)
            data: Request body data
            params: Query parameters

        Returns:
            Decoded JSON response, or empty dict for empty bodies

        Raises:
            NotFoundError: On HTTP 404
            AuthError: On HTTP 401
            RemoteCallError: On transport errors and any other failure status
        """
        url = f"{self.base_url}/{path}"
        response = await self._send(method, url, self._get_headers(), data, params)
        return self._process_response(response, method, url)

    async def get_raw(self, path: str) -> bytes:
        """GET an endpoint with the raw media type and return the body bytes.

        Args:
            path: API path

        Returns:
            Response content as bytes
        """
        url = f"{self.base_url}/{path}"
        response = await self._send("GET", url, self._get_headers(accept=RAW_MEDIA_TYPE), None, None)
        self._check_status(response, "GET", url)
        return response.content

    async def _send(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        data: Optional[Dict[str, Any]],
        params: Optional[Dict[str, Any]],
    ) -> httpx.Response:
        timeout_config = httpx.Timeout(self.timeout, connect=60.0)
        try:
            return await self._execute_http_request(
                method, url, headers, data, params, timeout_config
            )
        except httpx.RequestError as e:
            error_msg = f"GitHub API request error: {e}"
            logger.error(error_msg)
            raise RemoteCallError(error_msg) from e

    async def _execute_http_request(
        self,
        method: str,
        url: str,
        headers: Dict[str, str],
        data: Optional[Dict[str, Any]],
        params: Optional[Dict[str, Any]],
        timeout_config: httpx.Timeout,
    ) -> httpx.Response:
        """Execute HTTP request with method routing.

        Raises:
            ValueError: If HTTP method is unsupported
        """
        method_upper = method.upper()

        async with httpx.AsyncClient(timeout=timeout_config, trust_env=False) as client:
            if method_upper == "GET":
                return await client.get(url, headers=headers, params=params)
            elif method_upper == "POST":
                return await client.post(url, json=data, headers=headers, params=params)
            elif method_upper == "PATCH":
                return await client.patch(url, json=data, headers=headers, params=params)
            else:
                raise ValueError(f"Unsupported HTTP method: {method}")

    def _check_status(self, response: httpx.Response, method: str, url: str) -> None:
        status = response.status_code
        if 200 <= status < 300:
            logger.info(f"GitHub API {method} request to {url} successful (status: {status})")
            return

        error_msg = f"GitHub API {method} {url} failed (status {status}): {response.text}"
        if status == 404:
            logger.info(error_msg)
            raise NotFoundError(error_msg)
        logger.error(error_msg)
        if status == 401:
            raise AuthError(error_msg)
        raise RemoteCallError(error_msg, status_code=status)

    def _process_response(self, response: httpx.Response, method: str, url: str) -> Any:
        """Check the response status and decode its JSON body."""
        self._check_status(response, method, url)
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise RemoteCallError(
                f"GitHub API {method} {url} returned invalid JSON: {e}",
                status_code=response.status_code,
            ) from e

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, data: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("POST", path, data=data)

    async def patch(self, path: str, data: Optional[Dict[str, Any]] = None) -> Any:
        return await self.request("PATCH", path, data=data)
