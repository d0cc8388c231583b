"""
Shared HTTP client for the ProLegal REST API
"""

import logging
from typing import Any, Dict, Optional

import httpx

from config import settings
from utils.auth import AuthSession, get_auth_session

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Non-2xx response from the backend"""

    def __init__(self, status_code: Optional[int], message: str, payload: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.payload = payload

    def __str__(self) -> str:
        if self.status_code is None:
            return self.message
        return f"{self.status_code}: {self.message}"


class ApiConnectionError(ApiError):
    """Backend unreachable or timed out"""

    def __init__(self, message: str):
        super().__init__(None, message)


def clean_params(params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Drop query params with no value; 0 and False are values"""
    if not params:
        return {}
    return {key: value for key, value in params.items() if value is not None and value != ""}


def unwrap(payload: Any) -> Any:
    """Return ``data`` from a ``{"success": ..., "data": ...}`` envelope"""
    if isinstance(payload, dict) and "data" in payload:
        return payload["data"]
    return payload


def error_message(payload: Any, status_code: int) -> str:
    if isinstance(payload, dict):
        for key in ("message", "error", "detail"):
            value = payload.get(key)
            if value:
                return value if isinstance(value, str) else str(value)
    return f"HTTP {status_code}"


class ApiService:
    """Async JSON client bound to one API base URL"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[AuthSession] = None,
    ):
        self.base_url = (base_url or settings.API_BASE_URL).rstrip("/")
        self.timeout = timeout or settings.API_TIMEOUT
        self.session = session or get_auth_session()
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout)
        return self._client

    def _headers(self, skip_auth: bool, json_body: bool) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if json_body:
            headers["Content-Type"] = "application/json"
        if not skip_auth:
            token = self.session.bearer_token()
            if token:
                headers["Authorization"] = f"Bearer {token}"
        return headers

    async def send(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        data: Any = None,
        files: Optional[Dict[str, Any]] = None,
        skip_auth: bool = False,
        timeout: Optional[float] = None,
    ) -> httpx.Response:
        """
        Perform a request and return the raw response.

        Args:
            method: HTTP verb
            endpoint: path below the base URL, starting with '/'
            params: query params; empty values are dropped
            data: JSON body, or form fields when ``files`` is given
            files: multipart files, sent without a JSON content type
            skip_auth: do not attach the bearer token (public endpoints)
            timeout: per-request override in seconds

        Raises:
            ApiError: on a non-2xx status
            ApiConnectionError: when the backend cannot be reached
        """
        url = f"{self.base_url}{endpoint}"
        method = method.upper()
        request_kwargs: Dict[str, Any] = {
            "params": clean_params(params),
            "headers": self._headers(skip_auth, json_body=files is None and data is not None),
        }
        if files is not None:
            request_kwargs["files"] = files
            if data:
                request_kwargs["data"] = data
        elif data is not None:
            request_kwargs["json"] = data
        if timeout is not None:
            request_kwargs["timeout"] = timeout

        logger.info(f"API Request: {method} {endpoint}")
        try:
            response = await self.client.request(method, url, **request_kwargs)
        except httpx.TimeoutException as e:
            logger.error(f"API Request timed out: {method} {endpoint}: {e}")
            raise ApiConnectionError(f"Request to {endpoint} timed out") from e
        except httpx.RequestError as e:
            logger.error(f"API Request failed: {method} {endpoint}: {e}")
            raise ApiConnectionError(
                f"Cannot connect to {self.base_url}. Please ensure the backend is running."
            ) from e

        if response.is_error:
            payload = self.decode_body(response)
            message = error_message(payload, response.status_code)
            logger.error(f"API Response Error: {response.status_code} {endpoint}: {message}")
            raise ApiError(response.status_code, message, payload)

        logger.info(f"API Response: {response.status_code} {endpoint}")
        return response

    @staticmethod
    def decode_body(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    async def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None, skip_auth: bool = False) -> Any:
        response = await self.send("GET", endpoint, params=params, skip_auth=skip_auth)
        return self.decode_body(response)

    async def post(
        self,
        endpoint: str,
        data: Any = None,
        files: Optional[Dict[str, Any]] = None,
        skip_auth: bool = False,
    ) -> Any:
        response = await self.send("POST", endpoint, data=data, files=files, skip_auth=skip_auth)
        return self.decode_body(response)

    async def put(self, endpoint: str, data: Any = None) -> Any:
        response = await self.send("PUT", endpoint, data=data)
        return self.decode_body(response)

    async def patch(self, endpoint: str, data: Any = None) -> Any:
        response = await self.send("PATCH", endpoint, data=data)
        return self.decode_body(response)

    async def delete(self, endpoint: str, data: Any = None) -> Any:
        response = await self.send("DELETE", endpoint, data=data)
        return self.decode_body(response)

    async def get_bytes(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> bytes:
        """Binary download (exports, file blobs)"""
        response = await self.send("GET", endpoint, params=params)
        return response.content

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None


# Global service instance
_api_service: Optional[ApiService] = None

def get_api_service() -> ApiService:
    """Get the global API service instance"""
    global _api_service
    if _api_service is None:
        _api_service = ApiService()
    return _api_service

def set_api_service(service: Optional[ApiService]) -> None:
    """Replace the global API service (CLI --api-url, tests)"""
    global _api_service
    _api_service = service
