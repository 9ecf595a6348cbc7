"""
Base API Client

Responsibilities:
- HTTP client lifecycle management (using httpx)
- Procedure calls (POST /api/rpc/<name>)
- Response envelope unwrapping and error conversion
"""

from typing import Any, Dict, Optional
import httpx
from ..exceptions import (
    ConnectionError,
    NotFoundError,
    PhotoEditorSDKError,
    ValidationError,
)
from ..utils import build_api_url

_ERROR_CODES = {
    "NOT_FOUND": NotFoundError,
    "VALIDATION_ERROR": ValidationError,
}


class APIClient:
    """
    Base HTTP client for making procedure calls to the backend.

    Args:
        base_url: Backend base URL (e.g., "http://localhost:2022")
        timeout: Request timeout in seconds
        transport: Optional httpx transport (ASGI or mock transports in tests)
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def call(self, procedure: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        """
        Call a procedure and return the envelope's data field.

        Args:
            procedure: Procedure name (e.g., "getImage")
            payload: Procedure input

        Returns:
            The data field of a successful envelope (may be None)

        Raises:
            NotFoundError: Backend reported NOT_FOUND
            ValidationError: Backend reported VALIDATION_ERROR
            ConnectionError: Network failure or non-2xx status
            PhotoEditorSDKError: Any other business error
        """
        url = build_api_url(self.base_url, f"/api/rpc/{procedure}")

        try:
            response = await self.client.post(url, json=payload or {})
        except httpx.RequestError as e:
            raise ConnectionError(f"Request failed: {str(e)}")

        return self._handle_response(response)

    async def get(self, path: str) -> Dict[str, Any]:
        """Send GET request to a non-RPC endpoint and return envelope data"""
        url = build_api_url(self.base_url, path)
        try:
            response = await self.client.get(url)
        except httpx.RequestError as e:
            raise ConnectionError(f"Request failed: {str(e)}")
        return self._handle_response(response)

    def _handle_response(self, response: httpx.Response) -> Any:
        """
        Unwrap the response envelope and convert errors.

        Args:
            response: httpx Response object

        Returns:
            Envelope data
        """
        if not (200 <= response.status_code < 300):
            raise ConnectionError(
                f"Request failed: HTTP {response.status_code}",
                details={"status_code": response.status_code, "body": response.text},
            )

        try:
            body = response.json()
        except ValueError:
            raise PhotoEditorSDKError(
                "Backend returned a non-JSON response",
                details={"body": response.text},
            )

        if body.get("success"):
            return body.get("data")

        error = body.get("error") or {}
        exc_class = _ERROR_CODES.get(error.get("code"), PhotoEditorSDKError)
        raise exc_class(body.get("message") or "Request failed", details=error)

    async def close(self):
        """Close HTTP client and cleanup resources."""
        await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
