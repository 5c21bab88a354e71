"""Low-level HTTP client for the admin REST backend.

Handles base-URL prefixing, authentication headers, JSON parsing and
error translation. The resource handlers only see the ``request(descriptor)``
contract, so any callable with the same shape can replace ``ApiClient``.
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Any, Optional

import requests

from .exceptions import FailureKind, RequestFailedError

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 5


@dataclass(frozen=True)
class RequestConfig:
    """HTTP method and optional serialized body of a request."""
    method: str = "GET"
    data: Optional[str] = None


@dataclass(frozen=True)
class ApiRequest:
    """Request descriptor: endpoint path plus optional config (GET when omitted)."""
    endpoint: str
    config: Optional[RequestConfig] = None

    @property
    def method(self) -> str:
        return self.config.method if self.config else "GET"

    @property
    def data(self) -> Optional[str]:
        return self.config.data if self.config else None


class ApiClient:
    """HTTP transport for the admin backend.

    Features:
    - Base URL prefixing (leading slash on the endpoint is optional)
    - Bearer token injection
    - JSON parsing of the response body
    - Centralized error handling via RequestFailedError

    Usage:
        client = ApiClient("http://localhost:8080", token="...")
        courses = client.request(ApiRequest("/cursos"))
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        timeout: float = REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """Initialize API client.

        Args:
            base_url: Backend base URL (defaults to PAINEL_API_URL env var)
            token: Bearer token sent on every request, if any
            timeout: Per-request timeout in seconds
            session: Optional requests session (a new one is created otherwise)
        """
        self.base_url = (base_url or os.environ.get("PAINEL_API_URL", "http://localhost:8080")).rstrip("/")
        self.token = token
        self.timeout = timeout
        self.session = session or requests.Session()

    def url_for(self, endpoint: str) -> str:
        """Join base URL and endpoint with exactly one slash."""
        return f"{self.base_url}/{endpoint.lstrip('/')}"

    def request(self, descriptor: ApiRequest) -> Any:
        """Execute the described request and return the parsed JSON body.

        Args:
            descriptor: Endpoint and optional method/body

        Returns:
            Parsed JSON, or None when the response has no body

        Raises:
            RequestFailedError: On network failure, HTTP error status or invalid JSON
        """
        url = self.url_for(descriptor.endpoint)
        headers = {"Accept": "application/json"}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        if descriptor.data is not None:
            headers["Content-Type"] = "application/json"

        logger.debug("%s %s", descriptor.method, url)
        try:
            resp = self.session.request(
                descriptor.method,
                url,
                data=descriptor.data,
                headers=headers,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise RequestFailedError(str(exc), FailureKind.NETWORK, endpoint=url) from exc

        self._handle_error(resp)

        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            raise RequestFailedError(
                f"Invalid JSON response from {url}",
                FailureKind.PARSE,
                status_code=resp.status_code,
                endpoint=url,
            ) from exc

    __call__ = request

    def _handle_error(self, resp: requests.Response) -> None:
        """Centralized error handling for HTTP responses.

        The backend reports errors as ``{"message": "..."}``; other bodies
        are passed through as text.

        Raises:
            RequestFailedError: If response status indicates error
        """
        if resp.status_code < 400:
            return

        message = ""
        try:
            body = resp.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            message = str(body.get("message") or body.get("error") or "")
        if not message:
            message = resp.text or f"HTTP {resp.status_code}"
        raise RequestFailedError(
            message,
            FailureKind.SERVER_REJECTED,
            status_code=resp.status_code,
            endpoint=resp.url,
        )
