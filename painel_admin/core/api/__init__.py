"""REST backend client library.

Architecture:
- client.py: HTTP transport (request descriptors, auth header, JSON parsing)
- exceptions.py: Typed exceptions for error handling

Usage:
    from painel_admin.core.api import ApiClient, ApiRequest, RequestConfig

    client = ApiClient("http://localhost:8080", token="...")
    client.request(ApiRequest("/alunos"))
    client.request(ApiRequest("/alunos/7", RequestConfig(method="DELETE")))
"""
from .client import (
    ApiClient,
    ApiRequest,
    RequestConfig,
    REQUEST_TIMEOUT,
)
from .exceptions import (
    ApiError,
    FailureKind,
    RequestFailedError,
)

__all__ = [
    # Client
    "ApiClient",
    "ApiRequest",
    "RequestConfig",
    "REQUEST_TIMEOUT",

    # Exceptions
    "ApiError",
    "FailureKind",
    "RequestFailedError",
]
