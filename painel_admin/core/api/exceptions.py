"""API-specific exceptions for error handling."""
from __future__ import annotations
from enum import Enum
from typing import Optional


class FailureKind(str, Enum):
    """Where a request failed."""
    NETWORK = "network"
    PARSE = "parse"
    SERVER_REJECTED = "server_rejected"


class ApiError(Exception):
    """Base exception for all API operations."""
    pass


class RequestFailedError(ApiError):
    """A request to the backend did not produce a usable response.
    
    Callers only need the message; ``kind`` and ``status_code`` are there
    for diagnostics.
    
    Attributes:
        message: Error message (also the exception's ``str()``)
        kind: Failure category
        status_code: HTTP status code, when the server answered
        endpoint: Endpoint or URL that failed
    """
    
    def __init__(
        self,
        message: str,
        kind: FailureKind = FailureKind.NETWORK,
        status_code: Optional[int] = None,
        endpoint: str = "",
    ):
        self.message = message
        self.kind = kind
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)
