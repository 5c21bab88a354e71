"""Pytest shared fixtures for store tests."""
import pathlib
import sys
from collections import deque

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from painel_admin.core.api import FailureKind, RequestFailedError
from painel_admin.core.store import ResourceStore


class FakeTransport:
    """Records every request and answers from a queue of canned responses.

    Queue an exception instance to make the next call fail with it.
    """

    def __init__(self):
        self.requests = []
        self.responses = deque()

    def respond(self, *payloads):
        self.responses.extend(payloads)
        return self

    def __call__(self, request):
        self.requests.append(request)
        if not self.responses:
            raise AssertionError(f"Unexpected request: {request}")
        payload = self.responses.popleft()
        if isinstance(payload, Exception):
            raise payload
        return payload

    @property
    def last(self):
        return self.requests[-1]


@pytest.fixture()
def transport():
    return FakeTransport()


@pytest.fixture()
def store(transport):
    return ResourceStore(transport)


@pytest.fixture()
def upsert_store(transport):
    return ResourceStore(transport, edit_strategy="replace")


@pytest.fixture()
def server_error():
    return RequestFailedError("Erro interno do servidor", FailureKind.SERVER_REJECTED, status_code=500)
