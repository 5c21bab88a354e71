"""Unit tests for painel_admin/core/api/client.py"""
import json
from unittest.mock import MagicMock

import pytest
import requests

from painel_admin.core.api import (
    ApiClient,
    ApiRequest,
    FailureKind,
    RequestConfig,
    RequestFailedError,
)


def make_response(status_code=200, payload=None, text=None, url="http://api/x"):
    resp = MagicMock(spec=requests.Response)
    resp.status_code = status_code
    resp.url = url
    if payload is not None:
        body = json.dumps(payload)
        resp.json.return_value = payload
    else:
        body = text or ""
        resp.json.side_effect = ValueError("No JSON object could be decoded")
    resp.text = body
    resp.content = body.encode()
    return resp


@pytest.fixture()
def session():
    return MagicMock(spec=requests.Session)


def test_get_is_default_method(session):
    session.request.return_value = make_response(payload=[{"id": "1"}])
    client = ApiClient("http://api/", session=session)

    assert client.request(ApiRequest("/cursos")) == [{"id": "1"}]

    args, kwargs = session.request.call_args
    assert args == ("GET", "http://api/cursos")
    assert kwargs["data"] is None
    assert kwargs["timeout"] == 5
    assert "Authorization" not in kwargs["headers"]


def test_endpoint_without_leading_slash_is_normalized(session):
    client = ApiClient("http://api", session=session)
    assert client.url_for("permissoes") == client.url_for("/permissoes") == "http://api/permissoes"


def test_body_and_token_headers(session):
    session.request.return_value = make_response(payload={"id": "9"})
    client = ApiClient("http://api", token="abc", timeout=2, session=session)

    client(ApiRequest("/alunos", RequestConfig(method="POST", data='{"nome": "Ana"}')))

    args, kwargs = session.request.call_args
    assert args == ("POST", "http://api/alunos")
    assert kwargs["data"] == '{"nome": "Ana"}'
    assert kwargs["headers"]["Authorization"] == "Bearer abc"
    assert kwargs["headers"]["Content-Type"] == "application/json"
    assert kwargs["timeout"] == 2


def test_empty_body_returns_none(session):
    session.request.return_value = make_response(status_code=204)
    client = ApiClient("http://api", session=session)
    assert client.request(ApiRequest("/cursos/1", RequestConfig(method="DELETE"))) is None


def test_server_error_uses_message_field(session):
    session.request.return_value = make_response(
        status_code=409, payload={"message": "CPF já cadastrado"}, url="http://api/alunos"
    )
    client = ApiClient("http://api", session=session)

    with pytest.raises(RequestFailedError) as excinfo:
        client.request(ApiRequest("/alunos", RequestConfig(method="POST", data="{}")))

    err = excinfo.value
    assert str(err) == "CPF já cadastrado"
    assert err.kind is FailureKind.SERVER_REJECTED
    assert err.status_code == 409
    assert err.endpoint == "http://api/alunos"


def test_server_error_falls_back_to_text(session):
    session.request.return_value = make_response(status_code=502, text="Bad Gateway")
    client = ApiClient("http://api", session=session)
    with pytest.raises(RequestFailedError, match="Bad Gateway"):
        client.request(ApiRequest("/cursos"))


def test_server_error_without_body(session):
    session.request.return_value = make_response(status_code=404)
    client = ApiClient("http://api", session=session)
    with pytest.raises(RequestFailedError, match="HTTP 404"):
        client.request(ApiRequest("/cursos/1"))


def test_network_error(session):
    session.request.side_effect = requests.ConnectionError("connection refused")
    client = ApiClient("http://api", session=session)

    with pytest.raises(RequestFailedError) as excinfo:
        client.request(ApiRequest("/usuarios"))

    assert excinfo.value.kind is FailureKind.NETWORK
    assert "connection refused" in str(excinfo.value)


def test_invalid_json_is_parse_error(session):
    session.request.return_value = make_response(text="<html>")
    client = ApiClient("http://api", session=session)

    with pytest.raises(RequestFailedError) as excinfo:
        client.request(ApiRequest("/usuarios"))

    assert excinfo.value.kind is FailureKind.PARSE


def test_base_url_from_environment(monkeypatch):
    monkeypatch.setenv("PAINEL_API_URL", "http://backend:9000/")
    assert ApiClient().base_url == "http://backend:9000"


def test_request_descriptor_defaults():
    request = ApiRequest("/cursos")
    assert request.method == "GET"
    assert request.data is None
