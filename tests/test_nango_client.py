import httpx
import pytest

from app.clients import nango_client
from app.clients.nango_client import NangoClient
from app.core import config
from app.core.errors import ConfigError, NangoError


def test_list_connections(make_nango):
    nango = make_nango(connections=[{"provider_config_key": "slack", "connection_id": "c1"}])

    assert nango.list_connections() == [{"provider_config_key": "slack", "connection_id": "c1"}]
    assert nango.calls[0].headers["Authorization"] == "Bearer test-secret"


def test_list_records_sends_connection_headers(make_nango):
    nango = make_nango(records={("github", "c9"): [{"id": "r1"}]})

    records = nango.list_records("github", "c9", "GithubRepo", limit=50)

    assert records == [{"id": "r1"}]
    request = nango.calls[0]
    assert request.url.params["model"] == "GithubRepo"
    assert request.url.params["limit"] == "50"
    assert request.headers["Connection-Id"] == "c9"
    assert request.headers["Provider-Config-Key"] == "github"


def test_http_error_raises_nango_error(make_nango):
    nango = make_nango(connections_status=401)

    with pytest.raises(NangoError) as exc:
        nango.list_connections()
    assert exc.value.status_code == 401


def test_transport_error_raises_nango_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    nango = NangoClient("k", host="https://nango.test", transport=httpx.MockTransport(handler))
    try:
        with pytest.raises(NangoError, match="unreachable"):
            nango.list_connections()
    finally:
        nango.close()


def test_missing_secret_key(monkeypatch):
    monkeypatch.setattr(config, "NANGO_SECRET_KEY", None)

    with pytest.raises(ConfigError):
        nango_client.get_nango_client()


def test_context_manager_closes_client(make_nango):
    nango = make_nango()

    with nango as client:
        assert client is nango
        assert not nango._client.is_closed
    assert nango._client.is_closed
