"""
Tests for the Tendermint JSON-RPC transport.
"""
import base64
from unittest.mock import MagicMock, patch

import pytest
import requests

from rwa_sdk.exceptions import DecodeError, NetworkError
from rwa_sdk.rpc import TendermintRpc, decode_base64, to_int
from tests.test_helpers import TEST_RPC_URL


@pytest.fixture
def rpc():
    transport = TendermintRpc(TEST_RPC_URL, timeout=5)
    yield transport
    transport.close()


def test_call_posts_jsonrpc_envelope(rpc, requests_mock):
    requests_mock.post(TEST_RPC_URL, json={"jsonrpc": "2.0", "id": 1, "result": {"ok": True}})

    assert rpc.call("status", {}) == {"ok": True}
    body = requests_mock.last_request.json()
    assert body["jsonrpc"] == "2.0"
    assert body["method"] == "status"
    assert body["params"] == {}


def test_call_ids_increase(rpc, requests_mock):
    requests_mock.post(TEST_RPC_URL, json={"jsonrpc": "2.0", "id": 1, "result": {}})

    rpc.call("status", {})
    rpc.call("status", {})
    ids = [request.json()["id"] for request in requests_mock.request_history]
    assert ids[1] > ids[0]


def test_connection_error_raises_network_error(rpc, requests_mock):
    requests_mock.post(TEST_RPC_URL, exc=requests.exceptions.ConnectionError("refused"))

    with pytest.raises(NetworkError, match="failed"):
        rpc.call("status", {})


def test_timeout_raises_network_error(rpc, requests_mock):
    requests_mock.post(TEST_RPC_URL, exc=requests.exceptions.ReadTimeout("slow"))

    with pytest.raises(NetworkError, match="timed out"):
        rpc.call("status", {})


def test_no_retry_on_failure(rpc, requests_mock):
    """A failing request is sent exactly once"""
    requests_mock.post(TEST_RPC_URL, exc=requests.exceptions.ConnectionError("refused"))

    with pytest.raises(NetworkError):
        rpc.broadcast_tx_commit(b"tx")
    assert requests_mock.call_count == 1


def test_jsonrpc_error_object(rpc, requests_mock):
    requests_mock.post(TEST_RPC_URL, json={
        "jsonrpc": "2.0",
        "id": 1,
        "error": {"code": -32603, "message": "Internal error", "data": "tx already exists in cache"},
    })

    with pytest.raises(NetworkError) as exc_info:
        rpc.call("broadcast_tx_commit", {"tx": ""})
    assert exc_info.value.code == -32603
    assert exc_info.value.data == "tx already exists in cache"


def test_invalid_json_with_ok_status_is_decode_error(rpc, requests_mock):
    requests_mock.post(TEST_RPC_URL, text="<html>not json</html>", status_code=200)

    with pytest.raises(DecodeError, match="Invalid JSON"):
        rpc.call("status", {})


def test_invalid_json_with_error_status_is_network_error(rpc, requests_mock):
    requests_mock.post(TEST_RPC_URL, text="Bad Gateway", status_code=502)

    with pytest.raises(NetworkError, match="HTTP 502"):
        rpc.call("status", {})


def test_missing_result(rpc, requests_mock):
    requests_mock.post(TEST_RPC_URL, json={"jsonrpc": "2.0", "id": 1})

    with pytest.raises(DecodeError, match="Missing result"):
        rpc.call("status", {})


def test_abci_query_params_and_response(rpc, requests_mock):
    requests_mock.post(TEST_RPC_URL, json={"jsonrpc": "2.0", "id": 1, "result": {"response": {
        "code": 0,
        "value": base64.b64encode(b"\x0a\x01x").decode(),
        "height": "55",
    }}})

    response = rpc.abci_query("/some/path", b"\x01\x02")

    params = requests_mock.last_request.json()["params"]
    assert params == {"path": "/some/path", "data": "0102", "height": "0", "prove": False}
    assert response.ok
    assert response.value == b"\x0a\x01x"
    assert response.height == 55


def test_abci_query_failure_fields(rpc, requests_mock):
    requests_mock.post(TEST_RPC_URL, json={"jsonrpc": "2.0", "id": 1, "result": {"response": {
        "code": 22, "log": "key not found", "codespace": "sdk",
    }}})

    response = rpc.abci_query("/p", b"")
    assert not response.ok
    assert response.code == 22
    assert response.codespace == "sdk"
    assert response.value == b""


def test_abci_query_missing_response(rpc, requests_mock):
    requests_mock.post(TEST_RPC_URL, json={"jsonrpc": "2.0", "id": 1, "result": {}})

    with pytest.raises(DecodeError):
        rpc.abci_query("/p", b"")


def test_broadcast_encodes_base64(rpc, requests_mock):
    requests_mock.post(TEST_RPC_URL, json={"jsonrpc": "2.0", "id": 1, "result": {"hash": "AB"}})

    assert rpc.broadcast_tx_commit(b"\xff\x00tx") == {"hash": "AB"}
    assert requests_mock.last_request.json()["params"] == {"tx": base64.b64encode(b"\xff\x00tx").decode()}


def test_custom_session_is_used(requests_mock):
    session = requests.Session()
    session.headers["X-Api-Key"] = "secret"
    requests_mock.post(TEST_RPC_URL, json={"jsonrpc": "2.0", "id": 1, "result": {}})

    TendermintRpc(TEST_RPC_URL, session=session).status()
    assert requests_mock.last_request.headers["X-Api-Key"] == "secret"


def test_close_only_closes_own_session():
    session = MagicMock(spec=requests.Session)
    TendermintRpc(TEST_RPC_URL, session=session).close()
    session.close.assert_not_called()

    with patch.object(requests.Session, "close") as mock_close:
        TendermintRpc(TEST_RPC_URL).close()
    mock_close.assert_called_once()


def test_decode_base64_helpers():
    assert decode_base64(None, "f") == b""
    assert decode_base64("aGk=", "f") == b"hi"
    with pytest.raises(DecodeError, match="'f'"):
        decode_base64("!!!", "f")


def test_to_int_helpers():
    assert to_int("42", "h") == 42
    assert to_int(None, "h") == 0
    with pytest.raises(DecodeError, match="'h'"):
        to_int("forty", "h")
