"""
Tests for read-only smart contract queries.
"""
from typing import List

import pytest
from pydantic import BaseModel

from rwa_sdk import proto
from rwa_sdk.exceptions import DecodeError, EncodingError, NotFound, QueryError
from rwa_sdk.query import QueryExecutor
from rwa_sdk.rpc import TendermintRpc
from tests.test_helpers import TEST_RPC_URL, TEST_TOKEN


class Supply(BaseModel):
    total: int


@pytest.fixture
def executor(chain):
    return QueryExecutor(TendermintRpc(TEST_RPC_URL))


def test_query_sends_smart_state_request(executor, chain, requests_mock):
    chain.add_contract(TEST_TOKEN, lambda message: {"total": 5})

    executor.query(TEST_TOKEN, {"supply": {}})

    params = requests_mock.last_request.json()["params"]
    assert params["path"] == "/cosmwasm.wasm.v1.Query/SmartContractState"
    request = proto.QuerySmartContractStateRequest.FromString(bytes.fromhex(params["data"]))
    assert request.address == TEST_TOKEN
    assert request.query_data == b'{"supply":{}}'


def test_query_without_type_returns_json(executor, chain):
    chain.add_contract(TEST_TOKEN, lambda message: {"total": 5, "holders": ["a"]})

    assert executor.query(TEST_TOKEN, {"supply": {}}) == {"total": 5, "holders": ["a"]}


def test_query_with_type(executor, chain):
    chain.add_contract(TEST_TOKEN, lambda message: {"total": 5})

    assert executor.query(TEST_TOKEN, {"supply": {}}, Supply) == Supply(total=5)


def test_query_list_type(executor, chain):
    chain.add_contract(TEST_TOKEN, lambda message: [{"total": 1}, {"total": 2}])

    assert executor.query(TEST_TOKEN, {"all": {}}, List[Supply]) == [Supply(total=1), Supply(total=2)]


def test_identical_queries_identical_requests(executor, chain, requests_mock):
    """Queries are not cached and the same message yields the same request and answer"""
    chain.add_contract(TEST_TOKEN, lambda message: {"total": 5})

    first = executor.query(TEST_TOKEN, {"supply": {}}, Supply)
    second = executor.query(TEST_TOKEN, {"supply": {}}, Supply)

    assert first == second
    history = [r.json()["params"]["data"] for r in requests_mock.request_history]
    assert len(history) == 2
    assert history[0] == history[1]


def test_unknown_contract_is_not_found(executor):
    with pytest.raises(NotFound):
        executor.query("cosmos1nocontract", {"supply": {}})


def test_contract_error_is_query_error(executor, chain):
    chain.add_contract(TEST_TOKEN, lambda message: ValueError("unknown variant `supply`"))

    with pytest.raises(QueryError) as exc_info:
        executor.query(TEST_TOKEN, {"supply": {}})
    assert exc_info.value.code == 5
    assert exc_info.value.codespace == "wasm"
    assert "unknown variant" in exc_info.value.log


def test_invalid_json_answer(executor, chain):
    chain.add_contract(TEST_TOKEN, lambda message: b"{not json")

    with pytest.raises(DecodeError):
        executor.query(TEST_TOKEN, {"supply": {}})


def test_answer_of_wrong_shape(executor, chain):
    chain.add_contract(TEST_TOKEN, lambda message: {"unexpected": True})

    with pytest.raises(DecodeError):
        executor.query(TEST_TOKEN, {"supply": {}}, Supply)


def test_malformed_envelope(executor, requests_mock):
    requests_mock.post(TEST_RPC_URL, json={"jsonrpc": "2.0", "id": 1, "result": {"response": {
        "code": 0, "value": "/////w==",
    }}})

    with pytest.raises(DecodeError):
        executor.query_raw(TEST_TOKEN, {"supply": {}})


def test_unserializable_query(executor):
    with pytest.raises(EncodingError):
        executor.query(TEST_TOKEN, {"supply": object()})


def test_query_raw_returns_bytes(executor, chain):
    chain.add_contract(TEST_TOKEN, lambda message: b'{"raw":1}')

    assert executor.query_raw(TEST_TOKEN, {"x": {}}) == b'{"raw":1}'
