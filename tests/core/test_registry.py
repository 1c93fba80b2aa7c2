"""Registry: tests for operation discovery and lookup.

Tests cover:
    - The fixed catalog (names, paths, models, ordering)
    - Pairing rules: paths without request ignored, missing response defaulted
    - Lookup errors for unknown operations
    - Request/response validation helpers
"""

import pytest
from pydantic import ValidationError

from arkrpc.core.domain.schemas import (
    ANameRequest,
    ANameResponse,
    DingDTO,
    EinsRequest,
    EinsResponse,
    ListenRequest,
    ListenResponse,
    RpcShape,
    ZweiRequest,
    ZweiResponse,
)
from arkrpc.core.registry import (
    DTOS,
    OPERATIONS,
    EmptyResponse,
    UnknownOperationError,
    collect_dtos,
    collect_operations,
    get_operation,
    validate_request,
    validate_response,
)


def test_catalog_has_the_four_operations_in_request_name_order():
    assert [(op.name, op.path) for op in OPERATIONS] == [
        ("a_name", "/a_name"),
        ("eins", "/eins"),
        ("listen", "/listen"),
        ("zwei", "/zwei"),
    ]


def test_catalog_pairs_request_and_response_models():
    pairs = {op.name: (op.request_model, op.response_model) for op in OPERATIONS}
    assert pairs == {
        "a_name": (ANameRequest, ANameResponse),
        "eins": (EinsRequest, EinsResponse),
        "listen": (ListenRequest, ListenResponse),
        "zwei": (ZweiRequest, ZweiResponse),
    }


def test_paths_are_unique():
    paths = [op.path for op in OPERATIONS]
    assert len(paths) == len(set(paths))


def test_dtos_are_not_operations():
    assert DTOS == (DingDTO,)
    assert "ding" not in {op.name for op in OPERATIONS}


def test_collect_ignores_path_without_request():
    class OhneRequestResponse(RpcShape):
        pass

    ops = collect_operations(
        {"OHNE_REQUEST_PATH": "/ohne_request", "OhneRequestResponse": OhneRequestResponse}
    )
    assert ops == ()


def test_collect_ignores_models_without_path():
    class OhnePathRequest(RpcShape):
        pass

    class OhnePathResponse(RpcShape):
        pass

    ops = collect_operations({"OhnePathRequest": OhnePathRequest, "OhnePathResponse": OhnePathResponse})
    assert ops == ()


def test_collect_ignores_non_string_path_constants():
    class BadRequest(RpcShape):
        pass

    assert collect_operations({"BAD_PATH": 42, "BadRequest": BadRequest}) == ()


def test_collect_defaults_missing_response_to_empty_shape():
    class PingRequest(RpcShape):
        pass

    (op,) = collect_operations({"PING_PATH": "/ping", "PingRequest": PingRequest})
    assert op.name == "ping"
    assert op.response_model is EmptyResponse


def test_collect_rejects_duplicate_paths():
    class FooRequest(RpcShape):
        pass

    class BarRequest(RpcShape):
        pass

    with pytest.raises(ValueError, match="duplicate"):
        collect_operations(
            {"FOO_PATH": "/same", "FooRequest": FooRequest, "BAR_PATH": "/same", "BarRequest": BarRequest}
        )


def test_collect_dtos_sorted_by_name():
    class ZetaDTO(RpcShape):
        pass

    class AlphaDTO(RpcShape):
        pass

    assert collect_dtos({"ZetaDTO": ZetaDTO, "AlphaDTO": AlphaDTO, "NotADto": 1}) == (AlphaDTO, ZetaDTO)


def test_get_operation_returns_descriptor():
    op = get_operation("eins")
    assert op.path == "/eins"
    assert op.request_model is EinsRequest


def test_get_operation_unknown_name_raises_key_error():
    with pytest.raises(UnknownOperationError) as excinfo:
        get_operation("drei")
    assert isinstance(excinfo.value, KeyError)
    assert str(excinfo.value) == "unknown operation 'drei'"


def test_validate_request_accepts_absent_optionals():
    req = validate_request("zwei", {})
    assert isinstance(req, ZweiRequest)
    assert req.optional_string is None


def test_validate_request_rejects_bad_shape():
    with pytest.raises(ValidationError):
        validate_request("a_name", {"msg": ""})


def test_validate_response_builds_model():
    resp = validate_response("eins", {"responseString": "ok"})
    assert resp == EinsResponse(response_string="ok")


def test_describe_exposes_wire_field_names():
    described = get_operation("eins").describe()
    assert described["path"] == "/eins"
    assert set(described["request"]["properties"]) == {
        "requiredString",
        "optionalString",
        "requiredInt",
        "optionalInt",
        "requiredBool",
        "optionalBool",
    }
    assert set(described["request"]["required"]) == {"requiredString", "requiredInt", "requiredBool"}
