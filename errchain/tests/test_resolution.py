"""Resolution of code, message and operation across wrap chains."""

from __future__ import annotations

import pytest

from errchain.errors import (
    ChainError,
    ErrorCode,
    GENERIC_MESSAGE,
    iter_chain,
    new,
    resolve_code,
    resolve_message,
    resolve_operation,
)


class _Opaque(Exception):
    pass


def test_absent_error_resolves_to_empty_facets():
    assert resolve_code(None) is ErrorCode.OK
    assert resolve_message(None) == ""
    assert resolve_operation(None) == ""


@pytest.mark.parametrize("foreign", [ValueError("secret detail"), _Opaque(), KeyError("k")])
def test_foreign_errors_degrade_to_defaults(foreign):
    assert resolve_code(foreign) is ErrorCode.INTERNAL
    assert resolve_message(foreign) == GENERIC_MESSAGE
    assert resolve_operation(foreign) == ""


def test_scenario_resolve_code():
    err = new(ErrorCode.INVALID_ARGUMENT, "An invalid error", operation="TestErrorCode")
    assert resolve_code(err) is ErrorCode.INVALID_ARGUMENT
    assert int(resolve_code(err)) == 3


def test_scenario_resolve_message():
    err = new(ErrorCode.NOT_FOUND, "A not found error", operation="TestErrorMessage")
    assert resolve_message(err) == "A not found error"


def test_ok_code_delegates_to_cause():
    inner = new(ErrorCode.DATA_LOSS, "disk gone")
    outer = ChainError(code=ErrorCode.OK, cause=inner)
    assert resolve_code(outer) == resolve_code(inner) == ErrorCode.DATA_LOSS


def test_ok_code_without_cause_is_internal():
    assert resolve_code(ChainError()) is ErrorCode.INTERNAL
    assert resolve_code(new(ErrorCode.OK, "fine?")) is ErrorCode.INTERNAL


def test_ok_code_over_foreign_cause_is_internal():
    node = ChainError(cause=RuntimeError("boom"))
    assert resolve_code(node) is ErrorCode.INTERNAL
    assert resolve_message(node) == GENERIC_MESSAGE
    assert resolve_operation(node) == ""


def test_first_explicit_value_wins_walking_inwards():
    root = new(ErrorCode.NOT_FOUND, "row missing", operation="db.get")
    middle = ChainError(code=ErrorCode.UNAVAILABLE, cause=root)
    top = ChainError(operation="api.handler", cause=middle)

    assert resolve_code(top) is ErrorCode.UNAVAILABLE
    assert resolve_message(top) == "row missing"
    assert resolve_operation(top) == "api.handler"
    assert resolve_operation(middle) == "db.get"


def test_message_fallback_when_chain_has_no_message():
    node = ChainError(code=ErrorCode.CONFLICT, cause=ChainError(code=ErrorCode.ABORTED))
    assert resolve_message(node) == GENERIC_MESSAGE


def test_operation_has_no_fallback_text():
    node = ChainError(code=ErrorCode.CONFLICT, message="m", cause=ChainError(message="x"))
    assert resolve_operation(node) == ""


def test_out_of_range_code_is_treated_as_explicit():
    node = ChainError(code=99, cause=new(ErrorCode.NOT_FOUND, "x"))
    assert resolve_code(node) == 99


def test_deep_chain_resolves_without_recursion_limit():
    node = new(ErrorCode.NOT_FOUND, "leaf", operation="leaf_op")
    for _ in range(5000):
        node = ChainError(cause=node)
    assert resolve_code(node) is ErrorCode.NOT_FOUND
    assert resolve_message(node) == "leaf"
    assert resolve_operation(node) == "leaf_op"


def test_iter_chain_order_ends_with_foreign_cause():
    foreign = OSError("io")
    inner = new(ErrorCode.UNAVAILABLE, "down", cause=foreign)
    outer = ChainError(operation="outer", cause=inner)
    assert list(iter_chain(outer)) == [outer, inner, foreign]
    assert list(iter_chain(None)) == []
    assert list(iter_chain(foreign)) == [foreign]
