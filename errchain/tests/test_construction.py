"""Constructors: new, wrap, wrap_with_operation."""

from __future__ import annotations

import pytest

from errchain.errors import (
    ChainError,
    ErrorCode,
    ErrorOptions,
    GENERIC_MESSAGE,
    new,
    resolve_code,
    resolve_message,
    resolve_operation,
    with_cause,
    with_operation,
    wrap,
    wrap_with_operation,
)


def _facets(err):
    return resolve_code(err), resolve_message(err), resolve_operation(err)


def test_new_sets_fields():
    operation = "TestNew"
    err = new(ErrorCode.CONFLICT, "An error message", operation=operation)

    assert isinstance(err, ChainError)
    assert isinstance(err, Exception)
    assert err.code is ErrorCode.CONFLICT
    assert err.message == "An error message"
    assert err.operation == operation
    assert err.cause is None


def test_new_without_options_leaves_zero_values():
    err = new(ErrorCode.NOT_FOUND, "")
    assert err.operation == ""
    assert err.cause is None
    assert err.message == ""


def test_new_accepts_option_values_and_skips_none():
    cause = ValueError("inner")
    err = new(ErrorCode.ABORTED, "m", with_operation("op1"), None, with_cause(cause))
    assert err.operation == "op1"
    assert err.cause is cause


def test_keyword_options_override_option_values():
    err = new(ErrorCode.ABORTED, "m", ErrorOptions(operation="from_opts"), operation="from_kw")
    assert err.operation == "from_kw"


def test_new_accepts_unknown_integer_codes():
    err = new(1234, "odd")
    assert err.code == 1234
    assert resolve_code(err) == 1234


def test_new_links_native_cause():
    cause = KeyError("k")
    err = new(ErrorCode.NOT_FOUND, "missing", cause=cause)
    assert err.__cause__ is cause


@pytest.mark.parametrize(
    "err",
    [
        new(ErrorCode.NOT_FOUND, "row missing", operation="db.get"),
        ChainError(operation="top", cause=new(ErrorCode.CONFLICT, "dup")),
        ValueError("foreign"),
        ChainError(),
    ],
)
def test_wrap_preserves_resolved_facets(err):
    wrapped = wrap(err)
    assert wrapped.cause is err
    assert _facets(wrapped) == _facets(err)


def test_wrap_with_operation_forces_operation():
    a = new(ErrorCode.CONFLICT, "An error message", operation="TestNew")
    b = wrap_with_operation("TestWrap", a)

    assert b.cause is a
    assert resolve_operation(b) == "TestWrap"
    assert resolve_code(b) is ErrorCode.CONFLICT
    assert resolve_message(b) == "An error message"


def test_wrap_foreign_error_copies_defaults():
    foreign = RuntimeError("db password is hunter2")
    wrapped = wrap_with_operation("repo.save", foreign)
    assert wrapped.code is ErrorCode.INTERNAL
    assert wrapped.message == GENERIC_MESSAGE
    assert wrapped.operation == "repo.save"
    assert wrapped.cause is foreign


def test_wrap_none_is_total():
    wrapped = wrap(None)
    assert wrapped.cause is None
    assert wrapped.code is ErrorCode.OK
    assert wrapped.message == ""
    assert resolve_code(wrapped) is ErrorCode.INTERNAL


def test_each_layer_stamps_its_operation():
    err = new(ErrorCode.UNAVAILABLE, "upstream down", operation="client.fetch")
    err = wrap_with_operation("service.load", err)
    err = wrap_with_operation("handler.get", err)
    assert resolve_operation(err) == "handler.get"
    assert resolve_code(err) is ErrorCode.UNAVAILABLE
    assert resolve_operation(err.cause.cause) == "client.fetch"


def test_chain_error_can_be_raised_and_caught():
    with pytest.raises(ChainError) as info:
        raise wrap_with_operation("outer", new(ErrorCode.NOT_FOUND, "nope"))
    assert resolve_code(info.value) is ErrorCode.NOT_FOUND


def test_error_options_merge():
    base = ErrorOptions(operation="a", cause=None)
    cause = OSError()
    merged = base.merge(ErrorOptions(cause=cause))
    assert merged.operation == "a"
    assert merged.cause is cause
    assert base.merge(None) is base
