"""Error Hierarchy - ErrorInfo bridge and REST envelope."""

import dataclasses

import pytest

from customer_api.core.domain_types import OK, ErrorInfo, ErrorType
from customer_api.core.errors import (
    BadInputError,
    ErrorContext,
    ResourceNotFoundError,
    UnexpectedError,
    error_from_info,
    raise_for_error,
)


def test_error_info_ok_flag():
    assert OK.is_ok
    assert not ErrorInfo.bad_input("nope", "pageSize").is_ok


def test_bad_input_maps_to_400_with_field():
    exc = error_from_info(ErrorInfo.bad_input("pageSize too big", "pageSize"))
    assert isinstance(exc, BadInputError)
    assert exc.http_status == 400
    body = exc.to_response()["error"]
    assert body["code"] == "BAD_INPUT"
    assert body["context"]["field"] == "pageSize"


def test_not_found_maps_to_404_with_resource_id():
    exc = error_from_info(ErrorInfo.not_found("gone", "customerId", "42"))
    assert isinstance(exc, ResourceNotFoundError)
    assert exc.http_status == 404
    assert exc.message == "Customer '42' not found"
    assert exc.to_response()["error"]["context"]["resource_id"] == "42"


def test_unexpected_maps_to_500():
    exc = error_from_info(ErrorInfo(ErrorType.UNEXPECTED, "boom"))
    assert isinstance(exc, UnexpectedError)
    assert exc.http_status == 500


def test_error_from_ok_is_a_programming_error():
    with pytest.raises(ValueError):
        error_from_info(OK)


def test_raise_for_error_is_noop_for_ok():
    raise_for_error(OK)


def test_raise_for_error_raises_mapped_exception():
    with pytest.raises(BadInputError):
        raise_for_error(ErrorInfo.bad_input("bad"))


def test_error_context_holds_only_envelope_fields():
    names = {f.name for f in dataclasses.fields(ErrorContext)}
    assert names == {"timestamp", "field", "resource_id"}
    context = UnexpectedError("boom").to_response()["error"]["context"]
    assert context == {"field": None, "resource_id": None}
