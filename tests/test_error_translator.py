"""Tests for translating failed exchanges into GravityRecEngError."""

import pytest

from recengclient.adapters.error_translator import (
    RESPONSE_DECODE_ERROR,
    decode_failure,
    raise_for_error_response,
    render_request_body,
)
from recengclient.adapters.json_codec import JsonCodec
from recengclient.core.domain.models import Item, RecEngErrorPayload
from recengclient.core.exceptions import GravityRecEngError, RecEngClientError

from conftest import ENDPOINT

codec = JsonCodec()
URL = f"{ENDPOINT}/addItems?method=addItems&async=false"


def test_structured_error_body_is_raised_as_is(client, engine):
    """Test that a 500 with a well-formed error payload keeps message and code exactly."""
    engine.respond(500, json_body={"message": "Unknown scenario: FOO", "errorCode": "ERR_SCENARIO"})

    with pytest.raises(GravityRecEngError) as excinfo:
        client.get_scenario_information()

    error = excinfo.value
    assert error.message == "Unknown scenario: FOO"
    assert error.error_code == "ERR_SCENARIO"
    assert error.status_code == 500
    assert error.error == RecEngErrorPayload(message="Unknown scenario: FOO", error_code="ERR_SCENARIO")
    assert str(error) == "[ERR_SCENARIO] Unknown scenario: FOO"


def test_non_json_error_body_is_synthesized(client, engine):
    """Test that a 500 with a non-JSON body embeds status, URL and raw body."""
    engine.respond(500, text="<html><body>Internal Server Error</body></html>")

    with pytest.raises(GravityRecEngError) as excinfo:
        client.add_items([Item(item_id="i1")])

    error = excinfo.value
    assert "500" in error.message
    assert str(engine.last_request.url) in error.message
    assert "<html><body>Internal Server Error</body></html>" in error.message
    assert '"itemId":"i1"' in error.message
    assert error.error_code == "HTTP_500"


@pytest.mark.parametrize("body", [None, "", "{}", '{"errorCode": "X"}', "[1, 2, 3]"])
def test_unusable_error_payloads_are_synthesized(body):
    with pytest.raises(GravityRecEngError) as excinfo:
        raise_for_error_response(
            status_code=503,
            url=URL,
            response_text=body,
            request_body=None,
            codec=codec,
        )

    assert excinfo.value.error_code == "HTTP_503"
    assert URL in excinfo.value.message
    assert "Request body: null" in excinfo.value.message


def test_error_without_code_is_still_structured():
    with pytest.raises(GravityRecEngError) as excinfo:
        raise_for_error_response(
            status_code=401,
            url=URL,
            response_text='{"message": "Bad credentials", "details": "ignored"}',
            request_body=None,
            codec=codec,
        )

    assert excinfo.value.message == "Bad credentials"
    assert excinfo.value.error_code is None
    assert str(excinfo.value) == "Bad credentials"


def test_request_body_rendering():
    assert render_request_body(None, codec) == "null"
    assert render_request_body("joe", codec) == '"joe"'
    assert render_request_body([Item(item_id="a"), Item(item_id="b")], codec).startswith('[{"itemId":"a"')
    assert render_request_body([], codec) == "[]"


def test_error_hierarchy():
    error = GravityRecEngError(RecEngErrorPayload(message="boom"))

    assert isinstance(error, RecEngClientError)
    assert error.status_code is None


def test_decode_failure_carries_status_url_request_and_response():
    cause = ValueError("bad shape")

    error = decode_failure(
        status_code=200,
        url=URL,
        response_text="<html/>",
        request_body=[Item(item_id="i7")],
        codec=codec,
        cause=cause,
    )

    assert error.status_code == 200
    assert error.error_code == RESPONSE_DECODE_ERROR
    assert URL in error.message
    assert "ValueError" in error.message
    assert 'Request body: [{"itemId":"i7"' in error.message
    assert error.message.endswith("Response body: <html/>")
