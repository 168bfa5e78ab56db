"""Tests for request encoding and response decoding."""

import io
from typing import Optional

import pytest
from pydantic import BaseModel

from gqlhttp.codec import decode_response, encode_request
from gqlhttp.errors import DecodeError, SerializationError
from gqlhttp.models import DataResult, Error, ErrorsResult, Location, Request, ResponseKind


class Foo(BaseModel):
    foo: str


class FooWithOptional(BaseModel):
    foo: str
    bar: Optional[int] = None


MULTILINE_QUERY = " {\n   foo\n }"


# ---------------------------------------------------------------------------
# encode_request
# ---------------------------------------------------------------------------

class TestEncodeRequest:
    def test_without_operation_name(self):
        body = encode_request(Request(query=MULTILINE_QUERY))
        assert body == b'{"query":" {\\n   foo\\n }"}'

    def test_with_operation_name(self):
        body = encode_request(Request(query=MULTILINE_QUERY, operationName="foo"))
        assert body == b'{"query":" {\\n   foo\\n }","operationName":"foo"}'

    def test_newlines_are_escaped(self):
        body = encode_request(Request(query="query {\n  viewer\n}"))
        assert b"\n" not in body
        assert b"\\n" in body

    def test_operation_name_never_null(self):
        body = encode_request(Request(query="{ a }", operationName=None))
        assert b"operationName" not in body
        assert b"null" not in body

    def test_writes_to_sink(self):
        sink = io.BytesIO()
        body = encode_request(Request(query="{ a }"), sink=sink)
        assert sink.getvalue() == body

    def test_failing_sink(self):
        sink = io.BytesIO()
        sink.close()
        with pytest.raises(SerializationError):
            encode_request(Request(query="{ a }"), sink=sink)


# ---------------------------------------------------------------------------
# decode_response
# ---------------------------------------------------------------------------

class TestDecodeResponse:
    def test_data(self):
        owned = decode_response(b'{\n  "data": {\n    "foo": "success"\n  }\n}', Foo)
        try:
            assert owned.value.result() == DataResult(Foo(foo="success"))
            assert owned.value.kind is ResponseKind.DATA_ONLY
        finally:
            owned.release()

    def test_errors(self):
        body = b'{"errors": [{"message": "err", "path": ["foo","bar"]}]}'
        with decode_response(body, Foo) as response:
            assert response.result() == ErrorsResult([Error(message="err", path=["foo", "bar"])])
            assert response.kind is ResponseKind.ERRORS_ONLY

    def test_error_locations_and_extensions(self):
        body = (
            b'{"errors": [{"message": "bad", "locations": [{"line": 2, "column": 3}],'
            b' "extensions": {"code": "GRAPHQL_VALIDATION_FAILED"}}]}'
        )
        with decode_response(body, Foo) as response:
            err = response.errors[0]
            assert err.locations == [Location(line=2, column=3)]
            assert err.extensions == {"code": "GRAPHQL_VALIDATION_FAILED"}
            assert err.path is None

    def test_error_order_preserved(self):
        body = b'{"errors": [{"message": "one"}, {"message": "two"}, {"message": "three"}]}'
        with decode_response(body, Foo) as response:
            assert [e.message for e in response.errors] == ["one", "two", "three"]

    def test_integer_path_segments(self):
        body = b'{"errors": [{"message": "err", "path": ["items", 0, "name"]}]}'
        with decode_response(body, Foo) as response:
            assert response.errors[0].path == ["items", 0, "name"]

    def test_data_takes_precedence_over_errors(self):
        body = b'{"data": {"foo": "partial"}, "errors": [{"message": "err"}]}'
        with decode_response(body, Foo) as response:
            assert response.kind is ResponseKind.DATA_AND_ERRORS
            assert response.result() == DataResult(Foo(foo="partial"))

    def test_null_data_with_errors(self):
        body = b'{"data": null, "errors": [{"message": "err"}]}'
        with decode_response(body, Foo) as response:
            assert isinstance(response.result(), ErrorsResult)

    def test_unknown_fields_ignored(self):
        body = (
            b'{"data": {"foo": "success", "extra": 1}, "extensions": {"cost": 3},'
            b' "errors": [{"message": "err", "unknown": true}]}'
        )
        with decode_response(body, Foo) as response:
            assert response.data == Foo(foo="success")
            assert response.errors[0].message == "err"

    def test_missing_required_field(self):
        with pytest.raises(DecodeError):
            decode_response(b'{"data": {"other": "x"}}', Foo)

    def test_missing_optional_field(self):
        with decode_response(b'{"data": {"foo": "x"}}', FooWithOptional) as response:
            assert response.data.bar is None

    def test_invalid_json(self):
        with pytest.raises(DecodeError):
            decode_response(b"<html>oops</html>", Foo)

    @pytest.mark.parametrize("body", [b"{}", b'{"data": null}', b'{"data": null, "errors": null}'])
    def test_neither_data_nor_errors(self, body):
        with pytest.raises(DecodeError, match="neither data nor errors"):
            decode_response(body, Foo)

    def test_scalar_shape(self):
        with decode_response('{"data": 42}', int) as response:
            assert response.result() == DataResult(42)

    def test_dict_shape(self):
        with decode_response(b'{"data": {"a": {"b": [1, 2]}}}', dict) as response:
            assert response.data == {"a": {"b": [1, 2]}}
