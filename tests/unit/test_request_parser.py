# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging

import pytest

from restspec.document import JsonDocument
from restspec.errors import MissingFieldError, RequestConfigError
from restspec.http.auth import ApiKeyAuth, BasicAuth, BearerAuth, NoAuth
from restspec.http.enums import ApiKeyLocation, ContentType, HttpMethod
from restspec.http.parser import (
    parse_auth_document,
    parse_request_builder,
    parse_request_document,
    parse_request_json,
)


class RecordingSink:
    def __init__(self):
        self.debugs = []
        self.warnings = []

    def debug(self, msg, *args):
        self.debugs.append(msg % args if args else msg)

    def warning(self, msg, *args):
        self.warnings.append(msg % args if args else msg)


def test_full_document():
    spec = parse_request_document(
        {
            "url": " https://api.example.com/items ",
            "method": "post",
            "headers": {"X-Trace": "abc", "X-Count": 3, "X-Flag": True},
            "queryParams": {"page": 2},
            "body": {"name": "widget", "tags": ["a", "b"]},
            "contentType": "application/json; charset=utf-8",
            "auth": {"authType": "basic", "username": "user", "password": "pass"},
            "timeoutMs": 5000,
            "followRedirects": False,
            "verifySsl": False,
        }
    )
    assert spec.url == "https://api.example.com/items"
    assert spec.method is HttpMethod.POST
    assert dict(spec.headers) == {"X-Trace": "abc", "X-Count": "3", "X-Flag": "true"}
    assert dict(spec.query_params) == {"page": "2"}
    assert spec.body == '{"name":"widget","tags":["a","b"]}'
    assert spec.content_type is ContentType.JSON
    assert spec.auth == BasicAuth("user", "pass", True)
    assert spec.timeout_ms == 5000
    assert spec.follow_redirects is False
    assert spec.verify_ssl is False


@pytest.mark.parametrize("document", [{}, {"url": None}, {"url": "   "}, {"url": {}}, [1, 2]])
def test_missing_url_is_fatal(document):
    with pytest.raises(MissingFieldError) as excinfo:
        parse_request_document(document)
    assert "url" in str(excinfo.value)


def test_null_document_is_fatal():
    with pytest.raises(RequestConfigError):
        parse_request_document(None)


@pytest.mark.parametrize("timeout", [-5, 0, 0.5, float("inf"), "1000", True, None, {"ms": 1}])
def test_malformed_timeout_and_missing_method_use_defaults(timeout):
    spec = parse_request_document({"url": "http://x", "timeoutMs": timeout})
    assert spec.timeout_ms == 30000
    assert spec.method is HttpMethod.GET


def test_fractional_timeout_is_truncated():
    assert parse_request_document({"url": "http://x", "timeoutMs": 1500.9}).timeout_ms == 1500


@pytest.mark.parametrize("method", ["FETCH", 42, "", None, ["POST"]])
def test_unknown_method_is_silently_ignored(method):
    sink = RecordingSink()
    spec = parse_request_document({"url": "http://x", "method": method}, log=sink)
    assert spec.method is HttpMethod.GET
    assert sink.warnings == []


def test_method_is_case_insensitive():
    assert parse_request_document({"url": "http://x", "method": "dElEtE"}).method is HttpMethod.DELETE


def test_non_object_maps_are_treated_as_absent():
    spec = parse_request_document({"url": "http://x", "headers": "A: 1", "queryParams": [["a", "1"]]})
    assert dict(spec.headers) == {}
    assert dict(spec.query_params) == {}


def test_map_values_are_coerced_to_text():
    spec = parse_request_document({"url": "http://x", "headers": {"n": None, "f": 1.5, "o": {"x": 1}}})
    assert dict(spec.headers) == {"n": "null", "f": "1.5", "o": ""}


@pytest.mark.parametrize(
    "body, expected",
    [
        ([1, {"a": None}], '[1,{"a":null}]'),
        ("raw text", "raw text"),
        (12, "12"),
        (False, "false"),
        (None, None),
    ],
)
def test_body_handling(body, expected):
    assert parse_request_document({"url": "http://x", "body": body}).body == expected


@pytest.mark.parametrize("content_type", ["application/yaml", 7, None, ""])
def test_unknown_content_type_defaults_to_json(content_type):
    spec = parse_request_document({"url": "http://x", "contentType": content_type})
    assert spec.content_type is ContentType.JSON


def test_known_content_type():
    spec = parse_request_document({"url": "http://x", "contentType": "application/x-www-form-urlencoded"})
    assert spec.content_type is ContentType.FORM_URLENCODED


@pytest.mark.parametrize("value", ["false", 0, None, "yes"])
def test_flags_accept_only_booleans(value):
    spec = parse_request_document({"url": "http://x", "followRedirects": value, "verifySsl": value})
    assert spec.follow_redirects is True
    assert spec.verify_ssl is True


def test_auth_variants():
    assert parse_auth_document({"authType": "bearer", "token": "T"}) == BearerAuth("T")
    assert parse_auth_document({"authType": "none"}) == NoAuth()
    assert parse_auth_document({"authType": "apiKey", "keyName": "k", "keyValue": "v", "location": "queryParam"}) == (
        ApiKeyAuth("k", "v", ApiKeyLocation.QUERY_PARAM)
    )
    assert parse_auth_document({"authType": "API_KEY", "keyValue": "v"}) == ApiKeyAuth("X-API-Key", "v")
    assert parse_auth_document({"authType": "basic", "username": "u", "preemptive": False}) == BasicAuth("u", "", False)


@pytest.mark.parametrize(
    ("value", "expected"),
    [("false", False), (" true ", True), (0, False), (1, True), (0.0, False), ("TRUE", True), ("yes", True), (None, True)],
)
def test_preemptive_flag_reads_text_and_numbers(value, expected):
    auth = parse_auth_document({"authType": "basic", "username": "u", "preemptive": value})
    assert auth.preemptive is expected


@pytest.mark.parametrize("node", [None, {}, "bearer", [], {"token": "T"}])
def test_absent_or_untyped_auth_is_none(node):
    sink = RecordingSink()
    assert parse_auth_document(node, log=sink) == NoAuth()
    assert sink.warnings == []


def test_unknown_auth_type_warns_and_falls_back():
    sink = RecordingSink()
    spec = parse_request_document({"url": "http://x", "auth": {"authType": "kerberos"}}, log=sink)
    assert spec.auth == NoAuth()
    assert len(sink.warnings) == 1
    assert "kerberos" in sink.warnings[0]


def test_unknown_auth_type_logs_through_module_logger_by_default(caplog):
    with caplog.at_level(logging.WARNING, logger="restspec.http.parser"):
        spec = parse_request_document({"url": "http://x", "auth": {"authType": "digest"}})
    assert spec.auth == NoAuth()
    assert any("digest" in record.getMessage() for record in caplog.records)


def test_accepts_document_nodes():
    spec = parse_request_document(JsonDocument.loads('{"url": "http://x", "method": "PUT"}'))
    assert spec.method is HttpMethod.PUT


def test_parse_request_builder_allows_further_staging():
    builder = parse_request_builder({"url": "http://x"})
    spec = builder.header("X-Extra", "1").build()
    assert dict(spec.headers) == {"X-Extra": "1"}


def test_parse_request_json():
    spec = parse_request_json('{"url": "http://x", "auth": {"authType": "bearer", "token": "T"}}')
    assert spec.auth == BearerAuth("T")
    with pytest.raises(RequestConfigError):
        parse_request_json("{not json")
