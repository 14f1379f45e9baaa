# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import copy
import json
import pickle

import pytest

from restspec.errors import BuilderFinalizedError, MissingFieldError, RequestConfigError
from restspec.http.auth import ApiKeyAuth, BasicAuth, BearerAuth, NoAuth
from restspec.http.builder import RequestBuilder
from restspec.http.enums import ApiKeyLocation, ContentType, HttpMethod
from restspec.http.models import DEFAULT_TIMEOUT_MS, RequestSpec


def test_build_applies_defaults():
    spec = RequestSpec.builder("  https://api.example.com/items  ").build()
    assert spec.url == "https://api.example.com/items"
    assert spec.method is HttpMethod.GET
    assert dict(spec.headers) == {}
    assert dict(spec.query_params) == {}
    assert spec.body is None
    assert spec.content_type is ContentType.JSON
    assert spec.auth == NoAuth()
    assert spec.timeout_ms == DEFAULT_TIMEOUT_MS == 30000
    assert spec.follow_redirects is True
    assert spec.verify_ssl is True


@pytest.mark.parametrize("url", [None, "", "   "])
def test_build_rejects_missing_url(url):
    builder = RequestBuilder(url).post().body("x")
    with pytest.raises(MissingFieldError) as excinfo:
        builder.build()
    assert excinfo.value.field == "url"
    assert isinstance(excinfo.value, RequestConfigError)
    assert builder.is_built is False


def test_direct_construction_validates_too():
    with pytest.raises(MissingFieldError):
        RequestSpec(url=" ")


def test_chained_setters_return_same_builder():
    builder = RequestBuilder("http://x")
    assert builder.method(HttpMethod.PUT) is builder
    assert builder.header("A", "1").headers({"B": "2"}) is builder
    assert builder.query_param("q", "1").query_params({"r": "2"}) is builder
    assert builder.timeout(10).follow_redirects(False).verify_ssl(False) is builder


def test_full_builder_round():
    spec = (
        RequestSpec.builder("http://x")
        .patch()
        .header("X-A", "1")
        .headers({"X-B": "2"})
        .query_param("q", "v")
        .body("payload")
        .content_type(ContentType.TEXT_PLAIN)
        .bearer_auth("T")
        .timeout(1500)
        .follow_redirects(False)
        .verify_ssl(False)
        .build()
    )
    assert spec.method is HttpMethod.PATCH
    assert dict(spec.headers) == {"X-A": "1", "X-B": "2"}
    assert dict(spec.query_params) == {"q": "v"}
    assert spec.body == "payload"
    assert spec.content_type is ContentType.TEXT_PLAIN
    assert spec.auth == BearerAuth("T")
    assert spec.timeout_ms == 1500
    assert spec.follow_redirects is False
    assert spec.verify_ssl is False


@pytest.mark.parametrize("timeout", [0, -5, None, 0.5, 0.9, float("inf"), float("nan"), True])
def test_invalid_timeout_falls_back(timeout):
    assert RequestBuilder("http://x").timeout(timeout).build().timeout_ms == 30000


def test_fractional_timeout_truncates_before_the_positive_check():
    assert RequestBuilder("http://x").timeout(1500.9).build().timeout_ms == 1500
    assert RequestSpec("http://x", timeout_ms=0.9).timeout_ms == DEFAULT_TIMEOUT_MS


def test_auth_shorthands():
    assert RequestBuilder("http://x").basic_auth("u", "p").build().auth == BasicAuth("u", "p")
    api = RequestBuilder("http://x").api_key_auth("k", "v", ApiKeyLocation.QUERY_PARAM).build().auth
    assert api == ApiKeyAuth("k", "v", ApiKeyLocation.QUERY_PARAM)
    assert RequestBuilder("http://x").api_key_auth("k", "v").build().auth.location is ApiKeyLocation.HEADER


def test_json_body_is_compact_and_sets_content_type():
    spec = RequestBuilder("http://x").content_type(ContentType.XML).json_body({"a": [1, 2], "b": "é"}).build()
    assert spec.body == '{"a":[1,2],"b":"é"}'
    assert spec.content_type is ContentType.JSON


def test_json_body_rejects_unserializable():
    with pytest.raises(RequestConfigError):
        RequestBuilder("http://x").json_body({"a": object()})


def test_spec_is_snapshot_of_builder_state():
    source = {"A": "1"}
    builder = RequestBuilder("http://x").headers(source)
    spec = builder.build()
    source["B"] = "2"
    assert dict(spec.headers) == {"A": "1"}
    with pytest.raises(TypeError):
        spec.headers["C"] = "3"  # type: ignore[index]
    with pytest.raises(AttributeError):
        spec.url = "http://y"  # type: ignore[misc]


def test_builder_is_terminal_after_build():
    builder = RequestBuilder("http://x")
    spec = builder.build()
    assert builder.is_built
    assert builder.build() is spec
    with pytest.raises(BuilderFinalizedError):
        builder.header("A", "1")
    with pytest.raises(BuilderFinalizedError):
        builder.bearer_auth("T")
    assert dict(spec.headers) == {}


def test_factories():
    get = RequestSpec.get("http://x")
    assert get.method is HttpMethod.GET
    post = RequestSpec.post_json("http://x", '{"a":1}')
    assert post.method is HttpMethod.POST
    assert post.has_body
    assert post.content_type is ContentType.JSON


def test_with_changes_returns_new_value():
    spec = RequestSpec.get("http://x")
    changed = spec.with_changes(method=HttpMethod.DELETE, headers={"A": "1"})
    assert changed is not spec
    assert changed.method is HttpMethod.DELETE
    assert dict(changed.headers) == {"A": "1"}
    assert spec.method is HttpMethod.GET
    assert dict(spec.headers) == {}


def test_string_method_and_content_type_are_normalized():
    spec = RequestSpec(url="http://x", method="post", content_type="text/html; charset=utf-8")
    assert spec.method is HttpMethod.POST
    assert spec.content_type is ContentType.TEXT_HTML


def test_to_document_round_trips_through_parser():
    spec = (
        RequestSpec.builder("http://x/api")
        .post()
        .header("X-A", "1")
        .query_param("q", "v")
        .body('{"a":1}')
        .api_key_auth("k", "v", ApiKeyLocation.QUERY_PARAM)
        .timeout(2000)
        .verify_ssl(False)
        .build()
    )
    document = json.loads(json.dumps(spec.to_document()))
    assert RequestSpec.from_document(document) == spec


def test_spec_is_unhashable_but_copies_and_pickles():
    spec = (
        RequestBuilder("http://x")
        .post()
        .header("H", "1")
        .query_param("q", "2")
        .body("{}")
        .basic_auth("u", "p")
        .timeout(1200)
        .build()
    )
    with pytest.raises(TypeError):
        hash(spec)
    clone = copy.deepcopy(spec)
    assert clone == spec and clone is not spec
    assert clone.headers["H"] == "1"
    restored = pickle.loads(pickle.dumps(spec))
    assert restored == spec
    assert restored.auth == BasicAuth("u", "p")
