"""Tests for the request builder."""

import json
import unittest

from specagent.openapi.builder import (
    build_request,
    merge_headers,
    resolve_url,
    serialize_query_params,
    stringify_query_value,
)
from specagent.openapi.models import CallDescription


def make_call(**overrides):
    data = {
        "base_url": "https://api.example.com",
        "endpoint": "/v1/forecast",
        "method": "GET",
    }
    data.update(overrides)
    return CallDescription(**data)


class TestUrlResolution(unittest.TestCase):
    """Tests for resolving endpoints against the base URL."""

    def test_leading_slash(self):
        self.assertEqual(
            resolve_url("https://api.example.com", "/v1/forecast"),
            "https://api.example.com/v1/forecast",
        )

    def test_without_leading_slash(self):
        self.assertEqual(
            resolve_url("https://api.example.com/", "v1/forecast"),
            "https://api.example.com/v1/forecast",
        )

    def test_relative_endpoint_keeps_base_directory(self):
        self.assertEqual(
            resolve_url("https://api.example.com/api/", "users"),
            "https://api.example.com/api/users",
        )

    def test_absolute_endpoint_replaces_base_path(self):
        self.assertEqual(
            resolve_url("https://api.example.com/api/", "/users"),
            "https://api.example.com/users",
        )

    def test_existing_query_is_kept(self):
        self.assertEqual(
            resolve_url("https://api.example.com", "/search?q=a", "page=2"),
            "https://api.example.com/search?q=a&page=2",
        )


class TestQuerySerialization(unittest.TestCase):
    """Tests for query parameter serialization."""

    def test_skips_none_and_joins_lists(self):
        query = serialize_query_params({"a": None, "b": [1, 2], "c": "x"})
        self.assertEqual(query, "b=1,2&c=x")
        self.assertNotIn("a=", query)

    def test_preserves_caller_order(self):
        query = serialize_query_params({"z": 1, "a": 2, "m": 3})
        self.assertEqual(query, "z=1&a=2&m=3")

    def test_booleans_are_lowercase(self):
        self.assertEqual(
            serialize_query_params({"current_weather": True, "past": False}),
            "current_weather=true&past=false",
        )

    def test_numbers(self):
        self.assertEqual(
            serialize_query_params({"latitude": 40.7128, "longitude": -74.006, "days": 3}),
            "latitude=40.7128&longitude=-74.006&days=3",
        )

    def test_special_characters_are_encoded(self):
        self.assertEqual(
            serialize_query_params({"q": "new york & co"}), "q=new+york+%26+co"
        )

    def test_empty(self):
        self.assertEqual(serialize_query_params(None), "")
        self.assertEqual(serialize_query_params({}), "")

    def test_stringify_list_with_none(self):
        self.assertEqual(stringify_query_value(["a", None, True]), "a,,true")


class TestHeaderMerge(unittest.TestCase):
    """Tests for merging header layers."""

    def test_later_layer_wins(self):
        merged = merge_headers({"Content-Type": "application/json"}, {"Content-Type": "text/plain"})
        self.assertEqual(merged, {"Content-Type": "text/plain"})

    def test_case_insensitive_override(self):
        merged = merge_headers(
            {"Content-Type": "application/json"}, {"content-type": "text/plain"}
        )
        self.assertEqual(merged, {"content-type": "text/plain"})

    def test_none_layers_are_ignored(self):
        self.assertEqual(merge_headers(None, {"A": "1"}, None), {"A": "1"})


class TestBuildRequest(unittest.TestCase):
    """Tests for build_request."""

    def test_full_url(self):
        request = build_request(
            make_call(query_params={"a": None, "b": [1, 2], "c": "x"})
        )
        self.assertEqual(request.method, "GET")
        self.assertEqual(request.url, "https://api.example.com/v1/forecast?b=1,2&c=x")

    def test_default_content_type(self):
        request = build_request(make_call())
        self.assertEqual(request.headers, {"Content-Type": "application/json"})

    def test_caller_header_overrides_default(self):
        request = build_request(make_call(headers={"Content-Type": "text/plain"}))
        self.assertEqual(request.headers["Content-Type"], "text/plain")
        self.assertEqual(len(request.headers), 1)

    def test_configured_default_headers(self):
        request = build_request(
            make_call(headers={"X-Api-Key": "caller"}),
            default_headers={"X-Api-Key": "configured", "Accept": "application/json"},
        )
        self.assertEqual(request.headers["X-Api-Key"], "caller")
        self.assertEqual(request.headers["Accept"], "application/json")
        self.assertEqual(request.headers["Content-Type"], "application/json")

    def test_get_never_carries_body(self):
        request = build_request(make_call(method="GET", body={"name": "ignored"}))
        self.assertIsNone(request.body)

    def test_delete_never_carries_body(self):
        request = build_request(make_call(method="DELETE", body={"name": "ignored"}))
        self.assertIsNone(request.body)

    def test_body_methods(self):
        for method in ("POST", "PUT", "PATCH"):
            with self.subTest(method=method):
                request = build_request(make_call(method=method, body={"name": "x", "n": 1}))
                self.assertEqual(request.body, '{"name":"x","n":1}')
                self.assertEqual(json.loads(request.body), {"name": "x", "n": 1})

    def test_empty_body_is_attached(self):
        request = build_request(make_call(method="POST", body={}))
        self.assertEqual(request.body, "{}")

    def test_building_is_idempotent(self):
        call = make_call(
            method="POST",
            query_params={"b": [1, 2], "c": "x"},
            body={"nested": {"k": [1, 2]}},
            headers={"X-Trace": "1"},
        )
        first = build_request(call)
        second = build_request(call)
        self.assertEqual(first, second)
        self.assertEqual(first.model_dump_json(), second.model_dump_json())

    def test_non_serializable_body_raises(self):
        call = make_call(method="POST", body={"when": object()})
        with self.assertRaises(TypeError):
            build_request(call)


if __name__ == "__main__":
    unittest.main()
