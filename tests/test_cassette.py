"""Tests for webmock.cassette — YAML cassettes to Routes."""

from pathlib import Path

import pytest

from webmock.cassette import load_cassette, load_cassette_dir, load_cassette_file, parse_cassette
from webmock.errors import CassetteError, CassetteNotFound, ConfigurationError
from webmock.routing.route import Route

FULL_CASSETTE = """\
- request:
    method: get
    path: /users?page=2&sort=name
    headers:
      Accept: application/json
      X-Retry: 3
  response:
    status: 201
    headers:
      Content-Type: application/json
      X-Cached: true
    body: '{"users": []}'
"""


class TestParseCassette:
    def test_full_entry(self) -> None:
        (route,) = parse_cassette(FULL_CASSETTE)
        assert route.method == "GET"
        assert route.path == "/users"
        assert route.query == "page=2&sort=name"
        assert dict(route.request_headers) == {"Accept": "application/json", "X-Retry": "3"}
        assert route.status == 201
        assert dict(route.response_headers) == {
            "Content-Type": "application/json",
            "X-Cached": "true",
        }
        assert route.body == '{"users": []}'

    def test_minimal_entry_defaults(self) -> None:
        (route,) = parse_cassette("- request: {method: post, path: /hook}\n")
        assert route == Route("POST", "/hook")
        assert route.status == 0
        assert route.render_status == 200

    def test_missing_status_is_zero(self) -> None:
        (route,) = parse_cassette("- request: {method: GET, path: /a}\n  response: {body: x}\n")
        assert route.status == 0
        assert route.body == "x"

    def test_entries_in_document_order(self) -> None:
        text = (
            "- request: {method: GET, path: /a}\n"
            "- request: {method: GET, path: /b}\n"
            "- request: {method: GET, path: /c}\n"
        )
        assert [r.path for r in parse_cassette(text)] == ["/a", "/b", "/c"]

    def test_multiline_body_verbatim(self) -> None:
        text = (
            "- request: {method: GET, path: /a}\n"
            "  response:\n"
            "    body: |\n"
            "      line one\n"
            "      line two\n"
        )
        (route,) = parse_cassette(text)
        assert route.body == "line one\nline two\n"

    def test_absolute_path_keeps_host(self) -> None:
        (route,) = parse_cassette("- request: {method: GET, path: 'http://api.test/v1?x=1'}\n")
        assert route.host == "api.test"
        assert route.path == "/v1"
        assert route.query == "x=1"

    def test_empty_list(self) -> None:
        assert parse_cassette("[]\n") == []


class TestCassetteScalarsVerbatim:
    def test_header_values_keep_literal_text(self) -> None:
        text = (
            "- request:\n"
            "    method: GET\n"
            "    path: /v\n"
            "    headers: {X-Api-Version: 1.10, X-Flag: yes, X-Code: 010, X-Mode: on}\n"
            "  response:\n"
            "    headers: {X-Api-Version: 1.10, X-Null: null, X-Date: 2024-01-01}\n"
        )
        (route,) = parse_cassette(text)
        assert dict(route.request_headers) == {
            "X-Api-Version": "1.10",
            "X-Flag": "yes",
            "X-Code": "010",
            "X-Mode": "on",
        }
        assert dict(route.response_headers) == {
            "X-Api-Version": "1.10",
            "X-Null": "null",
            "X-Date": "2024-01-01",
        }

    @pytest.mark.parametrize(
        ("body", "expected"),
        [("42", "42"), ("true", "true"), ("1.50", "1.50"), ("''", "")],
    )
    def test_scalar_body_kept_as_written(self, body: str, expected: str) -> None:
        text = f"- request: {{method: get, path: /n}}\n  response: {{body: {body}}}\n"
        (route,) = parse_cassette(text)
        assert route.body == expected

    def test_status_written_as_text(self) -> None:
        text = "- request: {method: get, path: /n}\n  response: {status: '204'}\n"
        (route,) = parse_cassette(text)
        assert route.status == 204

    @pytest.mark.parametrize("status", ["", " null", " ~"])
    def test_null_status_is_unset(self, status: str) -> None:
        text = (
            "- request: {method: get, path: /n}\n"
            f"  response:\n    status:{status}\n    body: x\n"
        )
        (route,) = parse_cassette(text)
        assert route.status == 0


class TestParseCassetteErrors:
    @pytest.mark.parametrize(
        ("text", "reason"),
        [
            ("", "empty cassette"),
            ("request: {method: GET}\n", "expected a list"),
            ("- [not, a, mapping]\n", "expected a mapping"),
            ("- request: {path: /a}\n", "request.method is required"),
            ("- request: {method: GET}\n", "request.path is required"),
            ("- request: [GET, /a]\n", "'request' must be a mapping"),
            ("- request: {method: GET, path: /a}\n  response: {status: ok}\n", "status"),
            ("- request: {method: GET, path: /a}\n  response: {status: true}\n", "status"),
            ("- request: {method: GET, path: /a}\n  response: {body: {a: 1}}\n", "body"),
            ("- request: {method: GET, path: /a}\n  response: {body: [a, b]}\n", "body"),
            (
                "- request: {method: GET, path: /a}\n"
                "  response: {headers: {X-Currency: \u20ac}}\n",
                "entry 0: Response header 'X-Currency'",
            ),
            ("- request: {method: GET, path: /a, headers: [x]}\n", "headers must be a mapping"),
            (
                "- request: {method: GET, path: /a}\n  response: {headers: {X-A: [1, 2]}}\n",
                "must be a scalar",
            ),
            ("- request: {method: GET, path: '/a%zz'}\n", "percent-escape"),
            ("- request: {method: GET, path: /a\n", "invalid YAML"),
        ],
    )
    def test_malformed(self, text: str, reason: str) -> None:
        with pytest.raises(CassetteError, match=reason):
            parse_cassette(text, "broken.yaml")

    def test_error_names_source(self) -> None:
        with pytest.raises(CassetteError) as exc_info:
            parse_cassette("", "fixtures/api.yaml")
        assert exc_info.value.source == "fixtures/api.yaml"
        assert str(exc_info.value).startswith("fixtures/api.yaml:")

    def test_error_names_entry(self) -> None:
        text = "- request: {method: GET, path: /a}\n- request: {method: GET}\n"
        with pytest.raises(CassetteError, match="entry 1"):
            parse_cassette(text)


class TestLoadCassette:
    def test_single_file(self, tmp_path: Path) -> None:
        path = tmp_path / "api.yaml"
        path.write_text(FULL_CASSETTE)
        routes = load_cassette(path)
        assert len(routes) == 1
        assert load_cassette_file(str(path)) == routes

    def test_directory_in_name_order(self, cassette_dir: Path) -> None:
        routes = load_cassette(cassette_dir)
        assert [(r.path, r.body) for r in routes] == [
            ("/shared", "from-base"),
            ("/only-base", "base"),
            ("/shared", "from-override"),
        ]

    def test_directory_skips_subdirectories(self, cassette_dir: Path) -> None:
        nested = cassette_dir / "00_nested"
        nested.mkdir()
        (nested / "ignored.yaml").write_text("- request: {method: GET, path: /nested}\n")
        assert "/nested" not in [r.path for r in load_cassette_dir(cassette_dir)]

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert load_cassette(tmp_path) == []

    def test_missing_path(self, tmp_path: Path) -> None:
        with pytest.raises(CassetteNotFound) as exc_info:
            load_cassette(tmp_path / "nope.yaml")
        assert "does not exist" in str(exc_info.value)

    def test_missing_is_configuration_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError):
            load_cassette(tmp_path / "nope")

    def test_malformed_file_in_directory_fails_whole_load(self, cassette_dir: Path) -> None:
        (cassette_dir / "03_broken.yaml").write_text("- request: {method: GET}\n")
        with pytest.raises(CassetteError, match="03_broken.yaml"):
            load_cassette(cassette_dir)

    def test_undecodable_file(self, tmp_path: Path) -> None:
        path = tmp_path / "binary.yaml"
        path.write_bytes(b"\xff\xfe\x00garbage")
        with pytest.raises(CassetteError, match="cannot read file"):
            load_cassette(path)
