# topmark:header:start
#
#   project      : DisplayKit
#   file         : test_text_commands.py
#   file_relpath : tests/cli/test_text_commands.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI: text transformation commands (camel, camel-keys, strip-ansi, html2md, encode)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from tests.cli.conftest import (
    assert_FILE_NOT_FOUND,
    assert_INPUT_ERROR,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    run_cli,
)
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


@mark_cli
def test_camel_argument() -> None:
    result: Result = run_cli(["camel", "user_name-value"])

    assert_SUCCESS(result)
    assert result.stdout == "userNameValue\n"


@mark_cli
def test_camel_stdin_line_by_line() -> None:
    result: Result = run_cli(["camel"], input_text="first_name\nlast-name\n")

    assert_SUCCESS(result)
    assert result.stdout == "firstName\nlastName\n"


@mark_cli
def test_camel_file(tmp_path: Path) -> None:
    f: Path = tmp_path / "in.txt"
    f.write_text("app_id\n", encoding="utf-8")

    result: Result = run_cli(["camel", "--file", str(f)])

    assert_SUCCESS(result)
    assert result.stdout == "appId\n"


@mark_cli
def test_text_and_file_are_exclusive(tmp_path: Path) -> None:
    f: Path = tmp_path / "in.txt"
    f.write_text("x\n", encoding="utf-8")

    result: Result = run_cli(["camel", "a_b", "--file", str(f)])

    assert_USAGE_ERROR(result)
    assert "either TEXT or --file" in result.output


@mark_cli
def test_missing_input_file(tmp_path: Path) -> None:
    result: Result = run_cli(["camel", "--file", str(tmp_path / "missing.txt")])

    assert_FILE_NOT_FOUND(result)


@mark_cli
def test_invalid_utf8_input_file(tmp_path: Path) -> None:
    f: Path = tmp_path / "latin1.txt"
    f.write_bytes(b"caf\xe9\n")

    result: Result = run_cli(["strip-ansi", "--file", str(f)])

    assert_INPUT_ERROR(result)


@mark_cli
def test_camel_keys() -> None:
    payload = '{"user_id": 1, "tags": [{"tag_name": "x"}]}'

    result: Result = run_cli(["camel-keys"], input_text=payload)

    assert_SUCCESS(result)
    assert json.loads(result.stdout) == {"userId": 1, "tags": [{"tagName": "x"}]}


@mark_cli
def test_camel_keys_compact() -> None:
    result: Result = run_cli(["camel-keys", "--compact", '{"a_b": 1}'])

    assert_SUCCESS(result)
    assert result.stdout == '{"aB": 1}\n'


@mark_cli
def test_camel_keys_invalid_json() -> None:
    result: Result = run_cli(["camel-keys", "{not json"])

    assert_INPUT_ERROR(result)
    assert "Invalid JSON" in result.output


@mark_cli
def test_strip_ansi_stdin_preserves_newlines() -> None:
    result: Result = run_cli(["strip-ansi"], input_text="\x1b[1;31merror\x1b[0m: boom\n\x1b[2Kok\n")

    assert_SUCCESS(result)
    assert result.stdout == "error: boom\nok\n"


@mark_cli
def test_html2md() -> None:
    result: Result = run_cli(["html2md", '<p>Look <img src="cat.png" alt="cat"></p>'])

    assert_SUCCESS(result)
    assert result.stdout == "Look ![cat](cat.png)"


@mark_cli
def test_encode_argument() -> None:
    result: Result = run_cli(["encode", "a b/c?d=é"])

    assert_SUCCESS(result)
    assert result.stdout == "a%20b%2Fc%3Fd%3D%C3%A9\n"


@mark_cli
def test_encode_stdin_drops_trailing_newline() -> None:
    result: Result = run_cli(["encode"], input_text="hello world\n")

    assert_SUCCESS(result)
    assert result.stdout == "hello%20world\n"


@mark_cli
def test_encode_keep_newline() -> None:
    result: Result = run_cli(["encode", "--keep-newline"], input_text="x\n")

    assert_SUCCESS(result)
    assert result.stdout == "x%0A\n"
