"""
Tests for the command line interface.
"""

import json

import pytest
from loguru import logger
from typer.testing import CliRunner

from kullback.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def _silence_library_after_cli():
    # The CLI callback enables kullback logging; put the library default back
    yield
    logger.disable("kullback")


def test_encodings_lists_all():
    result = runner.invoke(app, ["encodings"])
    assert result.exit_code == 0
    assert result.output.split() == ["UTF8", "HEX", "BASE64"]


def test_analyze_table(xor_key3_data):
    result = runner.invoke(app, ["analyze", "--encoding", "HEX", "--max-period", "10", xor_key3_data.hex()])
    assert result.exit_code == 0, result.output
    assert "60 bytes, periods 2..10" in result.output
    assert "p=  3  ioc=1.00000" in result.output
    assert "Top IoC candidates:" in result.output


def test_analyze_json(xor_key3_data):
    result = runner.invoke(app, ["analyze", "-e", "hex", "-m", "6", "--json", xor_key3_data.hex()])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert [p["period"] for p in payload["series"]] == [2, 3, 4, 5, 6]
    assert payload["series"][1]["score"] == 1.0
    assert payload["length"] == 60


def test_analyze_from_file(tmp_path, english_xor_data):
    path = tmp_path / "ct.hex"
    path.write_text(english_xor_data.hex(), encoding="utf-8")
    result = runner.invoke(app, ["analyze", "--file", str(path), "-e", "HEX", "-m", "12", "--json"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["max_period"] == 12


def test_analyze_errors_are_bad_parameters():
    assert runner.invoke(app, ["analyze", "abc"]).exit_code == 2
    assert runner.invoke(app, ["analyze", "-e", "HEX", "abc"]).exit_code == 2
    assert runner.invoke(app, ["analyze", "-e", "BASE64", "not_base64!"]).exit_code == 2
    assert runner.invoke(app, ["analyze", "-m", "50", "abcdefghij"]).exit_code == 2
    assert runner.invoke(app, ["analyze"]).exit_code == 2


def test_analyze_binary_file_is_bad_parameter(tmp_path):
    path = tmp_path / "ct.bin"
    path.write_bytes(b"\xff\xfe\x00\x81" * 10)
    result = runner.invoke(app, ["analyze", "--file", str(path)])
    assert result.exit_code == 2
    assert not isinstance(result.exception, UnicodeDecodeError)


def test_analyze_missing_file_is_bad_parameter(tmp_path):
    result = runner.invoke(app, ["analyze", "--file", str(tmp_path / "nope.txt")])
    assert result.exit_code == 2
