from __future__ import annotations

import argparse
import subprocess
import sys

import pytest

from namedbitset.cli import cli, digit_spec, main


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("red", ("red", None)),
        ("red=r", ("red", "r")),
        ("red=rx", ("red", ("r", "x"))),
    ],
)
def test_digit_spec(text: str, expected: tuple) -> None:
    assert digit_spec(text) == expected


@pytest.mark.parametrize("text", ["=r", "red=rxy"])
def test_digit_spec_invalid(text: str) -> None:
    with pytest.raises(argparse.ArgumentTypeError):
        digit_spec(text)


def test_main_defaults() -> None:
    assert main(state="0o6", digit=[], parse=None, format="long") == "rw-"
    assert main(state="5", digit=[], parse=None, format="short") == "rx"


def test_main_parse() -> None:
    assert main(state="rx", digit=[], parse="short", format="int") == "5"
    assert main(state="r-x", digit=[], parse="long", format="short") == "rx"


def test_main_digits() -> None:
    digits = [("red", "r"), ("yellow", "y"), ("green", "g")]
    assert main(state="0b101", digit=digits, parse=None, format="long") == "r-g"


def test_main_table() -> None:
    output = main(state="4", digit=[], parse=None, format="table")
    assert output.splitlines()[2].split() == ["r", "4", "r", "True"]


def test_cli(capsys: pytest.CaptureFixture) -> None:
    cli(["-d", "a", "-d", "b", "-d", "c", "3"])
    assert capsys.readouterr().out == "011\n"


@pytest.mark.parametrize(
    "argv",
    [
        ["8"],
        ["nope"],
        ["-d", "a", "-d", "a", "1"],
        ["--parse", "short", "rr"],
        ["-d", "a", "-d", "b", "--format", "short", "1"],
    ],
)
def test_cli_errors(argv: list[str], capsys: pytest.CaptureFixture) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli(argv)
    assert excinfo.value.code == 2
    assert "error" in capsys.readouterr().err


def test_module_entry_point() -> None:
    result = subprocess.run(
        [
            sys.executable,
            "-m",
            "namedbitset.cli",
            "--format",
            "int",
            "--parse",
            "long",
            "rw-",
        ],
        check=True,
        capture_output=True,
        text=True,
    )
    assert result.stdout == "6\n"
