from __future__ import annotations

import pytest

import namedbitset
from namedbitset import configure, parse, pretty, rows, show
from namedbitset.configuration import Configuration
from namedbitset.exceptions import InvalidString


def test_configure_passes_through(traffic_light: Configuration) -> None:
    assert configure(traffic_light) is traffic_light


def test_configure() -> None:
    assert configure(["a", "b"]).digits == ("a", "b")


def test_parse(traffic_light: Configuration) -> None:
    assert parse("r-g", traffic_light).to_i() == 5
    assert parse("gr", traffic_light, format="short").to_i() == 5
    assert parse("110", ["a", "b", "c"]).to_i() == 6


def test_parse_invalid(traffic_light: Configuration) -> None:
    with pytest.raises(InvalidString):
        parse("rgy", traffic_light)


def test_rows(traffic_light: Configuration) -> None:
    assert rows(traffic_light.new(0b101)) == [
        dict(digit="red", weight=4, character="r", enabled=True),
        dict(digit="yellow", weight=2, character="-", enabled=False),
        dict(digit="green", weight=1, character="g", enabled=True),
    ]


def test_pretty(traffic_light: Configuration) -> None:
    result = pretty(traffic_light.new(0b101))
    lines = result.splitlines()
    assert lines[0].split() == ["digit", "weight", "character", "enabled"]
    assert lines[2].split() == ["red", "4", "r", "True"]
    assert lines[3].split() == ["yellow", "2", "-", "False"]
    assert len(lines) == 5


def test_show(traffic_light: Configuration, capsys: pytest.CaptureFixture) -> None:
    bits = traffic_light.new(0b101)
    show(bits)
    assert capsys.readouterr().out == pretty(bits) + "\n"


def test_public_names() -> None:
    assert {"configure", "parse", "rows", "pretty", "show"} <= set(
        namedbitset.api.__all__
    )


def test_version() -> None:
    assert namedbitset.__version__
