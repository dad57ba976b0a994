from __future__ import annotations

import pytest

from namedbitset.configuration import Configuration


@pytest.fixture(scope="session")  # type: ignore[misc]
def traffic_light() -> Configuration:
    return Configuration({"red": "r", "yellow": "y", "green": "g"})


@pytest.fixture(scope="session")  # type: ignore[misc]
def generic() -> Configuration:
    return Configuration(["a", "b", "c", "d", "e"])


@pytest.fixture(scope="session")  # type: ignore[misc]
def permissions() -> Configuration:
    return Configuration(
        {
            "setuid": ("s", "-"),
            "setgid": ("S", "-"),
            "sticky": ("t", "-"),
            "read": "r",
            "write": "w",
            "execute": "x",
        }
    )
