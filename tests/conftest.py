"""Shared test fixtures for splice-engine."""

from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


def read_fixture(name: str) -> str:
    with open(FIXTURES / name, encoding="utf-8", newline="") as f:
        return f.read()


@pytest.fixture
def class_template():
    return read_fixture("some-class.ts")


@pytest.fixture
def constructor_source():
    return read_fixture("with-constructor.ts")
