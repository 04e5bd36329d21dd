"""Shared fixtures for core unit tests"""

import pytest

from hdiff.core.models import OpKind
from hdiff.core.render import BlockRenderer


@pytest.fixture(name="colors")
def colors_fixture():
    return {OpKind.add: "#FF8C00", OpKind.change: "#FFFF00", OpKind.delete: "#C0C0C0"}


@pytest.fixture(name="renderer")
def renderer_fixture():
    return BlockRenderer()


@pytest.fixture(name="file1")
def file1_fixture():
    """Five lines: 'line 1' .. 'line 5'."""
    return [f"line {n}" for n in range(1, 6)]
