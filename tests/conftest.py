"""
Pytest configuration for the undirected graph engine tests.
"""
import textwrap

import pytest

import undigraph


@pytest.fixture
def lib():
    """The library under test."""
    return undigraph


@pytest.fixture
def build():
    """Load a graph from an indented multi-line description."""
    def _build(text):
        return undigraph.loads(textwrap.dedent(text))
    return _build


@pytest.fixture
def triangle_plus_isolated(build):
    """Weighted triangle A-B-C plus the isolated vertex D."""
    return build("""
        G1
        A -- B
        B -- C 5
        C -- A
        D
    """)


@pytest.fixture
def path_abc(build):
    """Simple path A-B-C."""
    return build("""
        path
        A -- B
        B -- C
    """)
