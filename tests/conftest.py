"""Pytest configuration and fixtures."""

import pytest

from shop_cart import build_cart


SCENARIO_A = """10 2 3
3 1
5 2 8
"""

SCENARIO_B = """5 1 1
4
5
"""

SCENARIO_D = """10 2 3
3 1
"""


@pytest.fixture
def scenario_a_cart():
    """Cart from scenario A: [[3, 1], [5, 2, 8]] with budget 10."""
    return build_cart(10, [[3, 1], [5, 2, 8]])


@pytest.fixture
def scenario_b_cart():
    """Cart from scenario B: [[4], [5]] with budget 5."""
    return build_cart(5, [[4], [5]])


@pytest.fixture
def write_input(tmp_path):
    """Write cart text to a temporary file and return its path."""
    def _write(text, name="cart.txt"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write
