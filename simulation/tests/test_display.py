"""
Tests for display rounding.
"""

import pytest

from simulation.logic.display import round_display


@pytest.mark.parametrize("value, expected", [
    (45.25, 45.3),
    (2.25, 2.3),
    (6.25, 6.3),
    (13.75, 13.8),
    (64.69999999999999, 64.7),
    (-2.25, -2.2),
    (-2.26, -2.3),
    (0, 0),
    (100, 100),
])
def test_round_display(value, expected):
    assert round_display(value) == expected
