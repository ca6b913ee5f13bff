"""
Clamped navigation helpers shared by the lab, the quiz and the quest.
"""

import pytest

from accounting_game.core.simulation.navigation import Navigator, clamp_index, progress_percent


@pytest.mark.parametrize("index,size,expected", [
    (0, 11, 0), (-1, 11, 0), (11, 11, 10), (5, 11, 5), (3, 0, 0),
])
def test_clamp_index(index, size, expected):
    assert clamp_index(index, size) == expected


def test_progress_percent():
    assert progress_percent(0, 11) == 0
    assert progress_percent(5, 11) == 45
    assert progress_percent(1, 0) == 0


def test_navigator_bounds():
    nav = Navigator(3)
    assert nav.is_first
    assert nav.previous() == 0
    assert nav.next() == 1
    assert nav.next() == 2
    assert nav.is_last
    assert nav.next() == 2
    assert nav.jump_to(-7) == 0
    assert nav.jump_to(1) == 1
    assert nav.reset() == 0


def test_navigator_start_is_clamped():
    assert Navigator(3, start=9).current_index == 2
    assert Navigator(3, start=-4).current_index == 0
