import os
import sys
from collections import defaultdict
import pytest
import numpy as np

# Add the project root to the Python path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from color_sort import ColorSegment, ColorTube, Level, LevelGenerationError, PALETTE, generate_level, level_completion
from color_sort import level as level_module
from color_sort.colors import COLOR_BLUE, COLOR_RED


def color_totals(level):
    totals = defaultdict(float)
    for tube in level.tubes:
        for color, amount in tube.segments:
            totals[color] += amount
    return totals


@pytest.fixture
def level():
    return generate_level(PALETTE, 4, 1)


def test_generate_level_shape(level):
    assert level.num_tubes == len(PALETTE) + 2
    assert level.capacity == 4
    assert level.level_index == 1
    assert level.grid_factor == 2
    assert (level.rows, level.columns) == (2, 7)

    for tube in level.tubes[:len(PALETTE)]:
        assert tube.amount() == 4.0
    for tube in level.tubes[len(PALETTE):]:
        assert tube.is_empty()


def test_generate_level_conserves_colors(level):
    totals = color_totals(level)
    assert set(totals) == set(PALETTE)
    for color in PALETTE:
        assert totals[color] == 4.0


def test_generate_level_keeps_tube_invariants(level):
    for tube in level.tubes:
        assert tube.amount() <= tube.capacity
        for lower, upper in zip(tube.contents, tube.contents[1:]):
            assert lower.color != upper.color


def test_generate_level_is_deterministic():
    first = generate_level(PALETTE, 4, 42)
    second = generate_level(PALETTE, 4, 42)
    assert [tube.segments for tube in first.tubes] == [tube.segments for tube in second.tubes]
    assert first.state_key(PALETTE) == second.state_key(PALETTE)


def test_generate_level_depends_on_seed():
    keys = {generate_level(PALETTE, 4, seed).state_key(PALETTE) for seed in range(5)}
    assert len(keys) > 1


def test_generate_two_color_level():
    palette = (COLOR_RED, COLOR_BLUE)
    level = generate_level(palette, 4, 3)

    assert level.num_tubes == 4
    non_empty = [tube for tube in level.tubes if not tube.is_empty()]
    assert len(non_empty) == 2
    assert level.tubes[2].is_empty() and level.tubes[3].is_empty()
    for tube in non_empty:
        assert tube.amount() <= 4.0

    totals = color_totals(level)
    assert totals[COLOR_RED] == 4.0
    assert totals[COLOR_BLUE] == 4.0
    # 4 tubes lay out as 2 x 2
    assert level.grid_factor == 2


def test_prime_tube_count_grid_factor():
    level = generate_level(PALETTE[:11], 4, 1)
    assert level.num_tubes == 13
    assert level.grid_factor == 13
    assert (level.rows, level.columns) == (13, 1)


def test_generation_fails_on_broken_drain(monkeypatch):
    monkeypatch.setattr(level_module.ColorTube, "drain", lambda self, amount: None)
    with pytest.raises(LevelGenerationError):
        generate_level(PALETTE, 4, 1)


def test_level_completion():
    tubes = [
        ColorTube(4, [ColorSegment(COLOR_RED, 4.0)]),
        ColorTube(4, [ColorSegment(COLOR_BLUE, 2.0)]),
        ColorTube(4, [ColorSegment(COLOR_BLUE, 2.0)]),
        ColorTube(4),
    ]
    # Empty tubes are left out of the average
    assert level_completion(tubes) == pytest.approx(2.0 / 3.0)

    tubes[1].fill_strict(tubes[2].drain(2.0))
    assert level_completion(tubes) == 1.0


def test_level_completion_without_content():
    assert level_completion([ColorTube(4), ColorTube(4)]) == 1.0
    assert level_completion([]) == 1.0


def test_generated_level_is_not_won(level):
    assert 0.0 <= level.completion() < 1.0
    assert not level.is_won()


def test_get_state():
    tubes = [
        ColorTube(4, [ColorSegment(COLOR_RED, 2.0), ColorSegment(COLOR_BLUE, 1.0)]),
        ColorTube(4, [ColorSegment(COLOR_BLUE, 3.0)]),
        ColorTube(4),
    ]
    level = Level(tubes, 4, 1)
    palette = (COLOR_RED, COLOR_BLUE)
    expected_state = np.array([
        [1, 1, 2, 0],
        [2, 2, 2, 0],
        [0, 0, 0, 0],
    ], dtype=np.int8)
    np.testing.assert_array_equal(level.get_state(palette), expected_state)
    assert level.grid_factor == 3
