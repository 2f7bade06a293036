import os
import sys
import pytest

# Add the project root to the Python path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from color_sort import Color, GameConfig, PALETTE
from color_sort.colors import COLOR_BLUE, COLOR_RED


def test_defaults():
    config = GameConfig()
    assert config.palette == PALETTE
    assert config.num_colors == 12
    assert config.num_tubes == 14
    assert config.tube_capacity == 4
    assert config.start_level == 1


def test_from_dict():
    config = GameConfig.from_dict({
        "palette": [COLOR_RED, COLOR_BLUE],
        "tube_capacity": 6,
        "start_level": 5,
        "episodes": 100,
    })
    assert config.palette == (COLOR_RED, COLOR_BLUE)
    assert config.tube_capacity == 6
    assert config.num_empty_tubes == 2
    assert config.start_level == 5


@pytest.mark.parametrize("stage, reason", [
    ({"tube_capacity": 0}, "the tube capacity must be a positive integer"),
    ({"tube_capacity": 2.5}, "the tube capacity must be a positive integer"),
    ({"palette": []}, "the palette is empty"),
    ({"palette": [COLOR_RED, COLOR_RED]}, "the palette contains duplicate colors"),
    ({"num_empty_tubes": -1}, "the number of empty tubes is negative"),
    ({"start_level": -1}, "the start level is negative"),
    ({"palette": [Color.from_rgb_u32(idx + 1) for idx in range(27)]}, "there are more tubes than the 28 shortcut keys"),
])
def test_invalid_config(stage, reason):
    with pytest.raises(ValueError, match=reason):
        GameConfig.from_dict(stage)
