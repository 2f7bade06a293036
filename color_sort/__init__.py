# Import all modules and classes from the color_sort library
from .colors import Color, PALETTE
from .color_tube import ColorSegment, ColorTube
from .config import GameConfig
from .exceptions import LevelGenerationError
from .keymap import assign_shortcuts, key_for_position, tube_for_key
from .layout import grid_shape, smallest_prime_factor
from .level import Level, generate_level, level_completion
from .session import GameSession, Selection, UiFlags
from .utils import hash_state, percent_label

# Define what is exposed when importing *
__all__ = [
    "Color",
    "PALETTE",
    "ColorSegment",
    "ColorTube",
    "GameConfig",
    "LevelGenerationError",
    "assign_shortcuts",
    "key_for_position",
    "tube_for_key",
    "grid_shape",
    "smallest_prime_factor",
    "Level",
    "generate_level",
    "level_completion",
    "GameSession",
    "Selection",
    "UiFlags",
    "hash_state",
    "percent_label",
]
