from dataclasses import dataclass, fields
from typing import Any, Mapping, Tuple

from color_sort.colors import Color, PALETTE
from color_sort.keymap import KEYS


@dataclass(frozen=True)
class GameConfig:
    palette: Tuple[Color, ...] = PALETTE
    tube_capacity: int = 4
    num_empty_tubes: int = 2
    start_level: int = 1

    def __post_init__(self):
        is_valid, reason = self.validate()
        if not is_valid:
            raise ValueError(f"Game config is invalid since {reason}.")

    @property
    def num_colors(self) -> int:
        return len(self.palette)

    @property
    def num_tubes(self) -> int:
        return self.num_colors + self.num_empty_tubes

    def validate(self):
        if isinstance(self.tube_capacity, bool) or not isinstance(self.tube_capacity, int) or self.tube_capacity <= 0:
            return False, "the tube capacity must be a positive integer"
        if len(self.palette) == 0:
            return False, "the palette is empty"
        if len(set(self.palette)) != len(self.palette):
            return False, "the palette contains duplicate colors"
        if self.num_empty_tubes < 0:
            return False, "the number of empty tubes is negative"
        if self.start_level < 0:
            return False, "the start level is negative"
        if self.num_tubes > len(KEYS):
            return False, f"there are more tubes than the {len(KEYS)} shortcut keys"
        return True, None

    @classmethod
    def from_dict(cls, stage: Mapping[str, Any]) -> "GameConfig":
        known = {field.name for field in fields(cls)}
        kwargs = {key: value for key, value in stage.items() if key in known}
        if "palette" in kwargs:
            kwargs["palette"] = tuple(kwargs["palette"])
        return cls(**kwargs)
