import logging
import math
from typing import List, Sequence

import numpy as np

from color_sort.color_tube import ColorSegment, ColorTube
from color_sort.colors import Color
from color_sort.exceptions import LevelGenerationError
from color_sort.layout import grid_shape, smallest_prime_factor
from color_sort.utils import hash_state

logger = logging.getLogger(__name__)


class Level:
    def __init__(self, tubes: List[ColorTube], capacity: int, level_index: int):
        self.tubes = tubes
        self.capacity = capacity
        self.level_index = level_index
        self.grid_factor = smallest_prime_factor(len(tubes)) if len(tubes) >= 2 else 1

    @property
    def num_tubes(self) -> int:
        return len(self.tubes)

    @property
    def rows(self) -> int:
        return grid_shape(self.num_tubes)[0]

    @property
    def columns(self) -> int:
        return grid_shape(self.num_tubes)[1]

    def completion(self) -> float:
        return level_completion(self.tubes)

    def is_won(self) -> bool:
        return self.completion() == 1.0

    def get_state(self, palette: Sequence[Color]) -> np.ndarray:
        """
        Export the level as a ball-sort style state array.

        Args:
            palette (Sequence[Color]): Colors in index order.

        Returns:
            np.ndarray: int8 array of shape (num_tubes, capacity) where each
            whole unit holds its palette index + 1 and empty slots hold 0.
        """
        color_ids = {color: idx + 1 for idx, color in enumerate(palette)}
        state = np.zeros((self.num_tubes, self.capacity), dtype=np.int8)
        for tube_idx, tube in enumerate(self.tubes):
            pos = 0
            for color, amount in tube.segments:
                units = int(math.floor(amount))
                state[tube_idx, pos:pos + units] = color_ids[color]
                pos += units
        return state

    def state_key(self, palette: Sequence[Color]) -> str:
        return hash_state(self.get_state(palette))


def level_completion(tubes: Sequence[ColorTube]) -> float:
    """
    Average completion over all tubes holding any content.

    A board without content has nothing left to sort and counts as complete.
    """
    fractions = [tube.completion_fraction() for tube in tubes if tube.remaining_capacity() != tube.capacity]
    if not fractions:
        return 1.0
    return min(max(sum(fractions) / len(fractions), 0.0), 1.0)


def generate_level(palette: Sequence[Color], capacity: int, level_index: int, num_empty_tubes: int = 2) -> Level:
    """
    Build a shuffled level from single-color source tubes.

    Every pass drains one unit from each source tube into the destination
    tube at the same index, then shuffles the destination tube order.

    Args:
        palette (Sequence[Color]): Distinct colors, one full tube each.
        capacity (int): Units per tube.
        level_index (int): Seed, the same index always yields the same level.
        num_empty_tubes (int): Empty tubes appended after shuffling.

    Returns:
        Level: The generated level.
    """
    rng = np.random.default_rng(level_index)

    sources = [ColorTube(capacity, [ColorSegment(color, float(capacity))]) for color in palette]
    sources = [sources[idx] for idx in rng.permutation(len(sources))]
    destinations = [ColorTube(capacity) for _ in palette]

    for _ in range(capacity):
        for idx, source in enumerate(sources):
            unit = source.drain(1.0)
            if unit is None:
                raise LevelGenerationError(f"Source tube {idx} ran out of color during level {level_index} generation.")
            if destinations[idx].fill_merge_or_append(unit) is not None:
                raise LevelGenerationError(f"Destination tube {idx} overflowed during level {level_index} generation.")
        destinations = [destinations[idx] for idx in rng.permutation(len(destinations))]

    tubes = destinations + [ColorTube(capacity) for _ in range(num_empty_tubes)]
    level = Level(tubes, capacity, level_index)
    logger.info(f"Generated level {level_index} with {level.num_tubes} tubes, grid factor {level.grid_factor}.")
    return level
