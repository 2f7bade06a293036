import logging
from dataclasses import dataclass
from typing import Optional

from color_sort.config import GameConfig
from color_sort.keymap import assign_shortcuts
from color_sort.level import Level, generate_level

logger = logging.getLogger(__name__)


@dataclass
class UiFlags:
    """Transient menu flags written by the UI."""
    restart: bool = False
    skip_level: bool = False
    fullscreen: bool = False


class Selection:
    """Either idle (no tube pending) or holding the index of the pending tube."""

    def __init__(self):
        self.index: Optional[int] = None

    @property
    def is_idle(self) -> bool:
        return self.index is None

    def select(self, index: int) -> None:
        self.index = index

    def reset(self) -> None:
        self.index = None


class GameSession:
    """
    Owns the current level and the tube selection.

    Events are processed one at a time: `activate` for a tube, and
    `restart_level` / `skip_level` / `next_level` which rebuild the level.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()
        self.selection = Selection()
        self.ui = UiFlags()
        self.move_count = 0
        self.level: Level = None
        self._build_level(self.config.start_level)

    @property
    def level_index(self) -> int:
        return self.level.level_index

    def _build_level(self, level_index: int) -> None:
        self.level = generate_level(
            self.config.palette,
            self.config.tube_capacity,
            level_index,
            num_empty_tubes=self.config.num_empty_tubes,
        )
        assign_shortcuts(self.level.tubes, self.level.columns)
        self.selection.reset()
        self.move_count = 0

    def activate(self, index: int) -> bool:
        """
        Feed a "tube activated" event into the selection state machine.

        Returns:
            bool: True if a transfer moved content, False otherwise.
        """
        if not 0 <= index < self.level.num_tubes:
            raise IndexError(f"Tube index {index} is out of range for {self.level.num_tubes} tubes.")

        if self.selection.is_idle:
            self.selection.select(index)
            self.level.tubes[index].clicked = True
            logger.debug(f"Selected tube {index}.")
            return False

        src = self.selection.index
        self.level.tubes[src].clicked = False
        self.selection.reset()
        if src == index:
            logger.debug(f"Deselected tube {index}.")
            return False
        return self.transfer(src, index)

    def transfer(self, src: int, dst: int) -> bool:
        src_tube = self.level.tubes[src]
        dst_tube = self.level.tubes[dst]

        content = src_tube.drain(dst_tube.remaining_capacity())
        if content is None:
            logger.debug(f"Nothing to pour from tube {src} into tube {dst}.")
            return False

        rejected = dst_tube.fill_strict(content)
        if rejected is not None:
            # content never gets lost, it goes back where it came from
            src_tube.fill_merge_or_append(rejected)
            logger.debug(f"Tube {dst} rejected {rejected.amount} from tube {src}.")
            return False

        self.move_count += 1
        logger.debug(f"Poured {content.amount} from tube {src} into tube {dst}.")
        if self.is_won():
            logger.info(f"Level {self.level_index} solved in {self.move_count} moves.")
        return True

    def completion(self) -> float:
        return self.level.completion()

    def is_won(self) -> bool:
        return self.level.is_won()

    def restart_level(self) -> None:
        logger.info(f"Restarting level {self.level_index}.")
        self._build_level(self.level_index)

    def skip_level(self) -> None:
        logger.info(f"Skipping level {self.level_index}.")
        self._build_level(self.level_index + 1)

    def next_level(self) -> bool:
        if not self.is_won():
            return False
        logger.info(f"Advancing from level {self.level_index}.")
        self._build_level(self.level_index + 1)
        return True

    def apply_ui_flags(self) -> None:
        """Consume restart and skip requests left by the UI."""
        if self.ui.restart:
            self.ui.restart = False
            self.restart_level()
        if self.ui.skip_level:
            self.ui.skip_level = False
            self.skip_level()
