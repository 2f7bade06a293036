import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from color_sort.colors import Color


@dataclass
class ColorSegment:
    color: Color
    amount: float = 1.0


class ColorTube:
    """
    A capacity-bounded stack of color segments.

    Segments are stored bottom to top, adjacent segments never share a color
    and empty segments are never stored.

    Args:
        capacity (float): Maximum total amount the tube holds.
        segments (list): Optional initial segments, bottom first.
    """

    def __init__(self, capacity: float = 4.0, segments: Optional[List[ColorSegment]] = None):
        if capacity <= 0:
            raise ValueError(f"Tube capacity must be positive, got {capacity}.")
        self.capacity = float(capacity)
        self.contents: List[ColorSegment] = []

        # UI flags, read and written by the renderer
        self.hovered = False
        self.mousedown = False
        self.clicked = False
        self.keycode: Optional[str] = None

        for segment in segments or []:
            if self.fill_merge_or_append(segment) is not None:
                raise ValueError(f"Initial segments exceed tube capacity {capacity}.")

    @property
    def segments(self) -> Tuple[Tuple[Color, float], ...]:
        return tuple((content.color, content.amount) for content in self.contents)

    def amount(self) -> float:
        return sum(content.amount for content in self.contents)

    def remaining_capacity(self) -> float:
        return self.capacity - self.amount()

    def is_empty(self) -> bool:
        return len(self.contents) == 0

    def top_color(self) -> Optional[Color]:
        return self.contents[-1].color if self.contents else None

    def main_color(self) -> Optional[Color]:
        # dict keeps bottom-to-top order of first appearance, max() keeps the first of equal counts
        occurrences: Dict[Color, float] = {}
        for content in self.contents:
            occurrences[content.color] = occurrences.get(content.color, 0.0) + content.amount
        if not occurrences:
            return None
        return max(occurrences, key=lambda color: math.floor(occurrences[color]))

    def color_fraction(self, color: Color) -> float:
        """Fraction of the full capacity occupied by `color`, within [0, 1]."""
        amount = sum(content.amount for content in self.contents if content.color == color)
        return min(max(amount / self.capacity, 0.0), 1.0)

    def completion_fraction(self) -> float:
        color = self.main_color()
        if color is None:
            return 1.0
        return self.color_fraction(color)

    def fill_merge_or_append(self, segment: ColorSegment) -> Optional[ColorSegment]:
        """
        Pour `segment` in regardless of the top color.

        Returns:
            ColorSegment: The untouched segment if it would overflow, otherwise None.
        """
        if self.remaining_capacity() < segment.amount:
            return segment
        self._push(segment)
        return None

    def fill_strict(self, segment: ColorSegment) -> Optional[ColorSegment]:
        """
        Pour `segment` in only if the tube is empty or its top color matches.

        Returns:
            ColorSegment: The untouched segment if it was rejected, otherwise None.
        """
        if self.remaining_capacity() < segment.amount:
            return segment
        if self.contents and self.contents[-1].color != segment.color:
            return segment
        self._push(segment)
        return None

    def _push(self, segment: ColorSegment) -> None:
        if segment.amount <= 0:
            return
        if self.contents and self.contents[-1].color == segment.color:
            self.contents[-1].amount += segment.amount
        else:
            self.contents.append(ColorSegment(segment.color, segment.amount))

    def drain(self, amount: float) -> Optional[ColorSegment]:
        """
        Remove up to `amount` from the topmost segment.

        Never reaches below the top segment, so the drained amount is at most
        the top segment's own amount.

        Returns:
            ColorSegment: The drained segment, or None if nothing was drained.
        """
        amount = min(amount, self.amount())
        if amount <= 0 or not self.contents:
            return None
        top = self.contents[-1]
        if amount >= top.amount:
            return self.contents.pop()
        top.amount -= amount
        return ColorSegment(top.color, amount)

    def __repr__(self):
        return f"ColorTube(capacity={self.capacity}, contents={self.segments})"
