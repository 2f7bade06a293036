from collections import namedtuple


class Color(namedtuple('Color', ['r', 'g', 'b', 'a'])):
    """RGBA color with float channels in [0, 1]."""
    __slots__ = ()

    def __new__(cls, r: float, g: float, b: float, a: float = 1.0):
        return super().__new__(cls, r, g, b, a)

    @classmethod
    def from_rgb_u32(cls, value: int) -> "Color":
        return cls(((value >> 16) & 0xFF) / 255.0, ((value >> 8) & 0xFF) / 255.0, (value & 0xFF) / 255.0)

    def to_rgb_u32(self) -> int:
        r, g, b = (int(round(channel * 255.0)) for channel in (self.r, self.g, self.b))
        return (r << 16) | (g << 8) | b

    def __repr__(self):
        return f"Color(#{self.to_rgb_u32():06x})"


# Liquid colors
COLOR_LIGHT_BLUEGRAY = Color.from_rgb_u32(0x8895A7)
COLOR_PINK = Color.from_rgb_u32(0xDC32AC)
COLOR_PURPLE = Color.from_rgb_u32(0xAF32DC)
COLOR_VIOLET = Color.from_rgb_u32(0x6832DC)
COLOR_BLUE = Color.from_rgb_u32(0x3185C9)
COLOR_TEAL = Color.from_rgb_u32(0x3CAFA3)
COLOR_GREEN = Color.from_rgb_u32(0x38C271)
COLOR_OLIVE = Color.from_rgb_u32(0xA2C238)
COLOR_YELLOW = Color.from_rgb_u32(0xF4CB62)
COLOR_ORANGE = Color.from_rgb_u32(0xDC7332)
COLOR_RED = Color.from_rgb_u32(0xDC3232)
COLOR_WHITE = Color.from_rgb_u32(0xF0F0F0)

PALETTE = (
    COLOR_PINK,
    COLOR_PURPLE,
    COLOR_VIOLET,
    COLOR_BLUE,
    COLOR_TEAL,
    COLOR_GREEN,
    COLOR_OLIVE,
    COLOR_YELLOW,
    COLOR_ORANGE,
    COLOR_RED,
    COLOR_LIGHT_BLUEGRAY,
    COLOR_WHITE,
)
