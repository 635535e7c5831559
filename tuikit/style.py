"""Terminal colours, colour-space conversions and line strokes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Union


@dataclass(frozen=True, slots=True)
class ColorIndex:
    """A colour from the terminal palette."""

    value: int


BLACK_COLOR = ColorIndex(0)
RED_COLOR = ColorIndex(1)
GREEN_COLOR = ColorIndex(2)
YELLOW_COLOR = ColorIndex(3)
BLUE_COLOR = ColorIndex(4)
MAGENTA_COLOR = ColorIndex(5)
CYAN_COLOR = ColorIndex(6)
WHITE_COLOR = ColorIndex(7)
BRIGHT_BLACK_COLOR = ColorIndex(8)
BRIGHT_RED_COLOR = ColorIndex(9)
BRIGHT_GREEN_COLOR = ColorIndex(10)
BRIGHT_YELLOW_COLOR = ColorIndex(11)
BRIGHT_BLUE_COLOR = ColorIndex(12)
BRIGHT_MAGENTA_COLOR = ColorIndex(13)
BRIGHT_CYAN_COLOR = ColorIndex(14)
BRIGHT_WHITE_COLOR = ColorIndex(15)


@dataclass(frozen=True, slots=True)
class DefaultColor:
    """The terminal's own default colour."""


DEFAULT_COLOR = DefaultColor()


@dataclass(frozen=True, slots=True)
class RGB:
    """Red, green and blue channels of 8 bits each."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "red", self.red & 0xFF)
        object.__setattr__(self, "green", self.green & 0xFF)
        object.__setattr__(self, "blue", self.blue & 0xFF)

    @classmethod
    def from_hex(cls, value: int) -> RGB:
        """Split 0xRRGGBB into its channels."""
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)


@dataclass(frozen=True, slots=True)
class HSL:
    """Hue in degrees [0, 359], saturation and lightness in percent [0, 100]."""

    hue: int
    saturation: int
    lightness: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "hue", self.hue & 0xFFFF)
        object.__setattr__(self, "saturation", self.saturation & 0xFF)
        object.__setattr__(self, "lightness", self.lightness & 0xFF)


def hsl_to_rgb(value: HSL) -> RGB:
    """Convert HSL to RGB; a hue of 360 or more gives black."""
    lightness = value.lightness / 100.0
    saturation = value.saturation / 100.0

    c = (1 - abs(2 * lightness - 1.0)) * saturation
    h_prime = value.hue / 60.0
    x = c * (1.0 - abs(math.fmod(h_prime, 2.0) - 1.0))
    m = lightness - c / 2.0

    c_ = int((c + m) * 255) & 0xFF
    x_ = int((x + m) * 255) & 0xFF
    m_ = int(m * 255) & 0xFF

    hue = value.hue
    if hue < 60:
        return RGB(c_, x_, m_)
    if hue < 120:
        return RGB(x_, c_, m_)
    if hue < 180:
        return RGB(m_, c_, x_)
    if hue < 240:
        return RGB(m_, x_, c_)
    if hue < 300:
        return RGB(x_, m_, c_)
    if hue < 360:
        return RGB(c_, m_, x_)
    return RGB(0, 0, 0)


def rgb_to_hsl(value: RGB) -> HSL:
    """Convert RGB to HSL, truncating each component."""
    r = value.red / 255.0
    g = value.green / 255.0
    b = value.blue / 255.0

    c_max = max(r, g, b)
    c_min = min(r, g, b)
    delta = c_max - c_min

    lightness = (c_max + c_min) / 2.0
    if delta == 0:
        saturation = 0.0
        hue = 0.0
    else:
        saturation = delta / (1 - abs(2 * lightness - 1))
        if c_max == r:
            hue = 60 * math.fmod((g - b) / delta, 6)
        elif c_max == g:
            hue = 60 * ((b - r) / delta + 2)
        else:
            hue = 60 * ((r - g) / delta + 4)
        if hue < 0:
            hue += 360

    return HSL(int(hue), int(saturation * 100), int(lightness * 100))


@dataclass(frozen=True, slots=True)
class TrueColor:
    """A 24-bit colour."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "red", self.red & 0xFF)
        object.__setattr__(self, "green", self.green & 0xFF)
        object.__setattr__(self, "blue", self.blue & 0xFF)

    @classmethod
    def from_rgb(cls, rgb: RGB) -> TrueColor:
        return cls(rgb.red, rgb.green, rgb.blue)

    @classmethod
    def from_hsl(cls, hsl: HSL) -> TrueColor:
        return cls.from_rgb(hsl_to_rgb(hsl))

    @property
    def value(self) -> int:
        """The packed value: red in the low byte, then green, then blue."""
        return self.red | (self.green << 8) | (self.blue << 16)

    def to_rgb(self) -> RGB:
        return RGB(self.red, self.green, self.blue)


Color = Union[ColorIndex, DefaultColor, TrueColor]


class Stroke(Enum):
    """Line styles for drawing boxes and borders."""

    LIGHT = "light"
    HEAVY = "heavy"
    DOUBLE = "double"
    DASHED = "dashed"
    BOLD = "bold"