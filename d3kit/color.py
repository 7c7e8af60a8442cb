"""RGB colors with conversions to and from packed framebuffer pixel formats.

Bit layouts:

* 32 bit: ``AAAAAAAA RRRRRRRR GGGGGGGG BBBBBBBB``
* 24 bit: ``RRRRRRRR GGGGGGGG BBBBBBBB``
* 16 bit: ``RRRRR GGGGGG BBBBB``
* 15 bit: ``RRRRR GGGGG BBBBB``
"""

from __future__ import annotations

from dataclasses import dataclass

BRIGHTNESS_SHIFT = 85

_SUPPORTED_BPP = (15, 16, 24, 32)


def _clamp_byte(value: float) -> int:
    """Truncate a float to an integer saturated to the byte range."""
    return max(0, min(0xFF, int(value)))


@dataclass(frozen=True, slots=True)
class Color:
    """An RGBA color with 8-bit channels."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not 0 <= value <= 0xFF:
                raise ValueError(f"{name} must be in 0..255, got {value}")

    @classmethod
    def from_rgb(cls, rgb: int, bpp: int) -> Color:
        """Decode a packed pixel value of the given bit depth."""
        if bpp == 32:
            return cls.from_rgb_32(rgb)
        if bpp == 24:
            return cls.from_rgb_24(rgb)
        if bpp == 16:
            return cls.from_rgb_16(rgb & 0xFFFF)
        if bpp == 15:
            return cls.from_rgb_15(rgb & 0xFFFF)
        raise ValueError(f"invalid bpp {bpp}; expected one of {_SUPPORTED_BPP}")

    @classmethod
    def from_rgb_32(cls, rgba: int) -> Color:
        """Decode an ARGB 32-bit value."""
        rgba &= 0xFFFFFFFF
        return cls(
            red=(rgba >> 16) & 0xFF,
            green=(rgba >> 8) & 0xFF,
            blue=rgba & 0xFF,
            alpha=(rgba >> 24) & 0xFF,
        )

    @classmethod
    def from_rgb_24(cls, rgb: int) -> Color:
        """Decode an RGB 24-bit value; the resulting alpha is 0."""
        return cls(
            red=(rgb >> 16) & 0xFF,
            green=(rgb >> 8) & 0xFF,
            blue=rgb & 0xFF,
            alpha=0,
        )

    @classmethod
    def from_rgb_16(cls, rgb: int) -> Color:
        """Decode an RGB 5-6-5 value; the resulting alpha is 0."""
        rgb &= 0xFFFF
        return cls(
            red=(((rgb & 0xF800) >> 11) * (256 // 32)) & 0xFF,
            green=(((rgb & 0x07E0) >> 5) * (256 // 64)) & 0xFF,
            blue=((rgb & 0x001F) * (256 // 32)) & 0xFF,
            alpha=0,
        )

    @classmethod
    def from_rgb_15(cls, rgb: int) -> Color:
        """Decode an RGB 5-5-5 value; the resulting alpha is 0."""
        rgb &= 0xFFFF
        return cls(
            red=(((rgb & 0x7C00) >> 10) * (256 // 32)) & 0xFF,
            green=(((rgb & 0x03E0) >> 5) * (256 // 32)) & 0xFF,
            blue=((rgb & 0x001F) * (256 // 32)) & 0xFF,
            alpha=0,
        )

    def rgb_32(self) -> int:
        """Encode as an ARGB 32-bit value."""
        return (self.alpha << 24) | (self.red << 16) | (self.green << 8) | self.blue

    def rgb_24(self) -> int:
        """Encode as an RGB 24-bit value."""
        return (self.red << 16) | (self.green << 8) | self.blue

    def rgb_16(self) -> int:
        """Encode as an RGB 5-6-5 value."""
        return (self.blue >> 3) | ((self.green >> 2) << 5) | ((self.red >> 3) << 11)

    def rgb_15(self) -> int:
        """Encode as an RGB 5-5-5 value."""
        return (self.blue >> 3) | ((self.green >> 3) << 5) | ((self.red >> 3) << 10)

    def bright(self) -> Color:
        """Return a brighter variant, saturating each channel at 255."""
        return Color(
            red=min(self.red + BRIGHTNESS_SHIFT, 0xFF),
            green=min(self.green + BRIGHTNESS_SHIFT, 0xFF),
            blue=min(self.blue + BRIGHTNESS_SHIFT, 0xFF),
            alpha=self.alpha,
        )

    def dim(self) -> Color:
        """Return a dimmer variant, saturating each channel at 0."""
        return Color(
            red=max(self.red - BRIGHTNESS_SHIFT, 0),
            green=max(self.green - BRIGHTNESS_SHIFT, 0),
            blue=max(self.blue - BRIGHTNESS_SHIFT, 0),
            alpha=self.alpha,
        )

    def with_alpha(self, alpha: int) -> Color:
        """Return the same color with a different alpha value."""
        return Color(self.red, self.green, self.blue, alpha)

    def blend(self, color: Color) -> Color:
        """Composite ``color`` over this color using its alpha channel."""
        if color.alpha == 0:
            return self
        if color.alpha == 0xFF:
            return color
        if self.alpha == 0:
            return BLACK.blend(color)

        alpha1 = color.alpha / 255.0
        alpha2 = self.alpha / 255.0
        alpha3 = alpha1 + (1.0 - alpha1) * alpha2

        def mix(top: int, bottom: int) -> int:
            return _clamp_byte((1.0 / alpha3) * (alpha1 * top + (1.0 - alpha1) * alpha2 * bottom))

        return Color(
            red=mix(color.red, self.red),
            green=mix(color.green, self.green),
            blue=mix(color.blue, self.blue),
            alpha=_clamp_byte(alpha3 * 255.0),
        )


INVISIBLE = Color(0, 0, 0, 0)

# ANSI colors
BLACK = Color(0, 0, 0, 255)
RED = Color(170, 0, 0, 255)
GREEN = Color(0, 170, 0, 255)
YELLOW = Color(170, 170, 0, 255)
BROWN = Color(170, 85, 0, 255)
BLUE = Color(0, 0, 170, 255)
MAGENTA = Color(170, 0, 170, 255)
CYAN = Color(0, 170, 170, 255)
WHITE = Color(170, 170, 170, 255)

# Arbitrary colors
HHU_BLUE = Color(0, 106, 179, 255)
HHU_GREEN = Color(140, 177, 16, 255)