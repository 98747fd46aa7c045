"""Procedurally generated RGB textures for the robots and the player's cannon."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from robotsiege.world import RandomSource

CHANNELS = 3

ENEMY_TEXTURE_SIZE = 512
ENEMY_BASE_GRAY = 200
ENEMY_PANEL_GRAY = 160
ENEMY_PANEL_SPACING = 32
ENEMY_NOISE = 10

SMALL_TEXTURE_SIZE = 64
METALLIC_BASE_GRAY = 100
METALLIC_PERIOD = 128
DARK_BASE_GRAY = 50
DARK_NOISE = 20


@dataclass(frozen=True)
class TextureImage:
    """A tightly packed RGB image, one byte per channel, rows stored bottom-up."""

    width: int
    height: int
    pixels: bytes

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"texture size {self.width}x{self.height} is not positive")
        expected = self.width * self.height * CHANNELS
        if len(self.pixels) != expected:
            raise ValueError(
                f"expected {expected} bytes for a {self.width}x{self.height} "
                f"RGB texture, got {len(self.pixels)}"
            )

    def pixel(self, x: int, y: int) -> tuple[int, int, int]:
        """Return the RGB value at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        start = (y * self.width + x) * CHANNELS
        red, green, blue = self.pixels[start:start + CHANNELS]
        return red, green, blue


def _gray_image(width: int, height: int, grays: dict[tuple[int, int], int]) -> TextureImage:
    data = bytearray()
    for y in range(height):
        for x in range(width):
            data.extend((grays[x, y],) * CHANNELS)
    return TextureImage(width, height, bytes(data))


def enemy_robot_texture(rng: Optional[RandomSource] = None) -> TextureImage:
    """Light grey panelling with darker seams every 32 pixels and slight noise."""
    source: RandomSource = rng if rng is not None else random.Random()
    size = ENEMY_TEXTURE_SIZE
    data = bytearray()
    for y in range(size):
        for x in range(size):
            on_seam = x % ENEMY_PANEL_SPACING == 0 or y % ENEMY_PANEL_SPACING == 0
            base = ENEMY_PANEL_GRAY if on_seam else ENEMY_BASE_GRAY
            gray = base - source.randrange(ENEMY_NOISE)
            data.extend((gray,) * CHANNELS)
    return TextureImage(size, size, bytes(data))


def metallic_texture() -> TextureImage:
    """A diagonal grey ramp giving a brushed-metal look."""
    size = SMALL_TEXTURE_SIZE
    grays = {
        (x, y): (x + y) % METALLIC_PERIOD + METALLIC_BASE_GRAY
        for x in range(size)
        for y in range(size)
    }
    return _gray_image(size, size, grays)


def dark_gray_texture(rng: Optional[RandomSource] = None) -> TextureImage:
    """Dark grey noise; random values are drawn column by column."""
    source: RandomSource = rng if rng is not None else random.Random()
    size = SMALL_TEXTURE_SIZE
    grays = {}
    for x in range(size):
        for y in range(size):
            grays[x, y] = DARK_BASE_GRAY + source.randrange(DARK_NOISE)
    return _gray_image(size, size, grays)