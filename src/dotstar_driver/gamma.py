"""Gamma correction: perceptual channel values for the LEDs.

Only R, G and B are corrected. Luminosity is handled by the 5-bit
brightness field and passes through untouched.
"""

import math
from typing import Callable, Sequence

from .colour import Colour

GammaFunc = Callable[[Colour], Colour]

DEFAULT_GAMMA = 2.8

# Pre-computed gamma 2.8 table, used by default_gamma
GAMMA_TABLE = (
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0,
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 1, 1, 1, 1,
    1, 1, 1, 1, 1, 1, 1, 1, 1, 2, 2, 2, 2, 2, 2, 2,
    2, 3, 3, 3, 3, 3, 3, 3, 4, 4, 4, 4, 4, 5, 5, 5,
    5, 6, 6, 6, 6, 7, 7, 7, 7, 8, 8, 8, 9, 9, 9, 10,
    10, 10, 11, 11, 11, 12, 12, 13, 13, 13, 14, 14, 15, 15, 16, 16,
    17, 17, 18, 18, 19, 19, 20, 20, 21, 21, 22, 22, 23, 24, 24, 25,
    25, 26, 27, 27, 28, 29, 29, 30, 31, 32, 32, 33, 34, 35, 35, 36,
    37, 38, 39, 39, 40, 41, 42, 43, 44, 45, 46, 47, 48, 49, 50, 50,
    51, 52, 54, 55, 56, 57, 58, 59, 60, 61, 62, 63, 64, 66, 67, 68,
    69, 70, 72, 73, 74, 75, 77, 78, 79, 81, 82, 83, 85, 86, 87, 89,
    90, 92, 93, 95, 96, 98, 99, 101, 102, 104, 105, 107, 109, 110, 112, 114,
    115, 117, 119, 120, 122, 124, 126, 127, 129, 131, 133, 135, 137, 138, 140, 142,
    144, 146, 148, 150, 152, 154, 156, 158, 160, 162, 164, 167, 169, 171, 173, 175,
    177, 180, 182, 184, 186, 189, 191, 193, 196, 198, 200, 203, 205, 208, 210, 213,
    215, 218, 220, 223, 225, 228, 231, 233, 236, 239, 241, 244, 247, 249, 252, 255,
)


def default_gamma(colour: Colour) -> Colour:
    """Apply the pre-computed 2.8 gamma table to R, G, B."""
    return Colour(
        r=GAMMA_TABLE[colour.r],
        g=GAMMA_TABLE[colour.g],
        b=GAMMA_TABLE[colour.b],
        l=colour.l,
    )


def build_gamma_table(gamma: float = DEFAULT_GAMMA) -> tuple:
    """256-entry lookup table for the given gamma exponent."""
    if not math.isfinite(gamma) or gamma <= 0:
        raise ValueError(f"gamma must be a positive finite number, got {gamma}")
    return tuple(int((i / 255.0) ** gamma * 255 + 0.5) for i in range(256))


def gamma_from_table(table: Sequence[int]) -> GammaFunc:
    """Wrap a 256-entry lookup table as a gamma function."""
    table = tuple(table)
    if len(table) != 256:
        raise ValueError(f"Gamma table needs 256 entries, got {len(table)}")
    if any(not (0 <= v <= 255) for v in table):
        raise ValueError("Gamma table entries must be 0-255")

    def _apply(colour: Colour) -> Colour:
        return Colour(r=table[colour.r], g=table[colour.g], b=table[colour.b], l=colour.l)

    return _apply
