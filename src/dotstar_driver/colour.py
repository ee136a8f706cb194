"""Colour model: RGB plus per-LED luminosity.

A Colour is immutable. Luminosity (L) has only 32 levels on the wire
(the top 5 bits), so use increments of 8.
"""

import string
from dataclasses import dataclass


_HEX_DIGITS = frozenset(string.hexdigits)


@dataclass(frozen=True)
class Colour:
    """Colour and luminosity (brightness) for one LED."""
    r: int
    g: int
    b: int
    l: int = 255  # Luminosity, 255 is maximum

    def __post_init__(self):
        for name in ("r", "g", "b", "l"):
            value = getattr(self, name)
            if not isinstance(value, int) or not (0 <= value <= 255):
                raise ValueError(f"Colour.{name} must be an int 0-255, got {value!r}")

    @classmethod
    def from_hex(cls, text: str, strict: bool = False) -> "Colour":
        """Parse '#RRGGBB' or '#RRGGBBLL'. Luminosity defaults to 255.

        Lenient by default: any other length gives Colour(0, 0, 0, 255), and
        parsing stops at the first non-hex digit: a pair whose second digit
        is bad keeps its first digit as the field value, and every later
        field stays at its default.
        Pass strict=True to get a ValueError instead.
        """
        fields = [0, 0, 0, 255]
        if len(text) not in (7, 9):
            if strict:
                raise ValueError(f"Expected #RRGGBB or #RRGGBBLL, got {text!r}")
            return cls(*fields)

        if not text.startswith("#"):
            if strict:
                raise ValueError(f"Hex colour must start with '#', got {text!r}")
            return cls(*fields)

        for i in range((len(text) - 1) // 2):
            pair = text[1 + 2 * i:3 + 2 * i]
            if set(pair) <= _HEX_DIGITS:
                fields[i] = int(pair, 16)
                continue
            if strict:
                raise ValueError(f"Invalid hex digits {pair!r} in {text!r}")
            if pair[0] in _HEX_DIGITS:
                fields[i] = int(pair[0], 16)
            break
        return cls(*fields)

    @property
    def hex(self) -> str:
        """'#RRGGBBLL' form, uppercase."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}{self.l:02X}"

    def blend(self, target: "Colour", ratio: float) -> "Colour":
        """Colour that is `ratio` of the way from this one to `target`.

        Channels are truncated, not rounded.
        """
        if ratio <= 0:
            return self
        if ratio >= 1:
            return target
        return Colour(
            r=int((target.r - self.r) * ratio + self.r),
            g=int((target.g - self.g) * ratio + self.g),
            b=int((target.b - self.b) * ratio + self.b),
            l=int((target.l - self.l) * ratio + self.l),
        )

    def __str__(self) -> str:
        return f"R: {self.r} G: {self.g} B: {self.b} L: {self.l} ({self.hex})"


OFF = Colour(0, 0, 0, 0)
RED = Colour(255, 0, 0, 255)
GREEN = Colour(0, 255, 0, 255)
BLUE = Colour(0, 0, 255, 255)
WHITE = Colour(255, 255, 255, 255)
