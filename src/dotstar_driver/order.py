"""Channel order: where R, G and B sit inside each 4-byte LED record.

Byte 0 of a record is the brightness byte, so offsets run 1-3.
Strips differ by hardware revision; most DotStars want "bgr".
"""

from typing import NamedTuple

from .errors import ConfigurationError

DEFAULT_ORDER = "bgr"


class ChannelOffsets(NamedTuple):
    """Record offsets for each colour channel."""
    red: int
    green: int
    blue: int


def parse_channel_order(order: str) -> ChannelOffsets:
    """Turn an order string like "bgr" or "RGB" into record offsets.

    Raises:
        ConfigurationError: A letter is missing or there are extra characters.
    """
    lower = order.lower()
    r_pos, g_pos, b_pos = lower.find("r"), lower.find("g"), lower.find("b")

    if r_pos == -1 or g_pos == -1 or b_pos == -1:
        raise ConfigurationError(f"Order configuration must contain r, g and b, got {order!r}")

    if len(order) != 3:
        raise ConfigurationError(
            f"Additional characters other than rgb are not supported, got {order!r}"
        )

    # +1 for the brightness byte at the start of each record
    return ChannelOffsets(red=r_pos + 1, green=g_pos + 1, blue=b_pos + 1)
