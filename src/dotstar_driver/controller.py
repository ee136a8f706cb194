"""Controller - DotStar frame encoder.

Keeps the colour of every LED and the wire frame that shows them. Each
mutation re-encodes the affected LED records immediately, so update()
only has to hand the buffer to the byte sink.

Frame layout:
    4 zero bytes                      start frame
    4 bytes per LED                   0b111xxxxx brightness, then 3 colour bytes
    ceil((count - 1) / 16) + 2 bytes  footer, clocks the last LED's data through

Methods are NOT safe to call from multiple threads concurrently.
"""

import logging
import math
from typing import Iterable, List, Optional

from .colour import OFF, Colour
from .config import ConfigStep, ControllerConfig, ControllerSettings
from .errors import ConfigurationError, TransportError
from .gamma import GammaFunc
from .order import ChannelOffsets
from .sinks import ByteSink

logger = logging.getLogger(__name__)

# Leading zeros that start a frame
HEADER_SIZE = 4

# Bytes per LED record
LED_PACKET_SIZE = 4

# Top 3 bits of every brightness byte
BRIGHTNESS_HEADER = 0xE0


def footer_size(led_count: int) -> int:
    """Footer bytes needed to shift data through led_count LEDs."""
    return int(math.ceil((led_count - 1) / 16)) + 2


def frame_size(led_count: int) -> int:
    """Total wire frame length for led_count LEDs."""
    return HEADER_SIZE + led_count * LED_PACKET_SIZE + footer_size(led_count)


class Controller:
    """Friendly interface to a DotStar strip.

    Defaults: colours written b, g, r with 2.8 gamma correction. Pass
    configuration steps (see dotstar_driver.config) to override.
    """

    def __init__(self, sink: ByteSink, led_count: int, *steps: ConfigStep):
        """
        Args:
            sink: Receives the frame on update()
            led_count: Number of LEDs in the strip
            steps: Configuration steps, applied in order after the defaults
        """
        if isinstance(led_count, bool) or not isinstance(led_count, int) or led_count < 1:
            raise ConfigurationError(f"led_count must be a positive integer, got {led_count!r}")

        settings = ControllerSettings()
        for step in steps:
            step(settings)

        self._sink = sink
        self._count = led_count
        self._offsets: ChannelOffsets = settings.offsets
        self._gamma: Optional[GammaFunc] = settings.gamma
        self._brightness = 255
        self._colours: List[Colour] = [OFF] * led_count
        self._buffer = bytearray(frame_size(led_count))

        for position in range(led_count):
            self._encode(position)

        logger.debug(
            "Controller: %d LEDs, %d byte frame, offsets %s, gamma %s",
            led_count, len(self._buffer), tuple(self._offsets),
            "on" if self._gamma is not None else "off",
        )

    @classmethod
    def from_config(cls, sink: ByteSink, config: ControllerConfig) -> "Controller":
        """Build a controller from a ControllerConfig.

        Raises:
            ConfigurationError: The config does not validate.
        """
        valid, error = config.validate()
        if not valid:
            raise ConfigurationError(error)
        ctl = cls(sink, config.led_count, *config.steps())
        if config.global_brightness != 255:
            ctl.set_global_brightness(config.global_brightness)
        return ctl

    @property
    def led_count(self) -> int:
        return self._count

    def __len__(self) -> int:
        return self._count

    @property
    def frame(self) -> bytes:
        """Copy of the frame update() would send now."""
        return bytes(self._buffer)

    def update(self) -> None:
        """Send the current colours to the LEDs.

        Raises:
            TransportError: The sink failed or accepted fewer bytes than the frame.
        """
        data = bytes(self._buffer)
        try:
            written = self._sink.write(data)
        except OSError as e:
            logger.warning("Frame write failed: %s", e)
            raise TransportError(f"Unable to send LED frame: {e}", expected=len(data)) from e

        if written != len(data):
            logger.warning("Short frame write: %s of %d bytes", written, len(data))
            raise TransportError(
                "Unable to send the full LED colour buffer to device",
                written=written,
                expected=len(data),
            )
        logger.debug("Sent %d byte frame", len(data))

    def clear(self) -> None:
        """Turn off all LEDs. Does not call update()."""
        for position in range(self._count):
            self.set_colour(position, OFF)

    def snapshot(self) -> List[Colour]:
        """Copy of the currently set colours, sent or not."""
        return list(self._colours)

    def set_global_brightness(self, brightness: int) -> None:
        """Cap every LED's luminosity, scaled by brightness / 255.

        Only the top 5 bits are useful, so the minimum step is 8.
        """
        if isinstance(brightness, bool) or not isinstance(brightness, int) or not (0 <= brightness <= 255):
            raise ValueError(f"Global brightness must be an int 0-255, got {brightness!r}")
        self._brightness = brightness
        for position in range(self._count):
            self._encode(position)

    def get_global_brightness(self) -> int:
        return self._brightness

    def set_colour(self, position: int, colour: Colour) -> None:
        """Record the colour for one LED. Out-of-range positions are ignored."""
        if position < 0 or position >= self._count:
            return
        self._colours[position] = colour
        self._encode(position)

    def set_colours(self, colours: Iterable[Colour]) -> None:
        """Set LEDs from position 0 onwards. Extra colours are ignored."""
        for position, colour in enumerate(colours):
            if position >= self._count:
                return
            self.set_colour(position, colour)

    def get_colour(self, position: int) -> Colour:
        """Colour previously set at position (before gamma and brightness).

        Out-of-range positions give an all-zero colour.
        """
        if position < 0 or position >= self._count:
            return OFF
        return self._colours[position]

    def _encode(self, position: int) -> None:
        colour = self._colours[position]
        offset = HEADER_SIZE + position * LED_PACKET_SIZE

        luminosity = colour.l
        if self._brightness != 255:
            luminosity = self._brightness * luminosity // 255

        if self._gamma is not None:
            colour = self._gamma(colour)

        self._buffer[offset] = (luminosity >> 3) | BRIGHTNESS_HEADER
        self._buffer[offset + self._offsets.red] = colour.r
        self._buffer[offset + self._offsets.green] = colour.g
        self._buffer[offset + self._offsets.blue] = colour.b
