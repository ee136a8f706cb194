"""
dotstar-driver - DotStar (APA102) LED frame encoder

Keeps per-LED colour state and turns it into the exact byte frame a
DotStar strip expects. The transport is yours: hand the Controller any
object with write(bytes) -> int.
"""

__version__ = "0.1.0"

from .colour import Colour, OFF, RED, GREEN, BLUE, WHITE
from .gamma import GAMMA_TABLE, default_gamma, build_gamma_table, gamma_from_table
from .order import DEFAULT_ORDER, ChannelOffsets, parse_channel_order
from .errors import ErrorType, DotstarError, ConfigurationError, TransportError
from .config import (
    ControllerSettings,
    ControllerConfig,
    ConfigManager,
    order_config,
    disable_gamma_correction,
    custom_gamma_correction,
)
from .sinks import ByteSink, CallableSink
from .controller import Controller, footer_size, frame_size

__all__ = [
    "Colour",
    "OFF",
    "RED",
    "GREEN",
    "BLUE",
    "WHITE",
    "GAMMA_TABLE",
    "default_gamma",
    "build_gamma_table",
    "gamma_from_table",
    "DEFAULT_ORDER",
    "ChannelOffsets",
    "parse_channel_order",
    "ErrorType",
    "DotstarError",
    "ConfigurationError",
    "TransportError",
    "ControllerSettings",
    "ControllerConfig",
    "ConfigManager",
    "order_config",
    "disable_gamma_correction",
    "custom_gamma_correction",
    "ByteSink",
    "CallableSink",
    "Controller",
    "footer_size",
    "frame_size",
]
