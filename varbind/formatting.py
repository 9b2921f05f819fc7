"""Rendering of variable values into presentable strings."""

import math
from typing import Union

from .model import Color, ResolvedType, VariableValue


def format_value(resolved_type: Union[ResolvedType, str], value: VariableValue) -> str:
    """
    Render a value for display.

    Colors of COLOR variables render as lowercase hex, everything else
    uses its natural string form.

    Args:
        resolved_type: Resolved type of the variable the value belongs to
        value: Terminal (non-alias) value

    Returns:
        Formatted string
    """
    if resolved_type == ResolvedType.COLOR and isinstance(value, Color):
        return rgb_to_hex(value)
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def rgb_to_hex(color: Color) -> str:
    """
    Convert a color to '#rrggbb', or '#rrggbbaa' when not fully opaque.

    Example:
        Color(1, 0, 0, 0.5) -> '#ff000080'
    """
    channels = [color.r, color.g, color.b]
    if color.alpha != 1:
        channels.append(color.alpha)
    return '#' + ''.join(_channel_to_hex(c) for c in channels)


def _channel_to_hex(channel: float) -> str:
    # Half-up rounding: 0.5 * 255 = 127.5 -> 128
    byte = int(math.floor(channel * 255 + 0.5))
    byte = min(max(byte, 0), 255)
    return f"{byte:02x}"
