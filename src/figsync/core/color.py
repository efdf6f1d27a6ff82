"""Color normalization.

Colors arrive as fractional RGB channels and are written as ``#rrggbb``.
Alpha is never encoded in the hex string; opacity travels in its own field.

Channel rounding is round-half-away-from-zero everywhere. Python's built-in
round() rounds half to even, which would disagree with other exporters of
the same format on values like 126.5.
"""

import math

from figsync.domain.nodes import RGB


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, ties away from zero."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def channel_to_byte(channel: float) -> int:
    """Convert a fractional channel to an integer in [0, 255].

    Values outside [0, 1] are clamped first.
    """
    clamped = min(max(channel, 0.0), 1.0)
    return round_half_away_from_zero(clamped * 255)


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert fractional RGB channels to a lowercase ``#rrggbb`` string.

    Args:
        r: Red channel in [0, 1]
        g: Green channel in [0, 1]
        b: Blue channel in [0, 1]

    Returns:
        Six-digit hex color, e.g. "#ff8000"
    """
    return "#" + "".join(f"{channel_to_byte(c):02x}" for c in (r, g, b))


def color_to_hex(color: RGB) -> str:
    """Convert an RGB value to ``#rrggbb``."""
    return rgb_to_hex(color.r, color.g, color.b)


def hex_to_rgb(value: str) -> RGB:
    """Parse ``#rrggbb`` (or ``rrggbb``) back into fractional channels.

    Raises:
        ValueError: If the string is not a six-digit hex color
    """
    digits = value.lstrip("#")
    if len(digits) != 6:
        raise ValueError(f"Expected a six-digit hex color, got {value!r}")
    r, g, b = (int(digits[i:i + 2], 16) / 255 for i in (0, 2, 4))
    return RGB(r, g, b)
