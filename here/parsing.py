"""Shared parsing helpers for environment and CLI value normalization."""

from __future__ import annotations

import re


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})
_HEX_COLOR_PATTERN = re.compile(r"^#?([0-9a-fA-F]{6})$")


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None

    token = normalized.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def parse_rgb_color(value: str, field_name: str) -> tuple[int, int, int]:
    """Parse an `R,G,B` triple or `#rrggbb` hex string into an RGB tuple.

    Raises:
        ValueError: If the value is not a valid color in either notation.
    """

    text = value.strip()
    hex_match = _HEX_COLOR_PATTERN.match(text)
    if hex_match is not None:
        digits = hex_match.group(1)
        return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    parts = [part.strip() for part in text.split(",")]
    if len(parts) == 3 and all(part.isdigit() for part in parts):
        channels = tuple(int(part) for part in parts)
        if all(0 <= channel <= 255 for channel in channels):
            return channels[0], channels[1], channels[2]

    raise ValueError(
        f"`{field_name}` must be an RGB color as `R,G,B` (0-255) or `#rrggbb`."
    )
