"""
Utilities for converting units to displayable strings.
"""

import unicodedata

# visible stand-in for the separator space
VISIBLE_SPACE = "␣"


def _escape_ctrl_chars(s: str) -> str:
    """Replace all Unicode control characters with their escape sequences."""
    cleaned = []
    for c in s:
        # control category codes vary: Cc, Cf, Cn etc.
        # so check via first character
        if unicodedata.category(c)[0] != "C":
            cleaned.append(c)
        else:
            cleaned.append(f"\\u{ord(c):04x}")
    return "".join(cleaned)


def render_unit(unit: str) -> str:
    """
    Make a unit printable on one line.

    A lone space is shown as ``␣``; newlines, tabs and other control
    characters are escaped.
    """
    if unit == " ":
        return VISIBLE_SPACE
    return _escape_ctrl_chars(unit)
