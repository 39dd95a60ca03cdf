"""
Unicode glyph tables for platforms without native text styling.

Bold uses MATHEMATICAL SANS-SERIF BOLD (letters and digits), italic uses
MATHEMATICAL SANS-SERIF ITALIC (letters only; that block has no digits).
Characters outside the tables pass through unchanged.
"""

import string

_BOLD_UPPER_START = 0x1D5D4  # 𝗔
_BOLD_LOWER_START = 0x1D5EE  # 𝗮
_BOLD_DIGIT_START = 0x1D7EC  # 𝟬
_ITALIC_UPPER_START = 0x1D608  # 𝘈
_ITALIC_LOWER_START = 0x1D622  # 𝘢

COMBINING_LOW_LINE = "\u0332"


def _glyph_range(chars: str, start: int) -> dict[str, str]:
    return {char: chr(start + offset) for offset, char in enumerate(chars)}


BOLD_MAP: dict[str, str] = {
    **_glyph_range(string.ascii_uppercase, _BOLD_UPPER_START),
    **_glyph_range(string.ascii_lowercase, _BOLD_LOWER_START),
    **_glyph_range(string.digits, _BOLD_DIGIT_START),
}

ITALIC_MAP: dict[str, str] = {
    **_glyph_range(string.ascii_uppercase, _ITALIC_UPPER_START),
    **_glyph_range(string.ascii_lowercase, _ITALIC_LOWER_START),
}

_BOLD_TABLE = str.maketrans(BOLD_MAP)
_ITALIC_TABLE = str.maketrans(ITALIC_MAP)


def to_bold(text: str) -> str:
    """Substitute Latin letters and digits with their bold glyphs."""
    return text.translate(_BOLD_TABLE)


def to_italic(text: str) -> str:
    """Substitute Latin letters with their italic glyphs."""
    return text.translate(_ITALIC_TABLE)


def to_underline(text: str) -> str:
    """Follow every character, Latin or not, with a combining low line."""
    return "".join(char + COMBINING_LOW_LINE for char in text)
