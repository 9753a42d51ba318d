from __future__ import annotations

from frozendict import frozendict

FRACTION_SLASH = "⁄"

# Unicode vulgar fraction glyphs and the "n/d" text they stand for
GLYPHS: frozendict[str, str] = frozendict(
    {
        "½": "1/2",
        "⅓": "1/3",
        "⅔": "2/3",
        "¼": "1/4",
        "¾": "3/4",
        "⅕": "1/5",
        "⅖": "2/5",
        "⅗": "3/5",
        "⅘": "4/5",
        "⅙": "1/6",
        "⅚": "5/6",
        "⅐": "1/7",
        "⅛": "1/8",
        "⅜": "3/8",
        "⅝": "5/8",
        "⅞": "7/8",
        "⅑": "1/9",
        "⅒": "1/10",
        "↉": "0/3",
    }
)

_GLYPHS_BY_VALUE: frozendict[tuple[int, int], str] = frozendict(
    {tuple(int(part) for part in text.split("/")): glyph for glyph, text in GLYPHS.items()}
)


def is_glyph(text: str) -> bool:
    return text in GLYPHS


def decode_glyphs(text: str) -> str:
    """
    Replaces every vulgar fraction glyph by its "n/d" text. A glyph written directly after a digit
    (as in "3¾") is separated from it by a space, so that it reads as a mixed fraction.

    Args:
        text (str): Input text

    Returns:
        str: Text without glyphs
    """
    decoded = []
    for i, char in enumerate(text):
        if char in GLYPHS:
            if i > 0 and text[i - 1].isdigit():
                decoded.append(" ")
            decoded.append(GLYPHS[char])
        elif char == FRACTION_SLASH:
            decoded.append("/")
        else:
            decoded.append(char)
    return "".join(decoded)


def encode_glyph(numerator: int, denominator: int) -> str | None:
    return _GLYPHS_BY_VALUE.get((numerator, denominator))
