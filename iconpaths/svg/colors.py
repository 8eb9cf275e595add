"""Color value canonicalization."""

from __future__ import annotations

import re

from iconpaths.svg.collections import COLOR_NAMES, COLOR_SHORT_NAMES

_RGB_RE = re.compile(
    r"^rgb\(\s*([+-]?[\d.]+)(%?)\s*[,\s]\s*([+-]?[\d.]+)(%?)\s*[,\s]\s*([+-]?[\d.]+)(%?)\s*\)$",
    re.IGNORECASE,
)
_LONG_HEX_RE = re.compile(r"^#([0-9a-f])\1([0-9a-f])\2([0-9a-f])\3$", re.IGNORECASE)
_HEX_RE = re.compile(r"^#(?:[0-9a-f]{3}|[0-9a-f]{6})$", re.IGNORECASE)

CURRENT_COLOR = "currentColor"


def adopts_current_color(value: str, rule: bool | str) -> bool:
    """Whether ``value`` should become ``currentColor`` under the adoption rule.

    ``True`` adopts every paint except ``none`` and paint-server references; a
    string is a regular expression the whole value must match.
    """
    if rule is False or rule is None:
        return False
    if rule is True:
        return value != "none" and not value.startswith("url(") and value != CURRENT_COLOR
    return re.fullmatch(rule, value) is not None


def _channel(raw: str, percent: str) -> int:
    number = float(raw)
    if percent:
        number = number * 2.55
    return max(0, min(255, round(number)))


def shorten_color(value: str) -> str:
    """Shortest spelling of a color: names → hex, rgb() → hex, #aabbcc → #abc, hex → name."""
    color = value.strip()
    lower = color.lower()
    if lower in COLOR_NAMES:
        color = COLOR_NAMES[lower]
    else:
        m = _RGB_RE.match(color)
        if m:
            r = _channel(m.group(1), m.group(2))
            g = _channel(m.group(3), m.group(4))
            b = _channel(m.group(5), m.group(6))
            color = f"#{r:02x}{g:02x}{b:02x}"
    if not _HEX_RE.match(color):
        return value
    color = color.lower()
    m = _LONG_HEX_RE.match(color)
    if m:
        color = f"#{m.group(1)}{m.group(2)}{m.group(3)}"
    return COLOR_SHORT_NAMES.get(color, color)


def convert_color(value: str, current_color: bool | str = False) -> str:
    if adopts_current_color(value, current_color):
        return CURRENT_COLOR
    return shorten_color(value)
