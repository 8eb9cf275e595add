"""Number formatting helpers for compact SVG output. No engine imports."""

from __future__ import annotations

import re

NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")


def format_number(value: float, precision: int) -> str:
    """Round to ``precision`` fractional digits and drop every redundant character.

    0.50 → ".5", -0.5 → "-.5", 3.0 → "3", -0.0 → "0".
    """
    text = f"{value:.{precision}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", "", "-"):
        return "0"
    if text.startswith("0."):
        return text[1:]
    if text.startswith("-0."):
        return "-" + text[2:]
    return text


def join_numbers(numbers: list[str], previous: str | None = None) -> str:
    """Join formatted numbers with the fewest separators.

    A separator is only needed when the next number could be read as part of the
    one before it. ``previous`` is the number already emitted ahead of the list.
    """
    out: list[str] = []
    prev = previous
    for num in numbers:
        if prev is not None and not _self_delimiting(prev, num):
            out.append(" ")
        out.append(num)
        prev = num
    return "".join(out)


def _self_delimiting(prev: str, num: str) -> bool:
    if num.startswith("-"):
        return True
    return num.startswith(".") and "." in prev and "e" not in prev.lower()


def parse_numbers(value: str) -> list[float]:
    return [float(m) for m in NUMBER_RE.findall(value)]


def close_to(a: float, b: float, eps: float) -> bool:
    return abs(a - b) <= eps


def to_float(value: str | None) -> float | None:
    """Plain number (optionally ``px``) → float; anything else → None."""
    if value is None:
        return None
    text = value.strip()
    if text.endswith("px"):
        text = text[:-2]
    if not NUMBER_RE.fullmatch(text):
        return None
    return float(text)
