"""Path data codec — parse ``d`` into absolute segments and write it back minimally.

Parsing normalizes every command to one of M, L, C, Q, A, Z in absolute
coordinates (H/V become L, S/T get their implicit control point). Writing
re-derives the shorthands and picks, per segment, the shorter of the absolute
and relative spelling.
"""

from __future__ import annotations

import logging
import math
from typing import NamedTuple

from iconpaths.utils.numbers import NUMBER_RE, close_to, format_number, join_numbers

logger = logging.getLogger(__name__)

_PARAM_COUNTS = {"M": 2, "L": 2, "H": 1, "V": 1, "C": 6, "S": 4, "Q": 4, "T": 2, "A": 7, "Z": 0}
_SEPARATORS = " \t\r\n\f,"
_NUMBER_START = "+-.0123456789"


class Segment(NamedTuple):
    command: str
    args: tuple[float, ...] = ()

    @property
    def end(self) -> tuple[float, float] | None:
        if self.command == "Z":
            return None
        return self.args[-2], self.args[-1]


class _Point(NamedTuple):
    x: float
    y: float


# ── Parsing ───────────────────────────────────────────────────────────────


def _scan(d: str) -> list[tuple[str, list[float]]]:
    """Tokenize path data into (letter, params). Stops at the first malformed token,
    keeping everything parsed before it."""
    commands: list[tuple[str, list[float]]] = []
    pos, n = 0, len(d)

    def skip(p: int) -> int:
        while p < n and d[p] in _SEPARATORS:
            p += 1
        return p

    while True:
        pos = skip(pos)
        if pos >= n:
            break
        letter = d[pos]
        upper = letter.upper()
        if upper not in _PARAM_COUNTS:
            logger.debug("Path data: unexpected %r at %d, truncating", letter, pos)
            break
        pos += 1
        count = _PARAM_COUNTS[upper]
        if count == 0:
            commands.append((letter, []))
            continue

        params: list[float] = []
        broken = False
        while True:
            group: list[float] = []
            for i in range(count):
                pos = skip(pos)
                if upper == "A" and i in (3, 4):
                    if pos < n and d[pos] in "01":
                        group.append(float(d[pos]))
                        pos += 1
                        continue
                    broken = True
                    break
                m = NUMBER_RE.match(d, pos)
                if not m:
                    broken = True
                    break
                group.append(float(m.group()))
                pos = m.end()
            if broken:
                break
            params.extend(group)
            look = skip(pos)
            if look >= n or d[look] not in _NUMBER_START:
                break

        if params:
            commands.append((letter, params))
        if broken:
            logger.debug("Path data: malformed parameters for %r, truncating", letter)
            break
    return commands


def _reflect(point: _Point, about: _Point) -> _Point:
    return _Point(2 * about.x - point.x, 2 * about.y - point.y)


def parse_path_data(d: str) -> list[Segment]:
    """Parse path data into absolute M/L/C/Q/A/Z segments."""
    segments: list[Segment] = []
    cur = _Point(0.0, 0.0)
    start = cur
    last_cubic: _Point | None = None
    last_quad: _Point | None = None

    for letter, params in _scan(d):
        upper = letter.upper()
        rel = letter != upper
        if upper == "Z":
            segments.append(Segment("Z"))
            cur = start
            last_cubic = last_quad = None
            continue

        count = _PARAM_COUNTS[upper]
        for i in range(0, len(params), count):
            p = params[i:i + count]
            ox, oy = (cur.x, cur.y) if rel else (0.0, 0.0)
            next_cubic: _Point | None = None
            next_quad: _Point | None = None

            if upper == "M":
                x, y = p[0] + ox, p[1] + oy
                if i == 0:
                    seg = Segment("M", (x, y))
                    start = _Point(x, y)
                else:
                    seg = Segment("L", (x, y))
            elif upper == "L":
                seg = Segment("L", (p[0] + ox, p[1] + oy))
            elif upper == "H":
                seg = Segment("L", (p[0] + ox, cur.y))
            elif upper == "V":
                seg = Segment("L", (cur.x, p[0] + oy))
            elif upper in ("C", "S"):
                if upper == "C":
                    c1 = _Point(p[0] + ox, p[1] + oy)
                    rest = p[2:]
                else:
                    c1 = _reflect(last_cubic, cur) if last_cubic else cur
                    rest = p
                c2 = _Point(rest[0] + ox, rest[1] + oy)
                seg = Segment("C", (c1.x, c1.y, c2.x, c2.y, rest[2] + ox, rest[3] + oy))
                next_cubic = c2
            elif upper in ("Q", "T"):
                if upper == "Q":
                    c = _Point(p[0] + ox, p[1] + oy)
                    rest = p[2:]
                else:
                    c = _reflect(last_quad, cur) if last_quad else cur
                    rest = p
                seg = Segment("Q", (c.x, c.y, rest[0] + ox, rest[1] + oy))
                next_quad = c
            else:
                rx, ry, rot, large, sweep, x, y = p
                seg = Segment("A", (abs(rx), abs(ry), rot, large, sweep, x + ox, y + oy))

            segments.append(seg)
            cur = _Point(*seg.end)
            last_cubic, last_quad = next_cubic, next_quad

    return segments


# ── Writing ───────────────────────────────────────────────────────────────


def round_segments(segments: list[Segment], precision: int) -> list[Segment]:
    out: list[Segment] = []
    for seg in segments:
        if seg.command == "A":
            rx, ry, rot, large, sweep, x, y = seg.args
            args = (round(rx, precision), round(ry, precision), round(rot, precision),
                    large, sweep, round(x, precision), round(y, precision))
        else:
            args = tuple(round(a, precision) for a in seg.args)
        out.append(Segment(seg.command, args))
    return out


def _is_straight(p0: _Point, controls: list[_Point], p3: _Point, eps: float) -> bool:
    """Control points on the chord between p0 and p3, so the curve renders as a line."""
    dx, dy = p3.x - p0.x, p3.y - p0.y
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return False
    length = length_sq ** 0.5
    for c in controls:
        cross = (c.x - p0.x) * dy - (c.y - p0.y) * dx
        if abs(cross) / length > eps:
            return False
        t = ((c.x - p0.x) * dx + (c.y - p0.y) * dy) / length_sq
        if t < 0 or t > 1:
            return False
    return True


def simplify_segments(segments: list[Segment], precision: int) -> list[Segment]:
    """Drop segments that draw nothing and turn straight curves into lines."""
    eps = 10.0 ** -precision
    out: list[Segment] = []
    cur = _Point(0.0, 0.0)
    start = cur

    for i, seg in enumerate(segments):
        nxt = segments[i + 1] if i + 1 < len(segments) else None
        if seg.command == "Z":
            out.append(seg)
            cur = start
            continue
        end = _Point(*seg.end)

        if seg.command == "M":
            start = end
        elif seg.command == "C":
            a = seg.args
            if _is_straight(cur, [_Point(a[0], a[1]), _Point(a[2], a[3])], end, eps):
                seg = Segment("L", (end.x, end.y))
        elif seg.command == "Q":
            a = seg.args
            if _is_straight(cur, [_Point(a[0], a[1])], end, eps):
                seg = Segment("L", (end.x, end.y))
        elif seg.command == "A" and (seg.args[0] == 0 or seg.args[1] == 0):
            seg = Segment("L", (end.x, end.y))

        if seg.command != "M":
            zero_length = close_to(end.x, cur.x, eps) and close_to(end.y, cur.y, eps)
            # Keep a lone zero-length segment after a moveto: it renders a dot with round caps
            if zero_length and out and out[-1].command != "M":
                continue
            if (
                seg.command == "L"
                and nxt is not None
                and nxt.command == "Z"
                and close_to(end.x, start.x, eps)
                and close_to(end.y, start.y, eps)
                and out
                and out[-1].command != "M"
            ):
                cur = end
                continue

        out.append(seg)
        cur = end
    return out


def _candidates(seg: Segment, cur: _Point, prev: Segment | None, fmt) -> list[tuple[str, list[str]]]:
    """Absolute and relative spellings of a segment (relative last so ties prefer it)."""
    a = seg.args
    if seg.command == "M":
        x, y = a
        return [("M", [fmt(x), fmt(y)]), ("m", [fmt(x - cur.x), fmt(y - cur.y)])]
    if seg.command == "L":
        x, y = a
        if fmt(y) == fmt(cur.y) and fmt(x) != fmt(cur.x):
            return [("H", [fmt(x)]), ("h", [fmt(x - cur.x)])]
        if fmt(x) == fmt(cur.x) and fmt(y) != fmt(cur.y):
            return [("V", [fmt(y)]), ("v", [fmt(y - cur.y)])]
        return [("L", [fmt(x), fmt(y)]), ("l", [fmt(x - cur.x), fmt(y - cur.y)])]
    if seg.command == "C":
        x1, y1, x2, y2, x, y = a
        if prev is not None and prev.command == "C":
            implied = _reflect(_Point(prev.args[2], prev.args[3]), cur)
        else:
            implied = cur
        if fmt(implied.x) == fmt(x1) and fmt(implied.y) == fmt(y1):
            return [
                ("S", [fmt(x2), fmt(y2), fmt(x), fmt(y)]),
                ("s", [fmt(x2 - cur.x), fmt(y2 - cur.y), fmt(x - cur.x), fmt(y - cur.y)]),
            ]
        return [
            ("C", [fmt(v) for v in a]),
            ("c", [fmt(x1 - cur.x), fmt(y1 - cur.y), fmt(x2 - cur.x), fmt(y2 - cur.y),
                   fmt(x - cur.x), fmt(y - cur.y)]),
        ]
    if seg.command == "Q":
        x1, y1, x, y = a
        if prev is not None and prev.command == "Q":
            implied = _reflect(_Point(prev.args[0], prev.args[1]), cur)
        else:
            implied = None
        if implied is not None and fmt(implied.x) == fmt(x1) and fmt(implied.y) == fmt(y1):
            return [("T", [fmt(x), fmt(y)]), ("t", [fmt(x - cur.x), fmt(y - cur.y)])]
        return [
            ("Q", [fmt(v) for v in a]),
            ("q", [fmt(x1 - cur.x), fmt(y1 - cur.y), fmt(x - cur.x), fmt(y - cur.y)]),
        ]
    rx, ry, rot, large, sweep, x, y = a
    head = [fmt(rx), fmt(ry), fmt(rot), str(int(large)), str(int(sweep))]
    return [("A", head + [fmt(x), fmt(y)]), ("a", head + [fmt(x - cur.x), fmt(y - cur.y)])]


def _implicit(prev_letter: str | None, letter: str) -> bool:
    """Whether ``letter`` may be omitted after ``prev_letter``."""
    if prev_letter is None or letter in ("M", "m", "z"):
        return False
    if prev_letter == letter:
        return True
    return (prev_letter, letter) in (("M", "L"), ("m", "l"))


def format_path_data(segments: list[Segment], precision: int) -> str:
    """Write segments back as the shortest path data string."""

    def fmt(v: float) -> str:
        return format_number(v, precision)

    parts: list[str] = []
    cur = _Point(0.0, 0.0)
    start = cur
    prev: Segment | None = None
    prev_letter: str | None = None
    last_number: str | None = None

    for index, seg in enumerate(segments):
        if seg.command == "Z":
            parts.append("z")
            prev_letter, last_number, prev = "z", None, seg
            cur = start
            continue

        best: tuple[str, str, list[str]] | None = None
        for letter, numbers in _candidates(seg, cur, prev, fmt):
            if index == 0 and letter == "m":
                continue
            if _implicit(prev_letter, letter):
                chunk = _continuation(numbers, last_number)
            else:
                chunk = letter + join_numbers(numbers)
            if best is None or len(chunk) <= len(best[1]):
                best = (letter, chunk, numbers)

        letter, chunk, numbers = best
        parts.append(chunk)
        prev_letter, last_number = letter, numbers[-1]
        if seg.command == "M":
            start = _Point(*seg.end)
        prev = seg
        cur = _Point(*seg.end)

    return "".join(parts)


def _continuation(numbers: list[str], last_number: str | None) -> str:
    """Numbers appended to the previous command without repeating its letter."""
    if last_number is None:
        return join_numbers(numbers)
    joined = join_numbers([last_number] + numbers)
    return joined[len(last_number):]


def optimize_path_data(d: str, precision: int) -> str:
    segments = round_segments(parse_path_data(d), precision)
    segments = simplify_segments(segments, precision)
    return format_path_data(segments, precision)


def concat_path_data(first: str, second: str, precision: int) -> str:
    """Path data drawing ``first`` then ``second`` (the second's moveto made absolute)."""
    segments = parse_path_data(first) + parse_path_data(second)
    return format_path_data(round_segments(segments, precision), precision)


def transform_segments(
    segments: list[Segment], matrix: tuple[float, float, float, float, float, float]
) -> list[Segment] | None:
    """Apply an affine ``(a, b, c, d, e, f)`` matrix to absolute segments.

    Arcs only survive rotations and uniform scales; any other matrix on a path
    with arcs returns None.
    """
    a, b, c, d, e, f = matrix

    def point(x: float, y: float) -> tuple[float, float]:
        return a * x + c * y + e, b * x + d * y + f

    similarity = close_to(a, d, 1e-9) and close_to(b, -c, 1e-9) and a * d - b * c > 0
    scale = math.hypot(a, b)
    angle = math.degrees(math.atan2(b, a))

    out: list[Segment] = []
    for seg in segments:
        if seg.command == "Z":
            out.append(seg)
        elif seg.command == "A":
            if not similarity:
                return None
            rx, ry, rot, large, sweep, x, y = seg.args
            out.append(Segment("A", (rx * scale, ry * scale, rot + angle, large, sweep, *point(x, y))))
        else:
            args: list[float] = []
            for i in range(0, len(seg.args), 2):
                args.extend(point(seg.args[i], seg.args[i + 1]))
            out.append(Segment(seg.command, tuple(args)))
    return out
