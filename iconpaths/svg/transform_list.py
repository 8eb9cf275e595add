"""Transform attribute helpers — collapse a transform list to its shortest equivalent.

svgpathtools parses the list into a 3x3 matrix; numpy does the algebra.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray
from svgpathtools.parser import parse_transform

from iconpaths.utils.numbers import format_number, join_numbers


def to_matrix(value: str) -> NDArray[np.float64]:
    """Transform list → 3x3 affine matrix ``[[a, c, e], [b, d, f], [0, 0, 1]]``."""
    if not value.strip():
        return np.identity(3)
    return np.asarray(parse_transform(value), dtype=np.float64)


def multiply(outer: str, inner: str) -> str:
    """Transform list equivalent to applying ``inner`` first, then ``outer``."""
    outer, inner = outer.strip(), inner.strip()
    if not outer:
        return inner
    if not inner:
        return outer
    return f"{outer} {inner}"


def _fn(name: str, values: list[float], precision: int) -> str:
    return f"{name}({join_numbers([format_number(v, precision) for v in values])})"


def minify_transform(value: str, precision: int, transform_precision: int) -> str:
    """Shortest transform list rendering the same as ``value``.

    Returns "" for the identity.
    """
    m = to_matrix(value)
    a, c, e = (float(v) for v in m[0])
    b, d, f = (float(v) for v in m[1])
    eps = 10.0 ** -transform_precision
    eps_t = 10.0 ** -precision

    def near(x: float, y: float, tol: float = eps) -> bool:
        return abs(x - y) < tol

    has_translate = not (near(e, 0, eps_t) and near(f, 0, eps_t))
    translate = [e] if near(f, 0, eps_t) else [e, f]
    candidates: list[str] = []

    if near(b, 0) and near(c, 0):
        if near(a, 1) and near(d, 1):
            if not has_translate:
                return ""
            return _fn("translate", translate, precision)
        scale = [a] if near(a, d) else [a, d]
        scale_fn = _fn("scale", scale, transform_precision)
        candidates.append(f"{_fn('translate', translate, precision)}{scale_fn}" if has_translate else scale_fn)

    if near(a, d) and near(b, -c) and near(a * a + b * b, 1):
        angle = math.degrees(math.atan2(b, a))
        if not has_translate:
            candidates.append(_fn("rotate", [angle], precision))
        else:
            # rotate(θ cx cy) = translate(cx cy) rotate(θ) translate(-cx -cy)
            lhs = np.array([[1 - a, b], [-b, 1 - a]])
            if abs(np.linalg.det(lhs)) > eps:
                cx, cy = np.linalg.solve(lhs, np.array([e, f]))
                candidates.append(_fn("rotate", [angle, float(cx), float(cy)], precision))

    matrix = [format_number(v, transform_precision) for v in (a, b, c, d)]
    matrix += [format_number(e, precision), format_number(f, precision)]
    candidates.append(f"matrix({join_numbers(matrix)})")
    return min(candidates, key=len)


def is_identity(value: str) -> bool:
    return np.allclose(to_matrix(value), np.identity(3))
