"""Path footprints — sample path data with svgpathtools, build shapely geometry.

Used to decide whether two paths overlap before merging them.
"""

from __future__ import annotations

import logging

import numpy as np
from shapely.geometry import LineString, Point, Polygon
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union
from svgpathtools import Path, parse_path

logger = logging.getLogger(__name__)

_SAMPLES_PER_SEGMENT = 16


def _sample_subpath(path: Path) -> list[tuple[float, float]]:
    points: list[tuple[float, float]] = []
    for seg in path:
        for t in np.linspace(0, 1, _SAMPLES_PER_SEGMENT):
            pt = seg.point(t)
            points.append((pt.real, pt.imag))
    return points


def _subpath_geometry(points: list[tuple[float, float]]) -> BaseGeometry:
    if len(set(points)) >= 3:
        poly = Polygon(points)
        if not poly.is_valid:
            poly = poly.buffer(0)
        if not poly.is_empty:
            return poly
    if len(set(points)) >= 2:
        return LineString(points)
    return Point(points[0])


def path_footprint(d: str, stroke_width: float = 0.0) -> BaseGeometry | None:
    """Area covered by path data, widened by half the stroke. None when it draws nothing."""
    try:
        path = parse_path(d)
        geoms = [
            _subpath_geometry(_sample_subpath(sub))
            for sub in path.continuous_subpaths()
            if len(sub)
        ]
    except Exception as e:
        logger.warning("Failed to sample path: %s", e)
        return None
    if not geoms:
        return None
    shape = unary_union(geoms)
    if stroke_width > 0:
        shape = shape.buffer(stroke_width / 2)
    return shape


def paths_intersect(first: str, second: str, stroke_width: float = 0.0) -> bool:
    """Whether two paths may touch. Unknown footprints count as touching."""
    a = path_footprint(first, stroke_width)
    b = path_footprint(second, stroke_width)
    if a is None or b is None:
        return True
    return a.intersects(b)
