"""Typed errors raised by the conversion pipeline and its collaborators."""

from __future__ import annotations


class IconPathsError(Exception):
    """Base error for everything the converter raises."""


class ParseError(IconPathsError):
    """The input (or an intermediate stage's output) is not well-formed markup."""


class RootShapeError(IconPathsError):
    """The optimized document does not have a single ``svg`` root."""


class DecodeError(IconPathsError):
    """Exported bytes could not be turned into SVG text."""
