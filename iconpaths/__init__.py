"""Turn exported SVG icons into JSX children for an icon component."""

__version__ = "0.1.0"

from iconpaths.core import IconPathsResult, convert_svg, get_optimised_svg_paths
from iconpaths.errors import DecodeError, IconPathsError, ParseError, RootShapeError

__all__ = [
    "__version__",
    "IconPathsResult",
    "convert_svg",
    "get_optimised_svg_paths",
    "IconPathsError",
    "ParseError",
    "RootShapeError",
    "DecodeError",
]
