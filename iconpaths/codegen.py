"""Icon module generation — the pieces around the converted paths.

Turns exported bytes into text, wraps the paths in a ``createSvgIcon``
module, and escapes that module for display in an HTML page.
"""

from __future__ import annotations

import html

from iconpaths.errors import DecodeError

ICON_MODULE_TEMPLATE = """import {{ createSvgIcon }} from '@mui/material';

export default createSvgIcon(
  {paths},
  '{name}'
);"""


def ensure_svg_text(text: str, name: str) -> str:
    """Reject exported text that holds nothing but whitespace."""
    if not text.lstrip("\ufeff").strip():
        raise DecodeError(f'Failed to decode SVG for "{name}" - result is empty')
    return text


def decode_svg_bytes(data: bytes, name: str) -> str:
    """UTF-8 text of an exported SVG, without a leading byte order mark.

    Raises:
        DecodeError: the bytes are not UTF-8 or decode to nothing.
    """
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise DecodeError(f"SVG decoding failed: {e}") from e
    return ensure_svg_text(text, name)


def render_icon_module(paths: str, name: str) -> str:
    return ICON_MODULE_TEMPLATE.format(paths=paths, name=name)


def escape_for_display(source: str) -> str:
    """HTML-escape generated source so it shows verbatim inside <pre>."""
    return html.escape(source, quote=True)


def render_display_html(source: str) -> str:
    return f"<div><pre>{escape_for_display(source)}</pre></div>"
