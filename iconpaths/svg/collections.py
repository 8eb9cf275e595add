"""SVG element and attribute knowledge tables shared by the transforms. No engine imports."""

from __future__ import annotations

# ── Element groups ────────────────────────────────────────────────────────

ANIMATION_ELEMS = {"animate", "animateColor", "animateMotion", "animateTransform", "set"}
DESCRIPTIVE_ELEMS = {"desc", "metadata", "title"}
SHAPE_ELEMS = {"circle", "ellipse", "line", "path", "polygon", "polyline", "rect"}
STRUCTURAL_ELEMS = {"defs", "g", "svg", "symbol", "use"}
PAINT_SERVER_ELEMS = {"hatch", "linearGradient", "meshGradient", "pattern", "radialGradient", "solidColor"}
NON_RENDERING_ELEMS = {
    "clipPath", "filter", "linearGradient", "marker", "mask",
    "pattern", "radialGradient", "solidColor", "symbol",
}
CONTAINER_ELEMS = {
    "a", "defs", "foreignObject", "g", "marker", "mask",
    "missing-glyph", "pattern", "svg", "switch", "symbol",
}
TEXT_CONTENT_ELEMS = {
    "altGlyph", "altGlyphDef", "altGlyphItem", "glyph", "glyphRef",
    "text", "textPath", "tref", "tspan",
}
FILTER_PRIMITIVE_ELEMS = {
    "feBlend", "feColorMatrix", "feComponentTransfer", "feComposite", "feConvolveMatrix",
    "feDiffuseLighting", "feDisplacementMap", "feDropShadow", "feFlood", "feFuncA",
    "feFuncB", "feFuncG", "feFuncR", "feGaussianBlur", "feImage", "feMerge", "feMergeNode",
    "feMorphology", "feOffset", "fePointLight", "feSpecularLighting", "feSpotLight",
    "feTile", "feTurbulence",
}

# Whitespace-only text is significant inside these
TEXT_ELEMS = {"text", "tspan", "textPath", "tref", "altGlyph", "title", "desc", "style", "script"}

PATH_ELEMS = {"path", "glyph", "missing-glyph"}

KNOWN_ELEMS = (
    ANIMATION_ELEMS | DESCRIPTIVE_ELEMS | SHAPE_ELEMS | STRUCTURAL_ELEMS | PAINT_SERVER_ELEMS
    | NON_RENDERING_ELEMS | CONTAINER_ELEMS | TEXT_CONTENT_ELEMS | FILTER_PRIMITIVE_ELEMS
    | {
        "clipPath", "color-profile", "cursor", "font", "font-face", "font-face-format",
        "font-face-name", "font-face-src", "font-face-uri", "hkern", "image", "mpath",
        "script", "stop", "style", "view", "vkern",
    }
)

# ── Attribute groups ──────────────────────────────────────────────────────

INHERITABLE_ATTRS = {
    "clip-rule", "color", "color-interpolation", "color-interpolation-filters", "color-profile",
    "color-rendering", "cursor", "direction", "dominant-baseline", "fill", "fill-opacity",
    "fill-rule", "font", "font-family", "font-size", "font-size-adjust", "font-stretch",
    "font-style", "font-variant", "font-weight", "glyph-orientation-horizontal",
    "glyph-orientation-vertical", "image-rendering", "letter-spacing", "marker", "marker-end",
    "marker-mid", "marker-start", "paint-order", "pointer-events", "shape-rendering", "stroke",
    "stroke-dasharray", "stroke-dashoffset", "stroke-linecap", "stroke-linejoin",
    "stroke-miterlimit", "stroke-opacity", "stroke-width", "text-anchor", "text-rendering",
    "visibility", "word-spacing", "writing-mode",
}

PRESENTATION_ATTRS = INHERITABLE_ATTRS | {
    "alignment-baseline", "baseline-shift", "clip", "clip-path", "display", "enable-background",
    "filter", "flood-color", "flood-opacity", "lighting-color", "mask", "opacity", "overflow",
    "stop-color", "stop-opacity", "text-decoration", "text-overflow", "transform-origin",
    "unicode-bidi", "vector-effect",
}

# Non-inheritable presentation attributes that still mean something on a <g>
GROUP_ONLY_PRESENTATION_ATTRS = {
    "clip-path", "display", "filter", "mask", "opacity", "text-decoration", "transform",
    "unicode-bidi",
}

CORE_ATTRS = {"id", "class", "style", "tabindex", "lang", "xml:base", "xml:lang", "xml:space"}
CONDITIONAL_ATTRS = {"requiredFeatures", "requiredExtensions", "systemLanguage"}
XLINK_ATTRS = {
    "href", "xlink:href", "xlink:type", "xlink:role", "xlink:arcrole",
    "xlink:title", "xlink:show", "xlink:actuate",
}

# Attributes that may hold url(#id) references
REFERENCE_ATTRS = {
    "clip-path", "color-profile", "fill", "filter", "marker-end", "marker-mid",
    "marker-start", "mask", "stroke", "style",
}

COLOR_ATTRS = {"color", "fill", "flood-color", "lighting-color", "stop-color", "stroke"}

TRANSFORM_ATTRS = ("transform", "gradientTransform", "patternTransform")

_SIZED = {"x", "y", "width", "height"}

# Element-specific attributes, on top of core/conditional/presentation/transform
ELEM_ATTRS: dict[str, set[str]] = {
    "svg": _SIZED | {
        "viewBox", "preserveAspectRatio", "zoomAndPan", "version", "baseProfile",
        "contentScriptType", "contentStyleType",
    },
    "g": set(),
    "defs": set(),
    "path": {"d", "pathLength"},
    "rect": _SIZED | {"rx", "ry", "pathLength"},
    "circle": {"cx", "cy", "r", "pathLength"},
    "ellipse": {"cx", "cy", "rx", "ry", "pathLength"},
    "line": {"x1", "y1", "x2", "y2", "pathLength"},
    "polyline": {"points", "pathLength"},
    "polygon": {"points", "pathLength"},
    "clipPath": {"clipPathUnits"},
    "mask": _SIZED | {"maskUnits", "maskContentUnits"},
    "use": _SIZED | XLINK_ATTRS,
    "symbol": _SIZED | {"viewBox", "preserveAspectRatio", "refX", "refY"},
    "linearGradient": {"x1", "y1", "x2", "y2", "gradientUnits", "gradientTransform", "spreadMethod"} | XLINK_ATTRS,
    "radialGradient": {"cx", "cy", "r", "fx", "fy", "fr", "gradientUnits", "gradientTransform", "spreadMethod"} | XLINK_ATTRS,
    "stop": {"offset"},
    "pattern": _SIZED | {
        "patternUnits", "patternContentUnits", "patternTransform", "viewBox", "preserveAspectRatio",
    } | XLINK_ATTRS,
    "image": _SIZED | {"preserveAspectRatio"} | XLINK_ATTRS,
    "marker": {"viewBox", "preserveAspectRatio", "refX", "refY", "markerUnits", "markerWidth", "markerHeight", "orient"},
    "a": XLINK_ATTRS | {"target"},
}

ELEM_DEFAULTS: dict[str, dict[str, str]] = {
    "svg": {
        "x": "0", "y": "0", "width": "100%", "height": "100%", "preserveAspectRatio": "xMidYMid",
        "zoomAndPan": "magnify", "version": "1.1", "baseProfile": "none",
        "contentScriptType": "application/ecmascript", "contentStyleType": "text/css",
    },
    "rect": {"x": "0", "y": "0"},
    "circle": {"cx": "0", "cy": "0"},
    "ellipse": {"cx": "0", "cy": "0"},
    "line": {"x1": "0", "y1": "0", "x2": "0", "y2": "0"},
    "use": {"x": "0", "y": "0"},
    "image": {"x": "0", "y": "0", "preserveAspectRatio": "xMidYMid"},
    "clipPath": {"clipPathUnits": "userSpaceOnUse"},
    "mask": {
        "x": "-10%", "y": "-10%", "width": "120%", "height": "120%",
        "maskUnits": "objectBoundingBox", "maskContentUnits": "userSpaceOnUse",
    },
    "linearGradient": {
        "x1": "0", "y1": "0", "x2": "100%", "y2": "0",
        "gradientUnits": "objectBoundingBox", "spreadMethod": "pad",
    },
    "radialGradient": {
        "cx": "50%", "cy": "50%", "r": "50%", "gradientUnits": "objectBoundingBox", "spreadMethod": "pad",
    },
    "stop": {"offset": "0"},
    "pattern": {
        "x": "0", "y": "0", "patternUnits": "objectBoundingBox", "patternContentUnits": "userSpaceOnUse",
    },
    "marker": {
        "refX": "0", "refY": "0", "markerUnits": "strokeWidth",
        "markerWidth": "3", "markerHeight": "3", "orient": "0",
    },
}

PRESENTATION_DEFAULTS: dict[str, str] = {
    "clip": "auto", "clip-path": "none", "clip-rule": "nonzero", "mask": "none", "opacity": "1",
    "stop-color": "#000", "stop-opacity": "1", "fill-opacity": "1", "fill-rule": "nonzero",
    "fill": "#000", "stroke": "none", "stroke-width": "1", "stroke-linecap": "butt",
    "stroke-linejoin": "miter", "stroke-miterlimit": "4", "stroke-dasharray": "none",
    "stroke-dashoffset": "0", "stroke-opacity": "1", "paint-order": "normal",
    "vector-effect": "none", "display": "inline", "visibility": "visible",
    "marker-start": "none", "marker-mid": "none", "marker-end": "none",
    "color-interpolation": "sRGB", "color-interpolation-filters": "linearRGB",
    "color-rendering": "auto", "shape-rendering": "auto", "text-rendering": "auto",
    "image-rendering": "auto", "font-style": "normal", "font-variant": "normal",
    "font-weight": "normal", "font-stretch": "normal", "font-size": "medium",
    "font-size-adjust": "none", "letter-spacing": "normal", "word-spacing": "normal",
    "text-decoration": "none", "text-anchor": "start", "text-overflow": "clip",
    "writing-mode": "lr-tb", "glyph-orientation-vertical": "auto",
    "alignment-baseline": "baseline", "baseline-shift": "baseline",
    "dominant-baseline": "auto", "unicode-bidi": "normal", "direction": "ltr",
    "flood-color": "#000", "flood-opacity": "1", "lighting-color": "#fff",
}

# ── Editor namespaces ─────────────────────────────────────────────────────

EDITOR_NAMESPACES = {
    "http://creativecommons.org/ns#",
    "http://inkscape.sourceforge.net/DTD/sodipodi-0.dtd",
    "http://ns.adobe.com/AdobeIllustrator/10.0/",
    "http://ns.adobe.com/AdobeSVGViewerExtensions/3.0/",
    "http://ns.adobe.com/Extensibility/1.0/",
    "http://ns.adobe.com/Flows/1.0/",
    "http://ns.adobe.com/GenericCustomNamespace/1.0/",
    "http://ns.adobe.com/Graphs/1.0/",
    "http://ns.adobe.com/ImageReplacement/1.0/",
    "http://ns.adobe.com/SaveForWeb/1.0/",
    "http://ns.adobe.com/Variables/1.0/",
    "http://ns.adobe.com/XPath/1.0/",
    "http://purl.org/dc/elements/1.1/",
    "http://schemas.microsoft.com/visio/2003/SVGExtensions/",
    "http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd",
    "http://taptrix.com/vectorillustrator/svg_extensions",
    "http://www.bohemiancoding.com/sketch/ns",
    "http://www.figma.com/figma/ns",
    "http://www.inkscape.org/namespaces/inkscape",
    "http://www.serif.com/",
    "http://www.vector.evaxdesign.sk",
    "http://www.w3.org/1999/02/22-rdf-syntax-ns#",
}

# ── Colors ────────────────────────────────────────────────────────────────

COLOR_NAMES: dict[str, str] = {
    "aliceblue": "#f0f8ff", "antiquewhite": "#faebd7", "aqua": "#0ff", "aquamarine": "#7fffd4",
    "azure": "#f0ffff", "beige": "#f5f5dc", "bisque": "#ffe4c4", "black": "#000",
    "blanchedalmond": "#ffebcd", "blue": "#00f", "blueviolet": "#8a2be2", "brown": "#a52a2a",
    "burlywood": "#deb887", "cadetblue": "#5f9ea0", "chartreuse": "#7fff00",
    "chocolate": "#d2691e", "coral": "#ff7f50", "cornflowerblue": "#6495ed",
    "cornsilk": "#fff8dc", "crimson": "#dc143c", "cyan": "#0ff", "darkblue": "#00008b",
    "darkcyan": "#008b8b", "darkgoldenrod": "#b8860b", "darkgray": "#a9a9a9",
    "darkgreen": "#006400", "darkgrey": "#a9a9a9", "darkkhaki": "#bdb76b",
    "darkmagenta": "#8b008b", "darkolivegreen": "#556b2f", "darkorange": "#ff8c00",
    "darkorchid": "#9932cc", "darkred": "#8b0000", "darksalmon": "#e9967a",
    "darkseagreen": "#8fbc8f", "darkslateblue": "#483d8b", "darkslategray": "#2f4f4f",
    "darkslategrey": "#2f4f4f", "darkturquoise": "#00ced1", "darkviolet": "#9400d3",
    "deeppink": "#ff1493", "deepskyblue": "#00bfff", "dimgray": "#696969",
    "dimgrey": "#696969", "dodgerblue": "#1e90ff", "firebrick": "#b22222",
    "floralwhite": "#fffaf0", "forestgreen": "#228b22", "fuchsia": "#f0f",
    "gainsboro": "#dcdcdc", "ghostwhite": "#f8f8ff", "gold": "#ffd700",
    "goldenrod": "#daa520", "gray": "#808080", "green": "#008000", "greenyellow": "#adff2f",
    "grey": "#808080", "honeydew": "#f0fff0", "hotpink": "#ff69b4", "indianred": "#cd5c5c",
    "indigo": "#4b0082", "ivory": "#fffff0", "khaki": "#f0e68c", "lavender": "#e6e6fa",
    "lavenderblush": "#fff0f5", "lawngreen": "#7cfc00", "lemonchiffon": "#fffacd",
    "lightblue": "#add8e6", "lightcoral": "#f08080", "lightcyan": "#e0ffff",
    "lightgoldenrodyellow": "#fafad2", "lightgray": "#d3d3d3", "lightgreen": "#90ee90",
    "lightgrey": "#d3d3d3", "lightpink": "#ffb6c1", "lightsalmon": "#ffa07a",
    "lightseagreen": "#20b2aa", "lightskyblue": "#87cefa", "lightslategray": "#789",
    "lightslategrey": "#789", "lightsteelblue": "#b0c4de", "lightyellow": "#ffffe0",
    "lime": "#0f0", "limegreen": "#32cd32", "linen": "#faf0e6", "magenta": "#f0f",
    "maroon": "#800000", "mediumaquamarine": "#66cdaa", "mediumblue": "#0000cd",
    "mediumorchid": "#ba55d3", "mediumpurple": "#9370db", "mediumseagreen": "#3cb371",
    "mediumslateblue": "#7b68ee", "mediumspringgreen": "#00fa9a",
    "mediumturquoise": "#48d1cc", "mediumvioletred": "#c71585", "midnightblue": "#191970",
    "mintcream": "#f5fffa", "mistyrose": "#ffe4e1", "moccasin": "#ffe4b5",
    "navajowhite": "#ffdead", "navy": "#000080", "oldlace": "#fdf5e6", "olive": "#808000",
    "olivedrab": "#6b8e23", "orange": "#ffa500", "orangered": "#ff4500", "orchid": "#da70d6",
    "palegoldenrod": "#eee8aa", "palegreen": "#98fb98", "paleturquoise": "#afeeee",
    "palevioletred": "#db7093", "papayawhip": "#ffefd5", "peachpuff": "#ffdab9",
    "peru": "#cd853f", "pink": "#ffc0cb", "plum": "#dda0dd", "powderblue": "#b0e0e6",
    "purple": "#800080", "rebeccapurple": "#639", "red": "#f00", "rosybrown": "#bc8f8f",
    "royalblue": "#4169e1", "saddlebrown": "#8b4513", "salmon": "#fa8072",
    "sandybrown": "#f4a460", "seagreen": "#2e8b57", "seashell": "#fff5ee", "sienna": "#a0522d",
    "silver": "#c0c0c0", "skyblue": "#87ceeb", "slateblue": "#6a5acd", "slategray": "#708090",
    "slategrey": "#708090", "snow": "#fffafa", "springgreen": "#00ff7f",
    "steelblue": "#4682b4", "tan": "#d2b48c", "teal": "#008080", "thistle": "#d8bfd8",
    "tomato": "#ff6347", "turquoise": "#40e0d0", "violet": "#ee82ee", "wheat": "#f5deb3",
    "white": "#fff", "whitesmoke": "#f5f5f5", "yellow": "#ff0", "yellowgreen": "#9acd32",
}

# Short hex → color name, where the name is the shorter spelling
COLOR_SHORT_NAMES: dict[str, str] = {}
for _name, _hex in sorted(COLOR_NAMES.items()):
    if len(_name) < len(_hex) and _hex not in COLOR_SHORT_NAMES:
        COLOR_SHORT_NAMES[_hex] = _name
del _name, _hex
