
from typing import Dict, List


# Curated feature-name substrings per maturity tier, keyed by tier key.
DEFAULT_BASELINE_CATALOG: Dict[str, List[str]] = {
    # Baseline 2023-2024, good support across current browsers
    "newlyAvailable": [
        "container", "container-name", "container-type", "container-query", "@container",
        "subgrid", "dvh", "svh", "lvh", "dvw", "svw", "lvw", "vi", "vb",
        "color-mix", "relative-color-syntax", "light-dark",
        "text-wrap", "wrap-before", "wrap-after", "wrap-inside",
        "scroll-timeline", "view-timeline", "animation-timeline",
        "anchor", "anchor-name", "anchor-scope", "@position-try",
        "has()", ":has()", "not()", ":not()", "is()", ":is()",
        "clamp", "max", "min", "abs", "sign", "mod", "rem",
        "accent-color", "color-scheme", "forced-color-adjust",
        "scroll-behavior", "scroll-snap-type", "scroll-snap-align",
        "backdrop-filter", "clip-path", "mask", "mask-image",
    ],
    # Baseline 2020-2022
    "widelyAvailable": [
        "grid", "flex", "grid-template-areas", "grid-area", "grid-column", "grid-row",
        "transform", "transform-origin", "transform-style", "perspective",
        "filter", "blur", "brightness", "contrast", "grayscale", "hue-rotate",
        "box-shadow", "text-shadow", "border-radius", "border-image",
        "transition", "animation", "@keyframes", "animation-delay",
        "opacity", "visibility", "display", "position", "z-index",
        "margin", "padding", "border", "outline", "width", "height",
        "font-family", "font-size", "font-weight", "line-height",
        "color", "background", "background-color", "background-image",
        "cursor", "pointer-events", "user-select", "resize",
        "overflow", "white-space", "text-overflow", "word-wrap",
        "box-sizing", "calc", "var", "custom-properties",
    ],
    # 2024+, limited support
    "experimental": [
        "@scope", "scope", "scope-start", "scope-end",
        "anchor-position", "position-anchor", "inset-area",
        "linear", "radial", "conic", "color-mix",
        "scroll-driven-animations", "scroll-timeline-axis",
        "view-transition", "view-transition-name",
        "popover", "anchor", "anchor-element",
        "trigonometric-functions", "sin", "cos", "tan",
        "logarithmic-functions", "log", "pow", "sqrt",
        "color-contrast", "color-adjust", "color-scheme",
    ],
    # Pre-2020, universal support
    "stable": [
        "float", "clear", "display", "position", "top", "right", "bottom", "left",
        "margin", "padding", "border", "outline", "width", "height", "max-width", "min-width",
        "font", "font-family", "font-size", "font-weight", "font-style", "text-align",
        "color", "background", "background-color", "background-image", "background-repeat",
        "text-decoration", "text-transform", "letter-spacing", "word-spacing",
        "list-style", "table-layout", "border-collapse", "caption-side",
        "cursor", "outline", "visibility", "overflow", "clip", "vertical-align",
        "white-space", "word-wrap", "text-indent", "line-height",
    ],
}

# Markers looked up in selector text, mapped to the token recorded for them.
SELECTOR_MARKERS: Dict[str, str] = {
    ":has(": ":has()",
    ":not(": ":not()",
    ":is(": ":is()",
    "@container": "@container",
    "@scope": "@scope",
}

# Markers looked up in declaration values, mapped to the token recorded for them.
VALUE_MARKERS: Dict[str, str] = {
    "clamp(": "clamp()",
    "min(": "min()",
    "max(": "max()",
    "color-mix(": "color-mix()",
    "dvh": "dvh",
    "svh": "svh",
    "lvh": "lvh",
    "dvw": "dvw",
    "svw": "svw",
    "lvw": "lvw",
    "container-query": "container-query",
    "subgrid": "subgrid",
    "backdrop-filter": "backdrop-filter",
    "scroll-timeline": "scroll-timeline",
    "view-timeline": "view-timeline",
    "anchor": "anchor",
    "light-dark": "light-dark",
}

# At-rule names recorded as tokens.
AT_RULE_MARKERS: Dict[str, str] = {
    "container": "@container",
    "scope": "@scope",
    "keyframes": "@keyframes",
}
