"""
Avatar style taxonomy — the legal values for every trait and their defaults.

Every style field has a closed value set.  ``resolve`` maps anything outside
that set back to the field default, which is how both the generators and the
record codec stay total.
"""

from __future__ import annotations

from typing import Any, Dict, Literal, Tuple

# ---------------------------------------------------------------------------
# Style literals
# ---------------------------------------------------------------------------

HeadShape = Literal["round", "oval", "square"]
HairStyle = Literal["none", "short", "spiky", "bob", "ponytail"]
EyeStyle = Literal["dots", "wide", "sleepy", "sparkle"]
EyebrowStyle = Literal["none", "normal", "angry", "worried", "thick"]
NoseStyle = Literal["none", "small", "round", "pointed"]
MouthStyle = Literal["smile", "neutral", "open", "cat", "surprised"]

HEAD_SHAPES: Tuple[str, ...] = ("round", "oval", "square")
HAIR_STYLES: Tuple[str, ...] = ("none", "short", "spiky", "bob", "ponytail")
EYE_STYLES: Tuple[str, ...] = ("dots", "wide", "sleepy", "sparkle")
EYEBROW_STYLES: Tuple[str, ...] = ("none", "normal", "angry", "worried", "thick")
NOSE_STYLES: Tuple[str, ...] = ("none", "small", "round", "pointed")
MOUTH_STYLES: Tuple[str, ...] = ("smile", "neutral", "open", "cat", "surprised")

# Record field name -> legal values (style fields only)
STYLE_DOMAINS: Dict[str, Tuple[str, ...]] = {
    "headShape": HEAD_SHAPES,
    "hairStyle": HAIR_STYLES,
    "eyeStyle": EYE_STYLES,
    "eyebrowStyle": EYEBROW_STYLES,
    "noseStyle": NOSE_STYLES,
    "mouthStyle": MOUTH_STYLES,
}

COLOR_FIELDS: Tuple[str, ...] = ("headColor", "hairColor", "eyeColor")

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULTS: Dict[str, Any] = {
    "headShape": "round",
    "headColor": "#ffccaa",
    "hairStyle": "short",
    "hairColor": "#4a3728",
    "eyeStyle": "dots",
    "eyeColor": "#333333",
    "eyebrowStyle": "normal",
    "noseStyle": "small",
    "mouthStyle": "smile",
    "hasBlush": True,
}

FIELDS: Tuple[str, ...] = tuple(DEFAULTS.keys())

# ---------------------------------------------------------------------------
# Editor swatches.  Suggestions for the UI only; any hex colour is accepted.
# ---------------------------------------------------------------------------

SWATCHES: Dict[str, Tuple[str, ...]] = {
    "headColor": (
        "#ffccaa", "#ffe4c4", "#f5d0c5", "#deb887", "#d2a679",
        "#a67c52", "#8d5524", "#a8e6cf", "#ffd3b6", "#c5b4e3",
    ),
    "hairColor": (
        "#4a3728", "#2c1810", "#8b7355", "#d4a574", "#ffd700",
        "#ff6b6b", "#4ecdc4", "#9b59b6", "#3498db", "#1a1a2e",
    ),
    "eyeColor": (
        "#333333", "#4a4a4a", "#2d5a27", "#4a90d9", "#8b4513", "#9b59b6",
    ),
}


def is_known_style(field: str, value: Any) -> bool:
    return isinstance(value, str) and value in STYLE_DOMAINS.get(field, ())


def resolve(field: str, value: Any) -> str:
    """Return ``value`` when it is legal for the style ``field``, else the default."""
    if is_known_style(field, value):
        return value
    return DEFAULTS[field]


def describe() -> Dict[str, Any]:
    """Domains, defaults and swatches in one JSON-friendly mapping."""
    return {
        "styles": {k: list(v) for k, v in STYLE_DOMAINS.items()},
        "colors": list(COLOR_FIELDS),
        "defaults": dict(DEFAULTS),
        "swatches": {k: list(v) for k, v in SWATCHES.items()},
    }
