"""Human-readable names for model files."""

from __future__ import annotations

import re

FALLBACK_DISPLAY_NAME: str = "Custom Model"

_KNOWN_EXTENSION_RE = re.compile(r"\.(glb|obj|fbx|gltf|png|jpg|jpeg|webp)\Z", re.IGNORECASE)

# Applied in order. Each pattern is removed wherever it occurs.
_STRIP_PATTERNS: tuple[re.Pattern[str], ...] = (
    # _user@example.com, then bare user@example.com
    re.compile(r"_[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"),
    re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"),
    # _first.last handle tails
    re.compile(r"_[a-zA-Z0-9._%+-]+\.[a-zA-Z0-9._%+-]+"),
    # _1712345678901 timestamps
    re.compile(r"_\d{10,}"),
    # first.middle.last, then first.last
    re.compile(r"[a-zA-Z]+\.[a-zA-Z]+\.[a-zA-Z]+"),
    re.compile(r"(?<![a-zA-Z])[a-zA-Z]+\.[a-zA-Z]+(?![a-zA-Z])"),
)

_UNDERSCORE_RUN_RE = re.compile(r"_+")


def generate_display_name(file_name: str) -> str:
    """
    Turn a raw Drive filename into a title for listings.

    Strips the extension, embedded emails, dotted name handles and long
    numeric timestamps, turns underscores into spaces and title-cases every
    word. Falls back to "Custom Model" when nothing meaningful is left.

    Examples:
        "Dragon_Statue.glb"            -> "Dragon Statue"
        "john.smith_design_v2.glb"     -> "Design V2"
        "me@example.com.glb"           -> "Custom Model"
    """
    if not isinstance(file_name, str):
        return FALLBACK_DISPLAY_NAME

    name = _KNOWN_EXTENSION_RE.sub("", file_name, count=1)
    for pattern in _STRIP_PATTERNS:
        name = pattern.sub("", name)

    name = _UNDERSCORE_RUN_RE.sub(" ", name)
    name = name.strip(" _\t\r\n\f\v")

    words = name.split()
    if len(" ".join(words)) < 2:
        return FALLBACK_DISPLAY_NAME

    return " ".join(word[:1].upper() + word[1:].lower() for word in words)
