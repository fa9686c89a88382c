"""Icon resolution for listing entries.

Candidate names come from the entry's content type, files come from the
freedesktop icon theme lookup (pyxdg), and decoded images are cached per
session.
"""

from __future__ import annotations

from .candidates import ERROR_ICON, UP_ICON, content_type_for_path, icon_candidates, icon_names_for_content_type
from .decode import decode_icon
from .resolver import IconLookup, IconResolver
from .theme import (
    FALLBACK_ICON_THEMES,
    IconThemeLookup,
    build_theme_list,
    detect_icon_theme,
)

__all__ = [
    "ERROR_ICON",
    "UP_ICON",
    "content_type_for_path",
    "icon_candidates",
    "icon_names_for_content_type",
    "decode_icon",
    "IconLookup",
    "IconResolver",
    "FALLBACK_ICON_THEMES",
    "IconThemeLookup",
    "build_theme_list",
    "detect_icon_theme",
]
