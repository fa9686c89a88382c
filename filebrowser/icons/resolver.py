"""Per-session icon resolution with a name-keyed image cache."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Protocol

from PIL import Image

from ..errors import IconDecodeError
from ..file_model.types import Entry
from .candidates import icon_candidates
from .decode import decode_icon
from .theme import DEFAULT_ICON_SCALE, IconThemeLookup

logger = logging.getLogger(__name__)


class IconLookup(Protocol):
    def find_icon(self, icon_name: str, themes: Sequence[str], size: int, scale: int = ...) -> Path | None: ...


class IconResolver:
    """Map listing entries to decoded icon images.

    The cache is keyed by icon name only and never evicted: the first image
    decoded for a name is returned for every later request of that name, at
    any size.
    """

    def __init__(
        self,
        themes: Sequence[str],
        lookup: IconLookup | None = None,
        decoder: Callable[[Path, int], Image.Image] = decode_icon,
        candidates: Callable[[Entry], list[str]] = icon_candidates,
        scale: int = DEFAULT_ICON_SCALE,
    ) -> None:
        self.themes = tuple(themes)
        self.lookup = lookup if lookup is not None else IconThemeLookup()
        self.decoder = decoder
        self.candidates = candidates
        self.scale = scale
        self.cache: dict[str, Image.Image] = {}

    def get_icon(self, entry: Entry, size: int) -> Image.Image | None:
        """Return the first cached or decodable icon among the entry's candidates."""
        for icon_name in self.candidates(entry):
            cached = self.cache.get(icon_name)
            if cached is not None:
                return cached

            icon_path = self.lookup.find_icon(icon_name, self.themes, size, self.scale)
            if icon_path is None:
                continue

            try:
                image = self.decoder(icon_path, size)
            except IconDecodeError as exc:
                logger.debug("%s", exc)
                continue

            self.cache[icon_name] = image
            return image
        return None


__all__ = [
    "IconLookup",
    "IconResolver",
]
