"""Icon asset decoding: raster files with Pillow, SVG via CairoSVG."""

from __future__ import annotations

import io
from pathlib import Path

from PIL import Image

from ..errors import IconDecodeError

RASTER_EXTENSIONS = frozenset({".png", ".xpm"})
VECTOR_EXTENSIONS = frozenset({".svg"})


def _render_svg(path: Path, size: int) -> bytes:
    """Rasterize an SVG file to PNG bytes at ``size`` x ``size``."""
    # cairosvg binds libcairo on import; keep it off the package import path.
    import cairosvg

    return cairosvg.svg2png(url=str(path), output_width=size, output_height=size)


def _load_image(source) -> Image.Image:
    image = Image.open(source)
    image.load()
    return image


def decode_icon(path: Path, size: int) -> Image.Image:
    """Decode the icon at ``path``, choosing the decoder by file extension.

    Raster icons keep their native size; SVG icons are rendered at ``size``.
    Raises ``IconDecodeError`` for corrupt, unsupported or unreadable assets.
    """
    suffix = path.suffix.lower()
    try:
        if suffix in RASTER_EXTENSIONS:
            return _load_image(path)
        if suffix in VECTOR_EXTENSIONS:
            return _load_image(io.BytesIO(_render_svg(path, max(1, size))))
    except Exception as exc:
        raise IconDecodeError(path, str(exc) or type(exc).__name__) from exc
    raise IconDecodeError(path, f"unsupported icon format {suffix or '(none)'}")


__all__ = [
    "RASTER_EXTENSIONS",
    "VECTOR_EXTENSIONS",
    "decode_icon",
]
