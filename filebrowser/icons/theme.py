"""Icon-theme lookup and desktop theme detection.

``IconThemeLookup`` hands each themed icon name to pyxdg, which applies the
freedesktop matching rules (exact size in the theme and its parents, then
closest size, then the plain icon directories and ``hicolor``). pyxdg keeps
its parsed themes and directory listings cached for the process.
"""

from __future__ import annotations

import configparser
import logging
import os
import re
import shutil
import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path

from xdg import Exceptions as xdg_exceptions
from xdg import IconTheme as xdg_icon_theme

from ..errors import ThemeDetectionError

logger = logging.getLogger(__name__)

FALLBACK_ICON_THEMES = ("Adwaita", "gnome")
ICON_EXTENSIONS = ("png", "svg", "xpm")
DEFAULT_ICON_SCALE = 1

GetIconPath = Callable[[str, int, str, list[str]], "str | None"]


class IconThemeLookup:
    """Resolve themed icon names to icon files on disk.

    Themes are tried in order; the first path pyxdg reports wins. A theme
    whose files cannot be read or parsed is skipped.
    """

    def __init__(
        self,
        get_icon_path: GetIconPath | None = None,
        extensions: Sequence[str] = ICON_EXTENSIONS,
    ) -> None:
        self._get_icon_path = get_icon_path if get_icon_path is not None else xdg_icon_theme.getIconPath
        self.extensions = list(extensions)

    def find_icon(
        self,
        icon_name: str,
        themes: Sequence[str],
        size: int,
        scale: int = DEFAULT_ICON_SCALE,
    ) -> Path | None:
        """Return the best icon file for ``icon_name`` across ``themes``."""
        # pyxdg ignores Scale keys; ask for the device pixel size instead.
        pixel_size = size * max(1, scale)
        for theme_name in themes:
            try:
                found = self._get_icon_path(icon_name, pixel_size, theme_name, self.extensions)
            except (OSError, RecursionError, xdg_exceptions.Error) as exc:
                logger.debug("Icon theme %s unusable for %s: %s", theme_name, icon_name, exc)
                continue
            if found:
                return Path(found)
        return None


_GTKRC_THEME_RE = re.compile(r'^\s*gtk-icon-theme-name\s*=\s*"?([^"\n]*)"?\s*$', re.MULTILINE)


def _gtk_settings_paths() -> list[Path]:
    config_home = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
    return [config_home / "gtk-4.0" / "settings.ini", config_home / "gtk-3.0" / "settings.ini"]


def _theme_from_settings_ini(path: Path) -> str | None:
    parser = configparser.ConfigParser(interpolation=None, strict=False)
    try:
        with path.open(encoding="utf-8", errors="replace") as handle:
            parser.read_file(handle)
    except (OSError, configparser.Error):
        return None
    value = parser.get("Settings", "gtk-icon-theme-name", fallback="").strip().strip("\"'")
    return value or None


def _theme_from_gtkrc(path: Path) -> str | None:
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return None
    match = _GTKRC_THEME_RE.search(text)
    if match is None:
        return None
    return match.group(1).strip() or None


def _theme_from_gsettings() -> str | None:
    if shutil.which("gsettings") is None:
        return None
    try:
        proc = subprocess.run(
            ["gsettings", "get", "org.gnome.desktop.interface", "icon-theme"],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            check=True,
            timeout=2,
        )
    except (OSError, subprocess.SubprocessError):
        return None
    return proc.stdout.strip().strip("\"'") or None


def detect_icon_theme() -> str:
    """Return the desktop's configured icon theme name.

    Checks GTK 4/3 ``settings.ini``, then ``~/.gtkrc-2.0``, then GNOME's
    ``gsettings``. Raises ``ThemeDetectionError`` when none yields a name.
    """
    for settings_path in _gtk_settings_paths():
        name = _theme_from_settings_ini(settings_path)
        if name:
            return name
    name = _theme_from_gtkrc(Path.home() / ".gtkrc-2.0")
    if name:
        return name
    name = _theme_from_gsettings()
    if name:
        return name
    raise ThemeDetectionError(
        "Could not determine GTK icon theme. Maybe try setting a theme with --theme"
    )


def build_theme_list(
    configured: Sequence[str] | None,
    detect: Callable[[], str] = detect_icon_theme,
) -> tuple[str, ...]:
    """Configured themes, else the detected theme, then the fixed fallbacks."""
    themes = [name for name in configured or () if name]
    if not themes:
        try:
            themes = [detect()]
        except ThemeDetectionError as exc:
            logger.warning("%s", exc)
    for fallback in FALLBACK_ICON_THEMES:
        if fallback not in themes:
            themes.append(fallback)
    return tuple(themes)


__all__ = [
    "FALLBACK_ICON_THEMES",
    "ICON_EXTENSIONS",
    "DEFAULT_ICON_SCALE",
    "IconThemeLookup",
    "detect_icon_theme",
    "build_theme_list",
]
