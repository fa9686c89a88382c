"""Tests for icon-theme lookup and theme detection."""

from __future__ import annotations

import os
import tempfile
import unittest
import uuid
from pathlib import Path
from unittest import mock

from xdg import Exceptions as xdg_exceptions
from xdg import IconTheme as xdg_icon_theme

from filebrowser.errors import ThemeDetectionError
from filebrowser.icons import theme as theme_mod
from filebrowser.icons.theme import IconThemeLookup, build_theme_list, detect_icon_theme


def _write_theme(base: Path, name: str, directories: dict[str, dict[str, str]], inherits: str = "") -> Path:
    root = base / name
    root.mkdir(parents=True)
    lines = ["[Icon Theme]", f"Name={name}", "Comment=test theme", f"Directories={','.join(directories)}"]
    if inherits:
        lines.append(f"Inherits={inherits}")
    for subdir, keys in directories.items():
        lines.append("")
        lines.append(f"[{subdir}]")
        lines.extend(f"{key}={value}" for key, value in keys.items())
        (root / subdir).mkdir(parents=True)
    (root / "index.theme").write_text("\n".join(lines) + "\n", encoding="utf-8")
    return root


def _touch(path: Path) -> Path:
    path.write_bytes(b"")
    return path


def _unique(name: str) -> str:
    return f"{name}-{uuid.uuid4().hex}"


class FakeGetIconPath:
    def __init__(self, found: dict[tuple[str, str], str]) -> None:
        self.found = found
        self.calls: list[tuple[str, int, str, list[str]]] = []

    def __call__(self, icon_name: str, size: int, theme: str, extensions: list[str]) -> str | None:
        self.calls.append((icon_name, size, theme, extensions))
        return self.found.get((theme, icon_name))


class IconThemeLookupTests(unittest.TestCase):
    def test_earlier_theme_in_list_wins(self) -> None:
        get_icon_path = FakeGetIconPath(
            {("First", "error"): "/icons/First/16x16/error.png", ("Second", "error"): "/icons/Second/16x16/error.png"}
        )
        lookup = IconThemeLookup(get_icon_path=get_icon_path)

        found = lookup.find_icon("error", ["Missing", "First", "Second"], 16)

        self.assertEqual(found, Path("/icons/First/16x16/error.png"))
        self.assertEqual([call[2] for call in get_icon_path.calls], ["Missing", "First"])

    def test_size_and_extensions_are_passed_through(self) -> None:
        get_icon_path = FakeGetIconPath({})
        lookup = IconThemeLookup(get_icon_path=get_icon_path)

        self.assertIsNone(lookup.find_icon("folder", ["Adwaita"], 24))
        self.assertEqual(get_icon_path.calls, [("folder", 24, "Adwaita", ["png", "svg", "xpm"])])

    def test_scale_requests_device_pixel_size(self) -> None:
        get_icon_path = FakeGetIconPath({})
        lookup = IconThemeLookup(get_icon_path=get_icon_path)

        lookup.find_icon("folder", ["Adwaita"], 24, scale=2)

        self.assertEqual(get_icon_path.calls[0][1], 48)

    def test_empty_result_means_not_found(self) -> None:
        lookup = IconThemeLookup(get_icon_path=lambda *_args: "")

        self.assertIsNone(lookup.find_icon("folder", ["Adwaita"], 24))

    def test_unusable_theme_is_skipped(self) -> None:
        def get_icon_path(icon_name: str, size: int, theme: str, extensions: list[str]) -> str | None:
            if theme == "Broken":
                raise xdg_exceptions.ParsingError("[Icon Theme]-Header missing", "/icons/Broken/index.theme")
            if theme == "Looping":
                raise RecursionError("maximum recursion depth exceeded")
            return f"/icons/{theme}/{icon_name}.png"

        lookup = IconThemeLookup(get_icon_path=get_icon_path)

        self.assertEqual(lookup.find_icon("go-up", ["Broken", "Looping", "Good"], 16), Path("/icons/Good/go-up.png"))


class PyxdgIconThemeLookupTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.base = Path(self._tmp.name).resolve() / "icons"
        self.base.mkdir()
        icondirs_patch = mock.patch.object(xdg_icon_theme, "icondirs", [str(self.base)])
        icondirs_patch.start()
        self.addCleanup(icondirs_patch.stop)
        self.lookup = IconThemeLookup()

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_icon_in_installed_theme_is_found(self) -> None:
        name = _unique("Primary")
        root = _write_theme(self.base, name, {"16x16/places": {"Size": "16", "Type": "Fixed"}})
        icon = _touch(root / "16x16/places/folder.png")

        self.assertEqual(self.lookup.find_icon("folder", [_unique("Missing"), name], 16), icon)

    def test_parent_theme_is_consulted(self) -> None:
        parent = _unique("Parent")
        child = _unique("Child")
        _write_theme(self.base, child, {"16x16/apps": {"Size": "16", "Type": "Fixed"}}, inherits=parent)
        parent_root = _write_theme(self.base, parent, {"16x16/apps": {"Size": "16", "Type": "Fixed"}})
        icon = _touch(parent_root / "16x16/apps/go-up.png")

        self.assertEqual(self.lookup.find_icon("go-up", [child], 16), icon)


class BuildThemeListTests(unittest.TestCase):
    def test_configured_themes_skip_detection(self) -> None:
        detect = mock.Mock(return_value="Detected")

        themes = build_theme_list(("Papirus",), detect=detect)

        self.assertEqual(themes, ("Papirus", "Adwaita", "gnome"))
        detect.assert_not_called()

    def test_detected_theme_is_used_when_not_configured(self) -> None:
        self.assertEqual(build_theme_list(None, detect=lambda: "Breeze"), ("Breeze", "Adwaita", "gnome"))

    def test_fallbacks_are_not_duplicated(self) -> None:
        self.assertEqual(build_theme_list(["Adwaita"], detect=lambda: "x"), ("Adwaita", "gnome"))

    def test_detection_failure_uses_fallbacks_only(self) -> None:
        def failing_detect() -> str:
            raise ThemeDetectionError("no theme")

        with self.assertLogs("filebrowser.icons.theme", level="WARNING") as logs:
            themes = build_theme_list(None, detect=failing_detect)

        self.assertEqual(themes, ("Adwaita", "gnome"))
        self.assertIn("no theme", logs.output[0])


class DetectIconThemeTests(unittest.TestCase):
    def test_reads_gtk3_settings(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_home = Path(tmp)
            settings = config_home / "gtk-3.0" / "settings.ini"
            settings.parent.mkdir(parents=True)
            settings.write_text("[Settings]\ngtk-icon-theme-name=Papirus-Dark\n", encoding="utf-8")
            with mock.patch.dict(os.environ, {"XDG_CONFIG_HOME": str(config_home), "HOME": tmp}):
                self.assertEqual(detect_icon_theme(), "Papirus-Dark")

    def test_reads_gtkrc_when_settings_missing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            (Path(tmp) / ".gtkrc-2.0").write_text('gtk-icon-theme-name="Tango"\n', encoding="utf-8")
            with mock.patch.dict(os.environ, {"XDG_CONFIG_HOME": str(Path(tmp) / "cfg"), "HOME": tmp}):
                self.assertEqual(detect_icon_theme(), "Tango")

    def test_raises_when_nothing_is_configured(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch.dict(os.environ, {"XDG_CONFIG_HOME": str(Path(tmp) / "cfg"), "HOME": tmp}), mock.patch.object(
                theme_mod, "_theme_from_gsettings", return_value=None
            ):
                with self.assertRaises(ThemeDetectionError):
                    detect_icon_theme()


if __name__ == "__main__":
    unittest.main()
