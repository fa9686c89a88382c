"""Tests for typed-path resolution and canonicalization."""

from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from filebrowser.errors import PathNotFoundError
from filebrowser.file_model import canonicalize, expand_user_input, resolve_absolute


class ResolveAbsoluteTests(unittest.TestCase):
    def test_existing_absolute_path_is_returned_unchanged(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            target = root / "notes.txt"
            target.write_text("", encoding="utf-8")

            resolved = resolve_absolute(str(target), Path("/"))

            self.assertEqual(resolved, target)
            self.assertEqual(resolve_absolute(str(resolved), Path("/")), resolved)

    def test_existing_path_keeps_its_form(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "sub").mkdir()
            uncanonical = f"{root}/sub/../sub"

            self.assertEqual(resolve_absolute(uncanonical, Path("/")), Path(uncanonical))

    def test_relative_path_falls_back_to_current_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp, tempfile.TemporaryDirectory() as other:
            root = Path(tmp).resolve()
            (root / "docs").mkdir()
            previous_cwd = Path.cwd()
            try:
                os.chdir(other)
                resolved = resolve_absolute("docs", root)
            finally:
                os.chdir(previous_cwd)

            self.assertEqual(resolved, root / "docs")

    def test_missing_path_raises_not_found(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()

            with self.assertRaises(PathNotFoundError) as ctx:
                resolve_absolute("does-not-exist-anywhere-7f3a", root)

            self.assertIsInstance(ctx.exception, FileNotFoundError)
            self.assertEqual(ctx.exception.current_dir, root)

    def test_empty_input_raises_not_found(self) -> None:
        with self.assertRaises(PathNotFoundError):
            resolve_absolute("", Path("/"))

    def test_overlong_name_is_reported_as_not_found(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()

            with self.assertRaises(PathNotFoundError):
                resolve_absolute("a" * 300, root)

    def test_unsearchable_parent_is_reported_as_not_found(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            with mock.patch("os.stat", side_effect=PermissionError(13, "Permission denied")):
                with self.assertRaises(PathNotFoundError):
                    resolve_absolute("locked/file.txt", root)


class CanonicalizeTests(unittest.TestCase):
    def test_dot_dot_segments_and_symlinks_are_resolved(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            real = root / "real"
            real.mkdir()
            os.symlink(real, root / "alias")

            self.assertEqual(canonicalize(root / "real" / ".."), root)
            self.assertEqual(canonicalize(root / "alias"), real)

    def test_root_parent_is_root(self) -> None:
        self.assertEqual(canonicalize(Path("/..")), Path("/"))


class ExpandUserInputTests(unittest.TestCase):
    def test_leading_tilde_expands_to_home(self) -> None:
        with mock.patch.dict(os.environ, {"HOME": "/home/tester"}):
            self.assertEqual(expand_user_input("~/docs"), "/home/tester/docs")

    def test_other_text_is_unchanged(self) -> None:
        self.assertEqual(expand_user_input("docs/~x"), "docs/~x")


if __name__ == "__main__":
    unittest.main()
