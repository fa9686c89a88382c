"""Path resolution for typed input and directory changes."""

from __future__ import annotations

import os
from pathlib import Path

from ..errors import PathNotFoundError


def expand_user_input(text: str) -> str:
    """Expand a leading ``~`` or ``~user`` in prompt text."""
    return os.path.expanduser(text)


def resolve_absolute(input_path: str | Path, current_dir: Path) -> Path:
    """Pick whichever of two candidate paths exists.

    ``input_path`` is returned unchanged in form when it exists as given
    (absolute, or relative to the process working directory). Otherwise it
    is joined onto ``current_dir``. No canonicalization happens here. Paths
    that cannot be checked (too long, unsearchable parent) count as missing.
    """
    if not str(input_path):
        raise PathNotFoundError(input_path, current_dir)
    as_given = Path(input_path)
    if os.path.exists(as_given):
        return as_given
    joined = current_dir / as_given
    if os.path.exists(joined):
        return joined
    raise PathNotFoundError(input_path, current_dir)


def canonicalize(path: Path) -> Path:
    """Return the canonical absolute form of ``path`` (``.``, ``..``, symlinks)."""
    return Path(os.path.realpath(path))


__all__ = [
    "expand_user_input",
    "resolve_absolute",
    "canonicalize",
]
