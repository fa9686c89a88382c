"""Public package surface for file-browser.

Exports ``main`` for programmatic CLI invocation.
The browser core lives in ``filebrowser.session``, ``filebrowser.file_model``
and ``filebrowser.icons``.
"""

from __future__ import annotations


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
