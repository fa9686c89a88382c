"""Module entrypoint for ``python -m filebrowser``.

All argument parsing and session setup happen in ``filebrowser.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
