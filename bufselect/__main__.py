"""Module entrypoint for ``python -m bufselect``.

All argument parsing and runtime setup happen in ``bufselect.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
