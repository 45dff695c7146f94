"""Module entrypoint for ``python -m dotwizard``.

All argument parsing and runtime setup happen in ``dotwizard.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
