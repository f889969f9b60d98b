"""Module entrypoint for ``python -m schemepicker``.

All argument parsing and runtime setup happen in ``schemepicker.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
