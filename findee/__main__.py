"""Module entrypoint for ``python -m findee``.

All argument parsing happens in ``findee.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
