"""Module entry point for `python -m xsd_mirror`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
