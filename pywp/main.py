from __future__ import annotations
import sys
from pywp.app import run_app


def main() -> int:
    """Module entrypoint for `python -m pywp.main` and the `pywp` console script."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
