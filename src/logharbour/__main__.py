"""Module entrypoint.

Allows:
    python -m logharbour
"""

from __future__ import annotations

from logharbour.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
