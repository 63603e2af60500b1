from __future__ import annotations

from gomoku.main import main

if __name__ == "__main__":
    raise SystemExit(main())
