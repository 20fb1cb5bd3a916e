"""Repository-root entry point: `python -m main fetch <user>` without installing.

Puts `src/` on `sys.path` and hands over to `src/main.py`.
"""

from __future__ import annotations

import importlib.util
import sys
from pathlib import Path

SRC = Path(__file__).resolve().parent / "src"


def main() -> None:
    if str(SRC) not in sys.path:
        sys.path.insert(0, str(SRC))

    entry = importlib.util.spec_from_file_location("githubfetch_dev_main", SRC / "main.py")
    module = importlib.util.module_from_spec(entry)
    entry.loader.exec_module(module)
    module.main()


if __name__ == "__main__":
    main()
