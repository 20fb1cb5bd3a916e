"""Run script: `python -m main fetch <user>` from `src/`.

Also the target of the repository-root `main.py`, so both dev entry points
share the stream setup below.
"""

from __future__ import annotations

import sys


def use_utf8_streams() -> None:
    """Force UTF-8 on stdout/stderr on Windows.

    Redirected output (pipes, files, CI logs) falls back to the ANSI code
    page there, and profile text from GitHub (bios, locations, logins of any
    script) plus the half-block avatar would raise `UnicodeEncodeError`
    halfway through the layout.
    """

    if sys.platform != "win32":
        return
    for stream in (sys.stdout, sys.stderr):
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(encoding="utf-8")


def main() -> None:
    use_utf8_streams()

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
