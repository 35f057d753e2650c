"""Run script.

Why it exists:
- Runs the CLI with `python -m main` during development.
- Keeps a plain entry point next to the `random-dog` console script.
"""

from __future__ import annotations

import sys

# Rich draws box and block characters; cp1252 consoles choke on them.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
