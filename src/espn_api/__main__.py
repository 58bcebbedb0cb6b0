"""Run the CLI with `python -m espn_api`."""

from __future__ import annotations

import sys

# Workaround for UnicodeEncodeError on Windows terminals (cp1252 vs utf-8).
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from espn_api.cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
