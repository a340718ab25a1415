"""Run the CLI with `python -m recengclient`."""

from __future__ import annotations

import sys

# Windows terminals may default to cp1252; item titles are often non-ASCII.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from recengclient.cli.main import run  # noqa: E402


def main() -> None:
    run()


if __name__ == "__main__":
    main()
