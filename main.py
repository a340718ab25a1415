"""Run the CLI from a source checkout: `python main.py scenarios`."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

from recengclient.cli.main import run  # noqa: E402

if __name__ == "__main__":
    run()
