from __future__ import annotations

import os
import sys
from typing import Sequence

# Add project root to path for direct script execution.
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from orgchart_desktop.runtime.cli import main


def launch(argv: Sequence[str] | None = None) -> int:
    extra = list(sys.argv[1:] if argv is None else argv)
    return main(["desktop", *extra])


if __name__ == "__main__":
    raise SystemExit(launch())
