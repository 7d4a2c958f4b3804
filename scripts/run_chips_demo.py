#!/usr/bin/env python3
"""
Run a chip scenario from a source checkout (no install needed).

Same options as the `smart-chips-demo` console script; see smart_chips.cli.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from smart_chips.cli import main

if __name__ == "__main__":
    sys.exit(main())
