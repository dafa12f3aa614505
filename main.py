#!/usr/bin/env python3
"""crandom - Main Entry Point

Simple wrapper to run the command line from a source checkout.
"""

import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent / "src"
sys.path.insert(0, str(src_path))

from crandom.cli import main

if __name__ == "__main__":
    sys.exit(main())
