"""
═══════════════════════════════════════════════════════════════════════
  VECALC — REAL VECTOR ARITHMETIC
  Main Entry Point
═══════════════════════════════════════════════════════════════════════

Runs the vecalc command line from a source checkout:
    python main.py            worked examples
    python main.py --serve    HTTP service
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from vecalc.cli import main


if __name__ == "__main__":
    sys.exit(main())
