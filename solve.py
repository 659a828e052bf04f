#!/usr/bin/env python3
"""
Solve a TicTacToe position from the command line.

Usage:
    python solve.py solve "XOX O_O XOX"
    python solve.py analyse "X__ _O_ ___"
    python solve.py play --as O
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from tttsolver.cli import main


if __name__ == "__main__":
    sys.exit(main())
