#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--difficulty {easy,medium,hard}]
    python main.py play --width W --height H --mines M [--seed N]
    python main.py presets
"""
import sys
from pathlib import Path

# Allow running from a source checkout without installing
sys.path.insert(0, str(Path(__file__).parent / "src"))

from minesweeper.cli import main  # noqa: E402


if __name__ == "__main__":
    sys.exit(main())
