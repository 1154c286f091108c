#!/usr/bin/env python3
"""
Minefield - console entry point.

Usage:
    python main.py [--difficulty {easy,medium,hard}] [--seed N]
    python main.py --width W --height H --mines N
"""
import sys

from src.minefield.console import main


if __name__ == "__main__":
    sys.exit(main())
