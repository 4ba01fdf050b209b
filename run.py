#!/usr/bin/env python3
"""
gesturepoker - Console Table Startup Script

Usage:
    python run.py [--seed N] [--hands N] [--bots-only] [--log-level LEVEL]
"""

from gesturepoker.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
