"""
Main entry point for running a Jumpy3 driver by problem name.

Usage:
    python -m jumpy_engine.driver MiniMax board1.txt board2.txt 2
"""

import sys

from jumpy_engine.driver.interface import cli

if __name__ == "__main__":
    sys.exit(cli())
