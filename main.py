#!/usr/bin/env python3
"""
PBCL - turn-based creature battling

Thin launcher around the scripted tutorial in :mod:`pbcl.cli`.

To run: python main.py
"""

from pbcl.cli import run

if __name__ == "__main__":
    run()
