"""PBCL: a small turn-based creature battling simulation."""
__version__ = "0.1.0"
