"""Checksums, the ARC4 cipher and output file names for Inno Setup installer data."""

__version__ = "1.9.0"