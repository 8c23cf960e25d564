"""Detect AI-sounding phrasing in Japanese prose with textlint."""

__version__ = "0.1.0"
