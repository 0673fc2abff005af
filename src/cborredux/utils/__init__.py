"""Utility functions for cborredux.

This module provides size calculation and hex inspection helpers.
"""

from __future__ import annotations

from .sizing import encoded_hex, encoded_size

__all__ = [
    "encoded_size",
    "encoded_hex",
]
