"""Conversion diagnostics.

This package emits section events and verbose item counts.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
