from __future__ import annotations

"""Unified protocol exports for public consumption.

This module intentionally re-exports existing protocol contracts to keep
a single import surface.
"""

from model import LLMModel

__all__ = [
    "LLMModel",
]
