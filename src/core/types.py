from __future__ import annotations

"""Unified type exports for public consumption.

This module provides a stable import surface and intentionally keeps type
ownership in domain modules (`prompts`, `parsing`, `model.py`, `pipelines`).
"""

from model import LLMRequest, LLMTask
from parsing import ParsedResult, TransformationCard
from pipelines import EnhanceResult
from prompts import GenerationRequestConfig, StyleExtension, TransformationCategory

__all__ = [
    "LLMTask",
    "LLMRequest",
    "StyleExtension",
    "GenerationRequestConfig",
    "TransformationCategory",
    "TransformationCard",
    "ParsedResult",
    "EnhanceResult",
]
