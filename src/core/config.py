from __future__ import annotations

"""Unified config exports for public consumption."""

from backends import OpenAIBackendConfig
from pipelines import EnhanceConfig
from prompts import PromptTemplate
from settings import Settings

__all__ = [
    "EnhanceConfig",
    "PromptTemplate",
    "OpenAIBackendConfig",
    "Settings",
]
