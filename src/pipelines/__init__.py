from __future__ import annotations

from pipelines.enhance import EnhanceConfig, EnhanceResult, TextEnhancePipeline

__all__ = [
    "EnhanceConfig",
    "EnhanceResult",
    "TextEnhancePipeline",
]
