from __future__ import annotations

from backends.openai import OpenAIBackendConfig, OpenAILLMModel

__all__ = [
    "OpenAIBackendConfig",
    "OpenAILLMModel",
]
