from __future__ import annotations

"""Unified public API for the package layout."""

from backends import OpenAIBackendConfig, OpenAILLMModel
from core import config, protocols, types
from model import LLMModel, LLMRequest, LLMTask
from parsing import (
    ParsedResult,
    TransformationCard,
    extract_critique,
    extract_transformations,
    parse_markdown_output,
)
from pipelines import EnhanceConfig, EnhanceResult, TextEnhancePipeline
from prompts import (
    DEFAULT_CATEGORIES,
    DEFAULT_TEMPLATE,
    RATIONALE_TEMPLATE,
    GenerationRequestConfig,
    PromptTemplate,
    StyleExtension,
    TransformationCategory,
    build_prompt,
    render_category_list,
    render_enhance_prompt,
)
from rendering import card_dom_id, render, render_html, render_json, render_text
from settings import MAX_STYLES, Settings, SettingsStore

__all__ = [
    "config",
    "protocols",
    "types",
    "LLMTask",
    "LLMRequest",
    "LLMModel",
    "TransformationCategory",
    "PromptTemplate",
    "DEFAULT_CATEGORIES",
    "DEFAULT_TEMPLATE",
    "RATIONALE_TEMPLATE",
    "StyleExtension",
    "GenerationRequestConfig",
    "render_category_list",
    "render_enhance_prompt",
    "build_prompt",
    "TransformationCard",
    "ParsedResult",
    "extract_critique",
    "extract_transformations",
    "parse_markdown_output",
    "EnhanceConfig",
    "EnhanceResult",
    "TextEnhancePipeline",
    "OpenAIBackendConfig",
    "OpenAILLMModel",
    "MAX_STYLES",
    "Settings",
    "SettingsStore",
    "card_dom_id",
    "render",
    "render_text",
    "render_html",
    "render_json",
]
