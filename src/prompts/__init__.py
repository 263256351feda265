from __future__ import annotations

from prompts.base import (
    DEFAULT_CATEGORIES,
    DEFAULT_TEMPLATE,
    RATIONALE_TEMPLATE,
    PromptTemplate,
    TransformationCategory,
)
from prompts.enhance import (
    GenerationRequestConfig,
    StyleExtension,
    build_prompt,
    render_category_list,
    render_enhance_prompt,
)

__all__ = [
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
]
