from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from model import LLMModel, LLMRequest
from parsing.markdown import ParsedResult, parse_markdown_output
from prompts.base import DEFAULT_TEMPLATE, PromptTemplate
from prompts.enhance import GenerationRequestConfig, StyleExtension, render_enhance_prompt
from settings import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnhanceConfig:
    template: PromptTemplate = DEFAULT_TEMPLATE
    require_text: bool = True  # reject blank input before any network call


@dataclass(frozen=True)
class EnhanceResult:
    prompt: str
    raw_output: str
    parsed: ParsedResult


class TextEnhancePipeline:
    """Build prompt, call the model once, parse the reply."""

    def __init__(
        self,
        model: LLMModel,
        config: EnhanceConfig | None = None,
    ) -> None:
        self._model = model
        self._config = config or EnhanceConfig()

    def build_request(
        self,
        user_text: str,
        styles: Sequence[StyleExtension] = (),
        unfiltered_mode: bool = False,
    ) -> GenerationRequestConfig:
        text = (user_text or "").strip()
        if self._config.require_text and not text:
            raise ValueError("Paste some text first.")
        return GenerationRequestConfig(
            user_text=text,
            styles=tuple(styles),
            unfiltered_mode=unfiltered_mode,
        )

    def run(
        self,
        user_text: str,
        styles: Sequence[StyleExtension] = (),
        unfiltered_mode: bool = False,
    ) -> EnhanceResult:
        request_config = self.build_request(user_text, styles, unfiltered_mode)
        prompt = render_enhance_prompt(request_config, self._config.template)
        logger.info(
            f"Enhancing {len(request_config.user_text)} chars with "
            f"{len(request_config.styles)} custom style(s), unfiltered={unfiltered_mode}"
        )

        raw_output = self._model.generate(
            LLMRequest(task="enhance_text", prompt=prompt, unfiltered=unfiltered_mode)
        )
        parsed = parse_markdown_output(raw_output, self._config.template)
        if not parsed.transformations:
            logger.warning("Model output contained no fenced transformations")
        else:
            logger.info(f"Parsed {len(parsed.transformations)} transformation(s)")
        return EnhanceResult(prompt=prompt, raw_output=raw_output, parsed=parsed)

    def run_with_settings(self, user_text: str, settings: Settings) -> EnhanceResult:
        return self.run(
            user_text,
            styles=settings.styles,
            unfiltered_mode=settings.unfiltered_mode,
        )


__all__ = [
    "EnhanceConfig",
    "EnhanceResult",
    "TextEnhancePipeline",
]
