from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any

from prompts.base import DEFAULT_TEMPLATE, PromptTemplate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransformationCard:
    title: str
    content: str

    def to_dict(self) -> dict[str, str]:
        return {"title": self.title, "content": self.content}


@dataclass(frozen=True)
class ParsedResult:
    critique: str = ""
    transformations: tuple[TransformationCard, ...] = ()

    def is_empty(self) -> bool:
        return not self.critique and not self.transformations

    def to_dict(self) -> dict[str, Any]:
        return {
            "critique": self.critique,
            "transformations": [card.to_dict() for card in self.transformations],
        }


def _coerce_text(raw_text: Any) -> str:
    if raw_text is None:
        return ""
    if isinstance(raw_text, bytes):
        return raw_text.decode("utf-8", errors="replace")
    return str(raw_text)


def extract_critique(text: str, template: PromptTemplate = DEFAULT_TEMPLATE) -> str:
    """Return the critique span, or "" when the model did not follow the format.

    The bold marker form is tried first, then the bare fallback label. Both
    capture up to the next heading marker, so a critique with no section
    after it is not recognised.
    """
    stop = f"(?={re.escape(template.heading_marker)})"
    candidates = (
        re.escape(f"**{template.critique_marker}:**"),
        re.escape(f"{template.critique_fallback}:"),
    )
    for lead in candidates:
        match = re.search(lead + r"(.*?)" + stop, text, flags=re.IGNORECASE | re.DOTALL)
        if match:
            return match.group(1).strip()
    return ""


def _heading_title(line: str, marker: str) -> str | None:
    pos = line.find(marker)
    if pos < 0:
        return None
    return line[pos + len(marker):].strip() or None


def extract_transformations(
    text: str,
    template: PromptTemplate = DEFAULT_TEMPLATE,
) -> tuple[TransformationCard, ...]:
    """Pair each heading with the next complete fenced block after it.

    A heading may sit anywhere on a line, including right after the closing
    fence of the previous block. Headings seen before the opening fence or
    inside a block belong to the card already in progress. A heading with no
    opening and closing fence after it yields nothing. Order follows the
    source text.
    """
    marker = template.heading_marker
    fence = template.fence_marker

    cards: list[TransformationCard] = []
    title: str | None = None
    block: list[str] | None = None
    for line in text.split("\n"):
        if block is not None:
            if not line.startswith(fence):
                block.append(line)
                continue
            cards.append(TransformationCard(title=title or "", content="\n".join(block).strip()))
            title, block = None, None
            line = line[len(fence):]
        elif title is not None:
            if line.startswith(fence):
                block = []
            continue
        title = _heading_title(line, marker)

    if title is not None:
        logger.debug(f"No complete fenced block after heading '{title}'")
    return tuple(cards)


def parse_markdown_output(
    raw_text: Any,
    template: PromptTemplate = DEFAULT_TEMPLATE,
) -> ParsedResult:
    text = _coerce_text(raw_text)
    result = ParsedResult(
        critique=extract_critique(text, template),
        transformations=extract_transformations(text, template),
    )
    logger.debug(
        f"Parsed model output: critique_len={len(result.critique)}, "
        f"cards={len(result.transformations)}"
    )
    return result


__all__ = [
    "TransformationCard",
    "ParsedResult",
    "extract_critique",
    "extract_transformations",
    "parse_markdown_output",
]
