from __future__ import annotations

"""Output renderers for parsed results.

Model output is untrusted: the HTML renderer escapes every extracted
substring, the other renderers emit it as plain text.
"""

import html
import json
import re
import textwrap
from typing import Literal

from parsing.markdown import ParsedResult
from prompts.base import DEFAULT_TEMPLATE, PromptTemplate

OutputFormat = Literal["text", "html", "json"]

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")


def card_dom_id(title: str) -> str:
    return "content-" + _NON_ALNUM.sub("", title)


def render_text(
    result: ParsedResult,
    width: int = 72,
    template: PromptTemplate = DEFAULT_TEMPLATE,
) -> str:
    blocks: list[str] = []
    if result.critique:
        rule = "=" * width
        wrapped = textwrap.fill(result.critique, width=width)
        blocks.append(f"{rule}\n{template.critique_marker.upper()}\n{rule}\n{wrapped}")
    if not result.transformations:
        blocks.append("(no transformations returned)")
    for idx, card in enumerate(result.transformations, start=1):
        header = f"[{idx}] {card.title}"
        blocks.append(f"{header}\n{'-' * len(header)}\n{card.content}")
    return "\n\n".join(blocks)


def render_html(result: ParsedResult) -> str:
    parts: list[str] = []
    if result.critique:
        parts.append(
            '<div class="coach-box"><div class="coach-content">'
            f"{html.escape(result.critique)}</div></div>"
        )
    parts.append('<div class="card-grid">')
    for card in result.transformations:
        parts.append(
            '<div class="transformation-card">'
            f'<div class="card-title">{html.escape(card.title)}</div>'
            f'<div class="card-content" id="{card_dom_id(card.title)}">'
            f"{html.escape(card.content)}</div>"
            "</div>"
        )
    parts.append("</div>")
    return "\n".join(parts)


def render_json(result: ParsedResult) -> str:
    return json.dumps(result.to_dict(), ensure_ascii=False, indent=2)


def render(
    result: ParsedResult,
    output_format: OutputFormat = "text",
    template: PromptTemplate = DEFAULT_TEMPLATE,
) -> str:
    if output_format == "html":
        return render_html(result)
    if output_format == "json":
        return render_json(result)
    return render_text(result, template=template)


__all__ = [
    "OutputFormat",
    "card_dom_id",
    "render_text",
    "render_html",
    "render_json",
    "render",
]
