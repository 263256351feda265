from __future__ import annotations

from parsing.markdown import (
    ParsedResult,
    TransformationCard,
    extract_critique,
    extract_transformations,
    parse_markdown_output,
)

__all__ = [
    "TransformationCard",
    "ParsedResult",
    "extract_critique",
    "extract_transformations",
    "parse_markdown_output",
]
