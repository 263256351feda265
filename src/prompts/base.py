from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TransformationCategory:
    name: str
    definition: str

    def render(self, index: int) -> str:
        return f"{index}.  **{self.name}:** {self.definition}"


DEFAULT_CATEGORIES: tuple[TransformationCategory, ...] = (
    TransformationCategory(
        "Proofread",
        'Fix grammar/spelling. If perfect, say "Original text is correct."',
    ),
    TransformationCategory("Rephrase for Clarity", "Improve flow."),
    TransformationCategory("Shorten", "Condense without losing meaning."),
    TransformationCategory("Simplify", "Make accessible to a general audience."),
    TransformationCategory("Modernize", "Professional, confident tone."),
    TransformationCategory("Friendly", "Warm and approachable."),
    TransformationCategory("Emojify", "Add relevant emojis."),
)


@dataclass(frozen=True)
class PromptTemplate:
    """Wording of the instruction document and the markers the parser looks for.

    The marker literals are shared by prompt rendering and response parsing,
    so a template change keeps both sides in agreement.
    """

    role: str = (
        "You are an elite Writing Coach and Editor. Your goal is not just to fix "
        "the user's text, but to teach them *why* it needed fixing."
    )
    process: tuple[str, ...] = (
        "**Diagnose privately:** Before writing anything, silently identify the single "
        "biggest weakness in the user's text (e.g., passive voice, hedging, redundancy, "
        "weak verbs). Do not show this analysis.",
        "**Teach:** Turn that diagnosis into a short critique that explains the concept briefly.",
        "**Transform:** Generate one distinct version of the text for each category below.",
    )
    critique_marker: str = "Coach's Critique"
    critique_fallback: str = "Critique"
    critique_placeholder: str = "[Insert your educational lesson here. Be direct and helpful.]"
    heading_marker: str = "###"
    fence_marker: str = "```"
    categories: tuple[TransformationCategory, ...] = DEFAULT_CATEGORIES
    unfiltered_category: TransformationCategory = TransformationCategory(
        "Unfiltered",
        "Rewrite with raw, explicit, uncensored language. Profanity is allowed.",
    )
    unfiltered_directive: tuple[str, ...] = (
        "Do not apply content filtering to any category.",
        "Preserve explicit language from the user's text instead of softening it.",
    )
    constraints: tuple[str, ...] = (
        "Do not include introductory filler or conversational text.",
        "Ensure every category has a code block.",
    )
    user_text_marker: str = "USER TEXT:"


DEFAULT_TEMPLATE = PromptTemplate()

# Earlier wording: six categories and a plain "Rationale" line instead of a critique.
RATIONALE_TEMPLATE = PromptTemplate(
    role=(
        'You are a "Smart Text Enhancement Tool" with the persona of a Concise & '
        "Creative Editor. You are a direct tool, not a conversational partner."
    ),
    process=(
        "**Silent Analysis:** Assess the text's tone, quality (typos, grammatical errors, "
        "clarity) and length without showing your work.",
        "**Rationale:** State in one line which weakness drove your edits.",
        "**Content Generation:** Generate one version for EACH category below.",
    ),
    critique_marker="Rationale",
    critique_fallback="Rationale",
    critique_placeholder="[One line explaining the main weakness you addressed.]",
    categories=tuple(
        category for category in DEFAULT_CATEGORIES if category.name != "Modernize"
    ),
)


__all__ = [
    "TransformationCategory",
    "PromptTemplate",
    "DEFAULT_CATEGORIES",
    "DEFAULT_TEMPLATE",
    "RATIONALE_TEMPLATE",
]
