from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Sequence

from prompts.base import DEFAULT_TEMPLATE, PromptTemplate, TransformationCategory


@dataclass(frozen=True)
class StyleExtension:
    name: str
    prompt: str

    def __post_init__(self) -> None:
        if not str(self.name).strip():
            raise ValueError("style name must not be empty")
        if not str(self.prompt).strip():
            raise ValueError("style prompt must not be empty")

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "StyleExtension":
        return cls(
            name=str(payload.get("name", "")).strip(),
            prompt=str(payload.get("prompt", "")).strip(),
        )

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "prompt": self.prompt}

    def as_category(self) -> TransformationCategory:
        return TransformationCategory(name=self.name, definition=self.prompt)


@dataclass(frozen=True)
class GenerationRequestConfig:
    user_text: str
    styles: tuple[StyleExtension, ...] = ()
    unfiltered_mode: bool = False


def _bullets(lines: Iterable[str]) -> str:
    return "\n".join(f"* {line}" for line in lines)


def _extension_categories(
    config: GenerationRequestConfig,
    template: PromptTemplate,
) -> list[TransformationCategory]:
    extensions = [style.as_category() for style in config.styles]
    if config.unfiltered_mode:
        extensions.append(template.unfiltered_category)
    return extensions


def render_category_list(
    config: GenerationRequestConfig,
    template: PromptTemplate = DEFAULT_TEMPLATE,
) -> str:
    """Number built-ins from 1, then styles and the unfiltered entry after them."""
    base = list(template.categories)
    extensions = _extension_categories(config, template)
    lines = [category.render(idx + 1) for idx, category in enumerate(base)]
    lines.extend(
        category.render(len(base) + idx + 1) for idx, category in enumerate(extensions)
    )
    return "\n".join(lines)


def render_enhance_prompt(
    config: GenerationRequestConfig,
    template: PromptTemplate = DEFAULT_TEMPLATE,
) -> str:
    fence = template.fence_marker
    output_structure = "\n".join(
        [
            "You must strictly follow this Markdown structure:",
            "",
            f"**{template.critique_marker}:** {template.critique_placeholder}",
            "",
            f"{template.heading_marker} [Category Name]",
            fence,
            "[Transformed Text]",
            fence,
        ]
    )
    blocks = [
        f"[Role]\n{template.role}",
        f"[Process]\n{_bullets(template.process)}",
        f"[Output Structure]\n{output_structure}",
        f"[Transformation Categories]\n{render_category_list(config, template)}",
    ]
    if config.unfiltered_mode:
        blocks.append(f"[Unfiltered Mode]\n{_bullets(template.unfiltered_directive)}")
    blocks.extend(
        [
            f"[Constraints]\n{_bullets(template.constraints)}",
            "---",
            f'{template.user_text_marker} "{config.user_text}"',
        ]
    )
    return "\n\n".join(blocks)


def build_prompt(
    user_text: str,
    styles: Sequence[StyleExtension] = (),
    unfiltered_mode: bool = False,
    template: PromptTemplate = DEFAULT_TEMPLATE,
) -> str:
    config = GenerationRequestConfig(
        user_text=user_text or "",
        styles=tuple(styles or ()),
        unfiltered_mode=bool(unfiltered_mode),
    )
    return render_enhance_prompt(config, template)


__all__ = [
    "StyleExtension",
    "GenerationRequestConfig",
    "render_category_list",
    "render_enhance_prompt",
    "build_prompt",
]
