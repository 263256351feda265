from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Protocol


LLMTask = Literal["enhance_text"]


@dataclass(frozen=True)
class LLMRequest:
    task: LLMTask
    prompt: str
    unfiltered: bool = False


class LLMModel(Protocol):
    def generate(self, request: LLMRequest) -> str:
        ...
