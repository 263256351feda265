from __future__ import annotations

"""JSON-backed store for the user's style library and mode flags."""

import json
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from prompts.enhance import StyleExtension

logger = logging.getLogger(__name__)

MAX_STYLES = 5
SETTINGS_PATH_ENV_VAR = "FLUFF_SETTINGS_PATH"
DEFAULT_SETTINGS_PATH = Path.home() / ".zero_fluff" / "settings.json"


@dataclass(frozen=True)
class Settings:
    styles: tuple[StyleExtension, ...] = ()
    unfiltered_mode: bool = False

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "Settings":
        raw_styles = payload.get("styles") or []
        if not isinstance(raw_styles, list):
            raise ValueError("styles must be a list")
        styles: list[StyleExtension] = []
        for idx, item in enumerate(raw_styles):
            if not isinstance(item, dict):
                raise ValueError(f"styles[{idx}] must be an object")
            styles.append(StyleExtension.from_dict(item))
        unfiltered_mode = payload.get("unfiltered_mode", False)
        if not isinstance(unfiltered_mode, bool):
            raise ValueError("unfiltered_mode must be true or false")
        return cls(styles=tuple(styles), unfiltered_mode=unfiltered_mode)

    def to_dict(self) -> dict[str, Any]:
        return {
            "styles": [style.to_dict() for style in self.styles],
            "unfiltered_mode": self.unfiltered_mode,
        }


def resolve_settings_path(path: Path | str | None = None) -> Path:
    if path is not None:
        return Path(path)
    env_path = os.getenv(SETTINGS_PATH_ENV_VAR, "").strip()
    if env_path:
        return Path(env_path)
    return DEFAULT_SETTINGS_PATH


class SettingsStore:
    def __init__(self, path: Path | str | None = None) -> None:
        self._path = resolve_settings_path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Settings:
        if not self._path.exists():
            return Settings()
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValueError(f"Settings file is not valid JSON: {self._path} ({exc})") from exc
        if not isinstance(payload, dict):
            raise ValueError(f"Settings file must contain a JSON object: {self._path}")
        return Settings.from_dict(payload)

    def save(self, settings: Settings) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps(settings.to_dict(), ensure_ascii=False, indent=2),
            encoding="utf-8",
        )
        logger.debug(f"Saved settings to {self._path}")

    def add_style(self, name: str, prompt: str) -> Settings:
        name = (name or "").strip()
        prompt = (prompt or "").strip()
        if not name or not prompt:
            raise ValueError("Name and prompt are required.")

        settings = self.load()
        if len(settings.styles) >= MAX_STYLES:
            raise ValueError(f"Max {MAX_STYLES} styles allowed. Delete one first.")

        updated = replace(settings, styles=settings.styles + (StyleExtension(name, prompt),))
        self.save(updated)
        logger.info(f"Style added: '{name}' ({len(updated.styles)}/{MAX_STYLES})")
        return updated

    def delete_style(self, index: int) -> Settings:
        settings = self.load()
        if not 0 <= index < len(settings.styles):
            raise ValueError(
                f"No style at index {index}; {len(settings.styles)} style(s) stored."
            )
        removed = settings.styles[index]
        styles = settings.styles[:index] + settings.styles[index + 1 :]
        updated = replace(settings, styles=styles)
        self.save(updated)
        logger.info(f"Style deleted: '{removed.name}'")
        return updated

    def set_unfiltered_mode(self, enabled: bool) -> Settings:
        updated = replace(self.load(), unfiltered_mode=bool(enabled))
        self.save(updated)
        logger.info(f"Unfiltered mode {'enabled' if enabled else 'disabled'}")
        return updated


__all__ = [
    "MAX_STYLES",
    "SETTINGS_PATH_ENV_VAR",
    "DEFAULT_SETTINGS_PATH",
    "Settings",
    "SettingsStore",
    "resolve_settings_path",
]
