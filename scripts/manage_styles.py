from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )


logger = logging.getLogger(__name__)


def _ensure_src_on_path() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    src_path = repo_root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


_ensure_src_on_path()

from settings import MAX_STYLES, Settings, SettingsStore


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=f"Manage the custom style library (at most {MAX_STYLES} styles)."
    )
    parser.add_argument(
        "--settings",
        type=Path,
        default=None,
        help="Settings file path. Same effect as setting FLUFF_SETTINGS_PATH.",
    )
    parser.add_argument("--verbose", "-v", action="store_true")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="Show stored styles and flags.")

    add_parser = subparsers.add_parser("add", help="Add a custom style.")
    add_parser.add_argument("name", type=str)
    add_parser.add_argument("prompt", type=str)

    delete_parser = subparsers.add_parser("delete", help="Delete a style by its list index.")
    delete_parser.add_argument("index", type=int)

    unfiltered_parser = subparsers.add_parser("unfiltered", help="Toggle unfiltered mode.")
    unfiltered_parser.add_argument("state", choices=["on", "off"])
    return parser


def format_settings(settings: Settings) -> str:
    lines = [f"Unfiltered mode: {'on' if settings.unfiltered_mode else 'off'}"]
    if not settings.styles:
        lines.append("No custom styles yet.")
    for idx, style in enumerate(settings.styles):
        lines.append(f"[{idx}] {style.name}: {style.prompt}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose)
    store = SettingsStore(args.settings)
    logger.debug(f"Using settings file: {store.path}")

    try:
        if args.command == "add":
            settings = store.add_style(args.name, args.prompt)
        elif args.command == "delete":
            settings = store.delete_style(args.index)
        elif args.command == "unfiltered":
            settings = store.set_unfiltered_mode(args.state == "on")
        else:
            settings = store.load()
    except ValueError as exc:
        logger.error(f"Error: {exc}")
        return 1

    print(format_settings(settings))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
