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

from backends import OpenAIBackendConfig, OpenAILLMModel
from backends.openai import DEFAULT_BASE_URL, DEFAULT_MODEL, DEFAULT_TEMPERATURE, DEFAULT_TOP_P
from pipelines import EnhanceConfig, TextEnhancePipeline
from prompts import DEFAULT_TEMPLATE, RATIONALE_TEMPLATE, StyleExtension, build_prompt
from rendering import render
from settings import SettingsStore

_TEMPLATES = {
    "coach": DEFAULT_TEMPLATE,
    "rationale": RATIONALE_TEMPLATE,
}


def _parse_style(value: str) -> StyleExtension:
    name, sep, prompt = value.partition("=")
    try:
        if not sep:
            raise ValueError("missing '='")
        return StyleExtension(name=name.strip(), prompt=prompt.strip())
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"style must look like NAME=PROMPT with both parts non-empty ({exc})"
        ) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Rewrite text into several styles plus a coach's critique using an OpenAI-compatible API."
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=Path("tests/data/live_enhance_input.txt"),
        help="Input text file path. Ignored when --text is given.",
    )
    parser.add_argument("--text", type=str, default=None, help="Text to enhance, inline.")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Optional output file path. If omitted, output is printed to stdout.",
    )
    parser.add_argument(
        "--style",
        type=_parse_style,
        action="append",
        default=[],
        metavar="NAME=PROMPT",
        help="Extra custom style for this run. May be repeated.",
    )
    parser.add_argument(
        "--no-stored-styles",
        action="store_true",
        help="Ignore styles saved in the settings file.",
    )
    parser.add_argument(
        "--unfiltered",
        action="store_true",
        help="Request an explicit/unfiltered variant in addition to the stored setting.",
    )
    parser.add_argument(
        "--settings",
        type=Path,
        default=None,
        help="Settings file path. Same effect as setting FLUFF_SETTINGS_PATH.",
    )
    parser.add_argument(
        "--template",
        type=str,
        default="coach",
        choices=sorted(_TEMPLATES),
        help="Prompt wording: 'coach' (critique + seven styles) or 'rationale'.",
    )
    parser.add_argument("--format", type=str, default="text", choices=["text", "html", "json"])
    parser.add_argument(
        "--print-prompt",
        action="store_true",
        help="Print the prompt that would be sent and exit without calling the API.",
    )
    parser.add_argument("--temperature", type=float, default=DEFAULT_TEMPERATURE)
    parser.add_argument("--top-p", type=float, default=DEFAULT_TOP_P)
    parser.add_argument("--max-new-tokens", type=int, default=None)
    parser.add_argument(
        "--model",
        type=str,
        default=None,
        help="Optional model override. Same effect as setting LLM_MODEL.",
    )
    parser.add_argument(
        "--base-url",
        type=str,
        default=None,
        help="Optional API base URL override. Same effect as setting LLM_BASE_URL.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging (DEBUG level).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(verbose=args.verbose)

    if args.text is not None:
        source_text = args.text
    else:
        logger.info(f"Reading input from: {args.input}")
        source_text = args.input.read_text(encoding="utf-8")
    logger.info(f"Input text length: {len(source_text)} chars")

    try:
        settings = SettingsStore(args.settings).load()
    except ValueError as exc:
        logger.error(f"Error: {exc}")
        return 1
    styles = list(args.style) if args.no_stored_styles else list(settings.styles) + list(args.style)
    unfiltered = args.unfiltered or settings.unfiltered_mode
    template = _TEMPLATES[args.template]

    logger.info("Configuration:")
    logger.info(f"  styles={[style.name for style in styles]}")
    logger.info(f"  unfiltered={unfiltered}")
    logger.info(f"  template={args.template}")
    logger.info(f"  temperature={args.temperature}")
    logger.info(f"  top_p={args.top_p}")
    logger.info(f"  max_new_tokens={args.max_new_tokens}")

    if args.print_prompt:
        print(build_prompt(source_text.strip(), styles, unfiltered, template))
        return 0

    try:
        model = OpenAILLMModel(
            config=OpenAIBackendConfig(
                base_url=args.base_url or DEFAULT_BASE_URL,
                model=args.model or DEFAULT_MODEL,
                temperature=args.temperature,
                top_p=args.top_p,
                max_new_tokens=args.max_new_tokens,
            )
        )
        pipeline = TextEnhancePipeline(model=model, config=EnhanceConfig(template=template))
        result = pipeline.run(source_text, styles=styles, unfiltered_mode=unfiltered)
    except ValueError as exc:
        logger.error(f"Error: {exc}")
        return 1

    rendered = render(result.parsed, args.format, template)
    if args.output is None:
        logger.info("Outputting to stdout")
        print(rendered)
    else:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(rendered, encoding="utf-8")
        logger.info(f"Written output to: {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
