"""Command-line entry point: generate a video plan and print or save it."""
from __future__ import annotations

import argparse
import logging
import re
import sys
from pathlib import Path

from .batchutil import load_options_file, resolve_option_paths
from .config import LOG_FILE, Config
from .errors import InvalidInput
from .generator import SAMPLE_OPTIONS, generate_video_plan, plan_to_json

log = logging.getLogger(__name__)

# argparse dest -> options field
_FLAG_FIELDS = {
    "topic": "topic",
    "mood": "mood",
    "tone": "tone",
    "style": "visualStyle",
    "atmosphere": "atmosphere",
    "scenes": "sceneCount",
    "voiceover": "includeVoiceover",
    "thumbnail": "includeThumbnail",
}


def _setup_logging(level: str) -> None:
    LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=str(LOG_FILE),
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vidplan",
        description="Turn a topic into a structured, production-ready video plan.",
    )
    parser.add_argument("--topic", type=str, help="What the video is about")
    parser.add_argument("--mood", type=str)
    parser.add_argument("--tone", type=str)
    parser.add_argument(
        "--style", type=str,
        help="cinematic, realistic, emotional, animated, documentary or surreal",
    )
    parser.add_argument("--atmosphere", type=str)
    parser.add_argument("--scenes", type=int, help="Number of scenes (1-10)")
    parser.add_argument(
        "--voiceover", action=argparse.BooleanOptionalAction, default=None,
        help="Add (or with --no-voiceover, leave out) voiceover lines",
    )
    parser.add_argument(
        "--thumbnail", action=argparse.BooleanOptionalAction, default=None,
        help="Add (or with --no-thumbnail, leave out) a thumbnail prompt",
    )
    parser.add_argument("--sample", action="store_true", help="Start from the built-in sample options")
    parser.add_argument(
        "--options-file", type=str,
        help="JSON options file(s): comma-separated files, directories or globs",
    )
    parser.add_argument("--prompt-only", action="store_true", help="Output only the final prompt")
    parser.add_argument("--output", type=str, help="Directory to write plan files into")
    return parser


def _flag_overrides(args: argparse.Namespace) -> dict:
    overrides = {}
    for dest, field_name in _FLAG_FIELDS.items():
        value = getattr(args, dest)
        if value is not None:
            overrides[field_name] = value
    return overrides


def _options_from_args(args: argparse.Namespace) -> dict:
    raw = dict(SAMPLE_OPTIONS) if args.sample else {}
    raw.update(_flag_overrides(args))
    return raw


def _slug(text: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")
    return slug[:60].rstrip("-") or "plan"


def _emit(raw: dict, args: argparse.Namespace, name: str | None = None) -> Path | None:
    """Print the plan, or save it under *name* (default: the title slug)."""
    plan = generate_video_plan(raw)
    text = plan.final_prompt if args.prompt_only else plan_to_json(plan)

    if not args.output:
        print(text)
        return None

    out_dir = Path(args.output)
    out_dir.mkdir(parents=True, exist_ok=True)
    suffix = ".txt" if args.prompt_only else ".json"
    path = out_dir / f"{name or _slug(plan.summary.title)}{suffix}"
    path.write_text(text + "\n", encoding="utf-8")
    log.info("Wrote %s", path)
    print(f"Saved: {path}")
    return path


def run_batch(args: argparse.Namespace) -> int:
    """Generate one plan per options file. Returns the number of failures.

    Each plan is saved under its options file's stem, so briefs that share a
    title never overwrite each other.
    """
    paths = resolve_option_paths(args.options_file)
    if not paths:
        print(f"No .json options files found at: {args.options_file}", file=sys.stderr)
        return 1

    failed = 0
    for path in paths:
        try:
            raw = load_options_file(path)
            raw.update({k: v for k, v in _flag_overrides(args).items() if k != "topic"})
            _emit(raw, args, name=path.stem)
        except InvalidInput as e:
            log.warning("Skipping %s: %s", path, e)
            print(f"  ERROR ({path.name}): {e}", file=sys.stderr)
            failed += 1
    return failed


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, generate, and print or save the plan(s)."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    config = Config.load()
    _setup_logging(config.log_level)
    if args.output is None and args.options_file:
        args.output = str(config.output_dir)

    if args.options_file:
        if run_batch(args):
            sys.exit(1)
        return

    raw = _options_from_args(args)
    if not raw.get("topic"):
        parser.print_usage(sys.stderr)
        print("Error: --topic (or --sample) is required", file=sys.stderr)
        sys.exit(1)

    try:
        _emit(raw, args)
    except InvalidInput as e:
        log.warning("Rejected options: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
