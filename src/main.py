# src/main.py — v2
"""CLI entry point: get, index, candidates commands.

Usage:
    readmekit get <entityRef> [--strip-markdown] [--json] [--refresh]
    readmekit index [-o FILE] [--watch]
    readmekit candidates
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from readmekit.version import __version__

if TYPE_CHECKING:
    from readmekit.config.settings import Settings

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    from pydantic import ValidationError

    from readmekit.config.settings import ConfigurationError, load_settings

    try:
        args.settings = load_settings()
    except (ConfigurationError, ValidationError) as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1

    _setup_logging(args.verbose, args.settings)

    try:
        return asyncio.run(args.func(args))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="readmekit",
        description=f"readmekit v{__version__}: README lookup for catalog entities",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- get ---
    p_get = subparsers.add_parser("get", help="Print the README of an entity")
    p_get.add_argument("entity_ref", help='Entity reference, e.g. "component:default/my-service"')
    p_get.add_argument(
        "--strip-markdown", action="store_true",
        help="Return markdown READMEs as plain text",
    )
    p_get.add_argument(
        "--json", dest="as_json", action="store_true",
        help="Print the action output as JSON",
    )
    p_get.add_argument(
        "--refresh", action="store_true",
        help="Drop the cached entry before looking up",
    )
    p_get.set_defaults(func=_cmd_get)

    # --- index ---
    p_index = subparsers.add_parser(
        "index", help="Collate README search documents as JSON lines",
    )
    p_index.add_argument(
        "-o", "--output", type=Path, default=None,
        help="Output file (default: stdout)",
    )
    p_index.add_argument(
        "--watch", action="store_true",
        help="Keep running on the configured search schedule",
    )
    p_index.set_defaults(func=_cmd_index)

    # --- candidates ---
    p_candidates = subparsers.add_parser(
        "candidates", help="Show the README file names probed, in order",
    )
    p_candidates.set_defaults(func=_cmd_candidates)

    return parser


async def _cmd_get(args: argparse.Namespace) -> int:
    """Look up and print one README."""
    from readmekit.api.facade import create_app
    from readmekit.core.errors import NotFoundError

    app = create_app(args.settings)
    try:
        if args.refresh:
            await app.cache.invalidate(args.entity_ref)
        output = await app.actions.invoke(
            "get-readme-content",
            {"entityRef": args.entity_ref, "stripMarkdown": args.strip_markdown},
        )
    except NotFoundError as exc:
        logger.error("%s", exc)
        return 1
    finally:
        await app.close()

    if args.as_json:
        print(json.dumps(output, indent=2))
    else:
        print(output["content"])
    return 0


async def _cmd_index(args: argparse.Namespace) -> int:
    """Collate search documents once, or on schedule with --watch."""
    from readmekit.api.facade import create_app
    from readmekit.search.scheduler import run_on_schedule

    app = create_app(args.settings)

    async def collate_once() -> int:
        count = 0
        out = open(args.output, "w", encoding="utf-8") if args.output else sys.stdout
        try:
            async for document in app.collator.collate():
                out.write(document.model_dump_json() + "\n")
                count += 1
        finally:
            if out is not sys.stdout:
                out.close()
        logger.info("Wrote %d README documents", count)
        return count

    try:
        if args.watch:
            await run_on_schedule(collate_once, app.schedule, asyncio.Event())
        else:
            await collate_once()
    finally:
        await app.close()
    return 0


async def _cmd_candidates(args: argparse.Namespace) -> int:
    """Print the configured candidate list."""
    from readmekit.core.candidates import build_candidates

    for candidate in build_candidates(args.settings.readme_file_names_list):
        print(f"{candidate.name}\t{candidate.content_type}")
    return 0


def _setup_logging(verbose: bool, settings: Settings) -> None:
    """Configure logging from settings; -v forces DEBUG."""
    from readmekit.logging.logger import setup_logging

    setup_logging(
        level="DEBUG" if verbose else settings.log_level,
        log_format=settings.log_format,
        log_file=settings.log_file,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )
    # Quiet noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


if __name__ == "__main__":
    sys.exit(main())
