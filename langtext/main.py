"""Command line entrypoint: resolve one header and print the text tree."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from typing import Sequence

from langtext.config import get_settings
from langtext.i18n.service import LanguageTextService
from langtext.logging import configure_logging, logger
from langtext.services.exceptions import ServiceError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="langtext", description=__doc__)
    parser.add_argument("header", help="Accept-Language style preference header")
    parser.add_argument("--source", help="translation source file (YAML or JSON)")
    parser.add_argument("--max-cache-size", type=int)
    parser.add_argument("--min-cache-size", type=int)
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    )
    return parser


async def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(args.log_level or settings.log_level, stream=sys.stderr)

    service = LanguageTextService(settings=settings)
    try:
        if args.source:
            service.set_source_location(args.source)
        if args.max_cache_size is not None:
            service.set_max_cache_size(args.max_cache_size)
        if args.min_cache_size is not None:
            service.set_min_cache_size(args.min_cache_size)
        text = await service.get_language_text(args.header)
    except ServiceError as exc:
        logger.error("language_text_failed", error=str(exc))
        print(f"error: {exc}", file=sys.stderr)
        return 1
    finally:
        service.cache.cancel_pending_purge()

    print(json.dumps(text, ensure_ascii=False, indent=2))
    return 0


def run() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
