from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from toptagger.app import tag_top_sellers
from toptagger.config import TaggingConfig, configure_logging, get_tagging_config

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Tag Shopify best sellers listed in a CSV")
    subparsers = parser.add_subparsers(dest="command", required=True)

    tag = subparsers.add_parser("tag", help="Tag every product listed in the intake CSV")
    tag.add_argument(
        "--input",
        type=Path,
        help="CSV file listing the best sellers (defaults to 'intake/best sellers.csv')",
    )
    tag.add_argument(
        "--report-dir",
        type=Path,
        help="Directory receiving the tagged and not-found reports (defaults to 'intake')",
    )
    tag.add_argument(
        "--tag-name",
        type=str,
        help="Tag to add to every matched product (defaults to 'api-top-seller')",
    )
    tag.add_argument(
        "--delay-ms",
        type=int,
        help="Pause between rows in milliseconds (defaults to 500)",
    )
    tag.add_argument(
        "--search-limit",
        type=int,
        help="Maximum number of search results inspected per row (defaults to 10)",
    )
    tag.add_argument(
        "--strict",
        action="store_true",
        help="Treat several exact matches as not found instead of taking the first",
    )
    tag.add_argument(
        "--verbose",
        action="store_true",
        help="Log raw search and update payloads",
    )

    return parser.parse_args(list(argv))


def _tagging_config_from_args(
    args: argparse.Namespace, *, base: TaggingConfig | None = None
) -> TaggingConfig:
    config = base or get_tagging_config()
    overrides: dict[str, object] = {}
    if args.input is not None:
        overrides["input_path"] = args.input
    if args.report_dir is not None:
        overrides["report_dir"] = args.report_dir
    if args.tag_name is not None:
        overrides["tag_name"] = args.tag_name.strip()
    if args.delay_ms is not None:
        overrides["pacing_seconds"] = args.delay_ms / 1000
    if args.search_limit is not None:
        overrides["search_limit"] = args.search_limit
    if args.strict:
        overrides["strict_matching"] = True
    return replace(config, **overrides)  # type: ignore[arg-type]


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    signal(SIGINT, sigint_handler)
    load_dotenv()
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        tagging = _tagging_config_from_args(parsed_args)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    if parsed_args.verbose:
        configure_logging(level=logging.DEBUG, force=True)

    try:
        if parsed_args.command == "tag":
            tag_top_sellers(tagging=tagging)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except Exception:
        log.exception("Fatal error during tagging run")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.warning("Interrupted by user (Ctrl+C); no reports written")
    sys.exit(130)


if __name__ == "__main__":
    main()
