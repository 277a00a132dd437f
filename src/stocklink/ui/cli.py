from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from stocklink.app import assign_stock_sources, list_stock_sources
from stocklink.config import configure_logging, get_log_level
from stocklink.ui.schema import load_links_file, parse_source_option

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage the sources assigned to stocks")
    subparsers = parser.add_subparsers(dest="command", required=True)

    assign = subparsers.add_parser(
        "assign",
        help="Replace the sources assigned to a stock",
    )
    assign.add_argument(
        "--stock-id",
        type=int,
        required=True,
        help="Stock whose source links are rewritten",
    )
    inputs = assign.add_mutually_exclusive_group(required=True)
    inputs.add_argument(
        "--source",
        dest="sources",
        action="append",
        metavar="CODE[:PRIORITY]",
        help="Source to keep assigned; repeat for several sources",
    )
    inputs.add_argument(
        "--links-file",
        type=Path,
        help="JSON array of link objects with source_code and optional priority",
    )
    inputs.add_argument(
        "--clear",
        action="store_true",
        help="Remove every source assigned to the stock",
    )
    assign.add_argument(
        "--dry-run",
        action="store_true",
        help="Report the links that would be saved and deleted without writing",
    )

    list_links = subparsers.add_parser("list", help="Show the sources assigned to a stock")
    list_links.add_argument(
        "--stock-id",
        type=int,
        required=True,
        help="Stock to inspect",
    )

    return parser.parse_args(list(argv))


def _collect_links_data(args: argparse.Namespace) -> list[dict[str, object]]:
    if args.clear:
        return []
    if args.links_file is not None:
        return load_links_file(args.links_file)
    return [parse_source_option(value) for value in args.sources]


def _run(args: argparse.Namespace, links_data: list[dict[str, object]]) -> None:
    if args.command == "assign":
        plan = assign_stock_sources(args.stock_id, links_data, dry_run=args.dry_run)
        prefix = "Would save" if args.dry_run else "Saved"
        log.info("%s %s for stock %s", prefix, plan.saved_codes() or "nothing", args.stock_id)
        prefix = "Would delete" if args.dry_run else "Deleted"
        log.info("%s %s for stock %s", prefix, plan.deleted_codes() or "nothing", args.stock_id)
    elif args.command == "list":
        links = list_stock_sources(args.stock_id)
        if not links:
            log.info("Stock %s has no sources assigned", args.stock_id)
        for link in links:
            log.info("%s priority=%s link_id=%s", link.source_code, link.priority, link.link_id)
    else:
        raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging(level=get_log_level())
    parsed_args: argparse.Namespace
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        links_data = _collect_links_data(parsed_args) if parsed_args.command == "assign" else []
    except (OSError, ValueError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        _run(parsed_args, links_data)
    except ValueError:
        log.exception("Invalid link data")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error while updating stock sources")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
