"""Entrypoint for the Ajou media department notice feed."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence, TextIO

from requests.exceptions import RequestException

from .config import Settings, get_settings
from .crawler import get_latest_notices
from .models import Notice
from .renderer import UnknownModeError, render
from .state import save_last_index

LOGGER = logging.getLogger(__name__)

UNCHANGED = "unchanged"
ADVANCED = "advanced"


def latest_regular_index(notices: Sequence[Notice]) -> int:
    """Return the index of the first non-pinned notice."""
    for notice in notices:
        if not notice.is_pinned:
            return notice.index
    raise ValueError("no regular (non-pinned) notice found on the board page")


def run(
    previous_index: int,
    mode: str,
    settings: Settings,
    *,
    stdout: Optional[TextIO] = None,
) -> str:
    """Fetch the board and, if it moved past ``previous_index``, render it.

    Returns UNCHANGED or ADVANCED.
    """
    out = stdout or sys.stdout

    notices = get_latest_notices(settings)
    latest_index = latest_regular_index(notices)

    if latest_index == previous_index:
        LOGGER.info("new notices not found")
        return UNCHANGED

    try:
        document = render(mode, notices, latest_index - previous_index, settings)
    except UnknownModeError as exc:
        LOGGER.warning("%s", exc)
    else:
        print(document, file=out)

    save_last_index(latest_index, settings.last_index_path)
    return ADVANCED


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ajou-notice-feed",
        description="Render new notices from the Ajou media department board.",
    )
    parser.add_argument(
        "previous_index", type=int, help="index of the last notice already seen"
    )
    parser.add_argument(
        "mode", nargs="?", default="xml", help="output mode: xml, md or cm"
    )
    parser.add_argument(
        "--last-index-file",
        default=None,
        help="watermark file to write (default: last_index next to the executable)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the feed workflow."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )

    try:
        settings = get_settings()
    except ValueError as exc:
        LOGGER.error("Configuration error: %s", exc)
        return 1

    if args.last_index_file:
        settings.last_index_path = args.last_index_file

    try:
        run(args.previous_index, args.mode, settings)
    except RequestException as exc:
        LOGGER.error("Failed to fetch notices: %s", exc)
        return 1
    except ValueError as exc:
        LOGGER.error("Failed to find the latest notice: %s", exc)
        return 1
    except OSError as exc:
        LOGGER.error("Failed to write last_index: %s", exc)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
