"""Command-line interface for bright region grouping.

Searches for bright regions in a b/w image and prints their coordinates.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from config import DEFAULT_REGION_SIZE, DEFAULT_THRESHOLD, MAX_CANDIDATES, load_settings
from errors import BrightGroupsError
from output import write_csv, write_regions
from processing import process_image
from progress import ProgressLogHandler, ProgressRenderer

PROG = "img-bri-groups"

logger = logging.getLogger(__name__)

_LEVELS = [logging.ERROR, logging.WARNING, logging.INFO, logging.DEBUG]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Search for bright regions in a b/w image and print their coordinates.",
    )
    parser.add_argument(
        "target",
        type=Path,
        help="The target PNG file, should be b/w (converted to 8-bit grayscale).",
    )
    parser.add_argument(
        "-t",
        "--threshold",
        type=int,
        default=None,
        help=f"Pixels brighter than this (0-255) are candidates (default: {DEFAULT_THRESHOLD}).",
    )
    parser.add_argument(
        "-s",
        "--region-size",
        type=int,
        default=None,
        help=f"Region size: usually size of center of sample (default: {DEFAULT_REGION_SIZE}).",
    )
    parser.add_argument(
        "-f",
        "--forced",
        action="store_true",
        default=None,
        help="Force to continue with more than the allowed bright pixels.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log output (-v warnings, -vv info, -vvv debug).",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only log errors.",
    )
    parser.add_argument(
        "--border",
        type=int,
        default=None,
        help="How many pixels from the image border to skip (default: 0).",
    )
    parser.add_argument(
        "--seed-order",
        choices=["last", "first"],
        default=None,
        help="Which pending pixel seeds a new region: newest ('last', default) or oldest ('first').",
    )
    parser.add_argument(
        "--strict-bounds",
        action="store_true",
        help="Fail when a region window reaches past the image origin instead of clamping it.",
    )
    parser.add_argument(
        "--max-candidates",
        type=int,
        default=None,
        help=f"Bright pixel count that requires --forced (default: {MAX_CANDIDATES}).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Optional JSON file with default settings; command-line flags win.",
    )
    parser.add_argument(
        "--csv",
        action="store_true",
        help="Print regions as CSV rows instead of '[ x : y : v ]' lines.",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar on stderr while grouping.",
    )

    args = parser.parse_args(argv)

    if args.threshold is not None and not (0 <= args.threshold <= 255):
        parser.error("--threshold must be in range [0, 255]")
    if args.region_size is not None and args.region_size < 1:
        parser.error("--region-size must be >= 1")
    if args.border is not None and args.border < 0:
        parser.error("--border must be >= 0")

    return args


def configure_logging(
    verbosity: int,
    quiet: bool = False,
    renderer: Optional[ProgressRenderer] = None,
) -> None:
    """Send log records to stderr at a level picked by the -v count.

    With an enabled `renderer` each record first ends its half-drawn bar.
    """
    level = logging.ERROR if quiet else _LEVELS[min(verbosity, len(_LEVELS) - 1)]
    if renderer is not None and renderer.enable:
        handler: logging.Handler = ProgressLogHandler(renderer, sys.stderr)
    else:
        handler = logging.StreamHandler(sys.stderr)
    logging.basicConfig(
        level=level,
        format="%(levelname)s - %(name)s - %(message)s",
        handlers=[handler],
        force=True,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    args = parse_args(argv)
    renderer = ProgressRenderer(enable=args.progress, stream=sys.stderr)
    configure_logging(args.verbose, args.quiet, renderer=renderer)

    try:
        settings = load_settings(
            args.config,
            threshold=args.threshold,
            region_size=args.region_size,
            forced=args.forced,
            border=args.border,
            seed_order=args.seed_order,
            max_candidates=args.max_candidates,
            underflow="raise" if args.strict_bounds else None,
        )
        logger.debug(f"Settings: {settings.model_dump()}")

        regions = process_image(args.target, settings, on_progress=renderer.update)
    except BrightGroupsError as exc:
        logger.error(str(exc))
        return 1

    if not regions:
        print(f'No pixels in "{args.target}" brighter than {settings.threshold}', file=sys.stderr)
        return 0

    if args.csv:
        write_csv(regions)
    else:
        write_regions(regions)

    print(f'"{args.target}" finished successfully', file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
