"""Output generation functions for bright region grouping."""

import csv
import sys
from typing import Iterable, Optional, TextIO

from models import Region


def format_region(region: Region) -> str:
    """Render a region as ``[ x : y : v ]``."""
    c = region.center
    return f"[ {c.x} : {c.y} : {c.v} ]"


def write_regions(regions: Iterable[Region], stream: Optional[TextIO] = None) -> None:
    """Write one line per region, in creation order."""
    stream = stream or sys.stdout
    for region in regions:
        print(format_region(region), file=stream)


def write_csv(regions: Iterable[Region], stream: Optional[TextIO] = None) -> None:
    """Write regions as CSV rows with their bounding box and member count."""
    stream = stream or sys.stdout
    writer = csv.writer(stream, lineterminator="\n")
    writer.writerow(["Region", "X", "Y", "V", "Left", "Top", "Width", "Height", "Points"])
    for idx, region in enumerate(regions, start=1):
        writer.writerow(
            [
                idx,
                region.center.x,
                region.center.y,
                region.center.v,
                region.top_left.x,
                region.top_left.y,
                region.width,
                region.height,
                len(region.members),
            ]
        )
