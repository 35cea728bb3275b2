"""Region growing for bright region grouping."""

import logging
from typing import Callable, List, Optional, Sequence

from models import UNDERFLOW_POLICIES, UNDERFLOW_SATURATE, Point, Region

SEED_ORDERS = ("last", "first")

ProgressCallback = Callable[[int, int, int], None]


class RegionClusterer:
    """Groups bright points into rectangular regions by iterative growth.

    Each outer pass sweeps the existing regions in creation order. A region
    first absorbs every pending point inside a fixed snapshot of its window,
    then claims every pending point inside its grown window. Whatever is
    still pending after the sweep seeds one new region. The result depends
    on point order and on ``seed_order``.

    Args:
        region_size: Window span; containment half width is ``region_size // 2``
        seed_order: ``"last"`` pops the newest pending point to seed a region,
            ``"first"`` the oldest
        underflow: ``"saturate"`` clamps window bounds at zero, ``"raise"``
            raises ``RegionUnderflowError``
        logger: Where diagnostics go (module logger if None)
        on_progress: Called as ``(claimed, total, region_count)`` after each pass
    """

    def __init__(
        self,
        region_size: int,
        seed_order: str = "last",
        underflow: str = UNDERFLOW_SATURATE,
        logger: Optional[logging.Logger] = None,
        on_progress: Optional[ProgressCallback] = None,
    ):
        if region_size < 1:
            raise ValueError("region_size must be >= 1")
        if seed_order not in SEED_ORDERS:
            raise ValueError(f"Unknown seed order: {seed_order}")
        if underflow not in UNDERFLOW_POLICIES:
            raise ValueError(f"Unknown underflow policy: {underflow}")
        self.region_size = region_size
        self.seed_order = seed_order
        self.underflow = underflow
        self.logger = logger or logging.getLogger(__name__)
        self.on_progress = on_progress

    def cluster(self, points: Sequence[Point]) -> List[Region]:
        """Run the grow/claim loop until every point belongs to a region."""
        pending: List[Point] = list(points)
        regions: List[Region] = []
        total = len(pending)
        passes = 0

        self.logger.info(f"{'.' * min(total, 80)}:{total}")

        while pending:
            passes += 1
            for region in regions:
                pending = self._sweep(region, pending)
                if not pending:
                    break

            if pending:
                seed = pending.pop() if self.seed_order == "last" else pending.pop(0)
                regions.append(Region.seed(seed, self.region_size))
                self.logger.debug(f"Seeded region {len(regions)} at ({seed.x}, {seed.y}) v={seed.v}")

            if self.on_progress is not None:
                self.on_progress(total - len(pending), total, len(regions))

        self.logger.info(f"Grouped {total} points into {len(regions)} region(s) in {passes} pass(es)")
        return regions

    def _sweep(self, region: Region, pending: List[Point]) -> List[Point]:
        """Grow ``region`` from ``pending`` and return what it did not claim."""
        # Every point of this pass is judged against the same window
        frozen = region.snapshot()
        matches = [p for p in pending if frozen.contains(p, self.underflow)]
        for p in matches:
            region.glue(p)

        remaining: List[Point] = []
        for p in pending:
            if region.contains(p, self.underflow):
                region.members.append(p)
            else:
                remaining.append(p)
        return remaining


def cluster_points(
    points: Sequence[Point],
    region_size: int,
    seed_order: str = "last",
    underflow: str = UNDERFLOW_SATURATE,
) -> List[Region]:
    """Shortcut for ``RegionClusterer(...).cluster(points)``."""
    return RegionClusterer(region_size, seed_order=seed_order, underflow=underflow).cluster(points)
