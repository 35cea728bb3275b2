"""Data models for bright region grouping."""

from dataclasses import dataclass, field, replace
from typing import List, Tuple

from errors import RegionUnderflowError

# Policies for a window that would reach past coordinate zero.
UNDERFLOW_SATURATE = "saturate"
UNDERFLOW_RAISE = "raise"
UNDERFLOW_POLICIES = (UNDERFLOW_SATURATE, UNDERFLOW_RAISE)


@dataclass(frozen=True)
class Point:
    """A bright pixel: 0-based coordinates and its 8-bit intensity."""
    x: int
    y: int
    v: int  # 0-255


@dataclass
class Region:
    """Rectangular cluster of bright points with a running centroid."""
    top_left: Point
    bottom_right: Point
    center: Point
    region_size: int
    members: List[Point] = field(default_factory=list)  # every claimed candidate

    @classmethod
    def seed(cls, point: Point, region_size: int) -> "Region":
        """Create a singleton region around ``point``."""
        return cls(
            top_left=point,
            bottom_right=point,
            center=Point(point.x, point.y, point.v),
            region_size=region_size,
            members=[point],
        )

    @property
    def width(self) -> int:
        return self.bottom_right.x - self.top_left.x + 1

    @property
    def height(self) -> int:
        return self.bottom_right.y - self.top_left.y + 1

    def window(self, underflow: str = UNDERFLOW_SATURATE) -> Tuple[int, int, int, int]:
        """Return the inclusive containment window (left, right, top, bottom).

        The window spans ``center +/- region_size // 2`` on both axes. When the
        center is closer to zero than the half size the lower bound either
        clamps to zero or raises, depending on ``underflow``.
        """
        half = self.region_size // 2
        cx, cy = self.center.x, self.center.y
        if underflow not in UNDERFLOW_POLICIES:
            raise ValueError(f"Unknown underflow policy: {underflow}")
        if underflow == UNDERFLOW_RAISE and (cx < half or cy < half):
            raise RegionUnderflowError(
                f"Region window at ({cx}, {cy}) with half size {half} "
                "reaches past the image origin."
            )
        return max(cx - half, 0), cx + half, max(cy - half, 0), cy + half

    def contains(self, point: Point, underflow: str = UNDERFLOW_SATURATE) -> bool:
        """Containment test: is ``point`` inside the current window?"""
        left, right, top, bottom = self.window(underflow)
        return left <= point.x <= right and top <= point.y <= bottom

    def glue(self, point: Point) -> Point:
        """Absorb ``point``: widen the box, fold its intensity, re-center.

        The intensity is a pairwise running average, so later points weigh
        more than earlier ones. The corners' ``v`` fields are left alone.
        """
        tl, br = self.top_left, self.bottom_right
        self.top_left = replace(tl, x=min(tl.x, point.x), y=min(tl.y, point.y))
        self.bottom_right = replace(br, x=max(br.x, point.x), y=max(br.y, point.y))
        v = (self.center.v + point.v) // 2
        self.center = Point(
            (self.top_left.x + self.bottom_right.x) // 2,
            (self.top_left.y + self.bottom_right.y) // 2,
            v,
        )
        return self.center

    # Same operation, kept under both names.
    expand = glue

    def snapshot(self) -> "Region":
        """Independent copy of the geometry, used as a fixed containment reference."""
        return Region(
            top_left=self.top_left,
            bottom_right=self.bottom_right,
            center=self.center,
            region_size=self.region_size,
        )
