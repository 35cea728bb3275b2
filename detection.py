"""Bright pixel extraction for bright region grouping."""

import logging
from typing import List

import numpy as np

from config import MAX_CANDIDATES
from errors import TooManyCandidatesError
from models import Point

logger = logging.getLogger(__name__)


def extract_bright_points(gray_np: np.ndarray, threshold: int, border: int = 0) -> List[Point]:
    """Collect every pixel strictly brighter than ``threshold``.

    Points come out in row-major order (y outer, x inner).

    Args:
        gray_np: 2D uint8 grid, shape (height, width)
        threshold: Intensity cutoff 0-255; a pixel qualifies when ``v > threshold``
        border: Pixels closer than this to any edge are skipped

    Returns:
        List of Point objects
    """
    if gray_np.ndim != 2:
        raise ValueError(f"Expected a 2D grayscale grid, got shape {gray_np.shape}")

    mask = gray_np > threshold
    if border > 0:
        # Zero out the frame so edge pixels never qualify
        inner = np.zeros_like(mask)
        inner[border:-border, border:-border] = True
        mask &= inner

    bright_indices = np.argwhere(mask)
    points = [Point(int(c), int(r), int(gray_np[r, c])) for r, c in bright_indices.tolist()]
    logger.debug(f"{len(points)} pixels brighter than {threshold} (border={border})")
    return points


def check_candidate_count(count: int, forced: bool, limit: int = MAX_CANDIDATES) -> None:
    """Refuse pathological inputs unless the operator forces the run."""
    if count > limit:
        if not forced:
            raise TooManyCandidatesError(count, limit)
        logger.warning(f"Got too much bright pixels ({count} > {limit}), continuing as forced")
