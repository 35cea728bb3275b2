"""Core processing pipeline functions."""

import logging
from pathlib import Path
from typing import List, Optional

import numpy as np

from clustering import ProgressCallback, RegionClusterer
from config import Settings
from detection import check_candidate_count, extract_bright_points
from image_io import load_grayscale
from models import Region

logger = logging.getLogger(__name__)


def find_regions(
    gray_np: np.ndarray,
    settings: Settings,
    on_progress: Optional[ProgressCallback] = None,
) -> List[Region]:
    """Extract bright points from a grid, apply the guard and group them.

    Returns an empty list when nothing is brighter than the threshold.
    """
    points = extract_bright_points(gray_np, settings.threshold, border=settings.border)
    if not points:
        return []

    check_candidate_count(len(points), settings.forced, limit=settings.max_candidates)

    clusterer = RegionClusterer(
        settings.region_size,
        seed_order=settings.seed_order,
        underflow=settings.underflow,
        on_progress=on_progress,
    )
    return clusterer.cluster(points)


def process_image(
    path: Path,
    settings: Settings,
    on_progress: Optional[ProgressCallback] = None,
) -> List[Region]:
    """Load ``path`` as grayscale and find its bright regions."""
    logger.info(f"Reading {path}...")
    gray_np = load_grayscale(path)
    logger.info(f"Starts search on bright regions in {path}...")
    return find_regions(gray_np, settings, on_progress=on_progress)
