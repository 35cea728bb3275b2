"""Image I/O utilities for bright region grouping."""

import logging
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from errors import ImageLoadError

# Try importing OpenCV for faster image loading (optional)
try:
    import cv2
    OPENCV_AVAILABLE = True
except ImportError:
    OPENCV_AVAILABLE = False
    cv2 = None

# Global flag to enable/disable OpenCV optimization
USE_OPENCV = OPENCV_AVAILABLE  # Can be toggled for testing

logger = logging.getLogger(__name__)


def _pil_to_gray8(img: Image.Image) -> np.ndarray:
    """Reduce a PIL image to 8-bit luma.

    16-bit and 32-bit integer grayscale keeps its high byte, the same way
    OpenCV reduces it; ``convert("L")`` would clip those samples at 255.
    """
    if img.mode.startswith("I;16") or img.mode == "I":
        wide = np.clip(np.asarray(img), 0, 65535).astype(np.uint16)
        return (wide >> 8).astype(np.uint8)
    return np.array(img.convert("L"))


def load_grayscale(path: Path) -> np.ndarray:
    """Load an image as an 8-bit single channel grid.

    Uses OpenCV if available for faster loading, otherwise falls back to PIL.
    Any channel layout is converted to luma.

    Args:
        path: Path to image file

    Returns:
        uint8 numpy array of shape (height, width)
    """
    path = Path(path)
    if not path.is_file():
        raise ImageLoadError(f"Image not found: {path}")

    if USE_OPENCV:
        gray_np = cv2.imread(str(path), cv2.IMREAD_GRAYSCALE)
        if gray_np is None:
            raise ImageLoadError(f"Failed to load image: {path}")
    else:
        try:
            with Image.open(path) as img:
                gray_np = _pil_to_gray8(img)
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
            raise ImageLoadError(f"Failed to load image: {path} ({e})") from e

    logger.debug(f"Loaded {path}: {gray_np.shape[1]}x{gray_np.shape[0]}, OpenCV={USE_OPENCV}")
    return gray_np.astype(np.uint8, copy=False)
