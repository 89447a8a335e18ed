"""
Size reconciliation for Image Combiner.

Two images are brought to common dimensions before their pixels are merged.
The target is whichever image has strictly fewer pixels, the first image
winning a tie, and both images are resized to it with nearest-neighbour
resampling.
"""

import logging
from typing import Tuple

from IC_Libs.ImageIOLib.image_models import DecodedImage, Dimensions

logger = logging.getLogger(__name__)


def get_smallest_dimensions(dim_1: Dimensions, dim_2: Dimensions) -> Dimensions:
    """
    Pick the dimensions with the lower pixel count.

    Example:
        >>> get_smallest_dimensions(Dimensions(10, 10), Dimensions(20, 5))
        Dimensions(width=10, height=10)
        >>> get_smallest_dimensions(Dimensions(8, 8), Dimensions(4, 4))
        Dimensions(width=4, height=4)
    """
    return dim_2 if dim_2.pixel_count < dim_1.pixel_count else dim_1


def standardize_size(image_1: DecodedImage, image_2: DecodedImage) -> Tuple[DecodedImage, DecodedImage]:
    """
    Resize both images to the smallest of their dimensions.

    Both images are resized, including the one that already has the target
    dimensions, so the two go through the same resampling path.

    Returns:
        (image_1, image_2) as new DecodedImages with identical dimensions
    """
    target = get_smallest_dimensions(image_1.dimensions, image_2.dimensions)
    logger.debug(
        f"Reconciling {image_1.width}x{image_1.height} and "
        f"{image_2.width}x{image_2.height} to {target.width}x{target.height}"
    )
    return image_1.resized(target), image_2.resized(target)


reconcile = standardize_size
