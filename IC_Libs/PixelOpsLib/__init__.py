"""
PixelOpsLib - Pixel operations on decoded images

Size reconciliation and channel interleaving for the Image Combiner project.
"""

from IC_Libs.PixelOpsLib.size_reconciler import (
    get_smallest_dimensions,
    standardize_size,
    reconcile,
)
from IC_Libs.PixelOpsLib.interleaver import (
    ChannelSource,
    select_source,
    alternate_pixels,
    combine_images,
)

__all__ = [
    "get_smallest_dimensions",
    "standardize_size",
    "reconcile",
    "ChannelSource",
    "select_source",
    "alternate_pixels",
    "combine_images",
]
