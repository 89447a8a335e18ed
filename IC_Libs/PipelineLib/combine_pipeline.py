"""
Combine pipeline for Image Combiner.

Runs the linear sequence of stages that turns two input image files into one
combined output file:

    START -> LOAD_A -> LOAD_B -> FORMAT_CHECK -> RECONCILE -> INTERLEAVE
          -> ASSIGN_OUTPUT -> ENCODE -> DONE

There are no retries and no stage is revisited. An ImageCombineError raised
by any stage is tagged with the stage name and re-raised unchanged.

Classes:
    PipelineStage: Stages of a combine run
    CombineResult: Summary of a successful run

Functions:
    check_formats: Ensure both inputs share one encoded format
    combine_image_files: Run the full pipeline
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from IC_Libs.combine_config import CombineConfig
from IC_Libs.combine_errors import ImageCombineError
from IC_Libs.ImageIOLib.image_loader import load_image
from IC_Libs.ImageIOLib.image_models import DecodedImage, Dimensions, FormatTag
from IC_Libs.ImageIOLib.output_image import OutputImage
from IC_Libs.PixelOpsLib.interleaver import combine_images
from IC_Libs.PixelOpsLib.size_reconciler import standardize_size

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class PipelineStage(Enum):
    START = "start"
    LOAD_A = "load_a"
    LOAD_B = "load_b"
    FORMAT_CHECK = "format_check"
    RECONCILE = "reconcile"
    INTERLEAVE = "interleave"
    ASSIGN_OUTPUT = "assign_output"
    ENCODE = "encode"
    DONE = "done"


@dataclass(frozen=True)
class CombineResult:
    """Summary of a successful combine run."""

    output_path: Path
    dimensions: Dimensions
    format: FormatTag
    buffer_length: int


def check_formats(image_1: DecodedImage, image_2: DecodedImage) -> FormatTag:
    """
    Return the shared format of both images.

    Raises:
        ImageCombineError: DIFFERENT_IMAGE_FORMATS if the formats differ
    """
    if image_1.format != image_2.format:
        raise ImageCombineError.different_image_formats(image_1.format, image_2.format)
    return image_1.format


class _StageTracker:
    """Records the current stage so failures can be attributed to it."""

    def __init__(self):
        self.stage = PipelineStage.START

    def enter(self, stage: PipelineStage) -> None:
        logger.debug(f"Pipeline stage: {self.stage.value} -> {stage.value}")
        self.stage = stage


def combine_image_files(
    image_1: PathLike,
    image_2: PathLike,
    output: PathLike,
    config: Optional[CombineConfig] = None,
) -> CombineResult:
    """
    Combine two image files into one output file.

    The output takes the Red channel of each pixel from ``image_1`` and the
    Green, Blue and Alpha channels from ``image_2``. It has the dimensions of
    the input with fewer pixels and is encoded in the inputs' shared format.

    Args:
        image_1: Path of the first input image
        image_2: Path of the second input image
        output: Path to write the combined image to
        config: Output options (defaults to CombineConfig())

    Returns:
        CombineResult describing the written file

    Raises:
        ImageCombineError: On any failure; ``stage`` names where it occurred
    """
    config = config or CombineConfig()
    tracker = _StageTracker()
    logger.debug(f"Combine config: {config.to_dict()}")

    try:
        tracker.enter(PipelineStage.LOAD_A)
        decoded_1 = load_image(image_1)

        tracker.enter(PipelineStage.LOAD_B)
        decoded_2 = load_image(image_2)

        tracker.enter(PipelineStage.FORMAT_CHECK)
        image_format = check_formats(decoded_1, decoded_2)

        tracker.enter(PipelineStage.RECONCILE)
        decoded_1, decoded_2 = standardize_size(decoded_1, decoded_2)

        tracker.enter(PipelineStage.INTERLEAVE)
        output_image = OutputImage.from_dimensions(decoded_1.dimensions, output)
        combined_data = combine_images(decoded_1, decoded_2)

        tracker.enter(PipelineStage.ASSIGN_OUTPUT)
        output_image.set_data(combined_data)

        tracker.enter(PipelineStage.ENCODE)
        output_path = output_image.save(image_format, config)
    except ImageCombineError as e:
        e.stage = tracker.stage.value
        raise

    tracker.enter(PipelineStage.DONE)
    logger.info(
        f"Combined {image_1} and {image_2} into {output_path} "
        f"({output_image.width}x{output_image.height} {image_format})"
    )
    return CombineResult(
        output_path=output_path,
        dimensions=output_image.dimensions,
        format=image_format,
        buffer_length=len(output_image.data),
    )
