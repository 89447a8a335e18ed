"""
Image Combiner command line entry point.

Usage:
    python image_combiner.py IMAGE_1 IMAGE_2 OUTPUT [options]

The output image takes the Red channel of every pixel from IMAGE_1 and the
Green, Blue and Alpha channels from IMAGE_2, at the size of whichever input
has fewer pixels, in the inputs' shared format.
"""

import argparse
import logging
import sys
from typing import List, Optional

from IC_Libs import __version__
from IC_Libs.combine_config import CombineConfig
from IC_Libs.combine_errors import ImageCombineError
from IC_Libs.constants import DEFAULT_JPEG_QUALITY, EXIT_OK
from IC_Libs.PipelineLib.combine_pipeline import combine_image_files

logger = logging.getLogger("image_combiner")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="image-combiner",
        description="Combine two same-format images: Red from the first, Green/Blue/Alpha from the second.",
    )
    parser.add_argument("image_1", help="First input image (Red channel source)")
    parser.add_argument("image_2", help="Second input image (Green/Blue/Alpha source)")
    parser.add_argument("output", help="Output image path")
    parser.add_argument(
        "--jpeg-quality",
        type=int,
        default=DEFAULT_JPEG_QUALITY,
        help=f"Quality for lossy output formats, 1-100 (default: {DEFAULT_JPEG_QUALITY})",
    )
    parser.add_argument(
        "--no-overwrite",
        dest="overwrite",
        action="store_false",
        help="Fail instead of replacing an existing output file",
    )
    parser.add_argument(
        "--no-create-dirs",
        dest="create_directories",
        action="store_false",
        help="Do not create missing output directories",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every pipeline stage")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Option dests match CombineConfig field names
    config = CombineConfig.from_dict(vars(args))

    try:
        combine_image_files(args.image_1, args.image_2, args.output, config)
    except ImageCombineError as e:
        logger.error(f"{e.kind.name} during {e.stage}: {e}")
        return e.exit_code

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
