"""
Image loading for Image Combiner.

Decodes an image file into a DecodedImage, detecting its encoded format from
the byte stream rather than the file extension.

Functions:
    load_image: Decode a file into a DecodedImage
    load_image_with_format: Decode a file and return (image, format tag)
"""

import logging
from pathlib import Path
from typing import Tuple, Union

from PIL import Image, UnidentifiedImageError

from IC_Libs.combine_errors import ImageCombineError
from IC_Libs.ImageIOLib.image_models import DecodedImage, FormatTag, to_rgba8

logger = logging.getLogger(__name__)

# Errors Pillow raises while decoding an identified stream
DECODE_ERRORS = (OSError, ValueError, SyntaxError, EOFError, Image.DecompressionBombError)


def load_image(path: Union[str, Path]) -> DecodedImage:
    """
    Open and fully decode the image at ``path``.

    Multi-frame images (GIF, TIFF) yield their first frame. The pixel grid is
    converted to 8-bit RGBA (wide grayscale and float samples are scaled,
    not clipped) and loaded before the file handle is closed.

    Args:
        path: Path to the image file

    Returns:
        DecodedImage with the RGBA pixel grid and detected format

    Raises:
        ImageCombineError: PATH_READ_FAILURE if the file cannot be opened,
            FORMAT_UNDETECTED if no format can be determined, DECODE_FAILURE
            if the identified stream cannot be decoded
    """
    path = Path(path)
    try:
        handle = open(path, "rb")
    except OSError as e:
        raise ImageCombineError.path_read_failure(path, e) from e

    with handle:
        try:
            img = Image.open(handle)
        except UnidentifiedImageError as e:
            raise ImageCombineError.format_undetected(path) from e
        except DECODE_ERRORS as e:
            raise ImageCombineError.decode_failure(path, e) from e

        with img:
            image_format = img.format
            if not image_format:
                raise ImageCombineError.format_undetected(path)

            try:
                rgba = to_rgba8(img)
                rgba.load()
            except DECODE_ERRORS as e:
                raise ImageCombineError.decode_failure(path, e) from e

    logger.debug(f"Decoded {path} as {image_format} ({rgba.width}x{rgba.height})")
    return DecodedImage(path=path, image=rgba, format=image_format)


def load_image_with_format(path: Union[str, Path]) -> Tuple[DecodedImage, FormatTag]:
    """Decode ``path`` and return the image together with its format tag."""
    decoded = load_image(path)
    return decoded, decoded.format
