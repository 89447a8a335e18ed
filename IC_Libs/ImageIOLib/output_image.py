"""
Output image buffer for Image Combiner.

OutputImage owns the destination RGBA8 buffer of a run. Its capacity is fixed
at construction to width * height * 4 bytes and every assigned buffer is
checked against it.

Classes:
    OutputImage: Destination buffer with a capacity ceiling and encoder
"""

import logging
from pathlib import Path
from typing import Optional, Union

from PIL import Image

from IC_Libs.combine_config import CombineConfig
from IC_Libs.combine_errors import ImageCombineError
from IC_Libs.constants import BYTES_PER_PIXEL, FORMATS_WITHOUT_ALPHA, RGB_MODE, RGBA_MODE
from IC_Libs.ImageIOLib.image_models import Dimensions

logger = logging.getLogger(__name__)


class OutputImage:
    """
    Destination image of a combine run.

    Attributes:
        width: Output width in pixels
        height: Output height in pixels
        name: Output file path
        capacity: Maximum buffer length in bytes (width * height * 4)
        data: Assigned RGBA8 buffer, empty until set_data() succeeds
    """

    def __init__(self, width: int, height: int, name: Union[str, Path]):
        if width < 0 or height < 0:
            raise ValueError(f"Output dimensions must be non-negative, got {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self.name = Path(name)
        self.capacity = self.width * self.height * BYTES_PER_PIXEL
        self.data = b""

    @classmethod
    def from_dimensions(cls, dimensions: Dimensions, name: Union[str, Path]) -> "OutputImage":
        return cls(dimensions.width, dimensions.height, name)

    @property
    def dimensions(self) -> Dimensions:
        return Dimensions(self.width, self.height)

    def set_data(self, data: bytes) -> None:
        """
        Assign ``data`` as the output buffer.

        Only a ceiling is enforced: buffers shorter than the capacity are
        accepted.

        Raises:
            ImageCombineError: CAPACITY_EXCEEDED if len(data) > capacity
        """
        if len(data) > self.capacity:
            raise ImageCombineError.capacity_exceeded(len(data), self.capacity)
        self.data = bytes(data)

    def to_pil_image(self) -> 'Image.Image':
        """Build a PIL RGBA image from the assigned buffer."""
        return Image.frombytes(RGBA_MODE, (self.width, self.height), self.data)

    def save(self, image_format: str, config: Optional[CombineConfig] = None) -> Path:
        """
        Encode the buffer as ``image_format`` and write it to ``name``.

        Formats without an alpha channel are written as RGB.

        Returns:
            Path the image was written to

        Raises:
            ImageCombineError: ENCODE_FAILURE if the buffer cannot be encoded
                or the file cannot be written
        """
        config = config or CombineConfig()
        save_kwargs = config.get_save_kwargs(image_format)

        try:
            if self.name.exists() and not config.overwrite:
                raise FileExistsError(f"Output file already exists: {self.name}")

            if config.create_directories:
                self.name.parent.mkdir(parents=True, exist_ok=True)

            img = self.to_pil_image()
            if save_kwargs["format"] in FORMATS_WITHOUT_ALPHA:
                img = img.convert(RGB_MODE)

            img.save(self.name, **save_kwargs)
        except (OSError, ValueError, KeyError) as e:
            raise ImageCombineError.encode_failure(self.name, e) from e

        logger.debug(f"Wrote {self.width}x{self.height} {save_kwargs['format']} image to {self.name}")
        return self.name
