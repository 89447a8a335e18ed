"""
Error taxonomy for the image combine pipeline.

Every failure the pipeline can produce is an ImageCombineError whose ``kind``
names exactly one member of the closed CombineErrorKind enum. Each kind carries
only the context relevant to it; the underlying cause, when there is one, is
chained with ``raise ... from`` and kept on ``cause``.

Classes:
    CombineErrorKind: Discriminant for the six failure kinds
    ImageCombineError: Exception raised by every pipeline component
"""

from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

from IC_Libs.constants import EXIT_CODES

PathLike = Union[str, Path]


class CombineErrorKind(Enum):
    PATH_READ_FAILURE = "path_read_failure"
    FORMAT_UNDETECTED = "format_undetected"
    DECODE_FAILURE = "decode_failure"
    DIFFERENT_IMAGE_FORMATS = "different_image_formats"
    CAPACITY_EXCEEDED = "capacity_exceeded"
    ENCODE_FAILURE = "encode_failure"

    @property
    def exit_code(self) -> int:
        return EXIT_CODES[self.value]


class ImageCombineError(Exception):
    """
    Terminal failure of an image combine run.

    Attributes:
        kind: Which failure occurred
        context: Kind-specific details (paths, formats, sizes)
        cause: The codec or I/O error that triggered this one, if any
        stage: Pipeline stage name the error surfaced in, set by the pipeline
    """

    def __init__(
        self,
        kind: CombineErrorKind,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.context = dict(context or {})
        self.cause = cause
        self.stage: Optional[str] = None

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"ImageCombineError(kind={self.kind.name}, message={self.message!r})"

    @property
    def exit_code(self) -> int:
        return self.kind.exit_code

    @classmethod
    def path_read_failure(cls, path: PathLike, cause: OSError) -> "ImageCombineError":
        return cls(
            CombineErrorKind.PATH_READ_FAILURE,
            f"Unable to read image from path {path}: {cause}",
            {"path": str(path)},
            cause,
        )

    @classmethod
    def format_undetected(cls, path: PathLike) -> "ImageCombineError":
        return cls(
            CombineErrorKind.FORMAT_UNDETECTED,
            f"Unable to determine image format of {path}",
            {"path": str(path)},
        )

    @classmethod
    def decode_failure(cls, path: PathLike, cause: BaseException) -> "ImageCombineError":
        return cls(
            CombineErrorKind.DECODE_FAILURE,
            f"Unable to decode image {path}: {cause}",
            {"path": str(path)},
            cause,
        )

    @classmethod
    def different_image_formats(cls, format_1: str, format_2: str) -> "ImageCombineError":
        return cls(
            CombineErrorKind.DIFFERENT_IMAGE_FORMATS,
            f"Images have different formats: {format_1} and {format_2}",
            {"format_1": format_1, "format_2": format_2},
        )

    @classmethod
    def capacity_exceeded(cls, length: int, capacity: int) -> "ImageCombineError":
        return cls(
            CombineErrorKind.CAPACITY_EXCEEDED,
            f"Buffer of {length} bytes exceeds output capacity of {capacity} bytes",
            {"length": length, "capacity": capacity},
        )

    @classmethod
    def encode_failure(cls, path: PathLike, cause: BaseException) -> "ImageCombineError":
        return cls(
            CombineErrorKind.ENCODE_FAILURE,
            f"Unable to save image to {path}: {cause}",
            {"path": str(path)},
            cause,
        )
