"""
Run configuration for Image Combiner.

Classes:
    CombineConfig: Output encoding and file handling options for one run
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict

from IC_Libs.constants import (
    DEFAULT_JPEG_QUALITY,
    FORMAT_ALIASES,
    MAX_JPEG_QUALITY,
    MIN_JPEG_QUALITY,
    QUALITY_FORMATS,
)


def normalize_format(image_format: str) -> str:
    """Return the Pillow format name for ``image_format`` (e.g. 'jpg' -> 'JPEG')."""
    name = str(image_format).strip().upper()
    return FORMAT_ALIASES.get(name, name)


@dataclass
class CombineConfig:
    """Configuration for writing the combined image.

    Attributes:
        jpeg_quality: Quality 1-100 for lossy formats (default: 95)
        overwrite: Replace an existing output file (default: True)
        create_directories: Create missing parent directories of the output (default: True)
    """
    jpeg_quality: int = DEFAULT_JPEG_QUALITY
    overwrite: bool = True
    create_directories: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CombineConfig":
        """Create from dictionary, ignoring unknown keys."""
        filtered = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**filtered)

    def get_save_kwargs(self, image_format: str) -> Dict[str, Any]:
        """Get PIL Image.save() kwargs for ``image_format``."""
        save_format = normalize_format(image_format)
        kwargs: Dict[str, Any] = {"format": save_format}

        if save_format in QUALITY_FORMATS:
            kwargs["quality"] = max(MIN_JPEG_QUALITY, min(MAX_JPEG_QUALITY, int(self.jpeg_quality)))

        return kwargs
