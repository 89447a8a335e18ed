"""
Unit tests for combine_config and combine_errors modules.
"""

import pytest

from IC_Libs.combine_config import CombineConfig, normalize_format
from IC_Libs.combine_errors import CombineErrorKind, ImageCombineError


class TestCombineConfig:
    """Tests for CombineConfig."""

    def test_defaults(self):
        config = CombineConfig()

        assert config.jpeg_quality == 95
        assert config.overwrite is True
        assert config.create_directories is True

    def test_dict_round_trip_ignores_unknown_keys(self):
        config = CombineConfig.from_dict({"jpeg_quality": 70, "overwrite": False, "bogus": 1})

        assert config.to_dict() == {"jpeg_quality": 70, "overwrite": False, "create_directories": True}

    def test_png_kwargs_have_no_quality(self):
        assert CombineConfig().get_save_kwargs("png") == {"format": "PNG"}

    def test_jpg_alias_and_quality_clamping(self):
        assert CombineConfig(jpeg_quality=150).get_save_kwargs("JPG") == {"format": "JPEG", "quality": 100}
        assert CombineConfig(jpeg_quality=-3).get_save_kwargs("JPEG") == {"format": "JPEG", "quality": 1}

    @pytest.mark.parametrize("name,expected", [("jpg", "JPEG"), (" tif ", "TIFF"), ("Png", "PNG")])
    def test_normalize_format(self, name, expected):
        assert normalize_format(name) == expected


class TestImageCombineError:
    """Tests for the error taxonomy."""

    def test_every_kind_has_distinct_exit_code(self):
        codes = [kind.exit_code for kind in CombineErrorKind]

        assert len(set(codes)) == len(CombineErrorKind) == 6
        assert 0 not in codes

    def test_constructors_set_kind_and_context(self):
        cause = OSError("boom")
        cases = [
            (ImageCombineError.path_read_failure("a.png", cause), CombineErrorKind.PATH_READ_FAILURE),
            (ImageCombineError.format_undetected("a.png"), CombineErrorKind.FORMAT_UNDETECTED),
            (ImageCombineError.decode_failure("a.png", cause), CombineErrorKind.DECODE_FAILURE),
            (ImageCombineError.different_image_formats("PNG", "GIF"), CombineErrorKind.DIFFERENT_IMAGE_FORMATS),
            (ImageCombineError.capacity_exceeded(5, 4), CombineErrorKind.CAPACITY_EXCEEDED),
            (ImageCombineError.encode_failure("out.png", cause), CombineErrorKind.ENCODE_FAILURE),
        ]

        for error, kind in cases:
            assert error.kind is kind
            assert error.exit_code == kind.exit_code
            assert error.stage is None
            assert str(error)

    def test_cause_is_kept(self):
        cause = OSError("disk full")
        error = ImageCombineError.encode_failure("out.png", cause)

        assert error.cause is cause
        assert "disk full" in str(error)
        assert error.context == {"path": "out.png"}
