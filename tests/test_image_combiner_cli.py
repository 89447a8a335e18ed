"""
Tests for the image_combiner command line entry point.
"""

import pytest
from PIL import Image

from IC_Libs.combine_config import CombineConfig
from IC_Libs.combine_errors import CombineErrorKind
from image_combiner import build_parser, main


class TestBuildParser:
    """Tests for argument parsing."""

    def test_positional_arguments(self):
        args = build_parser().parse_args(["a.png", "b.png", "out.png"])

        assert args.image_1 == "a.png"
        assert args.image_2 == "b.png"
        assert args.output == "out.png"
        assert args.jpeg_quality == 95
        assert args.overwrite
        assert args.create_directories
        assert not args.verbose

    def test_missing_output_is_usage_error(self):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["a.png", "b.png"])

        assert exc_info.value.code == 2

    def test_options_build_combine_config(self):
        args = build_parser().parse_args(
            ["a.jpg", "b.jpg", "out.jpg", "--jpeg-quality", "70", "--no-overwrite", "--no-create-dirs"]
        )

        config = CombineConfig.from_dict(vars(args))

        assert config == CombineConfig(jpeg_quality=70, overwrite=False, create_directories=False)

    def test_default_options_match_default_config(self):
        args = build_parser().parse_args(["a.png", "b.png", "out.png"])

        assert CombineConfig.from_dict(vars(args)) == CombineConfig()


class TestMain:
    """Tests for main() exit codes."""

    def test_success_returns_zero(self, write_image, temp_image_dir):
        image_1 = write_image("a.png", 10, 10, seed=1)
        image_2 = write_image("b.png", 20, 5, seed=2)
        output = temp_image_dir / "out.png"

        code = main([str(image_1), str(image_2), str(output), "--verbose"])

        assert code == 0
        with Image.open(output) as saved:
            assert saved.size == (10, 10)

    def test_format_mismatch_exit_code(self, write_image, temp_image_dir):
        image_1 = write_image("a.png", 4, 4)
        image_2 = write_image("b.bmp", 4, 4, fmt="BMP")
        output = temp_image_dir / "out.png"

        code = main([str(image_1), str(image_2), str(output)])

        assert code == CombineErrorKind.DIFFERENT_IMAGE_FORMATS.exit_code
        assert not output.exists()

    def test_missing_input_exit_code(self, write_image, temp_image_dir):
        image_2 = write_image("b.png", 4, 4)

        code = main([str(temp_image_dir / "nope.png"), str(image_2), str(temp_image_dir / "out.png")])

        assert code == CombineErrorKind.PATH_READ_FAILURE.exit_code

    def test_no_overwrite_flag(self, write_image, temp_image_dir):
        image_1 = write_image("a.png", 4, 4)
        image_2 = write_image("b.png", 4, 4)
        output = temp_image_dir / "out.png"
        output.write_bytes(b"existing")

        code = main([str(image_1), str(image_2), str(output), "--no-overwrite"])

        assert code == CombineErrorKind.ENCODE_FAILURE.exit_code
        assert output.read_bytes() == b"existing"
