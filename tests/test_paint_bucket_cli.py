"""
Tests for the paint_bucket command line tool.
"""

import pytest
from PIL import Image

from paint_bucket import build_argparser, main


@pytest.fixture
def input_image(tmp_path):
    """Write a 4x4 black PNG with a white bottom-right pixel."""
    path = tmp_path / "input.png"
    image = Image.new("RGBA", (4, 4), (0, 0, 0, 255))
    image.putpixel((3, 3), (255, 255, 255, 255))
    image.save(path)
    return path


class TestArgParser:
    """Tests for argument parsing."""

    def test_parses_color_and_seed(self):
        args = build_argparser().parse_args(["a.png", "--seed", "1", "2", "-c", "#ff0000"])

        assert args.seed == [1, 2]
        assert args.color.as_tuple() == (255, 0, 0, 255)
        assert args.tolerance == 0
        assert not args.antialias

    def test_invalid_color_exits(self):
        with pytest.raises(SystemExit) as excinfo:
            build_argparser().parse_args(["a.png", "--seed", "0", "0", "-c", "bogus"])
        assert excinfo.value.code == 2

    def test_negative_tolerance_exits(self):
        with pytest.raises(SystemExit):
            build_argparser().parse_args(["a.png", "--seed", "0", "0", "-c", "red", "-t", "-1"])


class TestMain:
    """Tests for running the tool end to end."""

    def test_writes_explicit_output(self, input_image, tmp_path):
        output = tmp_path / "out.png"

        code = main([str(input_image), "--seed", "0", "0", "-c", "255,0,0", "-o", str(output)])

        assert code == 0
        with Image.open(output) as result:
            assert result.getpixel((0, 0)) == (255, 0, 0, 255)
            assert result.getpixel((3, 3)) == (255, 255, 255, 255)

    def test_writes_prefixed_file_to_output_dir(self, input_image, tmp_path):
        output_dir = tmp_path / "results"

        code = main([str(input_image), "--seed", "3", "3", "-c", "blue", "--output-dir", str(output_dir)])

        assert code == 0
        with Image.open(output_dir / "filled_input.png") as result:
            assert result.getpixel((3, 3)) == (0, 0, 255, 255)
            assert result.getpixel((0, 0)) == (0, 0, 0, 255)

    def test_seed_outside_image_fails(self, input_image, tmp_path, caplog):
        code = main([str(input_image), "--seed", "9", "9", "-c", "red", "-o", str(tmp_path / "x.png")])

        assert code == 1
        assert "input.png" in caplog.text

    def test_missing_input_fails(self, tmp_path):
        code = main([str(tmp_path / "missing.png"), "--seed", "0", "0", "-c", "red"])
        assert code == 1

    def test_output_with_multiple_inputs_is_usage_error(self, input_image, tmp_path):
        with pytest.raises(SystemExit) as excinfo:
            main([str(input_image), str(input_image), "--seed", "0", "0", "-c", "red", "-o", str(tmp_path / "o.png")])
        assert excinfo.value.code == 2
