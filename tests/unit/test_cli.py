"""
Unit tests for the command line interface
"""

import tempfile
from pathlib import Path

import pytest
from PIL import Image

from pixel_slicer.cli import main, build_parser


class TestCli:
    """Test pixel-slicer commands"""

    @pytest.fixture
    def temp_dir(self):
        """Create temporary directory for testing"""
        with tempfile.TemporaryDirectory() as tmpdir:
            yield Path(tmpdir)

    @pytest.fixture
    def image_path(self, temp_dir):
        """Create a 32x16 image with a blue right half"""
        img = Image.new("RGB", (32, 16), (255, 0, 0))
        img.paste((0, 0, 255), (16, 0, 32, 16))
        path = temp_dir / "input.png"
        img.save(path)
        return path

    def test_slice(self, image_path, temp_dir, capsys):
        out_dir = temp_dir / "sliced"
        code = main([
            "slice", str(image_path),
            "--output", str(out_dir),
            "--tile-size", "8",
            "--workers", "2"
        ])

        assert code == 0
        assert len(list(out_dir.glob("pixel_*_*.png"))) == 8
        stdout = capsys.readouterr().out
        assert "Color Type: RGB" in stdout
        assert "Slicing completed, saved 8 pixel images" in stdout

    def test_slice_quiet(self, image_path, temp_dir, capsys):
        code = main([
            "slice", str(image_path),
            "--output", str(temp_dir / "sliced"),
            "--quiet"
        ])

        assert code == 0
        assert capsys.readouterr().out == ""
        assert len(list((temp_dir / "sliced").iterdir())) == 2

    def test_slice_several_images(self, image_path, temp_dir):
        other = temp_dir / "other.png"
        Image.new("RGB", (16, 16)).save(other)

        code = main([
            "slice", str(image_path), str(other),
            "--output", str(temp_dir / "batch"),
            "--quiet"
        ])

        assert code == 0
        assert len(list((temp_dir / "batch" / "input").iterdir())) == 2
        assert len(list((temp_dir / "batch" / "other").iterdir())) == 1

    def test_slice_missing_image(self, temp_dir):
        """Test a missing input exits with status 1 and writes nothing"""
        out_dir = temp_dir / "sliced"
        code = main(["slice", str(temp_dir / "missing.webp"), "--output", str(out_dir)])

        assert code == 1
        assert not out_dir.exists()

    def test_slice_invalid_tile_size(self, image_path, temp_dir):
        code = main(["slice", str(image_path), "--output", str(temp_dir), "--tile-size", "0"])
        assert code == 1

    def test_top_colors(self, image_path, capsys):
        code = main(["top-colors", str(image_path), "--top", "2"])

        assert code == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "Top 2 colors:"
        assert sorted(lines[1:]) == [
            "Color: #0000FF, Count: 256",
            "Color: #FF0000, Count: 256",
        ]

    def test_top_colors_missing_image(self, temp_dir):
        assert main(["top-colors", str(temp_dir / "missing.png")]) == 1

    def test_command_required(self):
        with pytest.raises(SystemExit) as exc:
            build_parser().parse_args([])
        assert exc.value.code == 2
