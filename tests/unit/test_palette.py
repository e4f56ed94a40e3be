"""
Unit tests for color frequency analysis
"""

import tempfile
from pathlib import Path

import pytest
from PIL import Image

from pixel_slicer.palette import ColorFrequencyAnalyzer, ColorCount, rgba_to_hex
from pixel_slicer.common.exceptions import ImageDecodeError

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)


class TestColorFrequencyAnalyzer:
    """Test color counting and ranking"""

    @pytest.fixture
    def analyzer(self):
        return ColorFrequencyAnalyzer(top_n=3)

    @pytest.fixture
    def image(self):
        """2x2 image: red, red, blue, green"""
        img = Image.new("RGBA", (2, 2))
        img.putpixel((0, 0), RED)
        img.putpixel((1, 0), RED)
        img.putpixel((0, 1), BLUE)
        img.putpixel((1, 1), GREEN)
        return img

    def test_count_colors(self, analyzer, image):
        """Test exact-match counts"""
        assert analyzer.count_colors(image) == {RED: 2, BLUE: 1, GREEN: 1}

    def test_top_colors(self, analyzer, image):
        """Test most common color first; tie order not asserted"""
        top = analyzer.top_colors(analyzer.count_colors(image))

        assert len(top) == 3
        assert top[0] == ColorCount(color=RED, count=2)
        assert {(c.color, c.count) for c in top[1:]} == {(BLUE, 1), (GREEN, 1)}

    def test_top_colors_limit(self, analyzer, image):
        top = analyzer.top_colors(analyzer.count_colors(image), n=1)
        assert [c.color for c in top] == [RED]

    def test_top_colors_zero(self, analyzer, image):
        """Test an explicit zero limit returns nothing"""
        assert analyzer.top_colors(analyzer.count_colors(image), n=0) == []

    def test_top_colors_default_limit(self):
        """Test the configured top_n applies when no limit is given"""
        analyzer = ColorFrequencyAnalyzer(top_n=5)
        table = {(i, 0, 0, 255): i + 1 for i in range(10)}
        top = analyzer.top_colors(table)
        assert [c.count for c in top] == [10, 9, 8, 7, 6]

    def test_rgb_image_gets_opaque_alpha(self, analyzer):
        img = Image.new("RGB", (3, 1), (10, 20, 30))
        assert analyzer.count_colors(img) == {(10, 20, 30, 255): 3}

    def test_alpha_distinguishes_colors(self, analyzer):
        """Test colors differing only in alpha are counted separately"""
        img = Image.new("RGBA", (2, 1), (1, 2, 3, 255))
        img.putpixel((1, 0), (1, 2, 3, 0))
        assert len(analyzer.count_colors(img)) == 2

    def test_analyze_file(self, analyzer, image):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "colors.png"
            image.save(path)
            top = analyzer.analyze(path)
        assert top[0].hex == "#FF0000"
        assert top[0].count == 2

    def test_analyze_missing_file(self, analyzer):
        with pytest.raises(ImageDecodeError):
            analyzer.analyze("does/not/exist.png")

    def test_format_report(self, analyzer):
        report = analyzer.format_report([
            ColorCount(color=RED, count=2),
            ColorCount(color=(0, 171, 205, 10), count=1),
        ])
        assert report == (
            "Top 3 colors:\n"
            "Color: #FF0000, Count: 2\n"
            "Color: #00ABCD, Count: 1"
        )

    def test_invalid_top_n(self):
        with pytest.raises(ValueError):
            ColorFrequencyAnalyzer(top_n=0)


class TestHexFormatting:
    """Test color hex rendering"""

    def test_uppercase_six_digits(self):
        assert rgba_to_hex((10, 171, 255, 0)) == "#0AABFF"

    def test_alpha_ignored(self):
        assert ColorCount(color=(1, 2, 3, 4), count=1).hex == "#010203"
