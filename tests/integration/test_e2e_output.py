"""End-to-end test that renders text and verifies the written image."""

from pathlib import Path

from PIL import Image

from smphr.config import get_default_settings
from smphr.core import render_text, validate_text
from smphr.core.anatomy import CELL_HEIGHT, CELL_WIDTH
from smphr.domain import PALETTE_RGB
from smphr.io import ImageWriter


def render_to_file(text: str, width: int, height: int, output: Path) -> Image.Image:
    """Render text, save it and load the image back."""
    validate_text(text)
    result = render_text(width, height, text)
    ImageWriter(output).save(result.canvas)
    with Image.open(output) as img:
        return img.convert("RGB")


class TestEndToEndOutput:
    """Test rendered images on disk."""

    def test_only_palette_colours(self, tmp_path: Path) -> None:
        """Test that the image holds nothing but the three palette colours."""
        settings = get_default_settings()
        img = render_to_file(
            "Hello World", settings.canvas.width, settings.canvas.height, tmp_path / "hello.png"
        )

        colours = {colour for _, colour in img.getcolors(maxcolors=16)}
        assert colours == set(PALETTE_RGB.values())

    def test_each_row_holds_figures(self, tmp_path: Path) -> None:
        """Test that wrapped text puts figures on each row."""
        width, height = 3 * CELL_WIDTH, 3 * CELL_HEIGHT
        img = render_to_file("abcdef", width, height, tmp_path / "rows.png")

        for row in range(2):
            anchor_y = CELL_HEIGHT // 2 + row * CELL_HEIGHT
            for column in range(3):
                anchor_x = CELL_WIDTH // 2 + column * CELL_WIDTH
                assert img.getpixel((anchor_x, anchor_y)) == (0, 0, 0)

    def test_truncated_render_is_still_written(self, tmp_path: Path) -> None:
        """Test that overflowing text still yields a valid image."""
        img = render_to_file("x" * 50, CELL_WIDTH + 1, CELL_HEIGHT, tmp_path / "cut.png")

        assert img.size == (CELL_WIDTH + 1, CELL_HEIGHT)
        assert img.getpixel((CELL_WIDTH // 2, CELL_HEIGHT // 2)) == (0, 0, 0)

    def test_jpeg_output(self, tmp_path: Path) -> None:
        """Test that the format follows the file extension."""
        img = render_to_file("sos", 300, 100, tmp_path / "sos.jpg")
        assert img.size == (300, 100)
