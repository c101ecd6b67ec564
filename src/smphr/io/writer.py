"""Image writer for saving rendered canvases.

This module provides the ImageWriter class for encoding a palette-indexed
canvas as an RGB image and writing it to disk.
"""

from pathlib import Path

from PIL import Image

from smphr.domain import PALETTE_RGB, Canvas, PaletteIndex
from smphr.exceptions import ImageSaveError


def canvas_to_image(
    canvas: Canvas,
    palette: dict[PaletteIndex, tuple[int, int, int]] | None = None,
) -> Image.Image:
    """Convert a canvas to an RGB image.

    Canvas pixel ``(x, y)`` becomes image pixel ``(x, y)``.

    Args:
        canvas: Rendered canvas
        palette: Palette index to RGB mapping (default: white, black, red)

    Returns:
        A PIL Image of size ``(canvas.width, canvas.height)`` in RGB mode
    """
    if palette is None:
        palette = PALETTE_RGB
    colors = [palette[index] for index in PaletteIndex]
    pixels = [colors[value] for value in canvas.pixels]

    img = Image.new("RGB", (canvas.width, canvas.height))
    img.putdata(pixels)  # type: ignore[arg-type]
    return img


class ImageWriter:
    """Writes rendered canvases to image files.

    The image format is picked by Pillow from the file extension.

    Example:
        writer = ImageWriter(Path("hello.png"))
        writer.save(result.canvas)
    """

    def __init__(
        self,
        output_path: Path,
        palette: dict[PaletteIndex, tuple[int, int, int]] | None = None,
    ) -> None:
        """Initialize the image writer.

        Args:
            output_path: Path where the image will be saved
            palette: Palette index to RGB mapping (default: white, black, red)
        """
        self._output_path = output_path
        self._palette = palette

    @property
    def output_path(self) -> Path:
        """Path the image is written to."""
        return self._output_path

    def save(self, canvas: Canvas) -> Path:
        """Encode and save the canvas.

        Args:
            canvas: Rendered canvas

        Returns:
            Path of the written file

        Raises:
            ImageSaveError: If the image cannot be encoded or written
        """
        image = canvas_to_image(canvas, self._palette)
        try:
            image.save(self._output_path)
        except (OSError, ValueError) as e:
            raise ImageSaveError(str(self._output_path), str(e)) from e
        return self._output_path
