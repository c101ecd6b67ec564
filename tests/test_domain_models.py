"""Tests for domain models to verify they work correctly."""

import pytest

from smphr.domain import PALETTE_RGB, Canvas, PaletteIndex, Point


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(3, -4)
        assert p.x == 3
        assert p.y == -4

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(3, 4).to_tuple() == (3, 4)

    def test_point_addition_converts_model_to_canvas_space(self) -> None:
        """Test that anchor + offset gives the canvas position."""
        anchor = Point(35, 40)
        offset = Point(-5, -10)
        assert anchor + offset == Point(30, 30)

    def test_point_subtraction(self) -> None:
        """Test point subtraction."""
        assert Point(30, 30) - Point(35, 40) == Point(-5, -10)

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(1, 2)
        with pytest.raises(AttributeError):
            p.x = 3  # type: ignore

    def test_point_hashable(self) -> None:
        """Test that points can be used in sets."""
        assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2


class TestCanvas:
    """Tests for Canvas class."""

    def test_canvas_starts_as_background(self) -> None:
        """Test that a new canvas is filled with the background index."""
        canvas = Canvas(4, 3)
        assert len(canvas.pixels) == 12
        assert canvas.count(PaletteIndex.BACKGROUND) == 12

    def test_canvas_is_row_major(self) -> None:
        """Test pixel (x, y) lives at y * width + x."""
        canvas = Canvas(4, 3)
        canvas.set(1, 2, PaletteIndex.ACCENT)
        assert canvas.pixels[2 * 4 + 1] == PaletteIndex.ACCENT

    def test_get_returns_palette_index(self) -> None:
        """Test that reads come back as PaletteIndex values."""
        canvas = Canvas(2, 2)
        canvas.set(0, 1, PaletteIndex.PRIMARY)
        assert canvas.get(0, 1) is PaletteIndex.PRIMARY

    @pytest.mark.parametrize(
        ("x", "y", "expected"),
        [
            (-1, 0, (0, 0)),
            (0, -7, (0, 0)),
            (10, 1, (3, 1)),
            (2, 99, (2, 2)),
            (-5, 99, (0, 2)),
        ],
    )
    def test_clamp(self, x: int, y: int, expected: tuple[int, int]) -> None:
        """Test that coordinates are bounded onto the canvas."""
        assert Canvas(4, 3).clamp(x, y) == expected

    @pytest.mark.parametrize(("width", "height"), [(0, 5), (5, 0), (-1, 3)])
    def test_invalid_dimensions(self, width: int, height: int) -> None:
        """Test that empty canvases are rejected."""
        with pytest.raises(ValueError, match="must be positive"):
            Canvas(width, height)

    def test_pixel_buffer_size_checked(self) -> None:
        """Test that a supplied buffer must match the dimensions."""
        with pytest.raises(ValueError, match="Expected 6 pixels"):
            Canvas(3, 2, bytearray(5))

    def test_coordinates_of(self) -> None:
        """Test collecting the coordinates of one colour."""
        canvas = Canvas(3, 3)
        canvas.set(0, 0, PaletteIndex.PRIMARY)
        canvas.set(2, 1, PaletteIndex.PRIMARY)
        assert canvas.coordinates_of(PaletteIndex.PRIMARY) == {(0, 0), (2, 1)}

    def test_rows(self) -> None:
        """Test iterating over rows."""
        canvas = Canvas(2, 2)
        canvas.set(1, 1, PaletteIndex.ACCENT)
        assert list(canvas.rows()) == [bytes([0, 0]), bytes([0, 2])]


class TestPalette:
    """Tests for the fixed palette."""

    def test_palette_values(self) -> None:
        """Test the three palette indices and their colours."""
        assert [int(index) for index in PaletteIndex] == [0, 1, 2]
        assert PALETTE_RGB[PaletteIndex.BACKGROUND] == (255, 255, 255)
        assert PALETTE_RGB[PaletteIndex.PRIMARY] == (0, 0, 0)
        assert PALETTE_RGB[PaletteIndex.ACCENT] == (255, 0, 0)
