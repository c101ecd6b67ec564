"""Exception hierarchy for Smphr."""


class SmphrError(Exception):
    """Base exception for all Smphr errors."""

    pass


class InputError(SmphrError):
    """Errors related to the text handed to the renderer."""

    pass


class NoDataError(InputError):
    """No text was provided."""

    def __init__(self) -> None:
        super().__init__("No input provided")


class InvalidDataError(InputError):
    """The text contains no character that can be drawn as a figure."""

    def __init__(self) -> None:
        super().__init__("No valid character in input")


class FigureError(SmphrError):
    """Errors related to building or placing a figure."""

    pass


class InvalidCharacterError(FigureError):
    """Character has no figure (not ASCII alphanumeric, space or newline)."""

    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"invalid character {char!r}")


class VerticalOverflowError(FigureError):
    """The next figure does not fit within the canvas height."""

    def __init__(self) -> None:
        super().__init__("vertical overflow")


class OutputError(SmphrError):
    """Errors related to writing the rendered image."""

    pass


class ImageSaveError(OutputError):
    """Error saving an image file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Could not write output file '{path}': {reason}")
