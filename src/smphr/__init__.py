"""Smphr - Render text as semaphore flag figures.

Smphr is a CLI tool that turns a line of text into an image of stick figures
holding semaphore flags, one figure per letter. Figures are laid out on a
fixed grid, wrapping to a new row when the canvas is full horizontally and
stopping when it is full vertically.

Example:
    $ smphr hello.png "hello world"

This will create hello.png with eleven cells, ten of them holding a figure.
"""

__version__ = "0.1.0"
__author__ = "François Straet"

__all__ = ["__author__", "__version__"]
