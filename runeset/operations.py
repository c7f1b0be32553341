"""
runeset.operations - edit glyphs in a runeset

Every operation reads a glyph, transforms it and stores the result.

(c) 2024 runeset contributors
licence: https://opensource.org/licenses/MIT
"""

from .constants import GRID_COLUMNS, GRID_ROWS
from .core import Glyph


def _apply(runeset, index, transform):
    """Replace glyph at index with the transformed glyph."""
    glyph = transform(runeset.read_at(index))
    runeset.set_at(glyph, index)
    return glyph


def toggle_pixel(runeset, index, x, y):
    """Flip the pixel in column x of row y of a glyph."""
    return _apply(runeset, index, lambda _g: _g.toggle(x, y))

def clear_glyph(runeset, index):
    """Remove all ink from a glyph."""
    return _apply(runeset, index, lambda _g: Glyph.blank())

def invert_glyph(runeset, index):
    """Reverse video of a glyph."""
    return _apply(runeset, index, Glyph.invert)

def reverse_glyph(runeset, index):
    """Mirror a glyph horizontally."""
    return _apply(runeset, index, Glyph.reverse)

def paste_glyph(runeset, glyph, index):
    """Replace a glyph."""
    return _apply(runeset, index, lambda _g: glyph)


class Clipboard:
    """Holds a single copied glyph."""

    def __init__(self):
        self.glyph = None

    def __bool__(self):
        return self.glyph is not None

    def copy(self, runeset, index):
        """Copy glyph at index to clipboard."""
        self.glyph = runeset.read_at(index)
        return self.glyph

    def paste(self, runeset, index):
        """Paste clipboard glyph at index."""
        if self.glyph is None:
            raise ValueError('Clipboard is empty.')
        return paste_glyph(runeset, self.glyph, index)


##############################################################################
# overview grid navigation

def cell_index(x, y):
    """Glyph index for overview grid cell; coordinates wrap around."""
    return (y % GRID_ROWS) * GRID_COLUMNS + (x % GRID_COLUMNS)


def cell_position(index):
    """Overview grid column and row for glyph index."""
    y, x = divmod(index, GRID_COLUMNS)
    return x, y
