"""
runeset - tools for working with 8x8 bitmap runesets

(c) 2024 runeset contributors
licence: https://opensource.org/licenses/MIT
"""

from .constants import VERSION as __version__
from .core import Glyph, Runeset
from .errors import (
    RunesetError, FileFormatError, BytesLengthError, ImageSizeError,
    GlyphIndexError, FileReadError, NotFoundError,
)
from .codec import encode, decode
from .storage import load, save, load_or_create
from .image import import_image, export_image
from .render import to_bit_grid, preview, draw, chart
