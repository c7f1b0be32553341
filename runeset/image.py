"""
runeset.image - runesets stored in image files

(c) 2024 runeset contributors
licence: https://opensource.org/licenses/MIT
"""

import logging
from pathlib import Path

from PIL import Image

from .constants import (
    GLYPH_WIDTH, GLYPH_HEIGHT, GRID_COLUMNS, GRID_ROWS,
    IMAGE_WIDTH, IMAGE_HEIGHT,
)
from .core import Glyph, Runeset
from .errors import NotFoundError, ImageSizeError


DEFAULT_IMAGE_FORMAT = 'png'

# only pure black is ink
INK = (0, 0, 0)
PAPER = (255, 255, 255)


def import_image(path):
    """
    Rasterize a 256x64 image into a runeset.

    The image is a grid of 32 columns and 8 rows of 8x8 cells, in glyph order.
    Pure black pixels are inked, all other colours are paper.
    """
    path = Path(path)
    try:
        path.stat()
    except FileNotFoundError:
        raise NotFoundError(path) from None
    logging.info('Importing `%s`', path)
    with Image.open(path) as img:
        if img.size != (IMAGE_WIDTH, IMAGE_HEIGHT):
            raise ImageSizeError(img.size)
        data = img.convert('RGB').tobytes()
    pixels = tuple(
        tuple(data[_offs:_offs+3])
        for _offs in range(0, len(data), 3)
    )
    colourset = set(pixels)
    if len(colourset) > 2:
        logging.warning(
            'Colour, greyscale and antialiased glyphs are not supported. '
            'Found %d colours; only pure black will be converted to ink.',
            len(colourset)
        )
    # row-major pixel grid
    grid = tuple(
        pixels[_y*IMAGE_WIDTH : (_y+1)*IMAGE_WIDTH]
        for _y in range(IMAGE_HEIGHT)
    )
    # glyph index = row * 32 + column
    return Runeset(
        Glyph.from_matrix(
            (
                _c == INK
                for _c in _line[_col*GLYPH_WIDTH : (_col+1)*GLYPH_WIDTH]
            )
            for _line in grid[_row*GLYPH_HEIGHT : (_row+1)*GLYPH_HEIGHT]
        )
        for _row in range(GRID_ROWS)
        for _col in range(GRID_COLUMNS)
    )


def create_image(runeset, paper=PAPER):
    """Draw runeset as a 256x64 image, black on paper."""
    if tuple(paper) == INK:
        raise ValueError('Paper colour must not be pure black.')
    img = Image.new('RGB', (IMAGE_WIDTH, IMAGE_HEIGHT), tuple(paper))
    for ordinal, glyph in enumerate(runeset):
        if glyph.is_blank():
            continue
        row, col = divmod(ordinal, GRID_COLUMNS)
        charimg = Image.new('RGB', (GLYPH_WIDTH, GLYPH_HEIGHT))
        charimg.putdata([
            INK if _bit else tuple(paper)
            for _row in glyph.as_matrix()
            for _bit in _row
        ])
        img.paste(charimg, (col*GLYPH_WIDTH, row*GLYPH_HEIGHT))
    return img


def export_image(runeset, path, *, format='', paper=PAPER):
    """
    Save runeset to an image that import_image reads back unchanged.

    format: image format (default: from file suffix, or png)
    paper: background colour (default: white)
    """
    img = create_image(runeset, paper)
    logging.info('Exporting to `%s`', path)
    try:
        img.save(path, format=format or Path(path).suffix[1:])
    except (KeyError, ValueError, TypeError):
        img.save(path, format=DEFAULT_IMAGE_FORMAT)
