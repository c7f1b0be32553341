"""
runeset.render - text renderings of glyphs and runesets

(c) 2024 runeset contributors
licence: https://opensource.org/licenses/MIT
"""

from .constants import GLYPH_WIDTH, GLYPH_HEIGHT, GRID_COLUMNS
from .errors import GlyphIndexError
from .base.binary import ceildiv
from .base.blocks import blockstr


# filler between glyph previews in the overview chart
SPACER = '▞'
# markers around the selected glyph in the overview chart
SELECTED_LEFT, SELECTED_RIGHT = '▶', '◀'

# full-resolution pixel cells
INK, PAPER = '█', ' '


def to_bit_grid(glyph):
    """Full-resolution view: 8 rows of 8 bool, bit j in column j."""
    return glyph.as_matrix()


def preview(glyph):
    """Low-resolution view: 4 lines of 4 quadrant block characters."""
    return glyph.as_blocks()


def draw(glyph, *, ink=INK, paper=PAPER):
    """Full-resolution editing grid, with pixels separated by box lines."""
    separator = '┼'.join(['──'] + ['───'] * (GLYPH_WIDTH-2) + ['──'])
    separator = f'\n{separator}\n'
    return blockstr(separator.join(
        ' │ '.join(ink if _bit else paper for _bit in _row)
        for _row in to_bit_grid(glyph)
    ))


def chart(runeset, *, columns=GRID_COLUMNS, selected=None):
    """
    Overview of all glyph previews in a grid.

    columns: number of glyphs per line (default: 32)
    selected: index of glyph to mark, followed by a status line (default: none)
    """
    previews = [preview(_glyph).split('\n') for _glyph in runeset]
    if selected is not None and not 0 <= selected < len(previews):
        raise GlyphIndexError(selected)
    rows = ceildiv(len(previews), columns)
    preview_height = ceildiv(GLYPH_HEIGHT, 2)
    preview_width = ceildiv(GLYPH_WIDTH, 2)
    spacer_line = SPACER * (columns * (preview_width+1) + 1)
    lines = [spacer_line]
    for row in range(rows):
        cells = range(row*columns, min((row+1)*columns, len(previews)))
        for line in range(preview_height):
            text = []
            for index in cells:
                if index == selected:
                    left = SELECTED_LEFT
                elif index - 1 == selected and index % columns:
                    left = SELECTED_RIGHT
                else:
                    left = SPACER
                text.extend((left, previews[index][line]))
            if selected == cells[-1]:
                text.append(SELECTED_RIGHT)
            else:
                text.append(SPACER)
            lines.append(''.join(text))
        lines.append(spacer_line)
    if selected is not None:
        y, x = divmod(selected, columns)
        lines.append(f'0x{selected:02x} ({x:02d}, {y:02d})')
    return blockstr('\n'.join(lines))
