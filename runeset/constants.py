"""
runeset.constants - format invariants

(c) 2024 runeset contributors
licence: https://opensource.org/licenses/MIT
"""

VERSION = '0.1.0'

# glyph geometry
GLYPH_WIDTH = 8
GLYPH_HEIGHT = 8
# bytes per glyph record, one byte per row
GLYPH_SIZE = GLYPH_HEIGHT

# number of glyphs in a runeset
RUNESET_LENGTH = 256
# size of a runeset file
RUNESET_SIZE = RUNESET_LENGTH * GLYPH_SIZE

# overview grid: 32 columns x 8 rows of glyph cells
GRID_COLUMNS = 32
GRID_ROWS = RUNESET_LENGTH // GRID_COLUMNS

# import image geometry in pixels
IMAGE_WIDTH = GRID_COLUMNS * GLYPH_WIDTH
IMAGE_HEIGHT = GRID_ROWS * GLYPH_HEIGHT
