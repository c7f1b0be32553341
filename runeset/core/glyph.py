"""
runeset.core.glyph - representation of single glyph

(c) 2024 runeset contributors
licence: https://opensource.org/licenses/MIT
"""

from ..constants import GLYPH_WIDTH, GLYPH_HEIGHT
from ..base.binary import (
    reverse_by_byte, invert_by_byte, byte_to_bits, bits_to_byte,
)
from ..base.blocks import matrix_to_blocks, blockstr


class Glyph:
    """
    8x8 bit matrix, stored as 8 row bytes.

    Bit j of row i is the pixel in column j of row i;
    the least significant bit is the leftmost column.
    Glyphs are immutable, all transformations return a new glyph.
    """

    __slots__ = ('_rows',)

    def __init__(self, rows=None):
        """Create glyph from a sequence of 8 row byte values."""
        if rows is None:
            rows = bytes(GLYPH_HEIGHT)
        elif isinstance(rows, Glyph):
            rows = rows._rows
        elif isinstance(rows, int):
            # bytes(n) would give n zero bytes
            raise ValueError(f'Glyph rows must be a sequence, not {rows!r}')
        try:
            rows = bytes(rows)
        except (TypeError, ValueError) as e:
            raise ValueError(f'Glyph rows must be byte values: {e}') from e
        if len(rows) != GLYPH_HEIGHT:
            raise ValueError(
                f'Glyph must have exactly {GLYPH_HEIGHT} rows, not {len(rows)}'
            )
        object.__setattr__(self, '_rows', rows)

    def __setattr__(self, attr, value):
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, Glyph):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self):
        return hash(self._rows)

    def __bool__(self):
        """Glyph has ink."""
        return not self.is_blank()

    def __repr__(self):
        """Text representation."""
        return '{}(({}))'.format(
            type(self).__name__,
            ', '.join(f'0x{_b:02x}' for _b in self._rows),
        )

    @property
    def rows(self):
        """Row byte values as a tuple of int."""
        return tuple(self._rows)


    ##########################################################################
    # creation and conversion

    @classmethod
    def blank(cls):
        """Create uninked glyph."""
        return cls()

    def is_blank(self):
        """Glyph has no ink."""
        return not any(self._rows)

    @classmethod
    def from_bytes(cls, byteseq):
        """Create glyph from 8 row bytes."""
        return cls(byteseq)

    def as_bytes(self):
        """Row bytes of the glyph."""
        return self._rows

    @classmethod
    def from_matrix(cls, matrix):
        """Create glyph from 8 rows of 8 truthy values, column 0 first."""
        matrix = tuple(tuple(_row) for _row in matrix)
        if (
                len(matrix) != GLYPH_HEIGHT
                or any(len(_row) != GLYPH_WIDTH for _row in matrix)
            ):
            raise ValueError(
                f'Glyph matrix must be {GLYPH_WIDTH}x{GLYPH_HEIGHT}'
            )
        return cls(bits_to_byte(_row) for _row in matrix)

    def as_matrix(self):
        """Return 8 rows of 8 bool, bit j of each row byte in column j."""
        return tuple(byte_to_bits(_row, GLYPH_WIDTH) for _row in self._rows)

    def as_text(self, *, paper='.', ink='@', start='', end='\n'):
        """Convert glyph to text."""
        return blockstr(
            start
            + (end+start).join(
                ''.join(ink if _bit else paper for _bit in _row)
                for _row in self.as_matrix()
            )
            + end
        )

    def as_blocks(self):
        """
        Convert glyph to 4 lines of 4 quadrant block characters.
        Each character represents a 2x2 cell of pixels.
        """
        block_matrix = matrix_to_blocks(self.as_matrix())
        return blockstr('\n'.join(''.join(_row) for _row in block_matrix))


    ##########################################################################
    # transformations

    def invert(self):
        """Reverse video."""
        return type(self)(invert_by_byte(self._rows))

    def reverse(self):
        """Reverse the bit order of every row, mirroring the glyph."""
        return type(self)(reverse_by_byte(self._rows))

    mirror = reverse

    def toggle(self, x, y):
        """Flip the pixel in column x of row y."""
        if not (0 <= x < GLYPH_WIDTH and 0 <= y < GLYPH_HEIGHT):
            raise ValueError(
                f'Pixel ({x}, {y}) outside of {GLYPH_WIDTH}x{GLYPH_HEIGHT} glyph'
            )
        rows = bytearray(self._rows)
        rows[y] ^= 1 << x
        return type(self)(rows)

    def get_pixel(self, x, y):
        """Pixel in column x of row y is inked."""
        if not (0 <= x < GLYPH_WIDTH and 0 <= y < GLYPH_HEIGHT):
            raise ValueError(
                f'Pixel ({x}, {y}) outside of {GLYPH_WIDTH}x{GLYPH_HEIGHT} glyph'
            )
        return bool((self._rows[y] >> x) & 1)
