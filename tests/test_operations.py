"""
runeset test suite
glyph editing tests
"""

import unittest

from runeset import Runeset, GlyphIndexError
from runeset import operations
from runeset.operations import Clipboard, cell_index, cell_position
from .base import BaseTester


class TestOperations(BaseTester):
    """Test editing glyphs in place."""

    def test_toggle_pixel(self):
        font = Runeset.blank()
        glyph = operations.toggle_pixel(font, 10, 3, 2)
        assert font.read_at(10) == glyph
        assert glyph.rows == (0, 0, 0x08, 0, 0, 0, 0, 0)
        operations.toggle_pixel(font, 10, 3, 2)
        assert font.is_blank()

    def test_clear(self):
        font = self.patterned_runeset()
        operations.clear_glyph(font, 200)
        assert font.read_at(200).is_blank()
        assert font.read_at(199) == self.patterned_runeset().read_at(199)

    def test_invert(self):
        font = Runeset.blank()
        font.set_at(self.hollow_square, 0)
        operations.invert_glyph(font, 0)
        assert font.read_at(0) == self.hollow_square.invert()

    def test_reverse(self):
        font = Runeset.blank()
        font.set_at(self.diagonal, 255)
        operations.reverse_glyph(font, 255)
        assert font.read_at(255) == self.diagonal.reverse()

    def test_paste(self):
        font = Runeset.blank()
        operations.paste_glyph(font, self.full, 7)
        assert font.read_at(7) == self.full

    def test_out_of_range(self):
        font = self.patterned_runeset()
        with self.assertRaises(GlyphIndexError):
            operations.invert_glyph(font, 256)
        with self.assertRaises(GlyphIndexError):
            operations.toggle_pixel(font, -1, 0, 0)
        assert font == self.patterned_runeset()


class TestClipboard(BaseTester):
    """Test copying glyphs."""

    def test_copy_paste(self):
        font = Runeset.blank()
        font.set_at(self.hollow_square, 65)
        clipboard = Clipboard()
        assert not clipboard
        clipboard.copy(font, 65)
        assert clipboard
        clipboard.paste(font, 66)
        assert font.read_at(66) == self.hollow_square
        # clipboard holds a value, not a reference to the slot
        operations.clear_glyph(font, 65)
        clipboard.paste(font, 67)
        assert font.read_at(67) == self.hollow_square

    def test_paste_empty(self):
        with self.assertRaises(ValueError):
            Clipboard().paste(Runeset.blank(), 0)


class TestNavigation(BaseTester):
    """Test overview grid coordinates."""

    def test_cell_index(self):
        assert cell_index(0, 0) == 0
        assert cell_index(1, 2) == 65
        assert cell_index(31, 7) == 255

    def test_wrap(self):
        assert cell_index(-1, 0) == 31
        assert cell_index(32, 0) == 0
        assert cell_index(0, -1) == 224
        assert cell_index(0, 8) == 0

    def test_cell_position(self):
        assert cell_position(65) == (1, 2)
        for index in range(256):
            assert cell_index(*cell_position(index)) == index


if __name__ == '__main__':
    unittest.main()
