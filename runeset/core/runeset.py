"""
runeset.core.runeset - representation of a 256-glyph font

(c) 2024 runeset contributors
licence: https://opensource.org/licenses/MIT
"""

from ..constants import RUNESET_LENGTH
from ..errors import GlyphIndexError
from .glyph import Glyph


class Runeset:
    """Fixed array of 256 glyphs."""

    def __init__(self, glyphs=None):
        """Create runeset from 256 glyphs; blank if not given."""
        if glyphs is None:
            glyphs = (Glyph.blank(),) * RUNESET_LENGTH
        glyphs = list(glyphs)
        if len(glyphs) != RUNESET_LENGTH:
            raise ValueError(
                f'Runeset must have exactly {RUNESET_LENGTH} glyphs, '
                f'not {len(glyphs)}'
            )
        if not all(isinstance(_g, Glyph) for _g in glyphs):
            raise TypeError('Runeset elements must be of type Glyph')
        self._glyphs = glyphs

    @classmethod
    def blank(cls):
        """Create runeset of uninked glyphs."""
        return cls()

    def __len__(self):
        return RUNESET_LENGTH

    def __iter__(self):
        return iter(self._glyphs)

    def __eq__(self, other):
        if not isinstance(other, Runeset):
            return NotImplemented
        return self._glyphs == other._glyphs

    def __repr__(self):
        inked = sum(1 for _g in self._glyphs if _g)
        return f'<{type(self).__name__} with {inked} inked glyphs>'

    def __getitem__(self, index):
        return self.read_at(index)

    def __setitem__(self, index, glyph):
        self.set_at(glyph, index)

    @property
    def glyphs(self):
        """Snapshot of the glyphs, in index order."""
        return tuple(self._glyphs)

    def copy(self):
        """Independent copy of the runeset."""
        return type(self)(self._glyphs)

    def is_blank(self):
        """No glyph has ink."""
        return not any(self._glyphs)

    @staticmethod
    def _check_index(index):
        # bool is an int, but not an index
        if (
                not isinstance(index, int) or isinstance(index, bool)
                or not 0 <= index < RUNESET_LENGTH
            ):
            raise GlyphIndexError(index)

    def read_at(self, index):
        """Glyph at given index."""
        self._check_index(index)
        return self._glyphs[index]

    def set_at(self, glyph, index):
        """Replace the glyph at given index."""
        self._check_index(index)
        if not isinstance(glyph, Glyph):
            raise TypeError(
                f'Can only store Glyph in runeset, not {type(glyph).__name__}'
            )
        self._glyphs[index] = glyph
