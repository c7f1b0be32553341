"""
runeset.codec - runeset binary format

A runeset file is 2048 bytes: 256 glyph records of 8 row bytes each,
in index order, without header, padding or checksum.

(c) 2024 runeset contributors
licence: https://opensource.org/licenses/MIT
"""

from .constants import RUNESET_LENGTH, RUNESET_SIZE, GLYPH_SIZE
from .core import Glyph, Runeset
from .errors import BytesLengthError


def encode(runeset):
    """Flatten runeset to 2048 bytes."""
    return b''.join(_glyph.as_bytes() for _glyph in runeset)


def decode(data):
    """Create runeset from 2048 bytes."""
    data = bytes(data)
    if len(data) != RUNESET_SIZE:
        raise BytesLengthError(len(data))
    return Runeset(
        Glyph.from_bytes(data[_ord*GLYPH_SIZE : (_ord+1)*GLYPH_SIZE])
        for _ord in range(RUNESET_LENGTH)
    )
