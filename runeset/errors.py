"""
runeset.errors - exceptions

(c) 2024 runeset contributors
licence: https://opensource.org/licenses/MIT
"""

from .constants import RUNESET_SIZE, RUNESET_LENGTH, IMAGE_WIDTH, IMAGE_HEIGHT


class RunesetError(Exception):
    """Base class for runeset errors."""


class FileFormatError(RunesetError, ValueError):
    """Incorrect file format."""

    # a file that fails to parse does exist
    found = True


class BytesLengthError(FileFormatError):
    """Byte buffer is not the size of a runeset."""

    def __init__(self, length):
        super().__init__(
            f'The byte buffer is the wrong length: {length} '
            f'(should be {RUNESET_SIZE})'
        )
        self.length = length


class ImageSizeError(FileFormatError):
    """Image is not the size of a runeset grid."""

    def __init__(self, size):
        width, height = size
        super().__init__(
            f'The image is the wrong size: {width}x{height} '
            f'(should be {IMAGE_WIDTH}x{IMAGE_HEIGHT})'
        )
        self.size = size


class GlyphIndexError(RunesetError, IndexError):
    """Glyph index outside the runeset."""

    def __init__(self, index):
        super().__init__(
            f'Runeset index out of range: {index!r} '
            f'(should be 0--{RUNESET_LENGTH-1})'
        )
        self.index = index


class FileReadError(RunesetError, OSError):
    """File exists but cannot be read."""

    found = True

    def __init__(self, path):
        super().__init__(f'Unable to read file `{path}`')
        self.path = path


class NotFoundError(RunesetError, FileNotFoundError):
    """File does not exist."""

    found = False

    def __init__(self, path):
        super().__init__(f'File not found: `{path}`')
        self.path = path
