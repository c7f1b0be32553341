"""
runeset.core - glyph and runeset data model

(c) 2024 runeset contributors
licence: https://opensource.org/licenses/MIT
"""

from .glyph import Glyph
from .runeset import Runeset
