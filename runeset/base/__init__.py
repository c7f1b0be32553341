"""
runeset.base - supporting functions

(c) 2024 runeset contributors
licence: https://opensource.org/licenses/MIT
"""

from . import binary
from . import blocks
