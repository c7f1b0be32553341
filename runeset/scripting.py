"""
runeset.scripting - scripting utilities

(c) 2024 runeset contributors
licence: https://opensource.org/licenses/MIT
"""

import sys
import logging
from contextlib import contextmanager


@contextmanager
def wrap_main(debug=False):
    """Run command; log errors and exit with status 1 unless debugging."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format='%(levelname)s: %(message)s', force=True,
    )
    try:
        yield
    except Exception as exc:
        if debug:
            raise
        logging.error(exc)
        sys.exit(1)
