"""
runeset.storage - load and save runeset files

(c) 2024 runeset contributors
licence: https://opensource.org/licenses/MIT
"""

import logging
from pathlib import Path

from .core import Runeset
from .codec import encode, decode
from .errors import FileReadError


def load(path):
    """
    Read runeset from file.

    Returns the runeset and whether the file was found.
    A missing file gives a blank runeset; this is not an error.
    """
    path = Path(path)
    try:
        path.stat()
    except FileNotFoundError:
        logging.info('File `%s` not found', path)
        return Runeset.blank(), False
    except OSError as e:
        raise FileReadError(path) from e
    logging.info('Loading `%s`', path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise FileReadError(path) from e
    return decode(data), True


def save(runeset, path):
    """Write runeset to file, replacing any existing file."""
    path = Path(path)
    logging.info('Saving `%s`', path)
    path.write_bytes(encode(runeset))


def load_or_create(path):
    """
    Read runeset from file, creating a blank file if it does not exist.

    Returns the runeset and whether the file was found.
    """
    runeset, found = load(path)
    if not found:
        logging.info('Creating new runeset `%s`', path)
        save(runeset, path)
    return runeset, found
