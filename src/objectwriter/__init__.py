"""objectwriter.

Writes primitive values (integers, strings, timestamps) to files in a small,
self-describing binary object format and reads them back.

Public API for clients using this package.
"""

from objectwriter.writer import ObjectWriter
from objectwriter.generator import ObjectGenerator
from objectwriter.reader import read_integers, read_objects, read_string, read_timestamp
from objectwriter.cli import main, validate_config

__version__ = "0.1.0"

__all__ = [
    "ObjectWriter",
    "ObjectGenerator",
    "read_objects",
    "read_integers",
    "read_string",
    "read_timestamp",
    "main",
    "validate_config",
]
