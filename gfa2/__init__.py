"""
gfa2: parse and write GFA2 (and GFA1) assembly graph files.
"""

__version__ = "0.1.0"

from .core.errors import GFAParseError
from .core.identifiers import (Representation, TEXT_WITH_TAGS, NUMERIC_WITH_TAGS,
                               TEXT_WITHOUT_TAGS, NUMERIC_WITHOUT_TAGS)
from .core.models import GFA2Document
from .core.gfa1 import GFA1Document
from .parsers import GFA1Parser, GFA2Parser, load_gfa

__all__ = [
    "GFAParseError",
    "Representation",
    "TEXT_WITH_TAGS",
    "NUMERIC_WITH_TAGS",
    "TEXT_WITHOUT_TAGS",
    "NUMERIC_WITHOUT_TAGS",
    "GFA2Document",
    "GFA1Document",
    "GFA1Parser",
    "GFA2Parser",
    "load_gfa",
]
