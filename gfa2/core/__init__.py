"""
Core data types: records, documents, tags, identifiers and errors.
"""

from .errors import (GFAError, GFAParseError, FieldCountError, UnknownRecordType,
                     MalformedTag, EncodingError, InvalidOrientation, MissingOrientation)
from .identifiers import (Orientation, Reference, Representation, TEXT_WITH_TAGS,
                          NUMERIC_WITH_TAGS, TEXT_WITHOUT_TAGS, NUMERIC_WITHOUT_TAGS)
from .models import GFA2Document
from .gfa1 import GFA1Document
from .tags import OptionalField, parse_tag, parse_tags

__all__ = [
    'GFAError', 'GFAParseError', 'FieldCountError', 'UnknownRecordType',
    'MalformedTag', 'EncodingError', 'InvalidOrientation', 'MissingOrientation',
    'Orientation', 'Reference', 'Representation', 'TEXT_WITH_TAGS',
    'NUMERIC_WITH_TAGS', 'TEXT_WITHOUT_TAGS', 'NUMERIC_WITHOUT_TAGS',
    'GFA2Document', 'GFA1Document',
    'OptionalField', 'parse_tag', 'parse_tags',
]
