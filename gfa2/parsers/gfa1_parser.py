"""
Parser for GFA1 files (H, S, L, C and P lines).

    H  [VN:Z:<ver>] <tag>*
    S  <name> <sequence> <tag>*
    L  <from> <+|-> <to> <+|-> <overlap> <tag>*
    C  <container> <+|-> <contained> <+|-> <pos> <overlap> <tag>*
    P  <path_name> <seg+>,<seg->,... <overlap>,... <tag>*
"""
from typing import Dict, Sequence

from ..core.gfa1 import Containment, GFA1Document, Header, Link, Path, Segment
from ..core.identifiers import Orientation, Representation
from .base import (DocumentParser, RecordParserFn, check_arity, record_tags,
                   split_version)

REQUIRED_FIELDS: Dict[str, int] = {
    'H': 1,
    'S': 3,
    'L': 6,
    'C': 7,
    'P': 4,
}


def parse_header(fields: Sequence[str], representation: Representation) -> Header:
    check_arity(fields, 'H', REQUIRED_FIELDS['H'])
    version, rest = split_version(fields[1:])
    return Header(version, record_tags(rest, representation))


def parse_segment(fields: Sequence[str], representation: Representation) -> Segment:
    check_arity(fields, 'S', REQUIRED_FIELDS['S'])
    return Segment(
        name=representation.identifiers.from_text(fields[1]),
        sequence=fields[2],
        tags=record_tags(fields[3:], representation),
    )


def parse_link(fields: Sequence[str], representation: Representation) -> Link:
    check_arity(fields, 'L', REQUIRED_FIELDS['L'])
    ids = representation.identifiers
    return Link(
        from_segment=ids.from_text(fields[1]),
        from_orient=Orientation.from_symbol(fields[2]),
        to_segment=ids.from_text(fields[3]),
        to_orient=Orientation.from_symbol(fields[4]),
        overlap=fields[5],
        tags=record_tags(fields[6:], representation),
    )


def parse_containment(fields: Sequence[str], representation: Representation) -> Containment:
    check_arity(fields, 'C', REQUIRED_FIELDS['C'])
    ids = representation.identifiers
    return Containment(
        container_name=ids.from_text(fields[1]),
        container_orient=Orientation.from_symbol(fields[2]),
        contained_name=ids.from_text(fields[3]),
        contained_orient=Orientation.from_symbol(fields[4]),
        pos=fields[5],
        overlap=fields[6],
        tags=record_tags(fields[7:], representation),
    )


def parse_path(fields: Sequence[str], representation: Representation) -> Path:
    # Path names are always kept as text
    check_arity(fields, 'P', REQUIRED_FIELDS['P'])
    return Path(
        path_name=fields[1],
        segment_names=fields[2],
        overlaps=fields[3],
        tags=record_tags(fields[4:], representation),
    )


class GFA1Parser(DocumentParser):
    """Parser for GFA1 documents, with the same representation choices as GFA2Parser."""
    FORMAT = 'GFA1'
    RECORD_PARSERS: Dict[str, RecordParserFn] = {
        'H': parse_header,
        'S': parse_segment,
        'L': parse_link,
        'C': parse_containment,
        'P': parse_path,
    }
    KIND_BY_TYPE = {
        'H': 'headers',
        'S': 'segments',
        'L': 'links',
        'C': 'containments',
        'P': 'paths',
    }
    DOCUMENT = GFA1Document

    def parse(self, text: str) -> GFA1Document:
        return super().parse(text)
