"""
Parser for GFA2 files.

Each record parser receives the tab-split line (record type included) and
the representation in use:

    H  [VN:Z:<ver>] <tag>*
    S  <sid> <slen> <sequence> <tag>*
    F  <sid> <external:ref> <sbeg> <send> <fbeg> <fend> <alignment> <tag>*
    E  <eid>|* <sid1:ref> <sid2:ref> <beg1> <end1> <beg2> <end2> <alignment> <tag>*
    G  <gid> <sid1:ref> <sid2:ref> <dist> [<var>] <tag>*
    O  <oid> <ref>([ ]<ref>)* <tag>*
    U  <uid> <id>([ ]<id>)* <tag>*

Identifiers and references go through the representation; every other fixed
field is stored as text without numeric checks. References between records
are not resolved here.
"""
from typing import Dict, Sequence

from ..core.identifiers import Representation
from ..core.models import (Edge, Fragment, Gap, GFA2Document, GroupO, GroupU,
                           Header, Segment)
from ..core.tags import looks_like_tag
from .base import (DocumentParser, RecordParserFn, check_arity, record_tags,
                   split_version)

# Minimum number of fields per record, the type letter included
REQUIRED_FIELDS: Dict[str, int] = {
    'H': 1,
    'S': 4,
    'F': 8,
    'E': 9,
    'G': 5,
    'O': 3,
    'U': 3,
}


def parse_header(fields: Sequence[str], representation: Representation) -> Header:
    check_arity(fields, 'H', REQUIRED_FIELDS['H'])
    version, rest = split_version(fields[1:])
    return Header(version, record_tags(rest, representation))


def parse_segment(fields: Sequence[str], representation: Representation) -> Segment:
    check_arity(fields, 'S', REQUIRED_FIELDS['S'])
    ids = representation.identifiers
    return Segment(
        id=ids.from_text(fields[1]),
        length=fields[2],
        sequence=fields[3],
        tags=record_tags(fields[4:], representation),
    )


def parse_fragment(fields: Sequence[str], representation: Representation) -> Fragment:
    check_arity(fields, 'F', REQUIRED_FIELDS['F'])
    ids = representation.identifiers
    return Fragment(
        id=ids.from_text(fields[1]),
        external=ids.parse_reference(fields[2]),
        sbeg=fields[3],
        send=fields[4],
        fbeg=fields[5],
        fend=fields[6],
        alignment=fields[7],
        tags=record_tags(fields[8:], representation),
    )


def parse_edge(fields: Sequence[str], representation: Representation) -> Edge:
    check_arity(fields, 'E', REQUIRED_FIELDS['E'])
    ids = representation.identifiers
    return Edge(
        id=ids.from_text(fields[1]),
        sid1=ids.parse_reference(fields[2]),
        sid2=ids.parse_reference(fields[3]),
        beg1=fields[4],
        end1=fields[5],
        beg2=fields[6],
        end2=fields[7],
        alignment=fields[8],
        tags=record_tags(fields[9:], representation),
    )


def parse_gap(fields: Sequence[str], representation: Representation) -> Gap:
    check_arity(fields, 'G', REQUIRED_FIELDS['G'])
    ids = representation.identifiers
    # The variance column may be left out; if present it is not tag-shaped
    variance = ''
    rest = fields[5:]
    if rest and not looks_like_tag(rest[0]):
        variance, rest = rest[0], rest[1:]
    return Gap(
        id=ids.from_text(fields[1]),
        sid1=ids.parse_reference(fields[2]),
        sid2=ids.parse_reference(fields[3]),
        distance=fields[4],
        variance=variance,
        tags=record_tags(rest, representation),
    )


def parse_group_o(fields: Sequence[str], representation: Representation) -> GroupO:
    check_arity(fields, 'O', REQUIRED_FIELDS['O'])
    return GroupO(
        id=representation.identifiers.from_text(fields[1]),
        references=fields[2],
        tags=record_tags(fields[3:], representation),
    )


def parse_group_u(fields: Sequence[str], representation: Representation) -> GroupU:
    check_arity(fields, 'U', REQUIRED_FIELDS['U'])
    return GroupU(
        id=representation.identifiers.from_text(fields[1]),
        members=fields[2],
        tags=record_tags(fields[3:], representation),
    )


class GFA2Parser(DocumentParser):
    """
    Parser for GFA2 documents.

    The representation (text or numeric identifiers, tags kept or dropped)
    is fixed when the parser is created and applies to every record.
    """
    FORMAT = 'GFA2'
    RECORD_PARSERS: Dict[str, RecordParserFn] = {
        'H': parse_header,
        'S': parse_segment,
        'F': parse_fragment,
        'E': parse_edge,
        'G': parse_gap,
        'O': parse_group_o,
        'U': parse_group_u,
    }
    KIND_BY_TYPE = {
        'H': 'headers',
        'S': 'segments',
        'F': 'fragments',
        'E': 'edges',
        'G': 'gaps',
        'O': 'groups_o',
        'U': 'groups_u',
    }
    DOCUMENT = GFA2Document

    def parse(self, text: str) -> GFA2Document:
        return super().parse(text)
