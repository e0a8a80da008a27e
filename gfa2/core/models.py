"""
Record and document types for GFA2.

Every record is a frozen dataclass built once from its source line. Fixed
fields that are not identifiers (lengths, coordinates, alignments, ...) are
kept as the original text. ``to_gfa()`` writes a record back as one
tab-separated line; ``str()`` does the same.
"""
from dataclasses import dataclass, field
from itertools import chain
from typing import ClassVar, Dict, Iterator, List, Optional, Tuple

from .identifiers import (Identifier, Identifiers, Reference, Representation,
                          TEXT_IDENTIFIERS, TEXT_WITH_TAGS)
from .tags import OptionalField

Tags = Tuple[OptionalField, ...]


class Record:
    """Behaviour shared by all record kinds."""
    RECORD_TYPE: ClassVar[str]
    tags: Tags

    def fixed_fields(self) -> List[str]:
        raise NotImplementedError

    def get_tag(self, name: str) -> Optional[OptionalField]:
        """Return the first tag called ``name``, or None."""
        for tag in self.tags:
            if tag.name == name:
                return tag
        return None

    def get_tags(self, name: str) -> List[OptionalField]:
        return [tag for tag in self.tags if tag.name == name]

    def to_gfa(self) -> str:
        fields = [self.RECORD_TYPE] + self.fixed_fields() + [tag.to_gfa() for tag in self.tags]
        return '\t'.join(fields)

    def __str__(self) -> str:
        return self.to_gfa()


@dataclass(frozen=True)
class Header(Record):
    RECORD_TYPE: ClassVar[str] = 'H'
    version: Optional[str] = None
    tags: Tags = ()

    @property
    def version_number(self) -> Optional[str]:
        """The value part of the ``VN:Z:<ver>`` token, e.g. ``"2.0"``."""
        if self.version is None:
            return None
        return self.version.split(':', 2)[-1]

    def fixed_fields(self) -> List[str]:
        return [self.version] if self.version is not None else []


@dataclass(frozen=True)
class Segment(Record):
    RECORD_TYPE: ClassVar[str] = 'S'
    id: Identifier
    length: str
    sequence: str
    tags: Tags = ()

    def fixed_fields(self) -> List[str]:
        return [str(self.id), self.length, self.sequence]


@dataclass(frozen=True)
class Fragment(Record):
    RECORD_TYPE: ClassVar[str] = 'F'
    id: Identifier
    external: Reference
    sbeg: str
    send: str
    fbeg: str
    fend: str
    alignment: str
    tags: Tags = ()

    def fixed_fields(self) -> List[str]:
        return [str(self.id), self.external.to_gfa(),
                self.sbeg, self.send, self.fbeg, self.fend, self.alignment]


@dataclass(frozen=True)
class Edge(Record):
    """
    Connection between two oriented segments.

    Positions may end in ``$`` (end of segment); the marker is part of the
    stored text.
    """
    RECORD_TYPE: ClassVar[str] = 'E'
    id: Identifier
    sid1: Reference
    sid2: Reference
    beg1: str
    end1: str
    beg2: str
    end2: str
    alignment: str
    tags: Tags = ()

    def fixed_fields(self) -> List[str]:
        return [str(self.id), self.sid1.to_gfa(), self.sid2.to_gfa(),
                self.beg1, self.end1, self.beg2, self.end2, self.alignment]


@dataclass(frozen=True)
class Gap(Record):
    RECORD_TYPE: ClassVar[str] = 'G'
    id: Identifier
    sid1: Reference
    sid2: Reference
    distance: str
    variance: str = ''
    tags: Tags = ()

    def fixed_fields(self) -> List[str]:
        fields = [str(self.id), self.sid1.to_gfa(), self.sid2.to_gfa(), self.distance]
        if self.variance:
            fields.append(self.variance)
        return fields


@dataclass(frozen=True)
class GroupO(Record):
    """Ordered group. ``references`` is the raw space-separated field."""
    RECORD_TYPE: ClassVar[str] = 'O'
    id: Identifier
    references: str
    tags: Tags = ()

    def iter_references(self, identifiers: Identifiers = TEXT_IDENTIFIERS) -> Iterator[Reference]:
        for token in self.references.split(' '):
            if token:
                yield identifiers.parse_reference(token)

    def fixed_fields(self) -> List[str]:
        return [str(self.id), self.references]


@dataclass(frozen=True)
class GroupU(Record):
    """Unordered group. ``members`` is the raw space-separated field."""
    RECORD_TYPE: ClassVar[str] = 'U'
    id: Identifier
    members: str
    tags: Tags = ()

    def iter_members(self, identifiers: Identifiers = TEXT_IDENTIFIERS) -> Iterator[Identifier]:
        for token in self.members.split(' '):
            if token:
                yield identifiers.from_text(token)

    def fixed_fields(self) -> List[str]:
        return [str(self.id), self.members]


@dataclass(frozen=True)
class GFA2Document:
    """
    A parsed GFA2 file: one tuple of records per kind, in input order.

    This holds the records as written; it is not a graph and nothing here
    checks that references point at existing segments.
    """
    headers: Tuple[Header, ...] = ()
    segments: Tuple[Segment, ...] = ()
    fragments: Tuple[Fragment, ...] = ()
    edges: Tuple[Edge, ...] = ()
    gaps: Tuple[Gap, ...] = ()
    groups_o: Tuple[GroupO, ...] = ()
    groups_u: Tuple[GroupU, ...] = ()
    representation: Representation = field(default=TEXT_WITH_TAGS)

    KINDS: ClassVar[Tuple[str, ...]] = (
        'headers', 'segments', 'fragments', 'edges', 'gaps', 'groups_o', 'groups_u',
    )

    def lines(self) -> Iterator[Record]:
        """All records in serialization order."""
        return chain.from_iterable(getattr(self, kind) for kind in self.KINDS)

    def counts(self) -> Dict[str, int]:
        return {kind: len(getattr(self, kind)) for kind in self.KINDS}

    def to_gfa(self) -> str:
        return ''.join(f"{record.to_gfa()}\n" for record in self.lines())

    def __str__(self) -> str:
        return self.to_gfa()
