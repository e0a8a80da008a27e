"""
Record and document types for GFA1 (H, S, L, C, P lines).

These live alongside the GFA2 types and share the tag system and identifier
handling; no conversion between the two versions is attempted.
"""
from dataclasses import dataclass, field
from itertools import chain
from typing import ClassVar, Dict, Iterator, List, Tuple

from .identifiers import (Identifier, Identifiers, Orientation, Reference,
                          Representation, TEXT_IDENTIFIERS, TEXT_WITH_TAGS)
from .models import Header, Record, Tags


@dataclass(frozen=True)
class Segment(Record):
    RECORD_TYPE: ClassVar[str] = 'S'
    name: Identifier
    sequence: str
    tags: Tags = ()

    @property
    def id(self) -> Identifier:
        """Same accessor as a GFA2 segment's identifier."""
        return self.name

    def fixed_fields(self) -> List[str]:
        return [str(self.name), self.sequence]


@dataclass(frozen=True)
class Link(Record):
    RECORD_TYPE: ClassVar[str] = 'L'
    from_segment: Identifier
    from_orient: Orientation
    to_segment: Identifier
    to_orient: Orientation
    overlap: str
    tags: Tags = ()

    @property
    def source(self) -> Reference:
        return Reference(self.from_segment, self.from_orient)

    @property
    def target(self) -> Reference:
        return Reference(self.to_segment, self.to_orient)

    def fixed_fields(self) -> List[str]:
        return [str(self.from_segment), self.from_orient.symbol,
                str(self.to_segment), self.to_orient.symbol, self.overlap]


@dataclass(frozen=True)
class Containment(Record):
    RECORD_TYPE: ClassVar[str] = 'C'
    container_name: Identifier
    container_orient: Orientation
    contained_name: Identifier
    contained_orient: Orientation
    pos: str
    overlap: str
    tags: Tags = ()

    def fixed_fields(self) -> List[str]:
        return [str(self.container_name), self.container_orient.symbol,
                str(self.contained_name), self.contained_orient.symbol,
                self.pos, self.overlap]


@dataclass(frozen=True)
class Path(Record):
    """A path; ``segment_names`` and ``overlaps`` are the raw comma-separated fields."""
    RECORD_TYPE: ClassVar[str] = 'P'
    path_name: str
    segment_names: str
    overlaps: str
    tags: Tags = ()

    def iter_segments(self, identifiers: Identifiers = TEXT_IDENTIFIERS) -> Iterator[Reference]:
        for token in self.segment_names.split(','):
            if token:
                yield identifiers.parse_reference(token)

    def fixed_fields(self) -> List[str]:
        return [self.path_name, self.segment_names, self.overlaps]


@dataclass(frozen=True)
class GFA1Document:
    headers: Tuple[Header, ...] = ()
    segments: Tuple[Segment, ...] = ()
    links: Tuple[Link, ...] = ()
    containments: Tuple[Containment, ...] = ()
    paths: Tuple[Path, ...] = ()
    representation: Representation = field(default=TEXT_WITH_TAGS)

    KINDS: ClassVar[Tuple[str, ...]] = ('headers', 'segments', 'links', 'containments', 'paths')

    def lines(self) -> Iterator[Record]:
        return chain.from_iterable(getattr(self, kind) for kind in self.KINDS)

    def counts(self) -> Dict[str, int]:
        return {kind: len(getattr(self, kind)) for kind in self.KINDS}

    def to_gfa(self) -> str:
        return ''.join(f"{record.to_gfa()}\n" for record in self.lines())

    def __str__(self) -> str:
        return self.to_gfa()
