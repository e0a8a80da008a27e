"""
How identifier and reference fields are materialized.

Identifiers are kept either verbatim (text) or folded into an integer built
from the ASCII codes of their characters (numeric). The numeric form is meant
for cheap hashing and comparison; it is lossy, distinct names can collide, and
it cannot be turned back into the original text.

Independently of the identifier kind, tags can be kept or dropped. The four
combinations are exposed as ``Representation`` constants and chosen once per
parser.
"""
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Dict, Tuple, Union

from .errors import InvalidOrientation, MissingOrientation

Identifier = Union[str, int]

ID_CHAR_RE = re.compile(r'^[A-Za-z0-9]$')


class Orientation(IntEnum):
    """Strand of a reference; the numeric value is the encoded form."""
    FORWARD = 0
    BACKWARD = 1

    @property
    def symbol(self) -> str:
        return '+' if self is Orientation.FORWARD else '-'

    @classmethod
    def from_symbol(cls, symbol: str) -> "Orientation":
        if symbol == '+':
            return cls.FORWARD
        if symbol == '-':
            return cls.BACKWARD
        if not symbol:
            raise MissingOrientation("Orientation field is empty")
        raise InvalidOrientation(f"Orientation must be '+' or '-', got {symbol!r}")

    def __str__(self) -> str:
        return self.symbol


@dataclass(frozen=True)
class Reference:
    """An identifier followed by an orientation, e.g. ``11+``."""
    id: Identifier
    orientation: Orientation

    def to_gfa(self) -> str:
        return f"{self.id}{self.orientation.symbol}"

    def __str__(self) -> str:
        return self.to_gfa()


def split_orientation(field: str) -> Tuple[str, Orientation]:
    """
    Split ``<id><+|->`` into the base identifier and its orientation.

    Raises:
        MissingOrientation: If the field is empty or ends in an identifier character
        InvalidOrientation: If the field ends in any other character, or has no identifier
    """
    if not field:
        raise MissingOrientation("Reference field is empty")

    suffix = field[-1]
    if suffix in '+-':
        base = field[:-1]
        if not base:
            raise InvalidOrientation(f"Reference {field!r} has no identifier before its orientation")
        return base, Orientation.from_symbol(suffix)

    if ID_CHAR_RE.match(suffix):
        raise MissingOrientation(f"Reference {field!r} is missing a '+' or '-' orientation")
    raise InvalidOrientation(f"Reference {field!r} ends in '{suffix}', expected '+' or '-'")


def fold_ascii(text: str) -> int:
    """
    Fold the bytes of ``text`` into one integer: ``acc = acc * 10 + byte``.

    This is raw code accumulation, so ``"1"`` becomes 49, not 1, and
    ``"11"`` becomes 539.
    """
    value = 0
    for byte in text.encode('utf-8'):
        value = value * 10 + byte
    return value


class Identifiers(ABC):
    """Conversion between identifier fields and their stored form."""
    name: ClassVar[str]

    @abstractmethod
    def from_text(self, field: str) -> Identifier:
        pass

    def to_text(self, value: Identifier) -> str:
        return str(value)

    def parse_reference(self, field: str) -> Reference:
        base, orientation = split_orientation(field)
        return Reference(self.from_text(base), orientation)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class TextIdentifiers(Identifiers):
    name = 'text'

    def from_text(self, field: str) -> str:
        return field


class NumericIdentifiers(Identifiers):
    name = 'numeric'

    def from_text(self, field: str) -> int:
        return fold_ascii(field)


TEXT_IDENTIFIERS = TextIdentifiers()
NUMERIC_IDENTIFIERS = NumericIdentifiers()

IDENTIFIER_KINDS: Dict[str, Identifiers] = {
    TEXT_IDENTIFIERS.name: TEXT_IDENTIFIERS,
    NUMERIC_IDENTIFIERS.name: NUMERIC_IDENTIFIERS,
}


@dataclass(frozen=True)
class Representation:
    """Identifier kind plus whether tags are kept."""
    identifiers: Identifiers
    keep_tags: bool = True

    @property
    def name(self) -> str:
        return f"{self.identifiers.name}-{'with' if self.keep_tags else 'without'}-tags"

    @classmethod
    def from_options(cls, identifiers: str = 'text', keep_tags: bool = True) -> "Representation":
        try:
            kind = IDENTIFIER_KINDS[identifiers]
        except KeyError:
            raise ValueError(
                f"Unknown identifier kind '{identifiers}', expected one of: {', '.join(IDENTIFIER_KINDS)}"
            ) from None
        return cls(kind, keep_tags)


TEXT_WITH_TAGS = Representation(TEXT_IDENTIFIERS, keep_tags=True)
NUMERIC_WITH_TAGS = Representation(NUMERIC_IDENTIFIERS, keep_tags=True)
TEXT_WITHOUT_TAGS = Representation(TEXT_IDENTIFIERS, keep_tags=False)
NUMERIC_WITHOUT_TAGS = Representation(NUMERIC_IDENTIFIERS, keep_tags=False)
