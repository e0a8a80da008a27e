"""
Optional fields ("tags") attached to GFA records.

A tag token has the form ``TT:C:VALUE``: a two-character name, a one-character
type code and a value whose syntax depends on the code.

    A  single printable character
    i  signed integer
    f  float
    Z  printable string (spaces allowed)
    J  JSON, printable on one line
    H  byte array written as pairs of hex digits
    B  numeric array, ``<subtype>,<v1>,<v2>,...`` with subtype in cCsSiIf

Values are decoded into one of the small value classes below. Each value class
knows its own type code and how to write itself back as text, so a parsed tag
can always be re-emitted in an equivalent form.
"""
import json
import math
import re
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Dict, Iterable, Tuple, Union

from .errors import EncodingError, MalformedTag

TAG_NAME_RE = re.compile(r'^[A-Za-z][A-Za-z0-9]$')
TAG_PREFIX_RE = re.compile(r'^[A-Za-z][A-Za-z0-9]:[AifZJHB]:')
CHAR_RE = re.compile(r'^[!-~]$')
INT_RE = re.compile(r'^[-+]?[0-9]+$')
FLOAT_RE = re.compile(r'^[-+]?[0-9]*\.?[0-9]+([eE][-+]?[0-9]+)?$')
STRING_RE = re.compile(r'^[ !-~]*$')
HEX_RE = re.compile(r'^[0-9A-Fa-f]*$')

# Inclusive bounds for the integer sub-types of B arrays
INT_ARRAY_RANGES: Dict[str, Tuple[int, int]] = {
    'c': (-2 ** 7, 2 ** 7 - 1),
    'C': (0, 2 ** 8 - 1),
    's': (-2 ** 15, 2 ** 15 - 1),
    'S': (0, 2 ** 16 - 1),
    'i': (-2 ** 31, 2 ** 31 - 1),
    'I': (0, 2 ** 32 - 1),
}
FLOAT_ARRAY_SUBTYPE = 'f'


def _format_float(value: float) -> str:
    return repr(float(value))


@dataclass(frozen=True)
class CharValue:
    TYPE_CODE: ClassVar[str] = 'A'
    value: str

    def encode(self) -> str:
        return self.value


@dataclass(frozen=True)
class IntValue:
    TYPE_CODE: ClassVar[str] = 'i'
    value: int

    def encode(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class FloatValue:
    TYPE_CODE: ClassVar[str] = 'f'
    value: float

    def encode(self) -> str:
        return _format_float(self.value)


@dataclass(frozen=True)
class StringValue:
    TYPE_CODE: ClassVar[str] = 'Z'
    value: str

    def encode(self) -> str:
        return self.value


@dataclass(frozen=True)
class JsonValue:
    """Decoded JSON; written back in compact form."""
    TYPE_CODE: ClassVar[str] = 'J'
    value: Any

    def encode(self) -> str:
        return json.dumps(self.value, separators=(',', ':'))


@dataclass(frozen=True)
class ByteArrayValue:
    TYPE_CODE: ClassVar[str] = 'H'
    value: bytes

    def encode(self) -> str:
        return self.value.hex().upper()


@dataclass(frozen=True)
class NumericArrayValue:
    """A B-typed array: integer sub-types hold ints, 'f' holds floats."""
    TYPE_CODE: ClassVar[str] = 'B'
    subtype: str
    values: Tuple[Union[int, float], ...]

    @property
    def is_float(self) -> bool:
        return self.subtype == FLOAT_ARRAY_SUBTYPE

    def encode(self) -> str:
        fmt = _format_float if self.is_float else str
        return ','.join([self.subtype] + [fmt(v) for v in self.values])


TagValue = Union[CharValue, IntValue, FloatValue, StringValue,
                 JsonValue, ByteArrayValue, NumericArrayValue]

TAG_VALUE_TYPES = (CharValue, IntValue, FloatValue, StringValue,
                   JsonValue, ByteArrayValue, NumericArrayValue)


@dataclass(frozen=True)
class OptionalField:
    """
    One typed tag of a record.

    The type code is stored alongside the value and must match it; building
    an ``OptionalField`` with a mismatching pair is a programming error.
    """
    name: str
    type_code: str
    value: TagValue

    def __post_init__(self):
        if not TAG_NAME_RE.match(self.name):
            raise ValueError(f"Tag name must be two characters, got {self.name!r}")
        if getattr(self.value, 'TYPE_CODE', None) != self.type_code:
            raise ValueError(
                f"Tag {self.name}: type code '{self.type_code}' does not match "
                f"value of type {type(self.value).__name__}"
            )

    @classmethod
    def of(cls, name: str, value: TagValue) -> "OptionalField":
        """Build a tag whose type code is taken from the value."""
        return cls(name, value.TYPE_CODE, value)

    def to_gfa(self) -> str:
        return f"{self.name}:{self.type_code}:{self.value.encode()}"

    def __str__(self) -> str:
        return self.to_gfa()


def _decode_char(raw: str) -> CharValue:
    if not CHAR_RE.match(raw):
        raise MalformedTag(f"A tag value must be one printable character, got {raw!r}")
    return CharValue(raw)


def _decode_int(raw: str) -> IntValue:
    if not INT_RE.match(raw):
        raise MalformedTag(f"i tag value is not an integer: {raw!r}")
    try:
        return IntValue(int(raw))
    except ValueError as e:
        # Too many digits for int()
        raise MalformedTag(f"i tag value cannot be converted: {e}") from e


def _decode_float(raw: str) -> FloatValue:
    if not FLOAT_RE.match(raw):
        raise MalformedTag(f"f tag value is not a float: {raw!r}")
    value = float(raw)
    if not math.isfinite(value):
        raise MalformedTag(f"f tag value out of range: {raw!r}")
    return FloatValue(value)


def _decode_string(raw: str) -> StringValue:
    if not STRING_RE.match(raw):
        raise MalformedTag(f"Z tag value has non-printable characters: {raw!r}")
    return StringValue(raw)


def _decode_json(raw: str) -> JsonValue:
    if not STRING_RE.match(raw):
        raise MalformedTag(f"J tag value has non-printable characters: {raw!r}")
    try:
        return JsonValue(json.loads(raw))
    except (ValueError, RecursionError) as e:
        raise MalformedTag(f"J tag value is not valid JSON: {e}") from e


def _decode_byte_array(raw: str) -> ByteArrayValue:
    if not HEX_RE.match(raw):
        raise EncodingError(f"H tag value has non-hex characters: {raw!r}")
    if len(raw) % 2:
        raise EncodingError(f"H tag value has an odd number of hex digits: {raw!r}")
    return ByteArrayValue(bytes.fromhex(raw))


def _decode_array_element(subtype: str, item: str) -> Union[int, float]:
    if subtype == FLOAT_ARRAY_SUBTYPE:
        if not FLOAT_RE.match(item) or not math.isfinite(float(item)):
            raise EncodingError(f"B:f array element is not a float: {item!r}")
        return float(item)

    if not INT_RE.match(item):
        raise EncodingError(f"B:{subtype} array element is not an integer: {item!r}")
    try:
        value = int(item)
    except ValueError as e:
        raise EncodingError(f"B:{subtype} array element cannot be converted: {e}") from e
    low, high = INT_ARRAY_RANGES[subtype]
    if not low <= value <= high:
        raise EncodingError(f"B:{subtype} array element {value} outside [{low}, {high}]")
    return value


def _decode_numeric_array(raw: str) -> NumericArrayValue:
    subtype, *items = raw.split(',')
    if subtype not in INT_ARRAY_RANGES and subtype != FLOAT_ARRAY_SUBTYPE:
        raise MalformedTag(f"B tag has invalid array subtype {subtype!r}")
    return NumericArrayValue(subtype, tuple(_decode_array_element(subtype, i) for i in items))


_DECODERS: Dict[str, Callable[[str], TagValue]] = {
    CharValue.TYPE_CODE: _decode_char,
    IntValue.TYPE_CODE: _decode_int,
    FloatValue.TYPE_CODE: _decode_float,
    StringValue.TYPE_CODE: _decode_string,
    JsonValue.TYPE_CODE: _decode_json,
    ByteArrayValue.TYPE_CODE: _decode_byte_array,
    NumericArrayValue.TYPE_CODE: _decode_numeric_array,
}

TAG_TYPE_CODES = frozenset(_DECODERS)


def parse_tag(token: str) -> OptionalField:
    """
    Parse one ``TT:C:VALUE`` token.

    Raises:
        MalformedTag: If the token structure, name or type code is invalid
        EncodingError: If an H or B value cannot be decoded
    """
    parts = token.split(':', 2)
    if len(parts) < 3:
        raise MalformedTag(f"Tag must have the form TT:C:VALUE, got {token!r}")

    name, type_code, raw = parts
    if not TAG_NAME_RE.match(name):
        raise MalformedTag(f"Tag name must be two characters, got {name!r}")
    decoder = _DECODERS.get(type_code)
    if decoder is None:
        raise MalformedTag(f"Unknown tag type '{type_code}' in {token!r}")

    return OptionalField(name, type_code, decoder(raw))


def parse_tags(fields: Iterable[str]) -> Tuple[OptionalField, ...]:
    """Parse trailing tag fields in order. Repeated names are kept."""
    return tuple(parse_tag(field) for field in fields)


def looks_like_tag(field: str) -> bool:
    return bool(TAG_PREFIX_RE.match(field))
