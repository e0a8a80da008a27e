"""
Shared document parsing loop for GFA1 and GFA2.

A concrete parser supplies a table mapping each record-type letter to a
function ``(fields, representation) -> record``, the document class and
the document attribute each record type is collected into.
"""
import logging
from typing import Callable, ClassVar, Dict, List, Optional, Sequence, Tuple

from ..core.errors import FieldCountError, GFAParseError, UnknownRecordType
from ..core.identifiers import Representation, TEXT_WITH_TAGS
from ..core.io import read_gfa_text
from ..core.models import Record, Tags
from ..core.tags import parse_tag, parse_tags

RecordParserFn = Callable[[Sequence[str], Representation], Record]


def check_arity(fields: Sequence[str], record_type: str, expected: int) -> None:
    """Raise FieldCountError if ``fields`` (type letter included) is too short."""
    if len(fields) < expected:
        raise FieldCountError(record_type, expected, len(fields))


def record_tags(fields: Sequence[str], representation: Representation) -> Tags:
    """Tags for a record, or nothing when the representation drops them."""
    if not representation.keep_tags:
        return ()
    return parse_tags(fields)


def split_version(fields: Sequence[str]) -> Tuple[Optional[str], Sequence[str]]:
    """
    Take a leading ``VN:`` token off the fields after ``H``.

    The token is kept verbatim as the header version, but it still has to be
    a well-formed tag.
    """
    if fields and fields[0].startswith('VN:'):
        parse_tag(fields[0])
        return fields[0], fields[1:]
    return None, fields


class DocumentParser:
    """
    Parses a whole text body into a document.

    Blank lines are skipped. The first failing line aborts the parse; the
    raised error carries that line's number and text.
    """
    FORMAT: ClassVar[str]
    RECORD_PARSERS: ClassVar[Dict[str, RecordParserFn]]
    KIND_BY_TYPE: ClassVar[Dict[str, str]]
    DOCUMENT: ClassVar[type]

    def __init__(self, representation: Representation = TEXT_WITH_TAGS):
        self.logger = logging.getLogger(__name__)
        self.representation = representation

    def parse_line(self, line: str) -> Record:
        """
        Parse a single record line.

        Raises:
            UnknownRecordType: If the first field is not a record type of this format
            GFAParseError: For any other problem with the line
        """
        fields = line.strip().split('\t')
        record_type = fields[0]
        parser = self.RECORD_PARSERS.get(record_type)
        if parser is None:
            raise UnknownRecordType(record_type)
        return parser(fields, self.representation)

    def parse(self, text: str):
        """
        Parse a complete document.

        Args:
            text: The whole file content, already decoded

        Returns:
            The assembled document

        Raises:
            GFAParseError: On the first malformed line, with line_number and line set
        """
        records: Dict[str, List[Record]] = {kind: [] for kind in self.DOCUMENT.KINDS}

        # Lines end at \n only; other Unicode line breaks are field content
        for line_number, raw_line in enumerate(text.split('\n'), 1):
            if raw_line.endswith('\r'):
                raw_line = raw_line[:-1]
            line = raw_line.strip()
            if not line:
                continue
            try:
                record = self.parse_line(line)
            except GFAParseError as e:
                e.at_line(line_number, raw_line)
                self.logger.debug(f"Failed to parse {self.FORMAT} line {line_number}: {e.message}")
                raise
            records[self.KIND_BY_TYPE[record.RECORD_TYPE]].append(record)

        document = self.DOCUMENT(
            representation=self.representation,
            **{kind: tuple(items) for kind, items in records.items()}
        )
        self.logger.debug(f"Parsed {self.FORMAT} record counts: {document.counts()}")
        return document

    def parse_file(self, filepath: str, progress: bool = False):
        """Read ``filepath`` and parse it as a whole."""
        self.logger.info(f"Parsing {self.FORMAT} file: {filepath}")
        document = self.parse(read_gfa_text(filepath, progress=progress))
        self.logger.info(f"Successfully parsed {self.FORMAT} with {sum(document.counts().values())} records")
        return document
