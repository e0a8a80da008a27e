import logging
from typing import Union

from ..core.gfa1 import GFA1Document
from ..core.identifiers import Representation, TEXT_WITH_TAGS
from ..core.io import detect_version, read_gfa_text
from ..core.models import GFA2Document
from .gfa1_parser import GFA1Parser
from .gfa2_parser import GFA2Parser

logger = logging.getLogger(__name__)

PARSERS = {
    '1': GFA1Parser,
    '2': GFA2Parser,
}


def load_gfa(filepath: str, representation: Representation = TEXT_WITH_TAGS,
             progress: bool = False) -> Union[GFA1Document, GFA2Document]:
    """
    Read a GFA file and parse it with the parser matching its version.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty
        GFAParseError: If any line is malformed
    """
    text = read_gfa_text(filepath, progress=progress)
    version = detect_version(text)
    logger.info(f"Loading {filepath} as GFA{version} ({representation.name})")
    return PARSERS[version](representation).parse(text)
