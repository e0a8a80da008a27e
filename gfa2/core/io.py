import bz2
import gzip
import logging
import os
from typing import Iterable, Optional, TextIO, Union

from Bio import SeqIO
from Bio.Seq import Seq
from Bio.SeqRecord import SeqRecord
from tqdm import tqdm

logger = logging.getLogger(__name__)

# Record types that only exist in one of the two versions
GFA1_ONLY_RECORDS = frozenset('LCP')
GFA2_ONLY_RECORDS = frozenset('FEGOU')


def open_input(filepath: str) -> TextIO:
    """Open a plain, gzip or bzip2 compressed file as text, line endings untranslated."""
    suffix = filepath.split('.')[-1].lower()
    if suffix == 'gz':
        return gzip.open(filepath, 'rt', newline='')
    if suffix == 'bz2':
        return bz2.open(filepath, 'rt', newline='')
    return open(filepath, 'r', newline='')


def read_gfa_text(filepath: str, progress: bool = False) -> str:
    """
    Read a whole GFA file into memory.

    Args:
        filepath: Path to the GFA file (optionally .gz or .bz2)
        progress: Show a progress bar while reading

    Returns:
        The file content as one string

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty
    """
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"GFA file not found: {filepath}")

    with open_input(filepath) as handle:
        lines: Iterable[str] = handle
        if progress:
            lines = tqdm(handle, desc="Reading GFA file", unit=" lines")
        text = ''.join(lines)

    if not text.strip():
        raise ValueError(f"Empty GFA file: {filepath}")
    return text


def detect_version(text: str) -> str:
    """
    Guess whether ``text`` is GFA1 or GFA2.

    A header ``VN`` tag decides if present; otherwise the first record type
    that belongs to only one version does. Defaults to GFA2.
    """
    for line in text.split('\n'):
        fields = line.strip().split('\t')
        record_type = fields[0]
        if record_type == 'H':
            for field in fields[1:]:
                if field.startswith('VN:Z:'):
                    return '1' if field[5:].startswith('1') else '2'
        elif record_type in GFA1_ONLY_RECORDS:
            return '1'
        elif record_type in GFA2_ONLY_RECORDS:
            return '2'
    return '2'


def write_gfa(document, output: Union[str, TextIO]) -> None:
    """Write a GFA1 or GFA2 document to a path or an open text stream."""
    if isinstance(output, str):
        with open(output, 'w') as handle:
            handle.write(document.to_gfa())
        logger.info(f"Wrote GFA to {output}")
    else:
        output.write(document.to_gfa())


def write_segments_fasta(document, output_path: str) -> int:
    """
    Write segment sequences as FASTA.

    Segments without a sequence ('*') are skipped.

    Returns:
        Number of sequences written
    """
    records = []
    for segment in document.segments:
        if segment.sequence == '*':
            continue
        name = str(segment.id)
        records.append(SeqRecord(Seq(segment.sequence), id=name, description=""))

    count = SeqIO.write(records, output_path, "fasta")
    logger.info(f"Wrote {count} segment sequences to {output_path}")
    return count
