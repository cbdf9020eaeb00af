import asyncio
import logging
import re
from io import TextIOBase
from os import PathLike
from typing import Any, AsyncGenerator, Generator, Iterable, TextIO, Union

from Bio.SeqIO.FastaIO import SimpleFastaParser

from seqcompare.engine.exceptions.reading import CapacityExceededException, EmptySequenceException, SequenceFileException
from seqcompare.engine.structures.genomics import NamedString, SequenceStore

logger = logging.getLogger(__name__)

_NON_RESIDUE_PATTERN = re.compile(r"[^A-Za-z]")

SequenceSource = Union[str, PathLike, TextIO, TextIOBase]


def clean_residues(text: str) -> str:
    return _NON_RESIDUE_PATTERN.sub("", text)

def _limited_lines(lines: Iterable[str], max_line_length: Union[int, None]) -> Generator[str, Any, None]:
    # Text ahead of the first header is not part of any record.
    in_records = False
    for line_number, line in enumerate(lines, start=1):
        if not line:
            continue
        if max_line_length is not None and len(line.rstrip("\r\n")) > max_line_length:
            raise CapacityExceededException("maximum line length", max_line_length, line_number)
        if not in_records:
            if not line.startswith(">"):
                continue
            in_records = True
        yield line

def parse_sequences(lines: Iterable[str], max_line_length: Union[int, None] = None) -> Generator[NamedString, Any, None]:
    for record_number, (title, body) in enumerate(SimpleFastaParser(_limited_lines(lines, max_line_length)), start=1):
        sequence = clean_residues(body)
        if len(sequence) == 0:
            raise EmptySequenceException(record_number, title)
        yield NamedString(title, sequence)

def read_sequences(source: SequenceSource, max_line_length: Union[int, None] = None, max_sequences: Union[int, None] = None) -> SequenceStore:
    if isinstance(source, (str, PathLike)):
        try:
            with open(source, "r", encoding="utf-8") as sequence_handle:
                store = SequenceStore.from_named_strings(parse_sequences(sequence_handle, max_line_length), max_sequences)
        except (OSError, UnicodeDecodeError) as error:
            raise SequenceFileException(str(source), str(error)) from error
    else:
        store = SequenceStore.from_named_strings(parse_sequences(source, max_line_length), max_sequences)
    logger.info("Read %d sequences", len(store))
    return store

async def read_fasta(source: SequenceSource, max_line_length: Union[int, None] = None, max_sequences: Union[int, None] = None) -> AsyncGenerator[NamedString, Any]:
    store = await asyncio.to_thread(read_sequences, source, max_line_length, max_sequences)
    for named_string in store:
        yield named_string
