import csv
from io import TextIOBase
from os import PathLike
from typing import AsyncIterable, Iterable, TextIO, Union

from seqcompare.engine.exceptions.writing import OutputFileException
from seqcompare.engine.structures.alignment import AlignmentResult

CSV_HEADER = ["seq1", "seq2", "seq1_name", "seq2_name", "score"]


def format_alignment_result(result: AlignmentResult) -> str:
    return f"Score for alignment of seq{result.first_index} to seq{result.second_index} is {result.score}"

def write_alignment_results(results: Iterable[AlignmentResult], handle: Union[TextIO, TextIOBase]):
    for result in results:
        handle.write(format_alignment_result(result) + "\n")

def alignment_result_to_row(result: AlignmentResult) -> dict[str, Union[str, int, None]]:
    return {
        "seq1": result.first_index,
        "seq2": result.second_index,
        "seq1_name": result.first_name,
        "seq2_name": result.second_name,
        "score": result.score
    }

async def write_alignment_results_as_csv(results: Union[AsyncIterable[AlignmentResult], Iterable[AlignmentResult]], handle: Union[str, bytes, PathLike[str], PathLike[bytes]]):
    try:
        filehandle = open(handle, "w", newline='')
    except OSError as error:
        raise OutputFileException(str(handle), str(error)) from error
    with filehandle:
        writer = csv.DictWriter(filehandle, fieldnames=CSV_HEADER)
        writer.writeheader()
        if isinstance(results, AsyncIterable):
            async for result in results:
                writer.writerow(rowdict=alignment_result_to_row(result))
        else:
            for result in results:
                writer.writerow(rowdict=alignment_result_to_row(result))
