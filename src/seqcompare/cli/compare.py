import asyncio
import logging
import sys
from typing import TextIO, Union

from seqcompare.engine.analysis.pairs import PairEnumerator
from seqcompare.engine.reading import read_sequences
from seqcompare.engine.settings import ComparisonSettings
from seqcompare.engine.writing import write_alignment_results, write_alignment_results_as_csv

logger = logging.getLogger(__name__)


async def run(settings: ComparisonSettings, output: Union[TextIO, None] = None):
    sequences = await asyncio.to_thread(read_sequences, settings.sequence_path, settings.max_line_length, settings.max_sequences)
    enumerator = PairEnumerator.from_scheme(settings.scheme, max_cells=settings.max_matrix_cells, stop_on_fail=settings.stop_on_fail)
    if settings.threads > 1:
        results = [result async for result in enumerator.run_concurrently(sequences, settings.threads)]
    else:
        results = list(enumerator.run(sequences))
    if settings.csv_path is not None:
        await write_alignment_results_as_csv(results, settings.csv_path)
        logger.info("Wrote %d results to %s", len(results), settings.csv_path)
    write_alignment_results(results, output if output is not None else sys.stdout)
    return results

def run_asynchronously(settings: ComparisonSettings, output: Union[TextIO, None] = None):
    return asyncio.run(run(settings, output))
