import logging
from typing import Any, AsyncGenerator, Generator, Sequence, Union

from seqcompare.engine.analysis.aligners import AsyncPairwiseAlignmentEngine, NeedlemanWunschAligner
from seqcompare.engine.exceptions.resources import ResourceExhaustedException
from seqcompare.engine.structures.alignment import AlignmentResult, ScoringScheme
from seqcompare.engine.structures.genomics import NamedString, SequenceStore

logger = logging.getLogger(__name__)


def enumerate_pairs(count: int) -> Generator[tuple[int, int], Any, None]:
    for first_index in range(count - 1):
        for second_index in range(first_index + 1, count):
            yield first_index, second_index

def as_named_strings(sequences: Union[SequenceStore, Sequence[str], Sequence[NamedString]]) -> list[NamedString]:
    named_strings = []
    for position, sequence in enumerate(sequences, start=1):
        if isinstance(sequence, NamedString):
            named_strings.append(sequence)
        else:
            named_strings.append(NamedString(f"seq{position}", sequence))
    return named_strings


class PairEnumerator:
    """Scores every unordered pair of sequences, (1, 2), (1, 3), ..., (2, 3), ..."""

    def __init__(self, aligner: NeedlemanWunschAligner, stop_on_fail: bool = False):
        self._aligner = aligner
        self._stop_on_fail = stop_on_fail

    @classmethod
    def from_scheme(cls, scheme: ScoringScheme, max_cells: Union[int, None] = None, stop_on_fail: bool = False) -> "PairEnumerator":
        return cls(NeedlemanWunschAligner(scheme, max_cells=max_cells), stop_on_fail=stop_on_fail)

    def run(self, sequences: Union[SequenceStore, Sequence[str], Sequence[NamedString]]) -> Generator[AlignmentResult, Any, None]:
        named_strings = as_named_strings(sequences)
        logger.debug("Aligning %d sequence pairs", len(named_strings) * (len(named_strings) - 1) // 2)
        for first_index, second_index in enumerate_pairs(len(named_strings)):
            first, second = named_strings[first_index], named_strings[second_index]
            try:
                score = self._aligner.align(first.sequence, second.sequence)
            except ResourceExhaustedException as e:
                self._on_fail(first_index, second_index, e)
                continue
            yield AlignmentResult(first_index + 1, second_index + 1, score, first.name, second.name)

    async def run_concurrently(self, sequences: Union[SequenceStore, Sequence[str], Sequence[NamedString]], max_threads: int = 4) -> AsyncGenerator[AlignmentResult, Any]:
        named_strings = as_named_strings(sequences)
        pairs = list(enumerate_pairs(len(named_strings)))
        logger.debug("Aligning %d sequence pairs on %d threads", len(pairs), max_threads)
        with AsyncPairwiseAlignmentEngine(self._aligner, max_threads) as engine:
            for first_index, second_index in pairs:
                engine.align(named_strings[first_index].sequence, named_strings[second_index].sequence,
                             first_index=first_index, second_index=second_index)
            # the engine hands results back in submission order, one per pair
            for first_index, second_index in pairs:
                try:
                    completed = await engine.next_completed()
                except ResourceExhaustedException as e:
                    self._on_fail(first_index, second_index, e)
                    continue
                if completed is None:
                    break
                score, _ = completed
                yield AlignmentResult(
                    first_index + 1,
                    second_index + 1,
                    score,
                    named_strings[first_index].name,
                    named_strings[second_index].name
                )

    def _on_fail(self, first_index: int, second_index: int, error: ResourceExhaustedException):
        if self._stop_on_fail:
            raise error
        logger.warning("Skipping seq%d to seq%d: %s", first_index + 1, second_index + 1, error)
