import asyncio
from concurrent.futures import Future, ThreadPoolExecutor
from contextlib import AbstractContextManager
from typing import Any, Union
from queue import Queue

from seqcompare.engine.analysis.matrix import ScoreMatrix, allocate_scores, check_cell_limit, check_score_range, encode_residues, fill_row, gap_offsets
from seqcompare.engine.structures.alignment import ScoringScheme


class NeedlemanWunschAligner:
    """
    Global aligner with a linear gap cost that reports the optimal score.

    With ``linear_space`` the score is computed keeping only two rows of the
    matrix, the shorter sequence laid along the columns. Otherwise a full
    ``ScoreMatrix`` is built for every pair. ``max_cells`` bounds the size of
    the (logical) matrix in either mode.
    """

    def __init__(self, scheme: ScoringScheme, max_cells: Union[int, None] = None, linear_space: bool = True):
        self._scheme = scheme
        self._max_cells = max_cells
        self._linear_space = linear_space

    @property
    def scheme(self) -> ScoringScheme:
        return self._scheme

    def build_matrix(self, first_sequence: str, second_sequence: str) -> ScoreMatrix:
        return ScoreMatrix(first_sequence, second_sequence, self._scheme, self._max_cells).fill()

    def align(self, first_sequence: str, second_sequence: str) -> int:
        if not self._linear_space:
            return self.build_matrix(first_sequence, second_sequence).score
        check_cell_limit(len(first_sequence) + 1, len(second_sequence) + 1, self._max_cells)
        check_score_range(len(first_sequence) + 1, len(second_sequence) + 1, self._scheme)
        # transposing the matrix swaps the up and left moves, both of which cost one gap
        if len(second_sequence) > len(first_sequence):
            first_sequence, second_sequence = second_sequence, first_sequence
        return self._align_two_rows(first_sequence, second_sequence)

    def _align_two_rows(self, first_sequence: str, second_sequence: str) -> int:
        columns = len(second_sequence) + 1
        offsets = gap_offsets(columns, self._scheme.gap)
        previous_row = allocate_scores(columns)
        current_row = allocate_scores(columns)
        previous_row[:] = offsets
        row_residues = encode_residues(first_sequence)
        column_residues = encode_residues(second_sequence)
        for row_index in range(1, len(first_sequence) + 1):
            fill_row(previous_row, current_row, row_index, row_residues[row_index - 1],
                     column_residues, self._scheme, offsets)
            previous_row, current_row = current_row, previous_row
        return int(previous_row[-1])


class AsyncPairwiseAlignmentEngine(AbstractContextManager):
    """Aligns pairs on a thread pool, yielding scores in the order they were submitted."""

    def __enter__(self):
        self._thread_pool = ThreadPoolExecutor(self._max_threads, thread_name_prefix="async-pairwise-alignment")
        return self

    def __init__(self, aligner: NeedlemanWunschAligner, max_threads: int = 4):
        self._max_threads = max_threads
        self._aligner = aligner
        self._work_submitted: Queue[Future] = Queue()

    def align(self, first_sequence: str, second_sequence: str, **associated_data):
        work = self._thread_pool.submit(
            self.work, first_sequence, second_sequence, **associated_data)
        self._work_submitted.put(work)

    def work(self, first_sequence: str, second_sequence: str, **associated_data):
        return self._aligner.align(first_sequence, second_sequence), associated_data

    async def next_completed(self) -> Union[tuple[int, dict[str, Any]], None]:
        if self._work_submitted.empty():
            return None
        return await asyncio.wrap_future(self._work_submitted.get())

    def __exit__(self, exc_type, exc_value, traceback):
        self.shutdown()

    def __aiter__(self):
        return self

    async def __anext__(self):
        result = await self.next_completed()
        if result is None:
            raise StopAsyncIteration
        return result

    def shutdown(self):
        self._thread_pool.shutdown(wait=True, cancel_futures=True)
