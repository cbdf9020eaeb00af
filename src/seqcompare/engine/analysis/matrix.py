"""
Needleman-Wunsch score matrix with a linear gap cost.

Cells hold the optimal score of aligning the i-prefix of the first sequence
against the j-prefix of the second. Row 0 and column 0 are the gap-only
boundaries. Rows are filled top to bottom; within a row the diagonal and
vertical candidates are independent of each other, so they are computed for
the whole row at once and the horizontal (left) moves are then resolved with a
running maximum.
"""
from typing import Union

import numpy as np

from seqcompare.engine.exceptions.resources import ResourceExhaustedException, ScoreOverflowException
from seqcompare.engine.structures.alignment import ScoringScheme

SCORE_DTYPE = np.int64


def encode_residues(sequence: str) -> np.ndarray:
    return np.fromiter(map(ord, sequence), dtype=np.int32, count=len(sequence))

def check_cell_limit(rows: int, columns: int, max_cells: Union[int, None]):
    if max_cells is not None and rows * columns > max_cells:
        raise ResourceExhaustedException(rows, columns, max_cells)

def check_score_range(rows: int, columns: int, scheme: ScoringScheme):
    # every cell, and every cell minus its gap offset, stays within this bound
    score_bound = 2 * scheme.largest_step() * (rows + columns)
    if score_bound > np.iinfo(SCORE_DTYPE).max:
        raise ScoreOverflowException(rows, columns, score_bound)

def allocate_scores(shape) -> np.ndarray:
    try:
        return np.empty(shape, dtype=SCORE_DTYPE)
    except (MemoryError, ValueError) as error:
        rows, columns = shape if isinstance(shape, tuple) else (1, shape)
        raise ResourceExhaustedException(rows, columns) from error

def gap_offsets(columns: int, gap: int) -> np.ndarray:
    return np.arange(columns, dtype=SCORE_DTYPE) * gap

def fill_row(previous_row: np.ndarray, current_row: np.ndarray, row_index: int, residue: int,
             column_residues: np.ndarray, scheme: ScoringScheme, offsets: np.ndarray):
    """
    Computes row ``row_index`` from the row above it.

    ``current_row[j]`` ends up as the maximum of the diagonal, up and left
    candidates. Unrolling ``cell(j) = max(best(j), cell(j - 1) + gap)`` gives
    ``max over k <= j of best(k) + gap * (j - k)``, which is what the
    accumulate below evaluates.
    """
    substitutions = np.where(column_residues == residue, scheme.match, scheme.mismatch)
    current_row[0] = scheme.gap * row_index
    np.maximum(previous_row[:-1] + substitutions, previous_row[1:] + scheme.gap, out=current_row[1:])
    np.maximum.accumulate(current_row - offsets, out=current_row)
    current_row += offsets


class ScoreMatrix:
    def __init__(self, first_sequence: str, second_sequence: str, scheme: ScoringScheme, max_cells: Union[int, None] = None):
        self._first_sequence = first_sequence
        self._second_sequence = second_sequence
        self._scheme = scheme
        rows = len(first_sequence) + 1
        columns = len(second_sequence) + 1
        check_cell_limit(rows, columns, max_cells)
        check_score_range(rows, columns, scheme)
        self._grid = allocate_scores((rows, columns))
        self._filled = False

    @property
    def shape(self) -> tuple[int, int]:
        return self._grid.shape # type: ignore

    @property
    def filled(self) -> bool:
        return self._filled

    def fill(self) -> "ScoreMatrix":
        if self._filled:
            return self
        gap = self._scheme.gap
        rows, columns = self.shape
        offsets = gap_offsets(columns, gap)
        self._grid[0, :] = offsets
        row_residues = encode_residues(self._first_sequence)
        column_residues = encode_residues(self._second_sequence)
        for row_index in range(1, rows):
            fill_row(self._grid[row_index - 1], self._grid[row_index], row_index,
                     row_residues[row_index - 1], column_residues, self._scheme, offsets)
        self._filled = True
        return self

    def cell(self, row: int, column: int) -> int:
        self._require_filled()
        return int(self._grid[row, column])

    @property
    def score(self) -> int:
        self._require_filled()
        return int(self._grid[-1, -1])

    @property
    def values(self) -> np.ndarray:
        self._require_filled()
        view = self._grid.view()
        view.flags.writeable = False
        return view

    def _require_filled(self):
        if not self._filled:
            raise ValueError("Score matrix has not been filled.")
