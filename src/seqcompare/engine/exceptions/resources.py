from typing import Union
from seqcompare.engine.exceptions.base import SequenceComparisonException


class ResourceExhaustedException(SequenceComparisonException):
    def __init__(self, rows: int, columns: int, max_cells: Union[int, None] = None):
        self.rows = rows
        self.columns = columns
        self.max_cells = max_cells
        if max_cells is None:
            super().__init__(f"Unable to allocate a {rows}x{columns} score matrix.")
        else:
            super().__init__(f"A {rows}x{columns} score matrix exceeds the limit of {max_cells} cells.")

class ScoreOverflowException(ResourceExhaustedException):
    def __init__(self, rows: int, columns: int, score_bound: int):
        self.rows = rows
        self.columns = columns
        self.max_cells = None
        self.score_bound = score_bound
        Exception.__init__(self, f"Scores in a {rows}x{columns} score matrix could reach {score_bound}, beyond the 64-bit score range.")
