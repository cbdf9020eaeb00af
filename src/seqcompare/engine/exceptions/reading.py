from typing import Union
from seqcompare.engine.exceptions.base import SequenceComparisonException


class SequenceFileException(SequenceComparisonException):
    def __init__(self, sequence_path: str, reason: str):
        self.sequence_path = sequence_path
        super().__init__(f"Unable to read sequences from \"{sequence_path}\": {reason}")

class EmptySequenceException(SequenceComparisonException):
    def __init__(self, record_number: int, record_name: str):
        self.record_number = record_number
        self.record_name = record_name
        super().__init__(f"Record {record_number} (\"{record_name}\") contains no residues.")

class CapacityExceededException(SequenceComparisonException):
    def __init__(self, limit_name: str, limit: int, line_number: Union[int, None] = None):
        self.limit_name = limit_name
        self.limit = limit
        self.line_number = line_number
        location = f" at line {line_number}" if line_number is not None else ""
        super().__init__(f"Input exceeds {limit_name} of {limit}{location}.")
