from seqcompare.engine.exceptions.base import SequenceComparisonException


class OutputFileException(SequenceComparisonException):
    def __init__(self, output_path: str, reason: str):
        self.output_path = output_path
        super().__init__(f"Unable to write results to \"{output_path}\": {reason}")
