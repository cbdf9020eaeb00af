from argparse import Namespace
from dataclasses import dataclass
from typing import Union

from seqcompare.engine.exceptions.configuration import InvalidLimitException
from seqcompare.engine.structures.alignment import ScoringScheme


def check_limit(limit_name: str, value: Union[int, None]) -> Union[int, None]:
    if value is not None and value <= 0:
        raise InvalidLimitException(limit_name, value)
    return value

@dataclass(frozen=True)
class ComparisonSettings:
    sequence_path: str
    scheme: ScoringScheme
    max_line_length: Union[int, None] = None
    max_sequences: Union[int, None] = None
    max_matrix_cells: Union[int, None] = None
    threads: int = 1
    stop_on_fail: bool = False
    csv_path: Union[str, None] = None

    def __post_init__(self):
        check_limit("max_line_length", self.max_line_length)
        check_limit("max_sequences", self.max_sequences)
        check_limit("max_matrix_cells", self.max_matrix_cells)
        check_limit("threads", self.threads)

    @classmethod
    def from_namespace(cls, args: Namespace) -> "ComparisonSettings":
        return cls(
            sequence_path=args.sequences,
            scheme=ScoringScheme.from_arguments(args.match, args.mismatch, args.gap),
            max_line_length=args.max_line_length,
            max_sequences=args.max_sequences,
            max_matrix_cells=args.max_matrix_cells,
            threads=args.threads,
            stop_on_fail=args.stop_on_fail,
            csv_path=args.csv
        )
