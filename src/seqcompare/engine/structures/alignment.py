import re
from dataclasses import dataclass
from typing import Union

from seqcompare.engine.exceptions.configuration import InvalidScoringParameterException

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
SCORING_PARAMETER_MIN = -2**31
SCORING_PARAMETER_MAX = 2**31 - 1

def parse_scoring_parameter(parameter_name: str, value: Union[str, int]) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        parsed = value
    elif isinstance(value, str) and _INTEGER_PATTERN.fullmatch(value):
        parsed = int(value)
    else:
        raise InvalidScoringParameterException(parameter_name, str(value))
    if not SCORING_PARAMETER_MIN <= parsed <= SCORING_PARAMETER_MAX:
        raise InvalidScoringParameterException(parameter_name, str(value))
    return parsed

@dataclass(frozen=True)
class ScoringScheme:
    match: int
    mismatch: int
    gap: int

    @classmethod
    def from_arguments(cls, match: Union[str, int], mismatch: Union[str, int], gap: Union[str, int]) -> "ScoringScheme":
        return cls(
            match=parse_scoring_parameter("match", match),
            mismatch=parse_scoring_parameter("mismatch", mismatch),
            gap=parse_scoring_parameter("gap", gap)
        )

    def largest_step(self) -> int:
        return max(abs(self.match), abs(self.mismatch), abs(self.gap))

@dataclass(frozen=True)
class AlignmentResult:
    first_index: int
    second_index: int
    score: int
    first_name: Union[str, None] = None
    second_name: Union[str, None] = None
