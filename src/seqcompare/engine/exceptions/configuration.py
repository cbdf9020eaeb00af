from seqcompare.engine.exceptions.base import SequenceComparisonException


class InvalidScoringParameterException(SequenceComparisonException):
    def __init__(self, parameter_name: str, given_value: str):
        self.parameter_name = parameter_name
        self.given_value = given_value
        super().__init__(f"Scoring parameter \"{parameter_name}\" must be a 32-bit integer (given \"{given_value}\").")

class InvalidLimitException(SequenceComparisonException):
    def __init__(self, limit_name: str, given_value):
        self.limit_name = limit_name
        self.given_value = given_value
        super().__init__(f"Limit \"{limit_name}\" must be a positive integer (given {given_value}).")
