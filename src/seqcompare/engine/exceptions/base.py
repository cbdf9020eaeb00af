class SequenceComparisonException(Exception):
    pass
