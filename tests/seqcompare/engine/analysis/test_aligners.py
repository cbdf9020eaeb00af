import random
from typing import Sequence

import pytest
from pytest import fixture

from seqcompare.engine.analysis.aligners import AsyncPairwiseAlignmentEngine, NeedlemanWunschAligner
from seqcompare.engine.exceptions.resources import ResourceExhaustedException, ScoreOverflowException
from seqcompare.engine.structures.alignment import ScoringScheme


def random_sequence(seed: str, length: int, alphabet: Sequence[str] = ["A", "T", "C", "G"]):
    rand = random.Random(seed)
    return "".join(rand.choices(alphabet, k=length))

def reference_score(first: str, second: str, scheme: ScoringScheme) -> int:
    matrix = [[0] * (len(second) + 1) for _ in range(len(first) + 1)]
    for row in range(len(first) + 1):
        for column in range(len(second) + 1):
            if row == 0:
                matrix[row][column] = scheme.gap * column
            elif column == 0:
                matrix[row][column] = scheme.gap * row
            else:
                matrix[row][column] = max(
                    matrix[row - 1][column - 1] + (scheme.match if first[row - 1] == second[column - 1] else scheme.mismatch),
                    matrix[row - 1][column] + scheme.gap,
                    matrix[row][column - 1] + scheme.gap
                )
    return matrix[-1][-1]

@fixture(params=[True, False], ids=["two-rows", "full-matrix"])
def linear_space(request):
    return request.param

@fixture(params=[1, 2])
def dummy_engine(request):
    aligner = NeedlemanWunschAligner(ScoringScheme(1, -1, -2))
    with AsyncPairwiseAlignmentEngine(aligner, request.param) as engine:
        yield engine

class TestNeedlemanWunschAligner:
    def test_textbook_pair(self, linear_space: bool):
        aligner = NeedlemanWunschAligner(ScoringScheme(1, -1, -2), linear_space=linear_space)
        assert aligner.align("AAG", "AGG") == 1

    def test_single_residue(self, linear_space: bool):
        aligner = NeedlemanWunschAligner(ScoringScheme(2, -1, -1), linear_space=linear_space)
        assert aligner.align("A", "A") == 2

    @pytest.mark.parametrize("seed", ["alpha", "beta", "gamma", "delta"])
    def test_score_is_symmetric(self, seed: str, linear_space: bool):
        aligner = NeedlemanWunschAligner(ScoringScheme(3, -2, -4), linear_space=linear_space)
        first = random_sequence(seed + "1", 23)
        second = random_sequence(seed + "2", 41)
        assert aligner.align(first, second) == aligner.align(second, first)

    @pytest.mark.parametrize("length", [1, 7, 60])
    def test_identical_sequences_score_all_matches(self, length: int, linear_space: bool):
        scheme = ScoringScheme(2, -1, -3)
        aligner = NeedlemanWunschAligner(scheme, linear_space=linear_space)
        sequence = random_sequence(f"identity{length}", length)
        assert aligner.align(sequence, sequence) == scheme.match * length

    def test_empty_sequence_scores_gaps(self, linear_space: bool):
        scheme = ScoringScheme(1, -1, -2)
        aligner = NeedlemanWunschAligner(scheme, linear_space=linear_space)
        assert aligner.align("", "ACGTA") == scheme.gap * 5
        assert aligner.align("ACGTA", "") == scheme.gap * 5
        assert aligner.align("", "") == 0

    def test_residues_compare_case_sensitively(self, linear_space: bool):
        aligner = NeedlemanWunschAligner(ScoringScheme(1, -1, -2), linear_space=linear_space)
        assert aligner.align("a", "A") == -1

    @pytest.mark.parametrize("scheme", [
        ScoringScheme(1, -1, -2),
        ScoringScheme(5, -4, -1),
        ScoringScheme(0, 0, 0),
        ScoringScheme(-1, 1, 2),
    ])
    def test_matches_plain_recurrence(self, scheme: ScoringScheme):
        first = random_sequence("recurrence-first", 17)
        second = random_sequence("recurrence-second", 29)
        expected = reference_score(first, second, scheme)
        assert NeedlemanWunschAligner(scheme, linear_space=True).align(first, second) == expected
        assert NeedlemanWunschAligner(scheme, linear_space=False).align(first, second) == expected

    def test_build_matrix_returns_filled_matrix(self):
        aligner = NeedlemanWunschAligner(ScoringScheme(1, -1, -2))
        matrix = aligner.build_matrix("AAG", "AGG")
        assert matrix.filled
        assert matrix.score == aligner.align("AAG", "AGG")

    def test_cell_limit_applies_to_both_modes(self, linear_space: bool):
        aligner = NeedlemanWunschAligner(ScoringScheme(1, -1, -2), max_cells=10, linear_space=linear_space)
        assert aligner.align("AA", "AG") == 0
        with pytest.raises(ResourceExhaustedException):
            aligner.align("AAAA", "AGGG")

    def test_scores_beyond_64_bits_raise(self, linear_space: bool):
        aligner = NeedlemanWunschAligner(ScoringScheme(1, -1, -(2**61)), linear_space=linear_space)
        with pytest.raises(ScoreOverflowException) as raised:
            aligner.align("AAAAA", "C")
        assert isinstance(raised.value, ResourceExhaustedException)

    def test_32_bit_extremes_score_exactly(self, linear_space: bool):
        scheme = ScoringScheme(1, -1, -2**31)
        aligner = NeedlemanWunschAligner(scheme, linear_space=linear_space)
        assert aligner.align("AAAAA", "C") == reference_score("AAAAA", "C", scheme) == -1 - 4 * 2**31

class TestAsyncPairwiseAlignmentEngine:
    async def test_single_alignment_no_errors(self, dummy_engine: AsyncPairwiseAlignmentEngine):
        dummy_engine.align("AAG", "AGG", label="only")
        results = [result async for result in dummy_engine]
        assert results == [(1, {"label": "only"})]

    async def test_results_follow_submission_order(self, dummy_engine: AsyncPairwiseAlignmentEngine):
        # longest first so later submissions tend to finish earlier
        lengths = [400, 200, 50, 5, 1]
        for position, length in enumerate(lengths):
            sequence = random_sequence(f"order{position}", length)
            dummy_engine.align(sequence, sequence, position=position)
        positions = [associated_data["position"] async for score, associated_data in dummy_engine]
        assert positions == list(range(len(lengths)))

    async def test_empty_engine_yields_nothing(self, dummy_engine: AsyncPairwiseAlignmentEngine):
        assert await dummy_engine.next_completed() is None

    async def test_failed_alignment_raises_on_retrieval(self):
        aligner = NeedlemanWunschAligner(ScoringScheme(1, -1, -2), max_cells=4)
        with AsyncPairwiseAlignmentEngine(aligner, 2) as engine:
            engine.align("ACGT", "ACGT")
            engine.align("A", "A")
            with pytest.raises(ResourceExhaustedException):
                await engine.next_completed()
            assert await engine.next_completed() == (1, {})
