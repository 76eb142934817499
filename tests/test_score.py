"""Tests for the Score ledger."""

import pytest
from conftest import FixedCase

from scoresuite import PercentageError, ScoreEntry


class TestIncrement:
    """Test increment bookkeeping."""

    def test_score_starts_at_minimum(self):
        case = FixedCase(min_score=3, max_score=10)
        assert case.score.value == 3
        assert case.score.increments == 0
        assert case.score.entries == []

    def test_increments_add_to_minimum(self):
        case = FixedCase(min_score=2, max_score=20)
        for value in (1, 4, 5):
            case.score.increment(value)

        assert case.score.value == 2 + 1 + 4 + 5
        assert case.score.increments == 3
        assert len(case.score.entries) == case.score.increments

    def test_entries_record_index_motivation_and_answer(self):
        case = FixedCase()
        case.score.increment(1, "Correct", "10")
        case.score.increment(0)

        assert case.score.entries == [
            ScoreEntry(index=0, score=1, motivation="Correct", answer="10"),
            ScoreEntry(index=1, score=0, motivation="", answer=""),
        ]

    def test_answer_and_motivation_are_stored_as_text(self):
        case = FixedCase()
        case.score.increment(1, 42, 10)

        assert case.score.entries == [ScoreEntry(index=0, score=1, motivation="42", answer="10")]

    def test_float_increments(self):
        case = FixedCase()
        case.score.increment(0.5)
        case.score.increment(1.25)
        assert case.score.value == pytest.approx(1.75)

    def test_entries_is_a_copy(self):
        case = FixedCase()
        case.score.increment(1)
        case.score.entries.clear()
        assert case.score.increments == 1
        assert len(case.score.entries) == 1

    def test_value_setter_bypasses_bookkeeping(self):
        case = FixedCase()
        case.score.increment(1)
        case.score.value = 7
        assert case.score.value == 7
        assert case.score.increments == 1


class TestStatistics:
    """Test percentage and average."""

    def test_percentage(self):
        case = FixedCase(min_score=0, max_score=200)
        case.score.increment(11)
        case.score.increment(11)
        assert case.score.percentage() == 11.0

    def test_percentage_rounds_to_two_places(self):
        case = FixedCase(min_score=0, max_score=3)
        case.score.increment(1)
        assert case.score.percentage() == 33.33

    def test_percentage_with_zero_maximum_raises(self):
        case = FixedCase(min_score=0, max_score=0)
        with pytest.raises(PercentageError):
            case.score.percentage()

    def test_percentage_error_is_a_zero_division_error(self):
        case = FixedCase(min_score=0, max_score=0)
        with pytest.raises(ZeroDivisionError):
            case.score.percentage()

    def test_average(self):
        case = FixedCase()
        for value in (2, 2, 3):
            case.score.increment(value)
        assert case.score.average() == pytest.approx(2.3333333333)

    def test_average_of_equal_increments(self):
        case = FixedCase()
        for _ in range(3):
            case.score.increment(3)
        assert case.score.average() == 3

    def test_average_without_increments_is_none(self):
        assert FixedCase().score.average() is None


def test_reset_restores_minimum():
    case = FixedCase(min_score=1, max_score=10)
    case.score.increment(4, "motivation", "answer")
    case.score.value = 100

    case.score.reset()

    assert case.score.value == 1
    assert case.score.increments == 0
    assert case.score.entries == []


def test_bounds_delegate_to_case():
    case = FixedCase(min_score=1, max_score=9)
    assert case.score.min_score == 1
    assert case.score.max_score == 9
    assert case.score.case is case
