"""
Score ledger owned by a single test case.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from scoresuite.core.reporting.reporting_models import Number, ScoreEntry
from scoresuite.models import PercentageError

if TYPE_CHECKING:
    from scoresuite.core.execution.case import TestCase


class Score:
    """Running total, increment history and derived statistics for one case.

    The total starts at the owning case's minimum score. Every call to
    :meth:`increment` appends a :class:`ScoreEntry` and adds its delta to the
    total, so ``value == min_score + sum(entry.score for entry in entries)``
    holds until the total is overwritten through the ``value`` setter.
    """

    def __init__(self, case: TestCase):
        self._case = case
        self._value: Number = 0
        self._increments = 0
        self._entries: list[ScoreEntry] = []
        self.reset()

    @property
    def case(self) -> TestCase:
        return self._case

    @property
    def min_score(self) -> Number:
        return self._case.min_score

    @property
    def max_score(self) -> Number:
        return self._case.max_score

    @property
    def value(self) -> Number:
        return self._value

    @value.setter
    def value(self, value: Number) -> None:
        self._value = value

    @property
    def increments(self) -> int:
        return self._increments

    @property
    def entries(self) -> list[ScoreEntry]:
        return list(self._entries)

    def reset(self) -> None:
        self._value = self.min_score
        self._increments = 0
        self._entries = []

    def increment(self, value: Number, motivation: Any = "", answer: Any = "") -> None:
        """Add ``value`` to the total and record why it was awarded.

        ``motivation`` and ``answer`` are stored as text, so ``answer=10`` is kept as ``"10"``.
        """
        self._entries.append(
            ScoreEntry(
                index=self._increments,
                score=value,
                motivation=str(motivation),
                answer=str(answer),
            )
        )
        self._value += value
        self._increments += 1

    def percentage(self) -> float:
        """Return the total as a percentage of the maximum, rounded to 2 places."""
        if not self.max_score:
            raise PercentageError(f"Cannot compute a percentage for '{self._case.name or self._case.qualified_name()}': maximum score is 0")
        return round(self._value / self.max_score * 100, 2)

    def average(self) -> float | None:
        if self._increments == 0:
            return None
        return self._value / self._increments

    def __repr__(self) -> str:
        return f"Score(value={self._value!r}, increments={self._increments}, max_score={self.max_score!r})"
