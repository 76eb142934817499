"""
Test suite: owns a set of cases, runs them against a shared container and
aggregates their scores.
"""

from typing import Any, Callable, Iterator, Self

from loguru import logger

from scoresuite.core.execution.case import TestCase
from scoresuite.core.execution.container import Container, InMemoryContainer
from scoresuite.core.execution.registry import create_case
from scoresuite.core.reporting.reporting_models import Number, ScoreEntry
from scoresuite.models import InvalidCaseError, PercentageError

TestHook = Callable[[TestCase], None]
CaseSpec = TestCase | type[TestCase] | str | list[Any] | tuple[Any, ...]


class TestSuite:
    """Ordered, identity-keyed collection of test cases.

    Cases run in the order they were attached. Attaching the same instance
    twice keeps a single membership. Each newly attached case is named
    ``<qualified name>_<n>`` where ``n`` is the number of members at that
    moment; after a detach the counter can repeat, so two members may share
    a name.
    """

    __test__ = False

    def __init__(
        self,
        container: Container | None = None,
        before_test: TestHook | None = None,
        after_test: TestHook | None = None,
    ):
        self._cases: dict[int, TestCase] = {}
        self._container: Container = InMemoryContainer()
        if container is not None:
            self.set_container(container)
        self._score: Number = 0
        self._before_test = before_test
        self._after_test = after_test

    @property
    def container(self) -> Container:
        return self._container

    @container.setter
    def container(self, container: Container) -> None:
        self.set_container(container)

    def set_container(self, container: Container) -> Self:
        if not isinstance(container, Container):
            raise TypeError(f"{type(container).__name__} does not implement has/get/set/forget.")
        self._container = container
        return self

    def before_test(self, case: TestCase) -> None:
        """Called before each case runs. Override or pass ``before_test`` to the constructor."""
        if self._before_test is not None:
            self._before_test(case)

    def after_test(self, case: TestCase) -> None:
        """Called after each case runs. Override or pass ``after_test`` to the constructor."""
        if self._after_test is not None:
            self._after_test(case)

    def _resolve(self, item: CaseSpec) -> list[TestCase]:
        if isinstance(item, (list, tuple)):
            resolved: list[TestCase] = []
            for sub_item in item:
                resolved.extend(self._resolve(sub_item))
            return resolved

        if isinstance(item, str):
            return [create_case(item)]

        if isinstance(item, type):
            if not issubclass(item, TestCase):
                raise InvalidCaseError(f"{item.__qualname__} does not extend TestCase.")
            return [item()]

        if not isinstance(item, TestCase):
            raise InvalidCaseError(f"{type(item).__name__} does not extend TestCase.")
        return [item]

    def attach(self, cases: CaseSpec) -> Self:
        """Attach a case, a case class, a registered case id, or a list of those.

        Everything is resolved before anything is attached, so an invalid item
        leaves the suite unchanged.
        """
        pending: dict[int, tuple[TestCase, str]] = {}
        for case in self._resolve(cases):
            key = id(case)
            if key in self._cases or key in pending:
                logger.debug(f"Case '{case.name}' is already attached")
                continue
            pending[key] = (case, f"{case.qualified_name()}_{len(self._cases) + len(pending)}")

        for key, (case, name) in pending.items():
            if any(member.name == name for member in self._cases.values()):
                logger.warning(f"Case name '{name}' is already used by another attached case")
            case._bind_name(name)
            self._cases[key] = case
            logger.debug(f"Attached case '{name}'")
        return self

    def detach(self, case: TestCase) -> Self:
        if self.has(case):
            del self._cases[id(case)]
            logger.debug(f"Detached case '{case.name}'")
        return self

    def has(self, case: TestCase) -> bool:
        return self._cases.get(id(case)) is case

    def tests(self) -> tuple[TestCase, ...]:
        return tuple(self._cases.values())

    def __len__(self) -> int:
        return len(self._cases)

    def __iter__(self) -> Iterator[TestCase]:
        return iter(self.tests())

    def __contains__(self, case: object) -> bool:
        return isinstance(case, TestCase) and self.has(case)

    def reset(self) -> None:
        self._score = 0
        for case in self._cases.values():
            case.score.reset()

    def run(self, reset: bool = True) -> int:
        """Run every attached case in order and return how many ran."""
        tests_run = 0

        if reset:
            self.reset()

        container = self._container
        for case in self.tests():
            logger.info(f"Running case: {case.name}")
            self.before_test(case)
            case.run(container)
            self.after_test(case)

            self._score += case.score.value
            tests_run += 1
            logger.info(f"Case '{case.name}' scored {case.score.value}/{case.max_score}")

        logger.info(f"Suite ran {tests_run} cases with a total score of {self._score}")
        return tests_run

    def answers(self) -> dict[str, list[ScoreEntry]]:
        return {case.name: case.score.entries for case in self._cases.values()}

    @property
    def score(self) -> Number:
        return self._score

    def average(self) -> float | None:
        if not self._cases:
            return None
        return self._score / len(self._cases)

    def max_score(self) -> Number:
        return sum(case.max_score for case in self._cases.values())

    def percentage(self) -> float:
        max_score = self.max_score()
        if not max_score:
            raise PercentageError("Cannot compute a suite percentage: the attached cases have a maximum score of 0")
        return round(self._score / max_score * 100, 2)
