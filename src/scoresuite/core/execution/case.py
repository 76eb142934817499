"""
Base classes for scored test cases.

A case declares the lowest and highest score it can reach and implements
``run(context)``, awarding points through ``self.score.increment(...)``.

Example:
    class Addition(TestCase):
        min_score = 0
        max_score = 2

        def run(self, context):
            for question, expected in context.get("sums", []):
                given = ask(question)
                self.score.increment(1 if given == expected else 0, question, given)
"""

from abc import ABC, abstractmethod
from functools import wraps
from typing import Any, Callable

from scoresuite.core.execution.container import Container
from scoresuite.core.execution.score import Score
from scoresuite.core.reporting.reporting_models import Number
from scoresuite.models import CaseDefinitionError


class TestCase(ABC):
    """Abstract scored check run by a ``TestSuite``.

    Score bounds come from the constructor arguments or, when those are
    omitted, from ``min_score``/``max_score`` class attributes. Both are
    required; a case without them cannot be created.
    """

    # Keeps pytest from collecting subclasses named Test*.
    __test__ = False

    min_score: Number | None = None
    max_score: Number | None = None

    def __init__(self, min_score: Number | None = None, max_score: Number | None = None):
        if min_score is not None:
            self.min_score = min_score
        if max_score is not None:
            self.max_score = max_score

        if self.min_score is None:
            raise CaseDefinitionError(f"{self.qualified_name()} must define min_score to indicate the lowest reachable score.")
        if self.max_score is None:
            raise CaseDefinitionError(f"{self.qualified_name()} must define max_score to indicate the highest reachable score.")
        if self.min_score > self.max_score:
            raise CaseDefinitionError(
                f"{self.qualified_name()} has min_score {self.min_score} greater than max_score {self.max_score}."
            )

        self._name = ""
        self.score = Score(self)
        self.after_creation()

    def after_creation(self) -> None:
        """Hook called once after the score exists. Override to prepare state."""

    @property
    def name(self) -> str:
        return self._name

    def _bind_name(self, name: str) -> None:
        # Only TestSuite.attach assigns names.
        self._name = name

    def qualified_name(self) -> str:
        cls = type(self)
        return f"{cls.__module__}.{cls.__qualname__}"

    @abstractmethod
    def run(self, context: Container) -> Any:
        """Run the check, calling ``self.score.increment`` as points are earned."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self._name!r} score={self.score.value!r}/{self.max_score!r}>"


class FunctionCase(TestCase):
    """A case built from score bounds and a plain function.

    ``func`` is called as ``func(case, context)`` and scores through
    ``case.score``.
    """

    def __init__(self, min_score: Number, max_score: Number, func: Callable[[TestCase, Container], Any]):
        if not callable(func):
            raise CaseDefinitionError(f"FunctionCase needs a callable, got {type(func).__name__}")
        self.func = func
        super().__init__(min_score, max_score)

    def qualified_name(self) -> str:
        # Partials and callable objects carry no __qualname__ of their own.
        module = getattr(self.func, "__module__", None) or type(self.func).__module__
        qualname = getattr(self.func, "__qualname__", type(self.func).__qualname__)
        return f"{module}.{qualname}"

    def run(self, context: Container) -> Any:
        return self.func(self, context)


def case(min_score: Number, max_score: Number) -> Callable[[Callable[[TestCase, Container], Any]], Callable[[], FunctionCase]]:
    """Decorator turning ``func(case, context)`` into a zero-argument case factory."""

    def decorator(func: Callable[[TestCase, Container], Any]) -> Callable[[], FunctionCase]:
        @wraps(func)
        def factory() -> FunctionCase:
            return FunctionCase(min_score, max_score, func)

        return factory

    return decorator
