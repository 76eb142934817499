import textwrap
from pathlib import Path

import pytest

from scoresuite import TestCase
from scoresuite.core.execution import registry


class FixedCase(TestCase):
    """Awards each configured increment in order."""

    min_score = 0
    max_score = 10

    def __init__(self, increments=(), **kwargs):
        self.planned = list(increments)
        super().__init__(**kwargs)

    def run(self, context):
        for value in self.planned:
            self.score.increment(value)


@pytest.fixture
def case_registry(monkeypatch):
    """Isolate the global case registry for a single test."""
    fresh: dict = {}
    monkeypatch.setattr(registry, "CASE_REGISTRY", fresh)
    return fresh


@pytest.fixture
def case_module(tmp_path: Path, monkeypatch, case_registry):
    """Write an importable module that registers two quiz cases."""
    module_name = f"quiz_cases_{tmp_path.name.replace('-', '_')}"
    source = textwrap.dedent(
        '''
        from scoresuite import TestCase, case, register_case


        @register_case("arithmetic")
        class Arithmetic(TestCase):
            """Checks **sums** stored in the context."""

            min_score = 0
            max_score = 2

            def run(self, context):
                for question, expected in context.get("questions", []):
                    given = context.get("answers", {}).get(question)
                    if given == expected:
                        self.score.increment(1, f"You are right {question}={expected}", str(given))
                    else:
                        self.score.increment(0, f"You are wrong {question}={expected}", str(given))


        @register_case("always_one")
        @case(0, 1)
        def always_one(case, context):
            """Awards a single point."""
            case.score.increment(1, "free point")
        '''
    )
    (tmp_path / f"{module_name}.py").write_text(source, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    return module_name
