"""
A module for registering test cases by identifier.

Registered cases can be attached to a suite by their identifier instead of
by instance or class, and are what the YAML configuration refers to.

Example:
    from scoresuite.core.execution.registry import register_case

    @register_case("addition")
    class Addition(TestCase):
        min_score = 0
        max_score = 2
        ...
"""

import inspect
from typing import Callable, TypedDict, TypeVar

from loguru import logger

from scoresuite.core.execution.case import TestCase
from scoresuite.models import InvalidCaseError, UnknownCaseError

F = TypeVar("F", bound=Callable[[], TestCase])


class CaseRegistration(TypedDict):
    factory: Callable[[], TestCase]
    docs: str | None


CASE_REGISTRY: dict[str, CaseRegistration] = {}


def register_case(case_id: str) -> Callable[[F], F]:
    """
    A decorator to register a test case class or zero-argument factory.

    Args:
        case_id (str): The unique identifier for the case.
                       This ID is used in the configuration file.
    """

    def decorator(factory: F) -> F:
        if case_id in CASE_REGISTRY:
            raise ValueError(f"Case with ID '{case_id}' is already registered.")
        if not callable(factory):
            raise ValueError(f"Case '{case_id}' must be registered with a class or a callable")

        CASE_REGISTRY[case_id] = {"factory": factory, "docs": inspect.getdoc(factory)}
        logger.debug(f"Registered case '{case_id}'")
        return factory

    return decorator


def get_case_factory(case_id: str) -> Callable[[], TestCase]:
    try:
        return CASE_REGISTRY[case_id]["factory"]
    except KeyError:
        raise UnknownCaseError(f"No case registered with ID '{case_id}'") from None


def get_case_docs(case_id: str) -> str | None:
    registration = CASE_REGISTRY.get(case_id)
    return registration["docs"] if registration else None


def create_case(case_id: str) -> TestCase:
    """Instantiate a registered case, checking the factory produced a ``TestCase``."""
    instance = get_case_factory(case_id)()
    if not isinstance(instance, TestCase):
        raise InvalidCaseError(f"Factory for '{case_id}' returned {type(instance).__name__}, not a TestCase")
    return instance
