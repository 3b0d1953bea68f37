"""
Pytest configuration and fixtures for the pattern demos
"""

import io
import pytest
from typing import Callable, List

from composite_decorator_pattern import Ingredient


@pytest.fixture
def out() -> io.StringIO:
    """Text sink that captures rendered output"""
    return io.StringIO()


@pytest.fixture
def flour() -> Ingredient:
    return Ingredient("Flour", "Organic flour", "2.00")


@pytest.fixture
def sugar() -> Ingredient:
    return Ingredient("Sugar", "White sugar", "1.50")


@pytest.fixture
def eggs() -> Ingredient:
    return Ingredient("Eggs", "Free-range eggs", "3.00")


@pytest.fixture
def scripted_input() -> Callable[[List[str]], Callable[[str], str]]:
    """Build an input() replacement that replays answers, then raises EOFError"""

    def build(answers: List[str]) -> Callable[[str], str]:
        remaining = list(answers)

        def fake_input(prompt: str) -> str:
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        return fake_input

    return build
