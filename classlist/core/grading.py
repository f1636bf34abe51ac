import random
from itertools import cycle
from typing import Callable

from classlist.core.config import MAX_GRADE, MIN_GRADE, PASS_THRESHOLD

Grader = Callable[[], float]


def random_grade() -> int:
    return random.randint(MIN_GRADE, MAX_GRADE)


def fixed_grades(*grades: float) -> Grader:
    """Grader that hands out `grades` in order, starting over when exhausted."""
    if not grades:
        raise ValueError("fixed_grades needs at least one grade")
    for g in grades:
        validate_grade(g)
    it = cycle(grades)
    return lambda: next(it)


def validate_grade(grade: float) -> None:
    if grade < MIN_GRADE or grade > MAX_GRADE:
        raise ValueError(f"grade must be between {MIN_GRADE} and {MAX_GRADE}, got {grade}")


def is_passing(grade: float) -> bool:
    return grade > PASS_THRESHOLD
