from enum import Enum

from pydantic import BaseModel, PrivateAttr

from classlist.core.grading import is_passing, validate_grade


class AssignmentStatus(str, Enum):
    released = "released"
    working = "working"
    final_reminder = "finalReminder"
    submitted = "submitted"
    passed = "pass"
    failed = "fail"


GRADED = frozenset({AssignmentStatus.passed, AssignmentStatus.failed})
# no longer waiting on the student
CLOSED = GRADED | {AssignmentStatus.submitted}


class Assignment(BaseModel):
    name: str
    status: AssignmentStatus = AssignmentStatus.released

    # only set while status is pass/fail
    _grade: float | None = PrivateAttr(default=None)

    @property
    def grade(self) -> float | None:
        return self._grade

    @property
    def is_graded(self) -> bool:
        return self.status in GRADED

    def set_grade(self, grade: float) -> None:
        validate_grade(grade)
        self._grade = grade
        self.status = AssignmentStatus.passed if is_passing(grade) else AssignmentStatus.failed

    def move_to(self, status: AssignmentStatus) -> None:
        """Non-grading transition; drops any previous grade."""
        if status in GRADED:
            raise ValueError(f"use set_grade() to move an assignment to {status.value!r}")
        self.status = status
        self._grade = None
