import logging

from classlist.core import notifier as phrases
from classlist.core.config import GRADING_DELAY_MS, NOT_ASSIGNED, WORKING_DELAY_MS
from classlist.core.grading import Grader, random_grade
from classlist.core.notifier import Notifier
from classlist.core.scheduler import AsyncioScheduler, Scheduler, TimerHandle
from classlist.models.assignment import CLOSED, Assignment, AssignmentStatus

logger = logging.getLogger(__name__)


class Student:
    """A student working through released assignments.

    Working and grading progress on timers from `scheduler`: a student
    who starts working auto-submits after WORKING_DELAY_MS and every
    submission is graded GRADING_DELAY_MS later by `grader`. Only the
    working timer is tracked per assignment; the grading step cannot be
    cancelled.
    """

    def __init__(
        self,
        full_name: str,
        email: str,
        notifier: Notifier,
        scheduler: Scheduler | None = None,
        grader: Grader = random_grade,
    ):
        self.full_name = full_name
        self.email = email
        self.notifier = notifier
        self.scheduler = scheduler or AsyncioScheduler()
        self.grader = grader
        self.overall_grade: float = 0
        self._assignments: dict[str, Assignment] = {}
        self._working_timers: dict[str, TimerHandle] = {}

    def __repr__(self) -> str:
        return f"Student(full_name={self.full_name!r}, assignments={len(self._assignments)})"

    @property
    def assignments(self) -> list[Assignment]:
        return list(self._assignments.values())

    @property
    def pending_timers(self) -> dict[str, TimerHandle]:
        return dict(self._working_timers)

    def set_full_name(self, full_name: str) -> None:
        self.full_name = full_name

    def set_email(self, email: str) -> None:
        self.email = email

    def find_assignment(self, assignment_name: str) -> Assignment | None:
        return self._assignments.get(assignment_name)

    def update_assignment_status(self, assignment_name: str, grade: float | None = None) -> None:
        assignment = self._assignments.get(assignment_name)
        if assignment is None:
            assignment = Assignment(name=assignment_name)
            self._assignments[assignment_name] = assignment
            self._notify(assignment_name, phrases.RELEASED)

        if grade is not None:
            assignment.set_grade(grade)
            self._notify(assignment_name, phrases.graded_phrase(assignment.status.value))

        self._calculate_overall_grade()

    def get_assignment_status(self, assignment_name: str) -> str:
        assignment = self._assignments.get(assignment_name)
        if assignment is None:
            return NOT_ASSIGNED
        if assignment.is_graded:
            return assignment.status.value.capitalize()
        return assignment.status.value

    async def start_working(self, assignment_name: str) -> None:
        self._cancel_working_timer(assignment_name)

        if assignment_name not in self._assignments:
            self.update_assignment_status(assignment_name)
        self._move(assignment_name, AssignmentStatus.working)
        self._notify(assignment_name, phrases.WORKING)

        self._working_timers[assignment_name] = self.scheduler.call_later(
            WORKING_DELAY_MS, lambda: self.submit_assignment(assignment_name)
        )

    def submit_assignment(self, assignment_name: str) -> None:
        assignment = self._assignments.get(assignment_name)
        if assignment is not None and assignment.status != AssignmentStatus.submitted:
            # schedule first: a scheduler that cannot run leaves the status untouched
            self.scheduler.call_later(GRADING_DELAY_MS, lambda: self._grade(assignment_name))
            self._move(assignment_name, AssignmentStatus.submitted)
            self._notify(assignment_name, phrases.SUBMITTED)

        self._cancel_working_timer(assignment_name)

    def handle_reminder(self, assignment_name: str) -> None:
        self._cancel_working_timer(assignment_name)

        assignment = self._assignments.get(assignment_name)
        if assignment is None or assignment.status in CLOSED:
            return

        self._move(assignment_name, AssignmentStatus.final_reminder)
        self._notify(assignment_name, phrases.FINAL_REMINDER)
        self.submit_assignment(assignment_name)

    def get_grade(self) -> float:
        return self.overall_grade

    def _grade(self, assignment_name: str) -> None:
        self.update_assignment_status(assignment_name, self.grader())

    def _move(self, assignment_name: str, status: AssignmentStatus) -> None:
        self._assignments[assignment_name].move_to(status)
        # leaving pass/fail drops a grade
        self._calculate_overall_grade()

    def _cancel_working_timer(self, assignment_name: str) -> None:
        timer = self._working_timers.pop(assignment_name, None)
        if timer is not None:
            timer.cancel()
            logger.debug("%s: cancelled working timer for %s", self.full_name, assignment_name)

    def _notify(self, assignment_name: str, phrase: str) -> None:
        self.notifier.notify(self.full_name, assignment_name, phrase)

    def _calculate_overall_grade(self) -> None:
        graded = [a.grade for a in self._assignments.values() if a.is_graded]
        if not graded:
            self.overall_grade = 0
            return
        self.overall_grade = sum(graded) / len(graded)
