import asyncio
import logging

from classlist.core.log_timing import timed
from classlist.core.notifier import Notifier
from classlist.models.assignment import CLOSED, GRADED, AssignmentStatus
from classlist.models.student import Student
from classlist.schemas.assignment_stats import AssignmentStatsRow
from classlist.schemas.gradebook import GradebookRow
from classlist.schemas.gradebook_summary import GradebookStudentSummary

logger = logging.getLogger(__name__)

# counted as "not started yet" by the roster-wide outstanding query
_UNSTARTED = frozenset({AssignmentStatus.released, AssignmentStatus.working})


def _average(grades: list[float]) -> float | None:
    if not grades:
        return None
    return round(sum(grades) / len(grades), 2)


class Roster:
    """The classlist: students plus bulk release, reminder and reporting."""

    def __init__(self, notifier: Notifier):
        self.students: list[Student] = []
        self.notifier = notifier

    def __len__(self) -> int:
        return len(self.students)

    def add_student(self, student: Student) -> None:
        self.students.append(student)
        logger.info("%s has been added to the classlist.", student.full_name)

    def remove_student(self, full_name: str) -> None:
        student = self.find_student_by_name(full_name)
        if student is not None:
            self.students.remove(student)

    def find_student_by_name(self, full_name: str) -> Student | None:
        return next((s for s in self.students if s.full_name == full_name), None)

    def find_outstanding_assignments(self, assignment_name: str | None = None) -> list[str]:
        if assignment_name:
            # students who haven't submitted this particular assignment
            return [
                s.full_name
                for s in self.students
                if (a := s.find_assignment(assignment_name)) is not None and a.status not in CLOSED
            ]

        return [
            s.full_name
            for s in self.students
            if any(a.status in _UNSTARTED for a in s.assignments)
        ]

    @timed
    async def release_assignments_parallel(self, assignment_names: list[str]) -> None:
        async def release(student: Student, assignment_name: str) -> None:
            student.update_assignment_status(assignment_name)

        async def release_all(student: Student) -> None:
            await asyncio.gather(*(release(student, name) for name in assignment_names))

        await asyncio.gather(*(release_all(s) for s in self.students))

    @timed
    def send_reminder(self, assignment_name: str) -> list[str]:
        reminded = self.find_outstanding_assignments(assignment_name)
        for name in reminded:
            student = self.find_student_by_name(name)
            if student is not None:
                student.handle_reminder(assignment_name)
        return reminded

    def gradebook(self) -> list[GradebookRow]:
        return [
            GradebookRow(
                student_name=s.full_name,
                student_email=s.email,
                assignment_name=a.name,
                status=a.status.value,
                grade=a.grade,
            )
            for s in self.students
            for a in s.assignments
        ]

    def student_summaries(self) -> list[GradebookStudentSummary]:
        rows: list[GradebookStudentSummary] = []

        for s in self.students:
            statuses = [a.status for a in s.assignments]
            graded = [a.grade for a in s.assignments if a.status in GRADED]
            rows.append(
                GradebookStudentSummary(
                    student_name=s.full_name,
                    student_email=s.email,
                    total_assignments=len(statuses),
                    outstanding=sum(1 for st in statuses if st not in CLOSED),
                    submitted=statuses.count(AssignmentStatus.submitted),
                    graded=len(graded),
                    average_grade=_average(graded),
                )
            )

        return rows

    def assignment_stats(self) -> list[AssignmentStatsRow]:
        # assignment names in the order they were first released to anyone
        names: dict[str, None] = {}
        for s in self.students:
            for a in s.assignments:
                names.setdefault(a.name)

        rows: list[AssignmentStatsRow] = []

        for name in names:
            held = [a for s in self.students if (a := s.find_assignment(name)) is not None]
            statuses = [a.status for a in held]
            grades = [a.grade for a in held if a.status in GRADED]
            rows.append(
                AssignmentStatsRow(
                    assignment_name=name,
                    total_students=len(held),
                    outstanding=sum(1 for st in statuses if st not in CLOSED),
                    submitted=statuses.count(AssignmentStatus.submitted),
                    graded=len(grades),
                    passed=statuses.count(AssignmentStatus.passed),
                    failed=statuses.count(AssignmentStatus.failed),
                    average_grade=_average(grades),
                )
            )

        return rows
