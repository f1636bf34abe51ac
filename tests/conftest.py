import pytest

from classlist.core.grading import fixed_grades
from classlist.core.notifier import Notifier
from classlist.core.scheduler import ManualScheduler
from classlist.models.roster import Roster
from classlist.models.student import Student


class RecordingNotifier(Notifier):
    """Keeps every reported event instead of logging it."""

    def __init__(self):
        self.events = []

    def report(self, event):
        self.events.append(event)

    @property
    def messages(self) -> list[str]:
        return [e.message for e in self.events]

    def messages_for(self, student_name: str) -> list[str]:
        return [e.message for e in self.events if e.student_name == student_name]


@pytest.fixture()
def notifier():
    return RecordingNotifier()


@pytest.fixture()
def scheduler():
    """Virtual clock; tests move time with scheduler.advance(ms)."""
    return ManualScheduler()


@pytest.fixture()
def make_student(notifier, scheduler):
    def _make(full_name: str = "Alice Smith", email: str | None = None, grades=(75,)) -> Student:
        if email is None:
            email = f"{full_name.split()[0].lower()}@example.com"
        return Student(
            full_name,
            email,
            notifier,
            scheduler=scheduler,
            grader=fixed_grades(*grades),
        )

    return _make


@pytest.fixture()
def alice(make_student):
    return make_student("Alice Smith")


@pytest.fixture()
def bob(make_student):
    return make_student("Bob Jones", grades=(40,))


@pytest.fixture()
def roster(notifier):
    return Roster(notifier)
