import logging

from classlist.schemas.status_event import StatusEvent

logger = logging.getLogger(__name__)

RELEASED = "has been released"
WORKING = "is working on"
SUBMITTED = "has submitted"
FINAL_REMINDER = "has received a final reminder for"


def graded_phrase(status: str) -> str:
    # "pass" -> "has passed", "fail" -> "has failed"
    return f"has {status}ed"


class Notifier:
    """Sink for status-change reports shared by every student built with it.

    Subclasses override `report`; `notify` never lets a failing report
    reach the caller.
    """

    def notify(self, student_name: str, assignment_name: str, phrase: str) -> None:
        try:
            event = StatusEvent(
                student_name=student_name,
                assignment_name=assignment_name,
                phrase=phrase,
            )
            self.report(event)
        except Exception:
            logger.exception(
                "failed to report status change: %s, %s %s", student_name, assignment_name, phrase
            )

    def report(self, event: StatusEvent) -> None:
        logger.info("%s", event.message)
