import asyncio
import logging

from classlist.core.notifier import Notifier
from classlist.models.roster import Roster
from classlist.models.student import Student

logging.basicConfig(level=logging.INFO)

logger = logging.getLogger(__name__)


async def run_demo() -> Roster:
    notifier = Notifier()
    roster = Roster(notifier)

    alice = Student("Alice Smith", "alice@example.com", notifier)
    bob = Student("Bob Jones", "bob@example.com", notifier)

    roster.add_student(alice)
    roster.add_student(bob)

    await roster.release_assignments_parallel(["A1", "A2"])
    await alice.start_working("A1")
    await bob.start_working("A2")

    # Alice is still working on A1 when the reminder goes out
    await asyncio.sleep(0.2)
    roster.send_reminder("A1")

    await asyncio.sleep(1.8)
    logger.info("--- Final Results ---")
    logger.info("Alice's overall grade: %s", alice.get_grade())
    logger.info("Bob's overall grade: %s", bob.get_grade())
    logger.info("Alice's A1 status: %s", alice.get_assignment_status("A1"))
    logger.info("Bob's A2 status: %s", bob.get_assignment_status("A2"))
    return roster


def main() -> None:
    asyncio.run(run_demo())


if __name__ == "__main__":
    main()
