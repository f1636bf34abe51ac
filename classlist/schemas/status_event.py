from pydantic import BaseModel


class StatusEvent(BaseModel):
    student_name: str
    assignment_name: str
    phrase: str  # e.g. "has been released", "is working on"

    @property
    def message(self) -> str:
        return f"{self.student_name}, {self.assignment_name} {self.phrase}"
