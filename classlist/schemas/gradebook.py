from typing import Optional

from pydantic import BaseModel


class GradebookRow(BaseModel):
    student_name: str
    student_email: str

    assignment_name: str
    status: str  # "released" | "working" | "finalReminder" | "submitted" | "pass" | "fail"
    grade: Optional[float] = None
