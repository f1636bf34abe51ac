from pydantic import BaseModel


class AssignmentStatsRow(BaseModel):
    assignment_name: str
    total_students: int
    outstanding: int
    submitted: int
    graded: int
    passed: int
    failed: int
    average_grade: float | None
