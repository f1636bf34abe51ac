from pydantic import BaseModel

class GradebookStudentSummary(BaseModel):
    student_name: str
    student_email: str
    total_assignments: int
    outstanding: int
    submitted: int
    graded: int
    average_grade: float | None
