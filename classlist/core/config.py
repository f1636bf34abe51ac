# Assignment lifecycle timing (milliseconds on the asyncio scheduler)
WORKING_DELAY_MS = 500  # working -> auto-submit
GRADING_DELAY_MS = 500  # submitted -> auto-grade

# Grading policy
PASS_THRESHOLD = 50  # strictly greater than this passes
MIN_GRADE = 0
MAX_GRADE = 100

NOT_ASSIGNED = "Hasn't been assigned"
