from enum import Enum


class ReviewStatus(str, Enum):
    PENDING = "pending"
    DRAFT = "draft"
    SENT = "sent"


class Placeholder(str, Enum):
    STUDENT_NAME = "{{student_name}}"
    MONTH = "{{month}}"
    INSTRUCTOR_NAME = "{{instructor_name}}"
    PROGRESS_SUMMARY = "{{progress_summary}}"
    NEXT_STEPS = "{{next_steps}}"
    FEEDBACK_LINK = "{{feedback_link}}"
