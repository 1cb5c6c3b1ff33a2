from review_portal.core.models.instructor import Instructor
from review_portal.core.models.instructor_student import InstructorStudent
from review_portal.core.models.monthly_review import MonthlyReview, ServiceFeedback
from review_portal.core.models.review_template import ReviewTemplate
from review_portal.core.models.student import Student

__all__ = [
    "Instructor",
    "InstructorStudent",
    "MonthlyReview",
    "ReviewTemplate",
    "ServiceFeedback",
    "Student",
]
