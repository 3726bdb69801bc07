from eduassess.models.user import User
from eduassess.models.assessment import Assessment, Question
from eduassess.models.result import AssessmentResult

__all__ = ["User", "Assessment", "Question", "AssessmentResult"]
