from datetime import datetime

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

class SubmittedAnswer(BaseModel):
    questionId: int
    answer: str

class ResultOut(BaseModel):
    id: int
    user_id: int
    assessment_id: int
    score: int
    total_score: int
    percentage: int
    correct_answers: int
    total_questions: int
    answers: list[SubmittedAnswer]
    submitted_at: datetime | None
    assessment_title: str
    assessment_description: str | None

class SkillOut(BaseModel):
    category: str
    total_assessments: int
    average_score: int
    last_attempt: datetime | None

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
