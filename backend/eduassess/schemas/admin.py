from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints
from pydantic.alias_generators import to_camel

from eduassess.schemas.assessment import OptionLabel

NonEmpty = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

class QuestionCreate(BaseModel):
    question_text: NonEmpty
    option_a: NonEmpty
    option_b: NonEmpty
    option_c: NonEmpty
    option_d: NonEmpty
    correct_answer: OptionLabel
    points: int = Field(default=1, ge=0)

class AssessmentCreate(BaseModel):
    title: NonEmpty
    description: NonEmpty
    skill_category: NonEmpty
    questions: list[QuestionCreate] = Field(min_length=1)

class AssessmentCreatedOut(BaseModel):
    message: str
    assessmentId: int

class AdminAssessmentOut(BaseModel):
    id: int
    title: str
    description: str | None
    skill_category: str | None
    is_active: bool
    created_at: datetime | None
    question_count: int

class AdminUserOut(BaseModel):
    id: int
    email: str
    name: str
    role: str
    created_at: datetime | None

    class Config:
        from_attributes = True

class SkillStatOut(BaseModel):
    skill_category: str | None
    average_score: float | None
    total_attempts: int

class AnalyticsOut(BaseModel):
    total_users: int
    total_assessments: int
    total_results: int
    skill_stats: list[SkillStatOut]

    class Config:
        alias_generator = to_camel
        populate_by_name = True
