from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel

OptionLabel = Literal["A", "B", "C", "D"]

class AssessmentOut(BaseModel):
    id: int
    title: str
    description: str | None
    skill_category: str | None
    is_active: bool
    created_at: datetime | None

    class Config:
        from_attributes = True

class QuestionOut(BaseModel):
    # correct_answer stays server side
    id: int
    assessment_id: int
    question_text: str
    option_a: str
    option_b: str
    option_c: str
    option_d: str
    points: int
    question_order: int

    class Config:
        from_attributes = True

class AssessmentDetailOut(BaseModel):
    assessment: AssessmentOut
    questions: list[QuestionOut]

class AnswerIn(BaseModel):
    question_id: int
    answer: OptionLabel

    class Config:
        alias_generator = to_camel
        populate_by_name = True

class SubmitIn(BaseModel):
    answers: list[AnswerIn] = Field(min_length=1)

    @model_validator(mode="after")
    def one_answer_per_question(self):
        seen = set()
        for a in self.answers:
            if a.question_id in seen:
                raise ValueError(f"Question {a.question_id} answered more than once")
            seen.add(a.question_id)
        return self

class ResultSummaryOut(BaseModel):
    id: int
    score: int
    total_score: int
    percentage: int
    correct_answers: int
    total_questions: int

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True

class SubmitOut(BaseModel):
    message: str
    result: ResultSummaryOut
