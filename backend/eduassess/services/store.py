"""Question bank and result store queries used by the scoring and skill services."""
from sqlalchemy import select
from sqlalchemy.orm import Session

from eduassess.models import Assessment, AssessmentResult, Question

def fetch_questions(db: Session, assessment_id: int) -> list[Question]:
    stmt = (
        select(Question)
        .where(Question.assessment_id == assessment_id)
        .order_by(Question.question_order)
    )
    return list(db.scalars(stmt))

def fetch_results_for_user(db: Session, user_id: int) -> list[tuple[AssessmentResult, str | None]]:
    """Results of one user, newest first, each paired with its assessment's skill category."""
    stmt = (
        select(AssessmentResult, Assessment.skill_category)
        .join(Assessment, AssessmentResult.assessment_id == Assessment.id)
        .where(AssessmentResult.user_id == user_id)
        .order_by(AssessmentResult.submitted_at.desc(), AssessmentResult.id.desc())
    )
    return [(r, category) for r, category in db.execute(stmt)]

def insert_result(db: Session, result: AssessmentResult) -> int:
    db.add(result)
    db.commit()
    db.refresh(result)
    return result.id
