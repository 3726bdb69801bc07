from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.orm import Session

from eduassess.api.deps import get_identity
from eduassess.core.db import get_db
from eduassess.core.security import Identity
from eduassess.models import Assessment
from eduassess.schemas.assessment import (
    AssessmentDetailOut,
    AssessmentOut,
    QuestionOut,
    ResultSummaryOut,
    SubmitIn,
    SubmitOut,
)
from eduassess.services import scoring
from eduassess.services.store import fetch_questions

router = APIRouter(prefix="/api/assessments", tags=["assessments"])

@router.get("", response_model=list[AssessmentOut])
def list_assessments(identity: Identity = Depends(get_identity), db: Session = Depends(get_db)):
    stmt = (
        select(Assessment)
        .where(Assessment.is_active.is_(True))
        .order_by(Assessment.created_at.desc(), Assessment.id.desc())
    )
    return list(db.scalars(stmt))

@router.get("/{assessment_id}", response_model=AssessmentDetailOut)
def get_assessment(assessment_id: int, identity: Identity = Depends(get_identity), db: Session = Depends(get_db)):
    a = db.get(Assessment, assessment_id)
    if not a or not a.is_active:
        raise HTTPException(404, "Assessment not found")
    return AssessmentDetailOut(
        assessment=AssessmentOut.model_validate(a),
        questions=[QuestionOut.model_validate(q) for q in fetch_questions(db, assessment_id)],
    )

@router.post("/{assessment_id}/submit", response_model=SubmitOut)
def submit_assessment(
    assessment_id: int,
    payload: SubmitIn,
    identity: Identity = Depends(get_identity),
    db: Session = Depends(get_db),
):
    if not db.get(Assessment, assessment_id):
        raise HTTPException(404, "Assessment not found")

    answers = [scoring.SubmittedAnswer(question_id=a.question_id, answer=a.answer) for a in payload.answers]
    result = scoring.score(db, identity, assessment_id, answers)
    return SubmitOut(message="Assessment submitted successfully", result=ResultSummaryOut.model_validate(result))
