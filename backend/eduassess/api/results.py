import json

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.orm import Session

from eduassess.api.deps import get_identity
from eduassess.core.db import get_db
from eduassess.core.security import Identity
from eduassess.models import Assessment, AssessmentResult
from eduassess.schemas.result import ResultOut, SkillOut
from eduassess.services import skills

router = APIRouter(tags=["results"])

@router.get("/api/results", response_model=list[ResultOut])
def list_results(identity: Identity = Depends(get_identity), db: Session = Depends(get_db)):
    stmt = (
        select(AssessmentResult, Assessment.title, Assessment.description)
        .join(Assessment, AssessmentResult.assessment_id == Assessment.id)
        .where(AssessmentResult.user_id == identity.user_id)
        .order_by(AssessmentResult.submitted_at.desc(), AssessmentResult.id.desc())
    )
    out = []
    for r, title, description in db.execute(stmt):
        out.append(ResultOut(
            id=r.id,
            user_id=r.user_id,
            assessment_id=r.assessment_id,
            score=r.score,
            total_score=r.total_score,
            percentage=r.percentage,
            correct_answers=r.correct_answers,
            total_questions=r.total_questions,
            answers=json.loads(r.answers),
            submitted_at=r.submitted_at,
            assessment_title=title,
            assessment_description=description,
        ))
    return out

@router.get("/api/skills/analysis", response_model=list[SkillOut])
def skill_analysis(identity: Identity = Depends(get_identity), db: Session = Depends(get_db)):
    return [SkillOut.model_validate(b) for b in skills.analyze(db, identity)]
