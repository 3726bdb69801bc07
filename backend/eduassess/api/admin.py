from fastapi import APIRouter, Depends
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from eduassess.api.deps import require_admin
from eduassess.core.db import get_db
from eduassess.core.security import Identity
from eduassess.models import Assessment, AssessmentResult, Question, User
from eduassess.schemas.admin import (
    AdminAssessmentOut,
    AdminUserOut,
    AnalyticsOut,
    AssessmentCreate,
    AssessmentCreatedOut,
    SkillStatOut,
)

router = APIRouter(prefix="/api/admin", tags=["admin"])

@router.get("/assessments", response_model=list[AdminAssessmentOut])
def list_all_assessments(identity: Identity = Depends(require_admin), db: Session = Depends(get_db)):
    stmt = (
        select(Assessment, func.count(Question.id))
        .outerjoin(Question, Question.assessment_id == Assessment.id)
        .group_by(Assessment.id)
        .order_by(Assessment.created_at.desc(), Assessment.id.desc())
    )
    return [
        AdminAssessmentOut(
            id=a.id,
            title=a.title,
            description=a.description,
            skill_category=a.skill_category,
            is_active=a.is_active,
            created_at=a.created_at,
            question_count=count,
        )
        for a, count in db.execute(stmt)
    ]

@router.post("/assessments", response_model=AssessmentCreatedOut, status_code=201)
def create_assessment(payload: AssessmentCreate, identity: Identity = Depends(require_admin), db: Session = Depends(get_db)):
    a = Assessment(
        title=payload.title,
        description=payload.description,
        skill_category=payload.skill_category,
        is_active=True,
    )
    for order, q in enumerate(payload.questions, start=1):
        a.questions.append(Question(
            question_text=q.question_text,
            option_a=q.option_a,
            option_b=q.option_b,
            option_c=q.option_c,
            option_d=q.option_d,
            correct_answer=q.correct_answer,
            points=q.points,
            question_order=order,
        ))
    db.add(a)
    db.commit()
    db.refresh(a)
    return AssessmentCreatedOut(message="Assessment created successfully", assessmentId=a.id)

@router.get("/users", response_model=list[AdminUserOut])
def list_users(identity: Identity = Depends(require_admin), db: Session = Depends(get_db)):
    return list(db.scalars(select(User).order_by(User.created_at.desc(), User.id.desc())))

@router.get("/analytics", response_model=AnalyticsOut)
def analytics(identity: Identity = Depends(require_admin), db: Session = Depends(get_db)):
    stats = db.execute(
        select(
            Assessment.skill_category,
            func.avg(AssessmentResult.percentage),
            func.count(AssessmentResult.id),
        )
        .join(Assessment, AssessmentResult.assessment_id == Assessment.id)
        .group_by(Assessment.skill_category)
    )
    return AnalyticsOut(
        total_users=db.scalar(select(func.count(User.id))),
        total_assessments=db.scalar(select(func.count(Assessment.id))),
        total_results=db.scalar(select(func.count(AssessmentResult.id))),
        skill_stats=[
            SkillStatOut(
                skill_category=category,
                average_score=float(avg) if avg is not None else None,
                total_attempts=count,
            )
            for category, avg, count in stats
        ],
    )
