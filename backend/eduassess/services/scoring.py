import json
import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from eduassess.core.security import Identity
from eduassess.models import AssessmentResult
from eduassess.services.store import fetch_questions, insert_result

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class SubmittedAnswer:
    question_id: int
    answer: str

def round_half_up(numerator: int, denominator: int) -> int:
    """Nearest integer to numerator / denominator, halves rounded up. Both must be non-negative."""
    return (2 * numerator + denominator) // (2 * denominator)

def percentage(earned: int, total: int) -> int:
    if total <= 0:
        return 0
    return round_half_up(100 * earned, total)

def score(db: Session, identity: Identity, assessment_id: int, answers: list[SubmittedAnswer]) -> AssessmentResult:
    """
    Grades a submission against the assessment's question bank and stores the result.

    Answers whose question id is unknown or belongs to another assessment earn
    nothing but still count toward total_questions, as do repeat answers to a
    question that was already graded. The question bank is read
    once, so all lookups see the same snapshot, and the result is written with
    a single insert after grading.
    """
    questions = fetch_questions(db, assessment_id)
    bank = {q.id: q for q in questions}

    earned = 0
    correct = 0
    graded = set()
    for a in answers:
        q = bank.get(a.question_id)
        if q is None or q.id in graded:
            continue
        graded.add(q.id)
        if a.answer == q.correct_answer:
            earned += q.points
            correct += 1

    total_points = sum(q.points for q in questions)

    result = AssessmentResult(
        user_id=identity.user_id,
        assessment_id=assessment_id,
        score=earned,
        total_score=total_points,
        percentage=percentage(earned, total_points),
        correct_answers=correct,
        total_questions=len(answers),
        answers=json.dumps([{"questionId": a.question_id, "answer": a.answer} for a in answers]),
    )
    insert_result(db, result)
    logger.info(
        "Stored result %s: user=%s assessment=%s score=%s/%s (%s%%)",
        result.id, identity.user_id, assessment_id, earned, total_points, result.percentage,
    )
    return result
