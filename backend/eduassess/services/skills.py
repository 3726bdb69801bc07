from dataclasses import dataclass
from datetime import datetime

from sqlalchemy.orm import Session

from eduassess.core.security import Identity
from eduassess.services.scoring import round_half_up
from eduassess.services.store import fetch_results_for_user

DEFAULT_CATEGORY = "General"

@dataclass
class SkillBucket:
    category: str
    total_assessments: int = 0
    total_score: int = 0
    average_score: int = 0
    last_attempt: datetime | None = None

    def add(self, percentage: int, submitted_at: datetime | None) -> None:
        self.total_assessments += 1
        self.total_score += percentage
        self.average_score = round_half_up(self.total_score, self.total_assessments)
        if submitted_at is not None and (self.last_attempt is None or submitted_at > self.last_attempt):
            self.last_attempt = submitted_at

def analyze(db: Session, identity: Identity) -> list[SkillBucket]:
    """Per-category attempt count, average percentage and latest attempt for the caller.

    Buckets come back in the order their category is first seen in the
    newest-first result list.
    """
    order: list[str] = []
    buckets: dict[str, SkillBucket] = {}

    for result, category in fetch_results_for_user(db, identity.user_id):
        category = category or DEFAULT_CATEGORY
        bucket = buckets.get(category)
        if bucket is None:
            bucket = SkillBucket(category=category)
            buckets[category] = bucket
            order.append(category)
        bucket.add(result.percentage, result.submitted_at)

    return [buckets[c] for c in order]
