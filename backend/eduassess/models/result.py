from sqlalchemy import DateTime, Integer, Text, func, ForeignKey
from sqlalchemy.orm import relationship, Mapped, mapped_column
from eduassess.core.db import Base

class AssessmentResult(Base):
    __tablename__ = "assessment_results"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    assessment_id: Mapped[int] = mapped_column(ForeignKey("assessments.id", ondelete="CASCADE"), nullable=False, index=True)

    score: Mapped[int] = mapped_column(Integer, nullable=False)  # earned points
    total_score: Mapped[int] = mapped_column(Integer, nullable=False)  # possible points
    percentage: Mapped[int] = mapped_column(Integer, nullable=False)  # 0–100
    correct_answers: Mapped[int] = mapped_column(Integer, nullable=False)
    total_questions: Mapped[int] = mapped_column(Integer, nullable=False)
    answers: Mapped[str] = mapped_column(Text, nullable=False)  # submitted answers as JSON
    submitted_at: Mapped["DateTime"] = mapped_column(DateTime(timezone=True), server_default=func.now(), index=True)

    user: Mapped["User"] = relationship("User", back_populates="results")
    assessment: Mapped["Assessment"] = relationship("Assessment")
