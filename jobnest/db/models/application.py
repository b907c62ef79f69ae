"""
Applications and the two question/answer threads attached to them:
screening answers given at apply time, and follow-up questions an employer
asks afterwards.
"""
from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, UniqueConstraint, Index
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship, backref
from jobnest.db.base import Base

STATUS_APPLIED = "applied"
STATUS_ACCEPTED = "accepted"
STATUS_REJECTED = "rejected"
STATUS_WAITLISTED = "waitlisted"

APPLICATION_STATUSES = (STATUS_APPLIED, STATUS_ACCEPTED, STATUS_REJECTED, STATUS_WAITLISTED)


class Application(Base):
    __tablename__ = "applications"

    id = Column(Integer, primary_key=True, index=True)
    job_id = Column(Integer, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    seeker_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    resume_id = Column(Integer, ForeignKey("resumes.id", ondelete="SET NULL"), nullable=True)

    status = Column(String(20), default=STATUS_APPLIED, nullable=False, index=True)
    employer_notes = Column(Text, nullable=True)

    application_date = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
    status_updated_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    job = relationship("Job", backref=backref("applications", passive_deletes=True))
    seeker = relationship("User", backref=backref("applications", passive_deletes=True))
    resume = relationship("Resume")
    answers = relationship("ApplicationAnswer", back_populates="application", passive_deletes=True)
    employer_questions = relationship(
        "EmployerQuestion",
        back_populates="application",
        order_by="EmployerQuestion.asked_at",
        passive_deletes=True,
    )

    __table_args__ = (
        UniqueConstraint("job_id", "seeker_id", name="uq_applications_job_seeker"),
    )

    def __repr__(self):
        return f"<Application(id={self.id}, job_id={self.job_id}, seeker_id={self.seeker_id}, status='{self.status}')>"


class ApplicationAnswer(Base):
    __tablename__ = "application_answers"

    id = Column(Integer, primary_key=True, index=True)
    application_id = Column(Integer, ForeignKey("applications.id", ondelete="CASCADE"), nullable=False, index=True)
    question_id = Column(Integer, ForeignKey("job_questions.id", ondelete="CASCADE"), nullable=False)
    answer_text = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    application = relationship("Application", back_populates="answers")
    question = relationship("JobQuestion")


class EmployerQuestion(Base):
    __tablename__ = "employer_questions"

    id = Column(Integer, primary_key=True, index=True)
    application_id = Column(Integer, ForeignKey("applications.id", ondelete="CASCADE"), nullable=False, index=True)
    employer_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    question_text = Column(Text, nullable=False)
    asked_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    application = relationship("Application", back_populates="employer_questions")
    answers = relationship("SeekerAnswer", back_populates="question", passive_deletes=True)


class SeekerAnswer(Base):
    __tablename__ = "seeker_answers"

    id = Column(Integer, primary_key=True, index=True)
    question_id = Column(Integer, ForeignKey("employer_questions.id", ondelete="CASCADE"), nullable=False, index=True)
    seeker_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    answer_text = Column(Text, nullable=False)
    answered_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    question = relationship("EmployerQuestion", back_populates="answers")

    __table_args__ = (
        UniqueConstraint("question_id", "seeker_id", name="uq_seeker_answers_question_seeker"),
        Index("idx_seeker_answers_seeker", "seeker_id"),
    )
