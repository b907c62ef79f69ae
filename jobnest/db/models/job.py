"""
Employer job postings and their screening questions.
"""
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey, Index
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship, backref
from jobnest.db.base import Base


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    employer_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)

    title = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=False)
    contact_email = Column(String(255), nullable=False)

    experience_required = Column(String(100), nullable=True)
    salary = Column(String(100), nullable=True)  # free text, e.g. "₹12,00,000 - ₹15,00,000"
    location = Column(String(255), nullable=True)
    country = Column(String(100), nullable=True)
    is_remote = Column(Boolean, default=False, nullable=False)
    job_type = Column(String(50), nullable=True)
    domain = Column(String(100), nullable=True)

    is_open = Column(Boolean, default=True, nullable=False, index=True)

    posted_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    employer = relationship("User", backref=backref("jobs", passive_deletes=True))
    questions = relationship(
        "JobQuestion",
        back_populates="job",
        order_by="JobQuestion.question_order",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        Index("idx_jobs_employer_posted", "employer_id", "posted_at"),
    )

    def __repr__(self):
        return f"<Job(id={self.id}, title='{self.title}', is_open={self.is_open})>"


class JobQuestion(Base):
    __tablename__ = "job_questions"

    id = Column(Integer, primary_key=True, index=True)
    job_id = Column(Integer, ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    question_text = Column(Text, nullable=False)
    is_required = Column(Boolean, default=False, nullable=False)
    question_order = Column(Integer, default=1, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    job = relationship("Job", back_populates="questions")

    def __repr__(self):
        return f"<JobQuestion(id={self.id}, job_id={self.job_id}, order={self.question_order})>"
