"""
Pydantic schemas for the application workflow.
"""
from typing import Optional, Dict, List
from datetime import datetime
from pydantic import BaseModel, Field


class ApplyRequest(BaseModel):
    resume_id: Optional[int] = Field(None, alias="resumeId")
    # question id -> answer text
    question_answers: Optional[Dict[str, Optional[str]]] = Field(None, alias="questionAnswers")

    class Config:
        populate_by_name = True


class StatusUpdateRequest(BaseModel):
    status: Optional[str] = None
    notes: Optional[str] = None


class AskQuestionRequest(BaseModel):
    question_text: Optional[str] = Field(None, alias="questionText")

    class Config:
        populate_by_name = True


class AnswerQuestionRequest(BaseModel):
    answer_text: Optional[str] = Field(None, alias="answerText")

    class Config:
        populate_by_name = True


class ThreadQuestionResponse(BaseModel):
    """Employer follow-up question with the seeker's answer, if any."""
    id: int
    question_text: str
    asked_at: datetime
    answer_text: Optional[str] = None
    answered_at: Optional[datetime] = None


class ScreeningAnswerResponse(BaseModel):
    question_id: int
    question_text: str
    answer_text: str


class SeekerApplicationResponse(BaseModel):
    id: int
    job_id: int
    seeker_id: int
    resume_id: Optional[int]
    status: str
    application_date: datetime
    status_updated_at: Optional[datetime]
    employer_notes: Optional[str]
    job_title: str
    company_name: Optional[str] = None
    questions: List[ThreadQuestionResponse] = Field(default_factory=list)


class EmployerApplicationResponse(BaseModel):
    id: int
    job_id: int
    seeker_id: int
    status: str
    application_date: datetime
    status_updated_at: Optional[datetime]
    employer_notes: Optional[str]
    applicant_email: str
    applicant_name: Optional[str] = None
    applicant_location: Optional[str] = None
    applicant_phone: Optional[str] = None
    education: Optional[str] = None
    resume_id: Optional[int] = None
    resume_title: Optional[str] = None
    resume_url: Optional[str] = None
    answers: List[ScreeningAnswerResponse] = Field(default_factory=list)
    questions: List[ThreadQuestionResponse] = Field(default_factory=list)


class StatusUpdateResponse(BaseModel):
    message: str
    applicant_email: str
    applicant_phone: Optional[str] = None
