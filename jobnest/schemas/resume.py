from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel


class ResumeResponse(BaseModel):
    id: int
    title: str
    file_url: str
    file_name: str
    file_size: Optional[int]
    is_default: bool
    created_at: datetime

    class Config:
        from_attributes = True


class ResumeListResponse(BaseModel):
    resumes: List[ResumeResponse]


class ResumeUploadResponse(BaseModel):
    message: str
    url: str
    resume: ResumeResponse
