"""
Pydantic schemas for authentication endpoints.
"""
from typing import Optional, List
from pydantic import BaseModel, EmailStr, Field


class RegisterRequest(BaseModel):
    """Request schema for account registration."""
    email: Optional[EmailStr] = Field(None, description="User's email address")
    password: Optional[str] = Field(None, description="User's password")
    role: Optional[str] = Field(None, description="job_seeker or employer")

    class Config:
        json_schema_extra = {
            "example": {
                "email": "a@x.com",
                "password": "pw123456",
                "role": "job_seeker"
            }
        }


class LoginRequest(BaseModel):
    """Request schema for user login."""
    email: Optional[str] = Field(None, description="User's email address")
    password: Optional[str] = Field(None, description="User's password")

    class Config:
        json_schema_extra = {
            "example": {
                "email": "a@x.com",
                "password": "pw123456"
            }
        }


class UserResponse(BaseModel):
    id: int
    email: str
    role: str
    is_paid: bool
    email_verified: bool

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    message: str
    user: UserResponse


class CleanupStepResponse(BaseModel):
    """Outcome of one best-effort delete during account removal."""
    table: str
    ok: bool
    deleted: int = 0
    error: Optional[str] = None


class DeleteAccountResponse(BaseModel):
    message: str
    cleanup: List[CleanupStepResponse]
