"""
Authentication-related Pydantic schemas
"""

from typing import Optional
from pydantic import BaseModel, Field, field_validator

class ValidateCodeRequest(BaseModel):
    """Invite code redemption request"""
    code: str = Field(..., min_length=1, max_length=50)

    @field_validator("code", mode="before")
    @classmethod
    def strip_code(cls, value):
        return value.strip() if isinstance(value, str) else value

class ValidateCodeResponse(BaseModel):
    """Result of redeeming an invite code"""
    session_type: str
    guest_name: Optional[str] = None

class AdminLoginRequest(BaseModel):
    """Admin username/password login"""
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)

class AdminLoginResponse(BaseModel):
    username: str

class SessionResponse(BaseModel):
    """Current session info"""
    session_type: str
    guest_id: Optional[int] = None
    guest_name: Optional[str] = None
    admin_id: Optional[int] = None
    admin_username: Optional[str] = None
