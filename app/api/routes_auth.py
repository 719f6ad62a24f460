"""
Authentication API routes: invite codes, admin login, session lifecycle
"""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.db import get_db
from app.models import AuthSession
from app.schemas.auth import (
    AdminLoginRequest,
    AdminLoginResponse,
    ValidateCodeRequest,
    ValidateCodeResponse,
)
from app.services.auth_service import AuthService
from app.utils.responses import success_response
from app.utils.security import (
    clear_session_cookie,
    enforce_rate_limit,
    get_current_session,
    get_session_token,
    set_session_cookie,
)

router = APIRouter()

@router.post("/code", dependencies=[Depends(enforce_rate_limit)])
def validate_code(
    code_in: ValidateCodeRequest,
    db: Session = Depends(get_db)
):
    """Redeem an invite code for a guest or admin-pending session"""
    session, guest_name = AuthService.redeem(db, code_in.code)

    response = success_response(
        message="Code accepted",
        data=ValidateCodeResponse(session_type=session.session_type, guest_name=guest_name)
    )
    set_session_cookie(response, session.token)
    return response

@router.post("/admin/login", dependencies=[Depends(enforce_rate_limit)])
def admin_login(
    credentials: AdminLoginRequest,
    current: Optional[AuthSession] = Depends(get_current_session),
    db: Session = Depends(get_db)
):
    """Upgrade an admin-pending session with username and password"""
    session, admin = AuthService.login(db, current, credentials.username, credentials.password)

    response = success_response(
        message="Logged in",
        data=AdminLoginResponse(username=admin.username)
    )
    set_session_cookie(response, session.token)
    return response

@router.post("/logout")
def logout(
    token: Optional[str] = Depends(get_session_token),
    db: Session = Depends(get_db)
):
    """Log out and clear the session cookie"""
    AuthService.logout(db, token)

    response = success_response(message="Logged out")
    clear_session_cookie(response)
    return response

@router.get("/session")
def get_session(
    session: Optional[AuthSession] = Depends(get_current_session),
    db: Session = Depends(get_db)
):
    """Current session type and bound identity"""
    return success_response(
        message="Session retrieved",
        data=AuthService.describe(db, session)
    )
