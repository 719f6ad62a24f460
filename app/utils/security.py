"""
Security utilities: session cookie transport, session guards, rate limiting
"""

import time
from collections import defaultdict
from typing import Optional

from fastapi import Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.db import get_db
from app.models import AuthSession, SessionType
from app.services.auth_service import AuthService
from app.services.session_service import SessionService

# Simple in-memory rate limiter
rate_limiter = defaultdict(list)

def get_session_token(request: Request) -> Optional[str]:
    """Session token from the cookie; headers and query strings are ignored"""
    return request.cookies.get(settings.SESSION_COOKIE_NAME)

def get_current_session(
    token: Optional[str] = Depends(get_session_token),
    db: Session = Depends(get_db)
) -> Optional[AuthSession]:
    """Resolve the caller's live session, or None"""
    return SessionService.resolve(db, token)

def require_session(expected: SessionType):
    """Build a dependency that only admits sessions of the given type"""
    def dependency(session: Optional[AuthSession] = Depends(get_current_session)) -> AuthSession:
        return AuthService.require(session, expected)
    dependency.__name__ = f"require_{expected.value}_session"
    return dependency

require_guest_session = require_session(SessionType.GUEST)
require_admin_pending_session = require_session(SessionType.ADMIN_PENDING)
require_admin_session = require_session(SessionType.ADMIN)

def set_session_cookie(response: Response, token: str) -> None:
    """Attach the session token as an HTTP-only, SameSite=Lax cookie"""
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.SESSION_DURATION_DAYS * 24 * 60 * 60,
        path="/",
        httponly=True,
        samesite="lax",
        secure=not settings.is_development,
    )

def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        path="/",
        httponly=True,
        samesite="lax",
        secure=not settings.is_development,
    )

def rate_limit_check(client_ip: str, limit: int = None) -> bool:
    """Simple rate limiting by IP address"""
    if limit is None:
        limit = settings.RATE_LIMIT_PER_MINUTE

    current_time = time.time()
    minute_ago = current_time - 60

    # Clean old requests and forget callers that went quiet
    for ip in list(rate_limiter):
        recent = [req_time for req_time in rate_limiter[ip] if req_time > minute_ago]
        if recent:
            rate_limiter[ip] = recent
        else:
            del rate_limiter[ip]

    # Check limit
    if len(rate_limiter[client_ip]) >= limit:
        return False

    # Add current request
    rate_limiter[client_ip].append(current_time)
    return True

def get_client_ip(request) -> str:
    """Extract client IP from request"""
    if not settings.TRUST_PROXY_HEADERS:
        return request.client.host if request.client else "unknown"

    # Check for forwarded IP first (for reverse proxy setups)
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()

    # Check for real IP header
    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip

    # Fall back to direct client IP
    return request.client.host if request.client else "unknown"

def enforce_rate_limit(request: Request) -> None:
    """Dependency rejecting callers over the per-minute budget"""
    if not rate_limit_check(get_client_ip(request)):
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail="Rate limit exceeded. Please try again later."
        )
