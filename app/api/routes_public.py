"""
Public API routes - no authentication required
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.db import get_db
from app.schemas.event import EventsListResponse
from app.services.event_service import EventService
from app.utils.responses import success_response

router = APIRouter()

@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok"}

@router.get("/events")
def list_events(db: Session = Depends(get_db)):
    """Event schedule in display order"""
    return success_response(
        message="Events retrieved successfully",
        data=EventsListResponse(events=EventService.list_events(db))
    )
