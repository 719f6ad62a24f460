"""
Event schedule service
"""

from datetime import date, datetime, time
from typing import List

from sqlalchemy.orm import Session

from app.core.db import commit_or_rollback
from app.core.errors import BadRequestError, NotFoundError
from app.models import Event
from app.schemas.event import AdminEventResponse, EventCreate, EventResponse
from app.services.repositories import EventRepo

class EventService:
    """Service for event listing and administration"""

    @staticmethod
    def parse_date(value: str) -> date:
        try:
            return datetime.strptime(value, "%Y-%m-%d").date()
        except ValueError:
            raise BadRequestError("Invalid date format. Use YYYY-MM-DD")

    @staticmethod
    def parse_time(value: str) -> time:
        try:
            return datetime.strptime(value, "%H:%M").time()
        except ValueError:
            raise BadRequestError("Invalid time format. Use HH:MM")

    @staticmethod
    def to_response(event: Event) -> EventResponse:
        return EventResponse(
            id=event.id,
            name=event.name,
            event_type=event.event_type,
            event_date=event.event_date.isoformat(),
            event_time=event.event_time.strftime("%H:%M"),
            location_name=event.location_name,
            location_address=event.location_address,
            description=event.description,
        )

    @staticmethod
    def to_admin_response(event: Event) -> AdminEventResponse:
        return AdminEventResponse(
            **EventService.to_response(event).model_dump(),
            display_order=event.display_order,
        )

    @staticmethod
    def list_events(db: Session) -> List[EventResponse]:
        return [EventService.to_response(event) for event in EventRepo.list_ordered(db)]

    @staticmethod
    def list_admin_events(db: Session) -> List[AdminEventResponse]:
        return [EventService.to_admin_response(event) for event in EventRepo.list_ordered(db)]

    @staticmethod
    def _apply(event: Event, event_in: EventCreate) -> None:
        event_date = EventService.parse_date(event_in.event_date)
        event_time = EventService.parse_time(event_in.event_time)

        event.name = event_in.name
        event.event_type = event_in.event_type
        event.event_date = event_date
        event.event_time = event_time
        event.location_name = event_in.location_name
        event.location_address = event_in.location_address
        event.description = event_in.description
        event.display_order = event_in.display_order

    @staticmethod
    def create_event(db: Session, event_in: EventCreate) -> AdminEventResponse:
        event = Event()
        EventService._apply(event, event_in)
        db.add(event)
        commit_or_rollback(db, "create event")
        db.refresh(event)
        return EventService.to_admin_response(event)

    @staticmethod
    def update_event(db: Session, event_id: int, event_in: EventCreate) -> AdminEventResponse:
        event = EventRepo.get_by_id(db, event_id)
        if not event:
            raise NotFoundError("Event not found")

        EventService._apply(event, event_in)
        commit_or_rollback(db, "update event")
        db.refresh(event)
        return EventService.to_admin_response(event)

    @staticmethod
    def delete_event(db: Session, event_id: int) -> None:
        event = EventRepo.get_by_id(db, event_id)
        if not event:
            raise NotFoundError("Event not found")

        db.delete(event)
        commit_or_rollback(db, "delete event")
