"""Conversions between BookingModel rows and Booking entities"""

import uuid

from uuid_utils import UUID

from src.service.ticketing.domain.entity.booking_entity import Booking
from src.service.ticketing.domain.enum.booking_status import BookingStatus
from src.service.ticketing.driven_adapter.model.booking_model import BookingModel


def to_pg_uuid(value: UUID | uuid.UUID | str) -> uuid.UUID:
    """asyncpg binds stdlib uuid.UUID, not uuid_utils.UUID"""
    return value if isinstance(value, uuid.UUID) else uuid.UUID(str(value))


def to_entity(db_booking: BookingModel) -> Booking:
    # as_uuid=True yields stdlib uuid.UUID; the domain uses uuid_utils.UUID
    return Booking(
        id=UUID(str(db_booking.id)),
        show_id=UUID(str(db_booking.show_id)),
        seats=list(db_booking.seats or []),
        name=db_booking.name,
        email=db_booking.email,
        phone=db_booking.phone,
        amount=db_booking.amount,
        status=BookingStatus(db_booking.status),
        created_at=db_booking.created_at,
        payment_order_id=db_booking.payment_order_id,
        payment_id=db_booking.payment_id,
        checked_in=db_booking.checked_in,
        checked_in_at=db_booking.checked_in_at,
    )


def to_model(booking: Booking) -> BookingModel:
    return BookingModel(
        id=to_pg_uuid(booking.id),
        show_id=to_pg_uuid(booking.show_id),
        seats=list(booking.seats),
        name=booking.name,
        email=booking.email,
        phone=booking.phone,
        amount=booking.amount,
        status=booking.status.value,
        payment_order_id=booking.payment_order_id,
        payment_id=booking.payment_id,
    )
