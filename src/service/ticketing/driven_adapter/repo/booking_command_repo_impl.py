"""
Booking Command Repository Implementation

State changes are single conditional UPDATE ... RETURNING statements, so two
concurrent confirmations or scans cannot both win.
"""

from typing import AsyncContextManager, Callable, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import func
from uuid_utils import UUID

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.ticketing.domain.entity.booking_entity import Booking
from src.service.ticketing.domain.enum.booking_status import BookingStatus
from src.service.ticketing.driven_adapter.model.booking_model import BookingModel
from src.service.ticketing.driven_adapter.repo.booking_mapper import (
    to_entity,
    to_model,
    to_pg_uuid,
)


class BookingCommandRepoImpl(IBookingCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory

    @Logger.io
    async def create(self, *, booking: Booking) -> Booking:
        async with self.session_factory() as session:
            db_booking = to_model(booking)
            session.add(db_booking)
            await session.commit()
            # Load server defaults (created_at, checked_in)
            await session.refresh(db_booking)
            return to_entity(db_booking)

    @Logger.io
    async def get_by_id(self, *, show_id: UUID, booking_id: UUID) -> Optional[Booking]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(BookingModel).where(
                    BookingModel.id == to_pg_uuid(booking_id),
                    BookingModel.show_id == to_pg_uuid(show_id),
                )
            )
            db_booking = result.scalar_one_or_none()
            return to_entity(db_booking) if db_booking else None

    @Logger.io
    async def mark_as_paid(self, *, booking: Booking) -> Optional[Booking]:
        stmt = (
            update(BookingModel)
            .where(
                BookingModel.id == to_pg_uuid(booking.id),
                BookingModel.show_id == to_pg_uuid(booking.show_id),
                BookingModel.status == BookingStatus.PENDING.value,
            )
            .values(status=BookingStatus.PAID.value, payment_id=booking.payment_id)
            .returning(BookingModel)
            .execution_options(synchronize_session=False)
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            db_booking = result.scalar_one_or_none()
            await session.commit()
            return to_entity(db_booking) if db_booking else None

    @Logger.io
    async def mark_checked_in(self, *, show_id: UUID, booking_id: UUID) -> Optional[Booking]:
        stmt = (
            update(BookingModel)
            .where(
                BookingModel.id == to_pg_uuid(booking_id),
                BookingModel.show_id == to_pg_uuid(show_id),
                BookingModel.status == BookingStatus.PAID.value,
                BookingModel.checked_in.is_(False),
            )
            .values(checked_in=True, checked_in_at=func.now())
            .returning(BookingModel)
            .execution_options(synchronize_session=False)
        )
        async with self.session_factory() as session:
            result = await session.execute(stmt)
            db_booking = result.scalar_one_or_none()
            await session.commit()
            return to_entity(db_booking) if db_booking else None
