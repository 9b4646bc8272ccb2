from datetime import datetime, timedelta
from typing import List, Optional

import attrs
from uuid_utils import UUID

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.domain.enum.booking_status import BookingStatus
from src.service.ticketing.domain.seat_hold_domain import is_hold_live
from src.service.ticketing.domain.value_object.purchaser_info import PurchaserInfo


# Payment reference of bookings created without the gateway
TEST_MODE_PAYMENT_ID = 'TEST_MODE_SKIP'


@attrs.define
class Booking:
    id: UUID
    show_id: UUID
    seats: List[str]
    name: str
    email: str
    phone: str
    amount: int
    status: BookingStatus = BookingStatus.PENDING
    created_at: Optional[datetime] = None  # Assigned by storage on insert
    payment_order_id: Optional[str] = None
    payment_id: Optional[str] = None
    checked_in: bool = False
    checked_in_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create_pending(
        cls,
        *,
        id: UUID,
        show_id: UUID,
        seats: List[str],
        purchaser: PurchaserInfo,
        amount: int,
        payment_order_id: str,
    ) -> 'Booking':
        return cls(
            id=id,
            show_id=show_id,
            seats=list(seats),
            name=purchaser.name,
            email=purchaser.email,
            phone=purchaser.phone,
            amount=amount,
            status=BookingStatus.PENDING,
            payment_order_id=payment_order_id,
        )

    @classmethod
    @Logger.io
    def create_paid_without_gateway(
        cls,
        *,
        id: UUID,
        show_id: UUID,
        seats: List[str],
        purchaser: PurchaserInfo,
        amount: int,
    ) -> 'Booking':
        """Skip the pending phase entirely (test path)"""
        return cls(
            id=id,
            show_id=show_id,
            seats=list(seats),
            name=purchaser.name,
            email=purchaser.email,
            phone=purchaser.phone,
            amount=amount,
            status=BookingStatus.PAID,
            payment_id=TEST_MODE_PAYMENT_ID,
        )

    @property
    def is_paid(self) -> bool:
        return self.status == BookingStatus.PAID

    @property
    def is_test_booking(self) -> bool:
        return self.payment_id == TEST_MODE_PAYMENT_ID

    @property
    def purchaser(self) -> PurchaserInfo:
        return PurchaserInfo(name=self.name, email=self.email, phone=self.phone)

    def hold_expires_at(self, *, window: timedelta) -> Optional[datetime]:
        if self.is_paid or self.created_at is None:
            return None
        return self.created_at + window

    def holds_seats(self, *, now: datetime, window: timedelta) -> bool:
        return is_hold_live(
            status=self.status, created_at=self.created_at, now=now, window=window
        )

    @Logger.io
    def mark_as_paid(self, *, payment_id: str) -> 'Booking':
        """
        pending -> paid. Seats and amount are carried over untouched.

        Raises:
            DomainError: When the booking is already paid
        """
        if self.is_paid:
            raise DomainError('Booking already paid')
        return attrs.evolve(self, status=BookingStatus.PAID, payment_id=payment_id)
