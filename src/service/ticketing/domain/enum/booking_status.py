from enum import StrEnum


class BookingStatus(StrEnum):
    """A booking starts pending (or paid on the test path) and only ever moves to paid"""

    PENDING = 'pending'
    PAID = 'paid'
