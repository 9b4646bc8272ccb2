"""Application layer DTOs"""

from src.service.ticketing.app.dto.check_in_result import CheckInResult
from src.service.ticketing.app.dto.confirmation_result import ConfirmationResult
from src.service.ticketing.app.dto.payment_order import PaymentOrder
from src.service.ticketing.app.dto.reservation_result import ReservationResult

__all__ = [
    'CheckInResult',
    'ConfirmationResult',
    'PaymentOrder',
    'ReservationResult',
]
