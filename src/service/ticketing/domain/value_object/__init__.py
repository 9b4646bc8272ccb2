"""Ticketing Domain Value Objects"""

from src.service.ticketing.domain.value_object.payment_proof import PaymentProof
from src.service.ticketing.domain.value_object.purchaser_info import PurchaserInfo
from src.service.ticketing.domain.value_object.seat_grid import SeatGrid
from src.service.ticketing.domain.value_object.ticket_payload import TicketPayload

__all__ = ['PaymentProof', 'PurchaserInfo', 'SeatGrid', 'TicketPayload']
