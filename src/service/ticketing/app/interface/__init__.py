"""Application layer interfaces (Ports)"""

from src.service.ticketing.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.ticketing.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.ticketing.app.interface.i_payment_gateway import IPaymentGateway
from src.service.ticketing.app.interface.i_show_command_repo import IShowCommandRepo
from src.service.ticketing.app.interface.i_show_query_repo import IShowQueryRepo
from src.service.ticketing.app.interface.i_ticket_delivery import ITicketDelivery

__all__ = [
    'IBookingCommandRepo',
    'IBookingQueryRepo',
    'IPaymentGateway',
    'IShowCommandRepo',
    'IShowQueryRepo',
    'ITicketDelivery',
]
