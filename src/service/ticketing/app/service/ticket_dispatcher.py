from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import metrics
from src.service.ticketing.app.interface.i_show_query_repo import IShowQueryRepo
from src.service.ticketing.app.interface.i_ticket_delivery import ITicketDelivery
from src.service.ticketing.domain.entity.booking_entity import Booking


class TicketDispatcher:
    """
    Hands a freshly paid booking to ticket delivery.

    Payment is authoritative: a delivery failure is logged and reported,
    never raised, and never touches the booking.
    """

    def __init__(self, *, ticket_delivery: ITicketDelivery, show_query_repo: IShowQueryRepo):
        self.ticket_delivery = ticket_delivery
        self.show_query_repo = show_query_repo
        self.tracer = trace.get_tracer(__name__)

    @Logger.io
    async def dispatch(self, *, booking: Booking) -> bool:
        with self.tracer.start_as_current_span(
            'ticket_dispatcher.dispatch', attributes={'booking.id': str(booking.id)}
        ) as span:
            try:
                show = await self.show_query_repo.get_by_id(show_id=booking.show_id)
                if show is None:
                    raise LookupError(f'Show {booking.show_id} vanished before delivery')
                await self.ticket_delivery.deliver(booking=booking, show=show)
            except Exception as e:
                Logger.base.opt(exception=e).error(
                    f'📧 [TICKET] Delivery failed for booking {booking.id}: {e}'
                )
                span.record_exception(e)
                metrics.record_delivery(result='failed')
                return False

            Logger.base.info(
                f'📧 [TICKET] Sent ticket for booking {booking.id} to {booking.email}'
            )
            metrics.record_delivery(result='sent')
            return True
