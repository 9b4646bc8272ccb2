from email.message import EmailMessage
from email.utils import make_msgid
from html import escape

import aiosmtplib

from src.platform.config.core_setting import Settings
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_ticket_delivery import ITicketDelivery
from src.service.ticketing.domain.entity.booking_entity import Booking
from src.service.ticketing.domain.entity.show_entity import ShowEntity
from src.service.ticketing.domain.value_object.ticket_payload import TicketPayload
from src.service.ticketing.driven_adapter.delivery.qr_code_renderer import render_ticket_qr_png


class SmtpTicketDelivery(ITicketDelivery):
    """Emails the QR ticket as an inline image of an HTML message"""

    def __init__(self, *, settings: Settings) -> None:
        self.settings = settings

    def build_message(self, *, booking: Booking, show: ShowEntity) -> EmailMessage:
        test_mark = ' (TEST)' if booking.is_test_booking else ''
        seats = ', '.join(booking.seats)
        starts_at = show.starts_at.strftime('%d %b %Y, %H:%M')

        msg = EmailMessage()
        msg['From'] = self.settings.MAIL_FROM
        msg['To'] = booking.email
        msg['Subject'] = f'Your {self.settings.TICKET_BRAND_NAME} Ticket is Confirmed!{test_mark}'

        # Plain text fallback
        msg.set_content(
            f'Hi {booking.name},\n\n'
            f'Thank you for your booking for {show.name}.\n'
            f'Please show the attached QR code at the entrance.\n\n'
            f'Show: {show.name}\n'
            f'Screen: {show.screen}\n'
            f'Starts: {starts_at}\n'
            f'Seats: {seats}\n'
            f'Booking ID: {booking.id}\n'
        )

        qr_cid = make_msgid(domain='ticket.local')
        msg.add_alternative(
            f"""\
<html>
  <body>
    <h1>Booking Confirmed!{escape(test_mark)}</h1>
    <p>Hi {escape(booking.name)},</p>
    <p>Thank you for your booking for <b>{escape(show.name)}</b>.</p>
    <p>Please show this QR code at the event entrance.</p>
    <img src="cid:{qr_cid[1:-1]}" alt="Your QR Code Ticket">
    <hr>
    <h3>Booking Details:</h3>
    <p><b>Show:</b> {escape(show.name)}</p>
    <p><b>Screen:</b> {escape(show.screen)}</p>
    <p><b>Starts:</b> {escape(starts_at)}</p>
    <p><b>Seats:</b> {escape(seats)}</p>
    <p><b>Booking ID:</b> {booking.id}</p>
  </body>
</html>
""",
            subtype='html',
        )

        qr_png = render_ticket_qr_png(
            TicketPayload(booking_id=booking.id, show_id=booking.show_id)
        )
        html_part = msg.get_payload()[1]  # type: ignore[index]
        html_part.add_related(qr_png, maintype='image', subtype='png', cid=qr_cid)
        return msg

    @Logger.io
    async def deliver(self, *, booking: Booking, show: ShowEntity) -> None:
        msg = self.build_message(booking=booking, show=show)
        await aiosmtplib.send(
            msg,
            hostname=self.settings.SMTP_HOST,
            port=self.settings.SMTP_PORT,
            username=self.settings.SMTP_USERNAME or None,
            password=self.settings.SMTP_PASSWORD.get_secret_value() or None,
            start_tls=self.settings.SMTP_START_TLS,
        )
