import io

import qrcode

from src.service.ticketing.domain.value_object.ticket_payload import TicketPayload


def render_ticket_qr_png(payload: TicketPayload) -> bytes:
    """PNG of the QR code the door scanner reads"""
    qr = qrcode.QRCode(box_size=6, border=2)
    qr.add_data(payload.to_json())
    qr.make(fit=True)
    img = qr.make_image(fill_color='black', back_color='white')
    bio = io.BytesIO()
    img.save(bio, format='PNG')
    return bio.getvalue()
