from typing import Any

import attrs
import orjson
from uuid_utils import UUID

from src.platform.exception.exceptions import ValidationError


@attrs.frozen
class TicketPayload:
    """
    The JSON encoded in the ticket QR code: `{"bookingId": ..., "showId": ...}`.

    Check-in trusts nothing else the scanner sends.
    """

    booking_id: UUID
    show_id: UUID

    def to_json(self) -> str:
        return orjson.dumps(
            {'bookingId': str(self.booking_id), 'showId': str(self.show_id)}
        ).decode()

    @classmethod
    def from_json(cls, raw: str | bytes) -> 'TicketPayload':
        try:
            data: Any = orjson.loads(raw)
        except orjson.JSONDecodeError as e:
            raise ValidationError('Ticket payload is not valid JSON', field='payload') from e

        if not isinstance(data, dict):
            raise ValidationError('Ticket payload must be a JSON object', field='payload')

        booking_id, show_id = data.get('bookingId'), data.get('showId')
        if not booking_id or not show_id:
            raise ValidationError('Ticket payload needs bookingId and showId', field='payload')

        try:
            return cls(booking_id=UUID(str(booking_id)), show_id=UUID(str(show_id)))
        except (TypeError, ValueError) as e:
            raise ValidationError('Ticket payload carries a malformed id', field='payload') from e
