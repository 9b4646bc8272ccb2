from datetime import datetime
from typing import Optional

import attrs
from uuid_utils import UUID


@attrs.define(frozen=True)
class ReservationResult:
    """
    Everything the buyer's browser needs to open the gateway checkout.

    `amount` is in major units, `amount_minor` is what the gateway charges.
    `hold_expires_at` drives the client countdown; it has no authority.
    """

    booking_id: UUID
    show_id: UUID
    seats: list[str]
    amount: int
    currency: str
    order_id: str
    key_id: str
    amount_minor: int
    hold_expires_at: Optional[datetime] = None
