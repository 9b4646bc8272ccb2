import attrs


@attrs.define(frozen=True)
class PaymentOrder:
    """Order created at the payment gateway; `amount` is in minor units (paise)"""

    id: str
    amount: int
    currency: str
    receipt: str
