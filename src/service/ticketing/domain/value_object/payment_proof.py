import hashlib
import hmac

import attrs


@attrs.frozen
class PaymentProof:
    """What the gateway hands the buyer after a successful payment"""

    order_id: str
    payment_id: str
    signature: str = attrs.field(repr=False)

    @staticmethod
    def sign(*, order_id: str, payment_id: str, secret: str) -> str:
        """Hex HMAC-SHA256 of `order_id|payment_id`, as the gateway computes it"""
        message = f'{order_id}|{payment_id}'.encode()
        return hmac.new(secret.encode(), message, hashlib.sha256).hexdigest()

    def verify(self, *, secret: str) -> bool:
        expected = self.sign(order_id=self.order_id, payment_id=self.payment_id, secret=secret)
        return hmac.compare_digest(expected.encode(), self.signature.encode())
