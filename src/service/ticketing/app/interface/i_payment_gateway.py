from abc import ABC, abstractmethod

from src.service.ticketing.app.dto.payment_order import PaymentOrder


class IPaymentGateway(ABC):
    """Hosted checkout provider. Signature checks happen locally, not here."""

    @property
    @abstractmethod
    def key_id(self) -> str:
        """Public key the browser checkout is opened with"""
        pass

    @abstractmethod
    async def create_order(
        self, *, amount_minor: int, currency: str, receipt: str
    ) -> PaymentOrder:
        """
        Raises:
            PaymentGatewayError: When the gateway rejects or cannot be reached
        """
        pass
