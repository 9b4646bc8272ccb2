"""
Razorpay Orders API client

https://razorpay.com/docs/api/orders/create/
"""

from typing import Any, Optional

import httpx

from src.platform.config.core_setting import Settings
from src.platform.exception.exceptions import PaymentGatewayError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.dto.payment_order import PaymentOrder
from src.service.ticketing.app.interface.i_payment_gateway import IPaymentGateway


class RazorpayPaymentGateway(IPaymentGateway):
    def __init__(
        self,
        *,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._key_id = settings.PAYMENT_KEY_ID
        self._key_secret = settings.PAYMENT_KEY_SECRET
        self._base_url = settings.PAYMENT_API_BASE_URL
        self._timeout = settings.PAYMENT_TIMEOUT_SECONDS
        self._transport = transport

    @property
    def key_id(self) -> str:
        return self._key_id

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            auth=(self._key_id, self._key_secret.get_secret_value()),
            timeout=self._timeout,
            transport=self._transport,
        )

    @Logger.io
    async def create_order(
        self, *, amount_minor: int, currency: str, receipt: str
    ) -> PaymentOrder:
        payload = {'amount': amount_minor, 'currency': currency, 'receipt': receipt}
        try:
            async with self._client() as client:
                response = await client.post('/orders', json=payload)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            Logger.base.error(
                f'💳 [GATEWAY] Order rejected ({e.response.status_code}): {e.response.text}'
            )
            raise PaymentGatewayError('Payment gateway rejected the order') from e
        except httpx.HTTPError as e:
            Logger.base.error(f'💳 [GATEWAY] Order request failed: {e!r}')
            raise PaymentGatewayError() from e

        try:
            data: dict[str, Any] = response.json()
            return PaymentOrder(
                id=data['id'],
                amount=int(data.get('amount', amount_minor)),
                currency=data.get('currency', currency),
                receipt=data.get('receipt', receipt),
            )
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            Logger.base.error(f'💳 [GATEWAY] Unreadable order response: {response.text[:200]!r}')
            raise PaymentGatewayError('Payment gateway returned an unreadable order') from e
