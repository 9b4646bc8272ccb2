from datetime import datetime
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field

from src.platform.types.uuid7_utils_types import UtilsUUID7


class BookingCreateRequest(BaseModel):
    show_id: UtilsUUID7
    seats: List[str]
    name: str
    email: str
    phone: str

    model_config = {
        'json_schema_extra': {
            'example': {
                'show_id': '01936d8f-5e73-7c4e-a9c5-123456789abc',
                'seats': ['A1', 'A2'],
                'name': 'Asha',
                'email': 'asha@example.com',
                'phone': '9876543210',
            }
        }
    }


class ReservationResponse(BaseModel):
    """Opens the gateway checkout; `amount_minor` is what the gateway charges"""

    booking_id: UtilsUUID7
    show_id: UtilsUUID7
    seats: List[str]
    amount: int
    currency: str
    order_id: str
    key_id: str
    amount_minor: int
    hold_expires_at: Optional[datetime] = None


class PaymentConfirmRequest(BaseModel):
    # The checkout callback posts razorpay_* names; plain names are accepted too
    order_id: str = Field(validation_alias=AliasChoices('order_id', 'razorpay_order_id'))
    payment_id: str = Field(validation_alias=AliasChoices('payment_id', 'razorpay_payment_id'))
    signature: str = Field(validation_alias=AliasChoices('signature', 'razorpay_signature'))

    model_config = {
        'json_schema_extra': {
            'example': {
                'razorpay_order_id': 'order_NXfmR3aX2iYh6c',
                'razorpay_payment_id': 'pay_NXfn0FqjJfNEVb',
                'razorpay_signature': '5f1c...e9',
            }
        }
    }


class ConfirmationResponse(BaseModel):
    message: str
    booking_id: UtilsUUID7
    status: str
    amount: int
    seats: List[str]
    already_confirmed: bool = False
    ticket_delivered: bool = False
