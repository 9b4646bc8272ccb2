"""
HTTP flow of a booking: hold -> confirm -> door check-in
"""

import pytest
import uuid_utils

from src.service.ticketing.domain.value_object.payment_proof import PaymentProof
from src.service.ticketing.domain.value_object.ticket_payload import TicketPayload


SECRET = 'test_payment_secret'


def _booking_body(show_id, seats, **overrides) -> dict:
    return {
        'show_id': str(show_id),
        'seats': seats,
        'name': 'Asha',
        'email': 'asha@example.com',
        'phone': '9876543210',
    } | overrides


def _checkout_callback(order_id: str, payment_id: str = 'pay_1') -> dict:
    return {
        'razorpay_order_id': order_id,
        'razorpay_payment_id': payment_id,
        'razorpay_signature': PaymentProof.sign(
            order_id=order_id, payment_id=payment_id, secret=SECRET
        ),
    }


@pytest.mark.api
class TestBookingApi:
    def test_hold_returns_checkout_details(self, client, sample_show):
        response = client.post('/api/booking', json=_booking_body(sample_show.id, ['A1', 'A2']))

        assert response.status_code == 201
        data = response.json()
        assert data['seats'] == ['A1', 'A2']
        assert data['amount'] == 60
        assert data['amount_minor'] == 6000
        assert data['currency'] == 'INR'
        assert data['key_id'] == 'rzp_test_key'
        assert data['order_id'] == 'order_test_1'
        assert data['hold_expires_at'] is not None

    def test_overlapping_hold_conflicts(self, client, sample_show):
        client.post('/api/booking', json=_booking_body(sample_show.id, ['A1']))

        response = client.post('/api/booking', json=_booking_body(sample_show.id, ['A1', 'A2']))

        assert response.status_code == 409
        assert response.json() == {
            'detail': 'Sorry, seat A1 is currently being booked.',
            'seat': 'A1',
            'reason': 'hold in progress',
        }

    def test_invalid_seat_is_bad_request(self, client, sample_show):
        response = client.post('/api/booking', json=_booking_body(sample_show.id, ['Z1']))

        assert response.status_code == 400
        assert response.json()['field'] == 'seats'

    def test_missing_field_is_bad_request(self, client, sample_show):
        body = _booking_body(sample_show.id, ['A1'])
        del body['phone']

        response = client.post('/api/booking', json=body)

        assert response.status_code == 400

    def test_unknown_show_is_not_found(self, client):
        response = client.post('/api/booking', json=_booking_body(uuid_utils.uuid7(), ['A1']))

        assert response.status_code == 404
        assert response.json()['detail'] == 'Show not found'

    def test_full_flow_from_hold_to_check_in(self, client, sample_show, ticket_delivery):
        hold = client.post('/api/booking', json=_booking_body(sample_show.id, ['C1'])).json()
        confirm_url = f'/api/booking/{sample_show.id}/{hold["booking_id"]}/confirm'

        # Confirm
        confirmed = client.post(confirm_url, json=_checkout_callback(hold['order_id']))
        assert confirmed.status_code == 200
        assert confirmed.json()['message'] == (
            'Booking successful! Check your email for the QR code.'
        )
        assert confirmed.json()['status'] == 'paid'
        assert confirmed.json()['ticket_delivered'] is True
        assert len(ticket_delivery.delivered) == 1

        # Confirm again
        repeat = client.post(confirm_url, json=_checkout_callback(hold['order_id']))
        assert repeat.status_code == 200
        assert repeat.json()['message'] == 'This booking is already confirmed.'
        assert repeat.json()['already_confirmed'] is True

        # Check in
        validate_url = f'/api/ticket/{hold["booking_id"]}/{sample_show.id}/validate'
        first_scan = client.get(validate_url)
        assert first_scan.status_code == 200
        assert first_scan.json()['status'] == 'VALID TICKET'
        assert first_scan.json()['seats'] == ['C1']

        second_scan = client.get(validate_url)
        assert second_scan.status_code == 409
        assert second_scan.json()['status'] == 'ALREADY CHECKED IN'
        assert second_scan.json()['checked_in_at'] == first_scan.json()['checked_in_at']

    def test_bad_signature_is_rejected(self, client, sample_show):
        hold = client.post('/api/booking', json=_booking_body(sample_show.id, ['C2'])).json()
        callback = _checkout_callback(hold['order_id']) | {'razorpay_signature': 'forged'}

        response = client.post(
            f'/api/booking/{sample_show.id}/{hold["booking_id"]}/confirm', json=callback
        )

        assert response.status_code == 400
        assert response.json()['detail'] == 'Invalid payment signature'

    def test_pending_ticket_is_not_admitted(self, client, sample_show):
        hold = client.post('/api/booking', json=_booking_body(sample_show.id, ['C3'])).json()

        response = client.get(f'/api/ticket/{hold["booking_id"]}/{sample_show.id}/validate')

        assert response.status_code == 400
        assert response.json()['detail'] == 'INVALID TICKET: Payment not complete.'

    def test_unknown_ticket_is_not_found(self, client, sample_show):
        response = client.get(f'/api/ticket/{uuid_utils.uuid7()}/{sample_show.id}/validate')

        assert response.status_code == 404
        assert response.json()['detail'] == 'INVALID TICKET: Not found.'

    def test_scanned_payload_checks_in(self, client, sample_show):
        booked = client.post(
            '/api/booking/test', json=_booking_body(sample_show.id, ['D5'])
        ).json()
        payload = TicketPayload(
            booking_id=uuid_utils.UUID(booked['booking_id']), show_id=sample_show.id
        )

        response = client.post('/api/ticket/validate', json={'payload': payload.to_json()})

        assert response.status_code == 200
        assert response.json()['outcome'] == 'valid'


@pytest.mark.api
class TestTestBookingApi:
    def test_books_without_gateway(self, client, sample_show, payment_gateway):
        response = client.post('/api/booking/test', json=_booking_body(sample_show.id, ['B1']))

        assert response.status_code == 201
        assert response.json()['message'] == 'Booking successful (Test Mode)! Check your email.'
        assert response.json()['status'] == 'paid'
        assert payment_gateway.orders == []

        # The seat is now sold
        conflict = client.post('/api/booking', json=_booking_body(sample_show.id, ['B1']))
        assert conflict.status_code == 409
        assert conflict.json()['reason'] == 'already booked'

    def test_disabled_test_booking_is_forbidden(self, client, sample_show, test_settings):
        test_settings.ENABLE_TEST_BOOKING = False

        response = client.post('/api/booking/test', json=_booking_body(sample_show.id, ['B1']))

        assert response.status_code == 403
