from prometheus_client import Counter, Histogram


class BookingMetrics:
    """
    Seat booking business metrics

    Tracks hold attempts and their conflicts, payment confirmations,
    door check-ins and ticket email delivery.
    """

    def __init__(self):
        # ========== Seat Hold Metrics ==========
        self.seat_hold_requests = Counter(
            'seat_hold_requests_total',
            'Total seat hold requests',
            ['path', 'result'],  # path: gateway/test, result: created/already_booked/...
        )

        self.seat_hold_seats = Histogram(
            'seat_hold_seats_per_booking',
            'Seats requested per booking',
            ['path'],
            buckets=[1, 2, 3, 4, 6, 8, 10, 20],
        )

        # ========== Payment Metrics ==========
        self.booking_confirmations = Counter(
            'booking_confirmations_total',
            'Payment confirmation attempts',
            ['result'],  # confirmed/already_confirmed/invalid_signature
        )

        # ========== Door Metrics ==========
        self.ticket_check_ins = Counter(
            'ticket_check_ins_total',
            'Ticket scans at the entrance',
            ['outcome'],  # valid/already_checked_in
        )

        # ========== Delivery Metrics ==========
        self.ticket_deliveries = Counter(
            'ticket_deliveries_total',
            'Ticket email deliveries',
            ['result'],  # sent/failed
        )

    # ========== Helper Methods ==========

    def record_seat_hold(self, *, path: str, result: str, seat_count: int = 0):
        self.seat_hold_requests.labels(path=path, result=result).inc()
        if seat_count:
            self.seat_hold_seats.labels(path=path).observe(seat_count)

    def record_confirmation(self, *, result: str):
        self.booking_confirmations.labels(result=result).inc()

    def record_check_in(self, *, outcome: str):
        self.ticket_check_ins.labels(outcome=outcome).inc()

    def record_delivery(self, *, result: str):
        self.ticket_deliveries.labels(result=result).inc()


# Global metrics instance
metrics = BookingMetrics()
