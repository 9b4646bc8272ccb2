class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ValidationError(DomainError):
    """A required field is missing, empty or malformed."""

    def __init__(self, message: str, *, field: str | None = None) -> None:
        self.field = field
        super().__init__(message, 400)


class InvalidSignatureError(DomainError):
    def __init__(self, message: str = 'Invalid payment signature') -> None:
        super().__init__(message, 400)


class NotPaidError(DomainError):
    def __init__(self, message: str = 'INVALID TICKET: Payment not complete.') -> None:
        super().__init__(message, 400)


class ForbiddenError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 403)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class SeatConflictError(ConflictError):
    """One requested seat is already paid for or on a live hold."""

    ALREADY_BOOKED = 'already booked'
    HOLD_IN_PROGRESS = 'hold in progress'

    def __init__(self, seat: str, reason: str) -> None:
        self.seat = seat
        self.reason = reason
        if reason == self.ALREADY_BOOKED:
            message = f'Sorry, seat {seat} is already booked. Please refresh.'
        else:
            message = f'Sorry, seat {seat} is currently being booked.'
        super().__init__(message)


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 401)


class PaymentGatewayError(CustomBaseError):
    """The payment gateway refused or failed to create an order."""

    def __init__(self, message: str = 'Payment gateway unavailable') -> None:
        super().__init__(message, 502)
