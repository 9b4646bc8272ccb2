import re
import string
from typing import Iterable, List

import attrs

from src.platform.exception.exceptions import ValidationError


_SEAT_CODE_PATTERN = re.compile(r'^([A-Z])(\d{1,3})$')


def seat_sort_key(seat: str) -> tuple[str, int]:
    """A1, A2, ..., A10, B1 rather than lexical A1, A10, A2"""
    match = _SEAT_CODE_PATTERN.match(seat)
    if not match:
        return (seat, 0)
    return (match.group(1), int(match.group(2)))


@attrs.frozen
class SeatGrid:
    """
    Seat map of the single screen.

    Rows are lettered from A, seats numbered from 1; the default 6 x 10 grid
    runs from A1 to F10.
    """

    rows: int = attrs.field(validator=attrs.validators.in_(range(1, 27)))
    seats_per_row: int = attrs.field(validator=attrs.validators.ge(1))

    @property
    def row_labels(self) -> List[str]:
        return list(string.ascii_uppercase[: self.rows])

    def all_seats(self) -> List[str]:
        return [
            f'{row}{number}'
            for row in self.row_labels
            for number in range(1, self.seats_per_row + 1)
        ]

    def normalize(self, seat: str) -> str:
        """Canonical form of a seat code, e.g. ' a01 ' -> 'A1'"""
        match = _SEAT_CODE_PATTERN.match(str(seat).strip().upper())
        if not match:
            raise ValidationError(f'Invalid seat code: {seat}', field='seats')

        row, number = match.group(1), int(match.group(2))
        if row not in self.row_labels or not 1 <= number <= self.seats_per_row:
            raise ValidationError(f'Seat {row}{number} is not on the seat map', field='seats')
        return f'{row}{number}'

    def validate_selection(self, seats: Iterable[str] | None) -> List[str]:
        """
        Normalize a requested seat set, keeping the caller's order.

        Raises:
            ValidationError: empty selection, unknown seat or a seat listed twice
        """
        selection = [self.normalize(seat) for seat in (seats or [])]
        if not selection:
            raise ValidationError('Select at least one seat', field='seats')

        duplicates = sorted(
            {seat for seat in selection if selection.count(seat) > 1}, key=seat_sort_key
        )
        if duplicates:
            raise ValidationError(f'Duplicate seats: {", ".join(duplicates)}', field='seats')
        return selection
