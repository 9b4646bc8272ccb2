from enum import StrEnum


class CheckInOutcome(StrEnum):
    VALID = 'valid'
    ALREADY_CHECKED_IN = 'already_checked_in'
