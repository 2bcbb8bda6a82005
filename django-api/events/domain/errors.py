"""Validation failures reported by the event use-cases."""

from enum import Enum


class ValidationError(Enum):
    """Closed set of reasons an event cannot be created.

    Members are listed in the order the create use-case checks them.
    """

    TITLE_IS_REQUIRED = "TITLE_IS_REQUIRED"
    DATE_MUST_NOT_BE_PAST = "DATE_MUST_NOT_BE_PAST"
