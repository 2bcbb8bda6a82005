"""Wire representation of event validation errors.

Codes are part of the public API contract and must stay stable.
"""

from dataclasses import dataclass
from typing import assert_never

from events.domain import ValidationError


@dataclass(frozen=True)
class ErrorMessage:
    """Machine-readable code plus human-readable description."""

    code: str
    description: str


def message_for(error: ValidationError) -> ErrorMessage:
    match error:
        case ValidationError.TITLE_IS_REQUIRED:
            return ErrorMessage("missing_title", "Title is a required field and must not be blank")
        case ValidationError.DATE_MUST_NOT_BE_PAST:
            return ErrorMessage("date_is_past", "The date must be today or later")
        case _:
            assert_never(error)
