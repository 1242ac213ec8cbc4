"""Error taxonomy for the itinerary store, expense ledger and generation adapter.

Store and ledger mutators raise ValidationError / NotFoundError synchronously.
ExternalServiceError is raised by generator implementations and caught at the
adapter boundary, where it degrades to an empty or placeholder result.
"""

from enum import Enum

from pydantic import ValidationError as PydanticValidationError


class ErrorCode(str, Enum):
    """Machine-usable error codes."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    DAY_OUT_OF_RANGE = "DAY_OUT_OF_RANGE"
    TRANSPORT_MISMATCH = "TRANSPORT_MISMATCH"
    DUPLICATE_ID = "DUPLICATE_ID"
    UNKNOWN_TRAVELER = "UNKNOWN_TRAVELER"
    NOT_FOUND = "NOT_FOUND"
    GENERATION_FAILED = "GENERATION_FAILED"
    ESTIMATE_FAILED = "ESTIMATE_FAILED"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.VALIDATION_ERROR: "The entry contains invalid information. Please check and try again.",
    ErrorCode.DAY_OUT_OF_RANGE: "That day is outside the trip.",
    ErrorCode.TRANSPORT_MISMATCH: "Transport details are only allowed on transport items, and are required there.",
    ErrorCode.DUPLICATE_ID: "An entry with this id already exists.",
    ErrorCode.UNKNOWN_TRAVELER: "The expense refers to a traveler who is not on this trip.",
    ErrorCode.NOT_FOUND: "The requested entry no longer exists.",
    ErrorCode.GENERATION_FAILED: "Could not generate an itinerary. Please try again later.",
    ErrorCode.ESTIMATE_FAILED: "Travel time could not be estimated.",
}


class TripmateError(Exception):
    """Base exception for all trip planning errors."""

    default_code = ErrorCode.VALIDATION_ERROR

    def __init__(self, message: str, code: ErrorCode | None = None):
        self.message = message
        self.code = code or self.default_code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.VALIDATION_ERROR])


class ValidationError(TripmateError):
    """Malformed or rule-violating input to a store or ledger mutator."""

    pass


class NotFoundError(TripmateError):
    """Operation targets an id that does not exist."""

    default_code = ErrorCode.NOT_FOUND


class ExternalServiceError(TripmateError):
    """Generation or estimate call failed or returned unusable data."""

    default_code = ErrorCode.GENERATION_FAILED


def from_pydantic_error(e: PydanticValidationError) -> ValidationError:
    """Convert a pydantic validation failure into a ValidationError.

    The message lists one ``loc: msg`` entry per error. Failures that concern
    transport details get TRANSPORT_MISMATCH.
    """
    parts = []
    code = ErrorCode.VALIDATION_ERROR
    for err in e.errors():
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
        if "transport_details" in err["msg"] or (err["loc"] and err["loc"][0] == "transport_details"):
            code = ErrorCode.TRANSPORT_MISMATCH
    return ValidationError("; ".join(parts), code=code)
