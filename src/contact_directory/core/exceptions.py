"""Domain-level exceptions.

Every rule violation is reported as a ValidationError carrying a kind, so
embedding code can catch one type and branch on which rule failed.
"""

from enum import Enum


class ValidationErrorKind(str, Enum):
    """Which rule a ValidationError reports."""

    INVALID_ID = "invalid_id"
    INVALID_NAME = "invalid_name"
    INVALID_PHONE = "invalid_phone"
    INVALID_ADDRESS = "invalid_address"
    NULL_ENTITY = "null_entity"
    DUPLICATE_ID = "duplicate_id"
    NOT_FOUND = "not_found"


_DEFAULT_MESSAGES = {
    ValidationErrorKind.INVALID_ID: "Invalid contact ID",
    ValidationErrorKind.INVALID_NAME: "Invalid name",
    ValidationErrorKind.INVALID_PHONE: "Invalid phone number",
    ValidationErrorKind.INVALID_ADDRESS: "Invalid address",
    ValidationErrorKind.NULL_ENTITY: "Contact cannot be None",
    ValidationErrorKind.DUPLICATE_ID: "Contact ID already exists",
    ValidationErrorKind.NOT_FOUND: "Contact not found",
}


class DomainError(Exception):
    """Base class for all contact directory errors."""


class ValidationError(DomainError):
    """A field rule or directory invariant was violated.

    Not a ValueError subclass: pydantic wraps ValueError raised inside
    validators, and this error must reach the caller unchanged.
    """

    def __init__(self, kind: ValidationErrorKind, message: str | None = None):
        self.kind = kind
        self.message = message or _DEFAULT_MESSAGES[kind]
        super().__init__(self.message)

    def __reduce__(self):
        return (self.__class__, (self.kind, self.message))

    def __repr__(self) -> str:
        return f"ValidationError(kind={self.kind.name}, message={self.message!r})"
