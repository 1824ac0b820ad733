"""Contact domain entity."""

import re
from collections.abc import Mapping
from typing import Any

from pydantic import Field, field_validator

from src.contact_directory.core.exceptions import ValidationError, ValidationErrorKind
from src.contact_directory.entities._base import Entity

ID_MAX_LENGTH = 10
NAME_MAX_LENGTH = 10
ADDRESS_MAX_LENGTH = 30

# ASCII digits only; \d would also accept other Unicode decimal digits.
_PHONE_PATTERN = re.compile(r"[0-9]{10}")


def _check_length(value: Any, max_length: int, kind: ValidationErrorKind) -> str:
    if not isinstance(value, str) or len(value) > max_length:
        raise ValidationError(kind)
    return value


class Contact(Entity):
    """Contact entity representing one person in the directory.

    Every field is checked by exactly one validator, which runs both when the
    contact is constructed and whenever a field is reassigned. A failed
    construction produces no instance; a failed assignment leaves the old
    value in place.
    """

    first_name: str = Field(
        default=None, validate_default=True, description="Contact's first name"
    )
    last_name: str = Field(
        default=None, validate_default=True, description="Contact's last name"
    )
    phone: str = Field(
        default=None,
        validate_default=True,
        description="Contact's phone number, exactly 10 digits",
    )
    address: str = Field(
        default=None, validate_default=True, description="Contact's address"
    )

    @field_validator("id", mode="before")
    @classmethod
    def check_id(cls, value: Any) -> str:
        return _check_length(value, ID_MAX_LENGTH, ValidationErrorKind.INVALID_ID)

    @field_validator("first_name", "last_name", mode="before")
    @classmethod
    def check_name(cls, value: Any) -> str:
        return _check_length(value, NAME_MAX_LENGTH, ValidationErrorKind.INVALID_NAME)

    @field_validator("phone", mode="before")
    @classmethod
    def check_phone(cls, value: Any) -> str:
        if not isinstance(value, str) or not _PHONE_PATTERN.fullmatch(value):
            raise ValidationError(ValidationErrorKind.INVALID_PHONE)
        return value

    @field_validator("address", mode="before")
    @classmethod
    def check_address(cls, value: Any) -> str:
        return _check_length(
            value, ADDRESS_MAX_LENGTH, ValidationErrorKind.INVALID_ADDRESS
        )

    def get_id(self) -> str:
        return self.id

    def get_first_name(self) -> str:
        return self.first_name

    def get_last_name(self) -> str:
        return self.last_name

    def get_phone(self) -> str:
        return self.phone

    def get_address(self) -> str:
        return self.address

    def set_first_name(self, value: str) -> None:
        """Replace the first name.

        Raises:
            ValidationError: INVALID_NAME if value is None or longer than 10.
        """
        self.first_name = value

    def set_last_name(self, value: str) -> None:
        """Replace the last name.

        Raises:
            ValidationError: INVALID_NAME if value is None or longer than 10.
        """
        self.last_name = value

    def set_phone(self, value: str) -> None:
        """Replace the phone number.

        Raises:
            ValidationError: INVALID_PHONE unless value is exactly 10 ASCII digits.
        """
        self.phone = value

    def set_address(self, value: str) -> None:
        """Replace the address.

        Raises:
            ValidationError: INVALID_ADDRESS if value is None or longer than 30.
        """
        self.address = value

    def model_copy(
        self, *, update: Mapping[str, Any] | None = None, deep: bool = False
    ) -> "Contact":
        """Copy the contact, validating the copy like a new construction.

        Raises:
            ValidationError: the kind of the first field in update that
                breaks its rule.
        """
        return type(self).model_validate({**self.model_dump(), **(update or {})})

    def __eq__(self, other: Any) -> bool:
        """Compare contacts by business attributes."""
        if not isinstance(other, Contact):
            return False

        return (
            self.id == other.id
            and self.first_name == other.first_name
            and self.last_name == other.last_name
            and self.phone == other.phone
            and self.address == other.address
        )

    def __hash__(self) -> int:
        """Hash on the identifier, the only field that cannot change."""
        return hash(self.id)
