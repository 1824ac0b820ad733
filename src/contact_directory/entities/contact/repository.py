"""Contact repository for in-memory data access."""

from src.contact_directory.core.exceptions import ValidationError, ValidationErrorKind

from .entity import Contact


class ContactRepository:
    """Identifier-keyed store for contacts.

    The repository owns the contacts it holds. Lookups return the stored
    instance itself, so in-place updates are visible to every holder of the
    reference.
    """

    def __init__(self) -> None:
        self._contacts: dict[str, Contact] = {}

    def get(self, contact_id: str) -> Contact | None:
        return self._contacts.get(contact_id)

    def exists(self, contact_id: object) -> bool:
        return contact_id in self._contacts

    def create(self, contact: Contact) -> Contact:
        """Store a new contact under its identifier.

        Raises:
            ValidationError: DUPLICATE_ID if the identifier is already taken.
        """
        if contact.id in self._contacts:
            raise ValidationError(ValidationErrorKind.DUPLICATE_ID)
        self._contacts[contact.id] = contact
        return contact

    def delete(self, contact_id: str) -> None:
        """Remove the contact stored under contact_id.

        Raises:
            ValidationError: NOT_FOUND if nothing is stored under contact_id.
        """
        if contact_id not in self._contacts:
            raise ValidationError(ValidationErrorKind.NOT_FOUND)
        del self._contacts[contact_id]

    def __len__(self) -> int:
        return len(self._contacts)
