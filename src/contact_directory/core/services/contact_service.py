import threading

from loguru import logger

from src.contact_directory.core.exceptions import ValidationError, ValidationErrorKind
from src.contact_directory.entities.contact.entity import Contact
from src.contact_directory.entities.contact.repository import ContactRepository
from src.contact_directory.runtime.settings import (
    ContactDirectorySettings,
    get_settings,
)


class ContactService:
    """Add, delete, update and look up contacts.

    Stored contacts are only mutated through update_contact, which either
    applies every proposed field or none of them.
    """

    def __init__(self, repository: ContactRepository | None = None) -> None:
        self._repo = repository if repository is not None else ContactRepository()

    def add_contact(self, contact: Contact | None) -> None:
        """Store a new contact.

        Args:
            contact: Contact to store, keyed by its identifier

        Raises:
            ValidationError: NULL_ENTITY if contact is None, DUPLICATE_ID if a
                contact with the same identifier is already stored, or the
                field kind if contact was built without validation.
        """
        if contact is None:
            logger.warning("Rejected add: contact is None")
            raise ValidationError(ValidationErrorKind.NULL_ENTITY)

        try:
            # Contacts built with model_construct skip validation.
            self._trial_copy(contact)
            self._repo.create(contact)
        except ValidationError as e:
            logger.warning(f"Rejected add of contact {contact.id!r}: {e.kind.name}")
            raise

        logger.info(f"Added contact {contact.id!r}")

    def delete_contact(self, contact_id: str) -> None:
        """Remove a stored contact.

        Raises:
            ValidationError: NOT_FOUND if no contact has that identifier.
        """
        try:
            self._repo.delete(contact_id)
        except ValidationError as e:
            logger.warning(f"Rejected delete of contact {contact_id!r}: {e.kind.name}")
            raise

        logger.info(f"Deleted contact {contact_id!r}")

    def update_contact(
        self,
        contact_id: str,
        first_name: str,
        last_name: str,
        phone: str,
        address: str,
    ) -> None:
        """Replace all four mutable fields of a stored contact.

        The proposed values are first applied to a disposable trial copy of
        the stored contact. Only when every value has been accepted there are
        the same values applied, in the same order, to the stored contact.

        Args:
            contact_id: Identifier of the contact to update
            first_name: New first name
            last_name: New last name
            phone: New phone number
            address: New address

        Raises:
            ValidationError: NOT_FOUND if no contact has that identifier, or
                the first field error raised by the trial copy. In both cases
                the stored contact is left unchanged.
        """
        contact = self._repo.get(contact_id)
        if contact is None:
            logger.warning(f"Rejected update of contact {contact_id!r}: NOT_FOUND")
            raise ValidationError(ValidationErrorKind.NOT_FOUND)

        trial = self._trial_copy(contact)
        try:
            self._apply(trial, first_name, last_name, phone, address)
        except ValidationError as e:
            logger.warning(f"Rejected update of contact {contact_id!r}: {e.kind.name}")
            raise

        # Every value was accepted by the trial copy, so this cannot fail.
        self._apply(contact, first_name, last_name, phone, address)
        logger.info(f"Updated contact {contact_id!r}")

    def get_contact(self, contact_id: str) -> Contact | None:
        """Return the stored contact, or None if there is none with that identifier."""
        return self._repo.get(contact_id)

    def __contains__(self, contact_id: object) -> bool:
        return self._repo.exists(contact_id)

    def __len__(self) -> int:
        return len(self._repo)

    @staticmethod
    def _trial_copy(contact: Contact) -> Contact:
        # Rebuilt through validation from already-valid data, never stored.
        return Contact.model_validate(contact.model_dump())

    @staticmethod
    def _apply(
        contact: Contact, first_name: str, last_name: str, phone: str, address: str
    ) -> None:
        contact.set_first_name(first_name)
        contact.set_last_name(last_name)
        contact.set_phone(phone)
        contact.set_address(address)


class SynchronizedContactService(ContactService):
    """ContactService with every operation guarded by one reentrant lock."""

    def __init__(self, repository: ContactRepository | None = None) -> None:
        super().__init__(repository)
        self._lock = threading.RLock()

    def add_contact(self, contact: Contact | None) -> None:
        with self._lock:
            super().add_contact(contact)

    def delete_contact(self, contact_id: str) -> None:
        with self._lock:
            super().delete_contact(contact_id)

    def update_contact(
        self,
        contact_id: str,
        first_name: str,
        last_name: str,
        phone: str,
        address: str,
    ) -> None:
        with self._lock:
            super().update_contact(contact_id, first_name, last_name, phone, address)

    def get_contact(self, contact_id: str) -> Contact | None:
        with self._lock:
            return super().get_contact(contact_id)

    def __contains__(self, contact_id: object) -> bool:
        with self._lock:
            return super().__contains__(contact_id)

    def __len__(self) -> int:
        with self._lock:
            return super().__len__()


def build_contact_service(
    settings: ContactDirectorySettings | None = None,
) -> ContactService:
    """Create an empty contact service configured from settings."""
    settings = settings or get_settings()
    if settings.thread_safe:
        logger.debug("Creating synchronized contact service")
        return SynchronizedContactService()
    return ContactService()
