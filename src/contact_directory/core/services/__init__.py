"""Core services."""

from .contact_service import (
    ContactService,
    SynchronizedContactService,
    build_contact_service,
)

__all__ = ["ContactService", "SynchronizedContactService", "build_contact_service"]
