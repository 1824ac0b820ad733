"""Contact entity package."""

from .entity import Contact
from .repository import ContactRepository

__all__ = ["Contact", "ContactRepository"]
