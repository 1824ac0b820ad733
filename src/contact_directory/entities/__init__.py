"""Entities module with entity-centric packages.

Each entity has its own package containing:
- entity.py: Domain model with validation rules
- repository.py: In-memory data access layer
"""

from .contact import Contact, ContactRepository

__all__ = ["Contact", "ContactRepository"]
