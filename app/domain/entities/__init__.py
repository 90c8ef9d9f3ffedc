"""Entidades del dominio."""

from app.domain.entities.contact import Contact, Phone

__all__ = [
    "Contact",
    "Phone",
]
