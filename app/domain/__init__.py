"""
Capa de Dominio - API de Contactos.

Esta capa contiene la lógica de negocio pura, sin dependencias de frameworks.
Incluye entidades y excepciones de dominio.

Estructura:
- entities/: Entidades del dominio (Contact, Phone)
- errors.py: Excepciones específicas del dominio
"""

from app.domain.entities import Contact, Phone
from app.domain.errors import (
    ContactNotFoundError,
    DomainError,
    NotAcceptableError,
    PatchRejectedError,
    PhoneNotFoundError,
    UnsupportedMediaTypeError,
    UnsupportedVersionError,
    ValidationFailedError,
)

__all__ = [
    # Entities
    "Contact",
    "Phone",
    # Errors
    "DomainError",
    "ContactNotFoundError",
    "PhoneNotFoundError",
    "ValidationFailedError",
    "PatchRejectedError",
    "UnsupportedVersionError",
    "NotAcceptableError",
    "UnsupportedMediaTypeError",
]
