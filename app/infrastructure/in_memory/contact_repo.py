"""Implementación in-memory del store de contactos."""

import copy
from typing import Sequence

from app.application.interfaces.contact_repo import ContactRepo
from app.domain.entities.contact import Contact


class InMemoryContactRepo(ContactRepo):
    """
    Store in-memory para desarrollo y testing.

    Entrega y recibe copias: nadie fuera del repo sostiene objetos del store.
    Ninguna mutación suspende, así que cada escritura es todo o nada.
    """

    def __init__(self) -> None:
        self._contacts: dict[int, Contact] = {}
        self._next_id = 1
        self._next_phone_id = 1

    async def list(self, search: str | None = None) -> Sequence[Contact]:
        """Lista contactos filtrando por apellido."""
        needle = (search or "").strip().lower()
        return [
            copy.deepcopy(contact)
            for contact_id, contact in sorted(self._contacts.items())
            if not needle or needle in contact.last_name.lower()
        ]

    async def get(self, contact_id: int) -> Contact | None:
        """Obtiene un contacto por su ID."""
        contact = self._contacts.get(contact_id)
        return copy.deepcopy(contact) if contact else None

    async def create(self, contact: Contact) -> Contact:
        """Crea un nuevo contacto en memoria asignando ids."""
        self._store_new(contact)
        return contact

    async def update(self, contact: Contact) -> bool:
        """Actualiza nombre, apellido y email."""
        stored = self._contacts.get(contact.id) if contact.id is not None else None
        if stored is None:
            return False
        stored.first_name = contact.first_name
        stored.last_name = contact.last_name
        stored.email = contact.email
        return True

    async def delete(self, contact_id: int) -> bool:
        """Elimina un contacto y sus teléfonos."""
        return self._contacts.pop(contact_id, None) is not None

    def seed(self, contacts: Sequence[Contact]) -> None:
        """Carga datos iniciales (demo y testing)."""
        for contact in contacts:
            self._store_new(contact)

    def clear(self) -> None:
        """Limpia todos los datos (para testing)."""
        self._contacts.clear()
        self._next_id = 1
        self._next_phone_id = 1

    def _store_new(self, contact: Contact) -> None:
        contact.id = self._next_id
        self._next_id += 1
        for phone in contact.phones:
            phone.id = self._next_phone_id
            phone.contact_id = contact.id
            self._next_phone_id += 1
        self._contacts[contact.id] = copy.deepcopy(contact)
