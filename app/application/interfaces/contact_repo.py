"""Interface ContactRepo - Puerto para el store de contactos."""

from abc import ABC, abstractmethod
from typing import Sequence

from app.domain.entities.contact import Contact


class ContactRepo(ABC):
    """
    Puerto para el store de contactos.

    Es dueño del grafo canónico Contact/Phone; quien lo llama recibe copias
    válidas solo durante la petición.
    """

    @abstractmethod
    async def list(self, search: str | None = None) -> Sequence[Contact]:
        """
        Lista contactos, opcionalmente filtrados.

        Args:
            search: Subcadena buscada en el apellido (sin distinguir mayúsculas).
                Vacío o None significa sin filtro.

        Returns:
            Contactos ordenados por id.
        """
        raise NotImplementedError

    @abstractmethod
    async def get(self, contact_id: int) -> Contact | None:
        """
        Obtiene un contacto con sus teléfonos.

        Args:
            contact_id: ID del contacto.

        Returns:
            Contact o None si no existe.
        """
        raise NotImplementedError

    @abstractmethod
    async def create(self, contact: Contact) -> Contact:
        """
        Persiste un contacto nuevo junto con sus teléfonos.

        Args:
            contact: Contacto sin id.

        Returns:
            El mismo contacto con los ids asignados.
        """
        raise NotImplementedError

    @abstractmethod
    async def update(self, contact: Contact) -> bool:
        """
        Reemplaza nombre, apellido y email de un contacto existente.

        Args:
            contact: Contacto con id.

        Returns:
            False si el id no existe.
        """
        raise NotImplementedError

    @abstractmethod
    async def delete(self, contact_id: int) -> bool:
        """
        Elimina un contacto y sus teléfonos.

        Args:
            contact_id: ID del contacto a eliminar.

        Returns:
            False si el id no existe.
        """
        raise NotImplementedError
