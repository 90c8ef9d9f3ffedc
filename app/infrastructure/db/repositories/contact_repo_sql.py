"""Implementación SQL del store de contactos."""

from typing import Sequence

from sqlalchemy import String, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.contact_repo import ContactRepo
from app.domain.entities.contact import Contact, Phone
from app.infrastructure.db.tables import contacts, phones


class ContactRepoSQL(ContactRepo):
    """
    Implementación SQL del store usando SQLAlchemy Core.

    No hace commit: las escrituras corren dentro del TransactionManager.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list(self, search: str | None = None) -> Sequence[Contact]:
        """Lista contactos (sin teléfonos) filtrando por apellido."""
        stmt = select(contacts).order_by(contacts.c.id)
        needle = (search or "").strip().lower()
        if needle:
            last_name = func.lower(contacts.c.last_name, type_=String)
            stmt = stmt.where(last_name.contains(needle, autoescape=True))
        result = await self._session.execute(stmt)
        return [self._row_to_contact(row) for row in result.mappings().all()]

    async def get(self, contact_id: int) -> Contact | None:
        """Obtiene un contacto con sus teléfonos."""
        result = await self._session.execute(select(contacts).where(contacts.c.id == contact_id))
        row = result.mappings().first()
        if not row:
            return None
        contact = self._row_to_contact(row)

        phone_rows = await self._session.execute(
            select(phones).where(phones.c.contact_id == contact_id).order_by(phones.c.id)
        )
        contact.phones = [self._row_to_phone(p) for p in phone_rows.mappings().all()]
        return contact

    async def create(self, contact: Contact) -> Contact:
        """Inserta el contacto y luego sus teléfonos."""
        result = await self._session.execute(
            insert(contacts).values(
                first_name=contact.first_name,
                last_name=contact.last_name,
                email=contact.email,
            )
        )
        contact.id = result.inserted_primary_key[0]

        for phone in contact.phones:
            phone.contact_id = contact.id
            phone_result = await self._session.execute(
                insert(phones).values(
                    contact_id=contact.id,
                    number=phone.number,
                    description=phone.description,
                )
            )
            phone.id = phone_result.inserted_primary_key[0]
        return contact

    async def update(self, contact: Contact) -> bool:
        """Actualiza nombre, apellido y email."""
        if contact.id is None:
            return False
        stmt = (
            update(contacts)
            .where(contacts.c.id == contact.id)
            .values(
                first_name=contact.first_name,
                last_name=contact.last_name,
                email=contact.email,
            )
        )
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    async def delete(self, contact_id: int) -> bool:
        """Elimina teléfonos y contacto."""
        await self._session.execute(delete(phones).where(phones.c.contact_id == contact_id))
        result = await self._session.execute(delete(contacts).where(contacts.c.id == contact_id))
        return result.rowcount > 0

    def _row_to_contact(self, row) -> Contact:
        """Convierte una fila de DB a Contact."""
        return Contact(
            id=row["id"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            email=row.get("email"),
        )

    def _row_to_phone(self, row) -> Phone:
        return Phone(
            id=row["id"],
            contact_id=row["contact_id"],
            number=row["number"],
            description=row.get("description"),
        )
