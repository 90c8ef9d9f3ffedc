"""Mapeo entre el agregado Contact y sus representaciones de wire."""

from typing import Callable

from pydantic import BaseModel

from app.api.schemas.contacts import (
    ContactDetails,
    ContactForCreation,
    ContactForUpdate,
    ContactSummary,
    ContactWithPhonesForCreation,
    PhoneDto,
)
from app.application.negotiation import Variant
from app.domain.entities.contact import Contact, Phone


def to_phone(phone: Phone) -> PhoneDto:
    return PhoneDto(id=phone.id, number=phone.number, description=phone.description)


def to_summary(contact: Contact) -> ContactSummary:
    return ContactSummary(id=contact.id, full_name=contact.full_name)


def to_details(contact: Contact) -> ContactDetails:
    return ContactDetails(
        id=contact.id,
        first_name=contact.first_name,
        last_name=contact.last_name,
        email=contact.email,
        phones=[to_phone(phone) for phone in contact.phones],
    )


def to_update(contact: Contact) -> ContactForUpdate:
    """Representación editable; se construye sin revalidar lo que ya está guardado."""
    return ContactForUpdate.model_construct(
        first_name=contact.first_name,
        last_name=contact.last_name,
        email=contact.email,
    )


def from_creation(dto: ContactForCreation) -> Contact:
    contact = Contact(
        first_name=dto.first_name,
        last_name=dto.last_name,
        email=dto.email,
    )
    if isinstance(dto, ContactWithPhonesForCreation):
        for phone in dto.phones:
            contact.add_phone(number=phone.number, description=phone.description)
    return contact


def from_update(dto: ContactForUpdate, contact_id: int) -> Contact:
    # The path id always wins over anything in the body.
    return Contact(
        id=contact_id,
        first_name=dto.first_name,
        last_name=dto.last_name,
        email=dto.email,
    )


def merge_update(dto: ContactForUpdate, contact: Contact) -> Contact:
    """Copia los campos editables sobre el agregado; id y teléfonos no se tocan."""
    contact.update_info(first_name=dto.first_name, last_name=dto.last_name, email=dto.email)
    return contact


OUTPUT_MAPPERS: dict[Variant, tuple[Callable[[Contact], BaseModel], type[BaseModel]]] = {
    Variant.SUMMARY: (to_summary, ContactSummary),
    Variant.DETAIL: (to_details, ContactDetails),
}

INPUT_MODELS: dict[Variant, type[ContactForCreation]] = {
    Variant.CREATION: ContactForCreation,
    Variant.CREATION_WITH_PHONES: ContactWithPhonesForCreation,
}
