from app.api.schemas.contacts import PhoneDto
from app.api.serializers import Rendered, render
from app.application.interfaces.contact_repo import ContactRepo
from app.application.mappers import to_phone
from app.application.negotiation import Negotiated
from app.domain.errors import ContactNotFoundError, PhoneNotFoundError


class GetPhonesUseCase:
    """Teléfonos de un contacto, como colección o uno por id."""

    def __init__(self, contact_repo: ContactRepo) -> None:
        self._contact_repo = contact_repo

    async def execute(
        self,
        contact_id: int,
        negotiated: Negotiated,
        phone_id: int | None = None,
    ) -> Rendered:
        contact = await self._contact_repo.get(contact_id)
        if contact is None:
            raise ContactNotFoundError(contact_id)

        if phone_id is None:
            phones = [to_phone(phone) for phone in contact.phones]
            return render(phones, PhoneDto, negotiated.format, negotiated.media_type)

        phone = contact.find_phone(phone_id)
        if phone is None:
            raise PhoneNotFoundError(contact_id, phone_id)
        return render(to_phone(phone), PhoneDto, negotiated.format, negotiated.media_type)
