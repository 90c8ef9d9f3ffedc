from app.api.schemas.contacts import ContactSummary
from app.api.serializers import Rendered, render
from app.application.interfaces.contact_repo import ContactRepo
from app.application.mappers import to_summary
from app.application.negotiation import Negotiated


class ListContactsUseCase:
    def __init__(self, contact_repo: ContactRepo) -> None:
        self._contact_repo = contact_repo

    async def execute(self, negotiated: Negotiated, search: str | None = None) -> Rendered:
        contacts = await self._contact_repo.list(search)
        summaries = [to_summary(contact) for contact in contacts]
        return render(summaries, ContactSummary, negotiated.format, negotiated.media_type)
