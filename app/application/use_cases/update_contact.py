from typing import Any

from app.api.schemas.contacts import ContactForUpdate
from app.application.interfaces.contact_repo import ContactRepo
from app.application.interfaces.transaction_manager import TransactionManager
from app.application.mappers import from_update
from app.application.validation import validate_representation
from app.domain.errors import ContactNotFoundError


class UpdateContactUseCase:
    """Reemplazo completo: el id del path se impone sobre el cuerpo."""

    def __init__(
        self,
        contact_repo: ContactRepo,
        transaction_manager: TransactionManager,
    ) -> None:
        self._contact_repo = contact_repo
        self._transaction_manager = transaction_manager

    async def execute(self, contact_id: int, payload: Any) -> None:
        dto = validate_representation(ContactForUpdate, payload)
        contact = from_update(dto, contact_id)

        async with self._transaction_manager.start():
            success = await self._contact_repo.update(contact)

        if not success:
            raise ContactNotFoundError(contact_id)
