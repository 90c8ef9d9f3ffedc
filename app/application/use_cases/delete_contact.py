from app.application.interfaces.contact_repo import ContactRepo
from app.application.interfaces.transaction_manager import TransactionManager
from app.domain.errors import ContactNotFoundError


class DeleteContactUseCase:
    def __init__(
        self,
        contact_repo: ContactRepo,
        transaction_manager: TransactionManager,
    ) -> None:
        self._contact_repo = contact_repo
        self._transaction_manager = transaction_manager

    async def execute(self, contact_id: int) -> None:
        async with self._transaction_manager.start():
            success = await self._contact_repo.delete(contact_id)
        if not success:
            raise ContactNotFoundError(contact_id)
