import logging
from typing import Any

from app.application.interfaces.contact_repo import ContactRepo
from app.application.interfaces.transaction_manager import TransactionManager
from app.application.json_patch import PatchEngine, parse_patch_document
from app.application.mappers import merge_update, to_update
from app.domain.errors import ContactNotFoundError, PatchRejectedError

logger = logging.getLogger(__name__)


class PatchContactUseCase:
    def __init__(
        self,
        contact_repo: ContactRepo,
        transaction_manager: TransactionManager,
        patch_engine: PatchEngine,
    ) -> None:
        self._contact_repo = contact_repo
        self._transaction_manager = transaction_manager
        self._patch_engine = patch_engine

    async def execute(self, contact_id: int, document: Any) -> None:
        contact = await self._contact_repo.get(contact_id)
        if contact is None:
            raise ContactNotFoundError(contact_id)

        try:
            operations = parse_patch_document(document)
            result = self._patch_engine.apply(to_update(contact), operations)
        except PatchRejectedError as exc:
            logger.info(
                "Patch document could not be applied",
                extra={"contact_id": contact_id, "reason": exc.reason},
            )
            raise

        if not result.is_valid:
            logger.info(
                "Patched contact failed validation",
                extra={"contact_id": contact_id, "errors": result.errors},
            )
            raise PatchRejectedError(
                PatchRejectedError.VALIDATION_FAILED,
                "The patched contact is not valid",
                errors=result.errors,
            )

        merge_update(result.representation, contact)

        async with self._transaction_manager.start():
            success = await self._contact_repo.update(contact)

        if not success:
            raise ContactNotFoundError(contact_id)
