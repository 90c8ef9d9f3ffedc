import logging
from typing import Any

from app.api.serializers import Rendered, render
from app.application.interfaces.contact_repo import ContactRepo
from app.application.interfaces.transaction_manager import TransactionManager
from app.application.mappers import INPUT_MODELS, OUTPUT_MAPPERS, from_creation
from app.application.negotiation import Negotiated
from app.application.validation import validate_representation

logger = logging.getLogger(__name__)


class CreateContactUseCase:
    def __init__(
        self,
        contact_repo: ContactRepo,
        transaction_manager: TransactionManager,
    ) -> None:
        self._contact_repo = contact_repo
        self._transaction_manager = transaction_manager

    async def execute(self, payload: Any, negotiated: Negotiated) -> tuple[int, Rendered]:
        """
        Valida, persiste y representa un contacto nuevo.

        La variante de entrada (por Content-Type) decide también la salida:
        JSON plano devuelve el resumen, el media type con teléfonos el detalle.

        Returns:
            (id asignado, representación creada).
        """
        dto = validate_representation(INPUT_MODELS[negotiated.input_variant], payload)
        contact = from_creation(dto)

        async with self._transaction_manager.start():
            await self._contact_repo.create(contact)

        logger.info(
            "Contact created",
            extra={"contact_id": contact.id, "variant": negotiated.input_variant.value},
        )
        mapper, model = OUTPUT_MAPPERS[negotiated.output_variant]
        return contact.id, render(mapper(contact), model, negotiated.format, negotiated.media_type)
