import logging

from app.api.serializers import Rendered, render
from app.application.interfaces.contact_repo import ContactRepo
from app.application.interfaces.response_cache import CacheKey, ResponseCache
from app.application.mappers import OUTPUT_MAPPERS
from app.application.negotiation import Negotiated
from app.domain.errors import ContactNotFoundError

logger = logging.getLogger(__name__)


class GetContactUseCase:
    """
    Lectura de un contacto con cache de respuesta.

    Un hit se sirve sin tocar el store, aunque el contacto haya cambiado
    dentro del TTL. Los not-found no se cachean.
    """

    def __init__(self, contact_repo: ContactRepo, response_cache: ResponseCache) -> None:
        self._contact_repo = contact_repo
        self._response_cache = response_cache

    async def execute(self, contact_id: int, negotiated: Negotiated) -> Rendered:
        mapper, model = OUTPUT_MAPPERS[negotiated.output_variant]
        key = CacheKey(
            operation=negotiated.operation.value,
            resource_id=contact_id,
            variant=negotiated.output_variant.value,
            format=negotiated.format,
        )

        if negotiated.cacheable:
            cached = self._response_cache.get(key)
            if cached is not None:
                return Rendered(body=cached, media_type=negotiated.media_type)

        logger.info("Getting contact from the store", extra={"contact_id": contact_id})
        contact = await self._contact_repo.get(contact_id)
        if contact is None:
            logger.warning("Contact not found", extra={"contact_id": contact_id})
            raise ContactNotFoundError(contact_id)

        rendered = render(mapper(contact), model, negotiated.format, negotiated.media_type)
        if negotiated.cacheable:
            self._response_cache.put(key, rendered.body)
        return rendered
