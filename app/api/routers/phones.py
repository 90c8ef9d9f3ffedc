from fastapi import APIRouter, Depends, Request, Response

from app.api.dependencies import get_negotiator, get_use_cases
from app.api.routers.contacts import respond
from app.application.negotiation import ContentNegotiator, Operation

router = APIRouter()


@router.get("/contacts/{contact_id}/phones", name="list_phones")
async def list_phones(
    contact_id: int,
    request: Request,
    negotiator: ContentNegotiator = Depends(get_negotiator),
    use_cases=Depends(get_use_cases),
) -> Response:
    negotiated = negotiator.negotiate(Operation.LIST_PHONES, request.headers)
    rendered = await use_cases["get_phones"].execute(contact_id=contact_id, negotiated=negotiated)
    return respond(rendered, negotiator)


@router.get("/contacts/{contact_id}/phones/{phone_id}", name="get_phone")
async def get_phone(
    contact_id: int,
    phone_id: int,
    request: Request,
    negotiator: ContentNegotiator = Depends(get_negotiator),
    use_cases=Depends(get_use_cases),
) -> Response:
    negotiated = negotiator.negotiate(Operation.GET_PHONE, request.headers)
    rendered = await use_cases["get_phones"].execute(
        contact_id=contact_id,
        negotiated=negotiated,
        phone_id=phone_id,
    )
    return respond(rendered, negotiator)
