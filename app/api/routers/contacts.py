import json
from typing import Any

from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.security import HTTPBasicCredentials

from app.api.dependencies import get_negotiator, get_use_cases
from app.api.security import basic_auth, ensure_authenticated
from app.api.serializers import Rendered
from app.application.negotiation import ContentNegotiator, Negotiated, Operation
from app.config import Settings, get_settings

router = APIRouter()


async def read_json(request: Request) -> Any:
    """Request body as JSON; None when empty or not JSON (validation reports it)."""
    body = await request.body()
    if not body:
        return None
    try:
        return json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError):
        return None


def respond(
    rendered: Rendered,
    negotiator: ContentNegotiator,
    status_code: int = status.HTTP_200_OK,
    headers: dict[str, str] | None = None,
) -> Response:
    response = Response(
        content=rendered.body,
        status_code=status_code,
        media_type=rendered.media_type,
        headers=headers,
    )
    response.headers["api-supported-versions"] = negotiator.supported_versions_header()
    return response


def no_content(negotiator: ContentNegotiator) -> Response:
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    response.headers["api-supported-versions"] = negotiator.supported_versions_header()
    return response


def _cache_headers(negotiated: Negotiated, settings: Settings) -> dict[str, str]:
    if not negotiated.cacheable:
        return {}
    return {"Cache-Control": f"public, max-age={int(settings.cache_ttl_seconds)}"}


@router.get("/contacts", name="list_contacts")
async def list_contacts(
    request: Request,
    search: str | None = Query(default=None),
    credentials: HTTPBasicCredentials | None = Depends(basic_auth),
    settings: Settings = Depends(get_settings),
    negotiator: ContentNegotiator = Depends(get_negotiator),
    use_cases=Depends(get_use_cases),
) -> Response:
    negotiated = negotiator.negotiate(Operation.LIST_CONTACTS, request.headers)
    if negotiated.authenticated:
        ensure_authenticated(credentials, settings)
    rendered = await use_cases["list_contacts"].execute(negotiated=negotiated, search=search)
    return respond(rendered, negotiator)


@router.get("/contacts/{contact_id}", name="get_contact")
async def get_contact(
    contact_id: int,
    request: Request,
    settings: Settings = Depends(get_settings),
    negotiator: ContentNegotiator = Depends(get_negotiator),
    use_cases=Depends(get_use_cases),
) -> Response:
    negotiated = negotiator.negotiate(Operation.GET_CONTACT, request.headers)
    rendered = await use_cases["get_contact"].execute(contact_id=contact_id, negotiated=negotiated)
    return respond(rendered, negotiator, headers=_cache_headers(negotiated, settings))


@router.post("/contacts", name="create_contact", status_code=status.HTTP_201_CREATED)
async def create_contact(
    request: Request,
    negotiator: ContentNegotiator = Depends(get_negotiator),
    use_cases=Depends(get_use_cases),
) -> Response:
    negotiated = negotiator.negotiate(Operation.CREATE_CONTACT, request.headers)
    payload = await read_json(request)
    contact_id, rendered = await use_cases["create_contact"].execute(
        payload=payload,
        negotiated=negotiated,
    )
    location = str(request.url_for("get_contact", contact_id=str(contact_id)))
    return respond(
        rendered,
        negotiator,
        status_code=status.HTTP_201_CREATED,
        headers={"Location": location},
    )


@router.put("/contacts/{contact_id}", name="update_contact")
async def update_contact(
    contact_id: int,
    request: Request,
    negotiator: ContentNegotiator = Depends(get_negotiator),
    use_cases=Depends(get_use_cases),
) -> Response:
    negotiator.negotiate(Operation.UPDATE_CONTACT, request.headers)
    payload = await read_json(request)
    await use_cases["update_contact"].execute(contact_id=contact_id, payload=payload)
    return no_content(negotiator)


@router.patch("/contacts/{contact_id}", name="patch_contact")
async def patch_contact(
    contact_id: int,
    request: Request,
    negotiator: ContentNegotiator = Depends(get_negotiator),
    use_cases=Depends(get_use_cases),
) -> Response:
    negotiator.negotiate(Operation.PATCH_CONTACT, request.headers)
    document = await read_json(request)
    await use_cases["patch_contact"].execute(contact_id=contact_id, document=document)
    return no_content(negotiator)


@router.delete("/contacts/{contact_id}", name="delete_contact")
async def delete_contact(
    contact_id: int,
    request: Request,
    negotiator: ContentNegotiator = Depends(get_negotiator),
    use_cases=Depends(get_use_cases),
) -> Response:
    negotiator.negotiate(Operation.DELETE_CONTACT, request.headers)
    await use_cases["delete_contact"].execute(contact_id=contact_id)
    return no_content(negotiator)
