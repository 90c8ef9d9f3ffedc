from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import AsyncSessionLocal
from app.application.interfaces.clock import SystemClock
from app.application.interfaces.contact_repo import ContactRepo
from app.application.interfaces.response_cache import ResponseCache
from app.application.interfaces.transaction_manager import TransactionManager
from app.application.json_patch import PatchEngine
from app.application.negotiation import ContentNegotiator
from app.application.use_cases.create_contact import CreateContactUseCase
from app.application.use_cases.delete_contact import DeleteContactUseCase
from app.application.use_cases.get_contact import GetContactUseCase
from app.application.use_cases.get_phones import GetPhonesUseCase
from app.application.use_cases.list_contacts import ListContactsUseCase
from app.application.use_cases.patch_contact import PatchContactUseCase
from app.application.use_cases.update_contact import UpdateContactUseCase
from app.config import Settings, get_settings
from app.infrastructure.db.repositories.contact_repo_sql import ContactRepoSQL
from app.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager
from app.infrastructure.in_memory.contact_repo import InMemoryContactRepo
from app.infrastructure.in_memory.response_cache import InMemoryResponseCache
from app.infrastructure.in_memory.transaction_manager import NoopTransactionManager
from app.infrastructure.seed_data import demo_contacts


async def get_session(settings: Settings = Depends(get_settings)) -> AsyncSession | None:
    if settings.use_in_memory:
        yield None
        return
    async with AsyncSessionLocal() as session:
        yield session


@lru_cache(maxsize=1)
def _in_memory_store() -> InMemoryContactRepo:
    repo = InMemoryContactRepo()
    if get_settings().seed_demo_data:
        repo.seed(demo_contacts())
    return repo


@lru_cache(maxsize=1)
def get_response_cache() -> ResponseCache:
    # Shared by every request of the process; entries expire, writes never evict.
    return InMemoryResponseCache(
        clock=SystemClock(),
        default_ttl_seconds=get_settings().cache_ttl_seconds,
    )


def get_negotiator(settings: Settings = Depends(get_settings)) -> ContentNegotiator:
    return ContentNegotiator(
        supported_versions=settings.supported_api_versions,
        version_header=settings.api_version_header,
    )


def get_contact_repo(
    settings: Settings = Depends(get_settings),
    session: AsyncSession | None = Depends(get_session),
) -> ContactRepo:
    if settings.use_in_memory:
        return _in_memory_store()
    if not session:
        raise RuntimeError("DB session not available")
    return ContactRepoSQL(session)


def get_transaction_manager(
    settings: Settings = Depends(get_settings),
    session: AsyncSession | None = Depends(get_session),
) -> TransactionManager:
    if settings.use_in_memory:
        return NoopTransactionManager()
    if not session:
        raise RuntimeError("DB session not available")
    return SQLAlchemyTransactionManager(session)


def get_use_cases(
    contact_repo: ContactRepo = Depends(get_contact_repo),
    tx_manager: TransactionManager = Depends(get_transaction_manager),
    response_cache: ResponseCache = Depends(get_response_cache),
):
    return {
        "list_contacts": ListContactsUseCase(contact_repo=contact_repo),
        "get_contact": GetContactUseCase(
            contact_repo=contact_repo,
            response_cache=response_cache,
        ),
        "create_contact": CreateContactUseCase(
            contact_repo=contact_repo,
            transaction_manager=tx_manager,
        ),
        "update_contact": UpdateContactUseCase(
            contact_repo=contact_repo,
            transaction_manager=tx_manager,
        ),
        "patch_contact": PatchContactUseCase(
            contact_repo=contact_repo,
            transaction_manager=tx_manager,
            patch_engine=PatchEngine(),
        ),
        "delete_contact": DeleteContactUseCase(
            contact_repo=contact_repo,
            transaction_manager=tx_manager,
        ),
        "get_phones": GetPhonesUseCase(contact_repo=contact_repo),
    }
