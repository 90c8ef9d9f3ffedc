"""Implementaciones in-memory para desarrollo y testing."""

from app.infrastructure.in_memory.contact_repo import InMemoryContactRepo
from app.infrastructure.in_memory.response_cache import InMemoryResponseCache
from app.infrastructure.in_memory.transaction_manager import NoopTransactionManager as InMemoryTransactionManager

__all__ = [
    # Repositories
    "InMemoryContactRepo",
    # Infrastructure
    "InMemoryResponseCache",
    "InMemoryTransactionManager",
]
