"""Interfaces (Puertos) de la capa de aplicación."""

from app.application.interfaces.clock import Clock, FakeClock, SystemClock
from app.application.interfaces.contact_repo import ContactRepo
from app.application.interfaces.response_cache import CacheEntry, CacheKey, ResponseCache
from app.application.interfaces.transaction_manager import TransactionManager

__all__ = [
    # Repositories
    "ContactRepo",
    # Infrastructure
    "TransactionManager",
    "ResponseCache",
    "CacheKey",
    "CacheEntry",
    # Utilities
    "Clock",
    "SystemClock",
    "FakeClock",
]
