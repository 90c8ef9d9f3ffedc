"""
Capa de Infraestructura - API de Contactos.

Esta capa contiene las implementaciones concretas de los puertos (interfaces).

Estructura:
- db/: Tablas, repositorio SQL y transacciones
- in_memory/: Implementaciones in-memory (desarrollo y testing)
- seed_data.py: Contactos de demostración
"""

# Database
from app.infrastructure.db.repositories.contact_repo_sql import ContactRepoSQL
from app.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager

# In-Memory
from app.infrastructure.in_memory import (
    InMemoryContactRepo,
    InMemoryResponseCache,
    InMemoryTransactionManager,
)

__all__ = [
    # Database - Repositories SQL
    "ContactRepoSQL",
    "SQLAlchemyTransactionManager",
    # In-Memory Implementations
    "InMemoryContactRepo",
    "InMemoryResponseCache",
    "InMemoryTransactionManager",
]
