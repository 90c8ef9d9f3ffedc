"""
Capa de Aplicación - API de Contactos.

Esta capa contiene los casos de uso e interfaces (puertos), además de la
negociación de contenido, la validación y el motor de JSON Patch.

Estructura:
- use_cases/: Casos de uso del sistema
- interfaces/: Puertos (contratos para adaptadores)
- negotiation.py: Versión, variante y formato por request
- json_patch.py: Aplicación de documentos JSON Patch
"""

from app.application.interfaces import (
    CacheEntry,
    CacheKey,
    Clock,
    ContactRepo,
    FakeClock,
    ResponseCache,
    SystemClock,
    TransactionManager,
)

__all__ = [
    # Interfaces - Repositories
    "ContactRepo",
    # Interfaces - Infrastructure
    "TransactionManager",
    "ResponseCache",
    "CacheKey",
    "CacheEntry",
    # Interfaces - Utilities
    "Clock",
    "SystemClock",
    "FakeClock",
]
