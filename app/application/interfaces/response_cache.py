"""Interface ResponseCache - Puerto para el cache de respuestas GET."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class CacheKey:
    """
    Identidad de una respuesta cacheada.

    Incluye variante y formato para que dos media types del mismo recurso
    nunca compartan entrada.
    """

    operation: str
    resource_id: int
    variant: str
    format: str

    def __str__(self) -> str:
        return f"{self.operation}:{self.resource_id}:{self.variant}:{self.format}"


@dataclass(frozen=True)
class CacheEntry:
    """Valor serializado con vencimiento absoluto. Inmutable una vez escrito."""

    value: bytes
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at


class ResponseCache(ABC):
    """
    Puerto para el cache de representaciones.

    Las escrituras al store no invalidan entradas: una lectura puede quedar
    desactualizada como máximo el TTL de la entrada.
    """

    @property
    @abstractmethod
    def default_ttl_seconds(self) -> float:
        raise NotImplementedError

    @abstractmethod
    def get(self, key: CacheKey) -> bytes | None:
        """
        Retorna el valor vigente para key.

        Una entrada vencida se descarta en la misma lectura y cuenta como miss.
        """
        raise NotImplementedError

    @abstractmethod
    def put(self, key: CacheKey, value: bytes, ttl_seconds: float | None = None) -> None:
        """
        Guarda value para key; la última escritura gana.

        Args:
            key: Identidad de la respuesta.
            value: Representación serializada.
            ttl_seconds: Vigencia; None usa el TTL por defecto.
        """
        raise NotImplementedError

    @abstractmethod
    def evict_expired(self) -> int:
        """Elimina todas las entradas vencidas y retorna cuántas fueron."""
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        raise NotImplementedError
