"""Excepciones de dominio para la API de contactos."""


class DomainError(Exception):
    """Clase base para todos los errores de dominio."""

    status_code = 400

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


# === Errores de Contacto ===


class ContactNotFoundError(DomainError):
    """El contacto no existe."""

    status_code = 404

    def __init__(self, contact_id: int):
        super().__init__(
            message=f"Contact with id {contact_id} was not found",
            code="CONTACT_NOT_FOUND",
        )
        self.contact_id = contact_id


class PhoneNotFoundError(DomainError):
    """El teléfono no existe o pertenece a otro contacto."""

    status_code = 404

    def __init__(self, contact_id: int, phone_id: int):
        super().__init__(
            message=f"Phone with id {phone_id} was not found for contact {contact_id}",
            code="PHONE_NOT_FOUND",
        )
        self.contact_id = contact_id
        self.phone_id = phone_id


# === Errores de Validación ===


class ValidationFailedError(DomainError):
    """
    La entrada viola reglas de campo o de dominio.

    Acumula pares (campo, mensaje) antes de responder.
    """

    status_code = 422

    def __init__(self, errors: list[tuple[str, str]]):
        fields = ", ".join(sorted({field for field, _ in errors}))
        super().__init__(
            message=f"Validation failed for: {fields}",
            code="VALIDATION_FAILED",
        )
        self.errors = errors


class PatchRejectedError(DomainError):
    """
    El documento de patch no pudo aplicarse o el resultado no es válido.

    reason distingue fallas estructurales de fallas de validación.
    """

    MALFORMED_DOCUMENT = "malformed_document"
    INVALID_OPERATION = "invalid_operation"
    PATH_NOT_FOUND = "path_not_found"
    TEST_FAILED = "test_failed"
    VALIDATION_FAILED = "validation_failed"

    def __init__(
        self,
        reason: str,
        message: str,
        errors: list[tuple[str, str]] | None = None,
    ):
        super().__init__(message=message, code="PATCH_REJECTED")
        self.reason = reason
        self.errors = errors or []
        self.status_code = 400 if reason == self.MALFORMED_DOCUMENT else 422


# === Errores de Negociación ===


class UnsupportedVersionError(DomainError):
    """La versión de API pedida no existe o no define la operación."""

    status_code = 400

    def __init__(self, requested: str, supported: list[int]):
        versions = ", ".join(f"{v}.0" for v in supported)
        super().__init__(
            message=f"API version '{requested}' is not supported (supported: {versions})",
            code="UNSUPPORTED_API_VERSION",
        )
        self.requested = requested
        self.supported = supported


class NotAcceptableError(DomainError):
    """Ningún media type registrado satisface el header Accept."""

    status_code = 406

    def __init__(self, accept: str, available: list[str]):
        super().__init__(
            message=f"None of the requested media types '{accept}' can be produced "
            f"(available: {', '.join(available)})",
            code="NOT_ACCEPTABLE",
        )
        self.accept = accept
        self.available = available


class UnsupportedMediaTypeError(DomainError):
    """El Content-Type de la petición no está registrado para la operación."""

    status_code = 415

    def __init__(self, content_type: str | None, available: list[str]):
        super().__init__(
            message=f"Content-Type '{content_type or ''}' is not supported "
            f"(supported: {', '.join(available)})",
            code="UNSUPPORTED_MEDIA_TYPE",
        )
        self.content_type = content_type
        self.available = available
