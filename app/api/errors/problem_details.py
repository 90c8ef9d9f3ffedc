"""RFC 7807 Problem Details bodies for error responses."""

from pydantic import BaseModel, Field

PROBLEM_MEDIA_TYPE = "application/problem+json"


class ErrorDetail(BaseModel):
    """Individual field-specific error (one entry per failed rule)."""

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """Problem body returned for every 4xx/5xx produced by the API."""

    type: str = Field(..., description="URI reference identifying the problem type")
    title: str = Field(..., description="Short, human-readable summary")
    status: int = Field(..., description="HTTP status code")
    detail: str = Field(..., description="Human-readable explanation")
    instance: str = Field(..., description="URI reference identifying this occurrence")
    code: str | None = Field(None, description="Machine-readable error code")
    reason: str | None = Field(None, description="Why a patch document was rejected")
    errors: list[ErrorDetail] | None = Field(None, description="Field-specific errors")
    error_id: str | None = Field(None, description="Correlation id for server errors")
