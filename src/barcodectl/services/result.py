"""ServiceResult and ServiceError — the universal service contract.

INVARIANT: All service-layer methods return ServiceResult; domain errors
never escape a service. The CLI and any future adapter consume this type.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from barcodectl.domain.errors import BarcodeError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: BarcodeError) -> ServiceError:
        """Translate a domain error, keeping its kind as ``code``."""
        return cls(code=exc.code, message=exc.message, detail=exc.detail)


class ServiceResult(BaseModel):
    """Universal return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"build_barcode"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (scheme parameters, counts, etc.).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, exc: BarcodeError) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError.from_exception(exc))
