"""ServiceResult and ServiceError, returned by every TextService operation.

A failed result always carries one of the :class:`ErrorCode` values so the
CLI and JSON consumers can branch on a closed set. Silent fallbacks (zero
color, echoed digest input) stay ``ok`` and are reported in ``warnings``.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, model_validator


class ErrorCode(StrEnum):
    INVALID_INPUT = "INVALID_INPUT"
    ENCODING_ERROR = "ENCODING_ERROR"
    INVALID_JSON = "INVALID_JSON"
    FONT_ERROR = "FONT_ERROR"


class ServiceError(BaseModel):
    """Why an operation failed, plus the offending values in ``detail``."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one string operation.

    Attributes:
        ok: Whether the operation produced a value.
        op: Operation name (``"hex_color"``, ``"md5"``, ``"range_to_slice"``...).
        data: The computed values; empty on failure.
        warnings: Fallbacks taken while still producing a value.
        error: Set only when ``ok`` is False.
        meta: ``{"telemetry": {...}}`` under ``--verbose``, else None.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @model_validator(mode="after")
    def _error_only_on_failure(self) -> ServiceResult:
        if self.ok and self.error is not None:
            raise ValueError(f"Successful {self.op!r} result cannot carry an error")
        return self
