"""The value every service method returns.

INVARIANT: Services never raise for expected failures (bad arguments,
unreadable documents, missing paths). They return ``ok=False`` with a
:class:`ServiceError` instead, and the CLI decides how to print it.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation failed: a stable ``code`` plus a readable message."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name shown in output headers (``"get"``, ``"chunk"``).
        data: The primary result under ``"value"``, plus operation-specific
            extras such as ``count`` or ``found``.
        warnings: Non-fatal notes printed to stderr in human mode.
        error: Set when ``ok`` is False.
        meta: Telemetry and other diagnostics, filled in under ``--verbose``.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @property
    def value(self) -> Any:
        """The primary result, or None for failures."""
        return self.data.get("value")
