"""BaseService: shared foundation for dashkit services.

Every service receives :class:`DashSettings` at construction time and
returns :class:`ServiceResult` from each public method. Validation
errors raised by the domain layer are converted into failed results
here so that callers never see a bare exception.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from dashkit.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from dashkit.config.settings import DashSettings

logger = logging.getLogger(__name__)

INVALID_ARGUMENT = "INVALID_ARGUMENT"
LOAD_FAILED = "LOAD_FAILED"
NOT_FOUND = "NOT_FOUND"


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class TextService(BaseService):
            def trim(self, text: str) -> ServiceResult:
                return self._ok("trim", dashkit.trim(text))
    """

    def __init__(self, settings: DashSettings) -> None:
        self._settings = settings

    @staticmethod
    def _ok(
        op: str,
        value: Any,
        *,
        warnings: list[str] | None = None,
        **data: Any,
    ) -> ServiceResult:
        return ServiceResult(
            ok=True,
            op=op,
            data={"value": value, **data},
            warnings=warnings or [],
        )

    @staticmethod
    def _fail(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        logger.debug("%s failed: %s (%s)", op, message, code)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )

    def _invalid(self, op: str, exc: ValueError) -> ServiceResult:
        return self._fail(op, INVALID_ARGUMENT, str(exc))
