"""SequenceService: integer ranges for the CLI."""

from __future__ import annotations

from dashkit.domain.functional import range_
from dashkit.services.base import BaseService
from dashkit.services.result import ServiceResult
from dashkit.services.telemetry import traced


class SequenceService(BaseService):
    @traced
    def range_(self, start: int, end: int | None = None, step: int = 1) -> ServiceResult:
        try:
            numbers = range_(start, end, step)
        except ValueError as exc:
            return self._invalid("range", exc)
        return self._ok("range", numbers, count=len(numbers))
