"""DocumentService: path queries and transforms over loaded documents.

Each operation loads a JSON/YAML document, optionally narrows it to the
subtree at *path*, and applies one domain helper to the result.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from dashkit.config.models import DocumentFormat
from dashkit.domain import deep, lists, objects
from dashkit.infrastructure.documents import DocumentError, load_document
from dashkit.services.base import LOAD_FAILED, NOT_FOUND, BaseService
from dashkit.services.result import ServiceResult
from dashkit.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)

_UNSET = object()


class _Failed(Exception):
    """Internal short-circuit carrying a failed ServiceResult."""

    def __init__(self, result: ServiceResult) -> None:
        super().__init__(result.error.message if result.error else result.op)
        self.result = result


class DocumentService(BaseService):
    """Query and reshape JSON/YAML documents with the dashkit helpers."""

    def _load(self, op: str, source: str, fmt: DocumentFormat | None) -> Any:
        with trace_span("load_document") as span:
            try:
                document = load_document(
                    source,
                    fmt,
                    default_format=self._settings.documents.default_format,
                )
            except DocumentError as exc:
                raise _Failed(self._fail(op, LOAD_FAILED, str(exc), source=source)) from exc
            if span:
                span.annotate("source", source)
        logger.debug("Loaded document from %s", source)
        return document

    def _select(self, op: str, source: str, path: str | None, fmt: DocumentFormat | None) -> Any:
        document = self._load(op, source, fmt)
        if not path:
            return document
        if not objects.has(document, path):
            raise _Failed(self._fail(op, NOT_FOUND, f"No value at path {path!r}", path=path))
        return objects.get(document, path)

    def _run(self, op: str, action: Callable[[], ServiceResult]) -> ServiceResult:
        try:
            return action()
        except _Failed as failed:
            return failed.result
        except ValueError as exc:
            return self._invalid(op, exc)

    @staticmethod
    def _require_mapping(value: Any, path: str | None) -> Mapping[Any, Any]:
        if not isinstance(value, Mapping):
            msg = f"Value at {path or '<root>'!r} is not a mapping"
            raise ValueError(msg)
        return value

    @staticmethod
    def _require_list(value: Any, path: str | None) -> Sequence[Any]:
        if not isinstance(value, (list, tuple)):
            msg = f"Value at {path or '<root>'!r} is not a list"
            raise ValueError(msg)
        return value

    # ── Path access ──────────────────────────────────────────────────

    @traced
    def get(
        self,
        source: str,
        path: str,
        *,
        default: Any = None,
        fmt: DocumentFormat | None = None,
    ) -> ServiceResult:
        """Resolve *path*; a miss yields *default* rather than an error.

        Falling back to a non-null *default* is reported as a warning.
        """

        def action() -> ServiceResult:
            document = self._load("get", source, fmt)
            found = objects.has(document, path)
            value = objects.get(document, path, _UNSET)
            warnings: list[str] = []
            if value is _UNSET:
                value = default
                if default is not None:
                    reason = "is null" if found else "not found"
                    warnings.append(f"Path {path!r} {reason}; using default {default!r}")
            return self._ok("get", value, warnings=warnings, path=path, found=found)

        return self._run("get", action)

    @traced
    def has(self, source: str, path: str, *, fmt: DocumentFormat | None = None) -> ServiceResult:
        def action() -> ServiceResult:
            document = self._load("has", source, fmt)
            return self._ok("has", objects.has(document, path), path=path)

        return self._run("has", action)

    # ── Mapping transforms ───────────────────────────────────────────

    @traced
    def pick(
        self,
        source: str,
        keys: Sequence[str],
        *,
        path: str | None = None,
        fmt: DocumentFormat | None = None,
    ) -> ServiceResult:
        def action() -> ServiceResult:
            target = self._require_mapping(self._select("pick", source, path, fmt), path)
            return self._ok("pick", objects.pick(target, *keys))

        return self._run("pick", action)

    @traced
    def omit(
        self,
        source: str,
        keys: Sequence[str],
        *,
        path: str | None = None,
        fmt: DocumentFormat | None = None,
    ) -> ServiceResult:
        def action() -> ServiceResult:
            target = self._require_mapping(self._select("omit", source, path, fmt), path)
            return self._ok("omit", objects.omit(target, *keys))

        return self._run("omit", action)

    @traced
    def keys(
        self,
        source: str,
        *,
        path: str | None = None,
        fmt: DocumentFormat | None = None,
    ) -> ServiceResult:
        """List mapping keys; a non-mapping target yields an empty list."""

        def action() -> ServiceResult:
            target = self._select("keys", source, path, fmt)
            found = objects.keys(target)
            return self._ok("keys", found, count=len(found))

        return self._run("keys", action)

    @traced
    def invert(
        self,
        source: str,
        *,
        path: str | None = None,
        group: bool = False,
        fmt: DocumentFormat | None = None,
    ) -> ServiceResult:
        """Invert a mapping; with *group*, collect every key per value."""

        def action() -> ServiceResult:
            target = self._require_mapping(self._select("invert", source, path, fmt), path)
            inverted = objects.invert_by(target) if group else objects.invert(target)
            return self._ok("invert", inverted)

        return self._run("invert", action)

    # ── List transforms ──────────────────────────────────────────────

    @traced
    def flatten(
        self,
        source: str,
        *,
        path: str | None = None,
        fmt: DocumentFormat | None = None,
    ) -> ServiceResult:
        def action() -> ServiceResult:
            target = self._require_list(self._select("flatten", source, path, fmt), path)
            flat = deep.flatten_deep(target)
            return self._ok("flatten", flat, count=len(flat))

        return self._run("flatten", action)

    @traced
    def chunk(
        self,
        source: str,
        size: int,
        *,
        path: str | None = None,
        fmt: DocumentFormat | None = None,
    ) -> ServiceResult:
        def action() -> ServiceResult:
            target = self._require_list(self._select("chunk", source, path, fmt), path)
            chunks = lists.chunk(target, size)
            return self._ok("chunk", chunks, count=len(chunks))

        return self._run("chunk", action)

    @traced
    def compact(
        self,
        source: str,
        *,
        path: str | None = None,
        fmt: DocumentFormat | None = None,
    ) -> ServiceResult:
        def action() -> ServiceResult:
            target = self._require_list(self._select("compact", source, path, fmt), path)
            kept = lists.compact(target)
            return self._ok("compact", kept, removed=len(target) - len(kept))

        return self._run("compact", action)

    @traced
    def uniq(
        self,
        source: str,
        *,
        path: str | None = None,
        by: str | None = None,
        fmt: DocumentFormat | None = None,
    ) -> ServiceResult:
        """Deduplicate a list, optionally by the value at *by* in each item."""

        def action() -> ServiceResult:
            target = self._require_list(self._select("uniq", source, path, fmt), path)
            if by:
                distinct = lists.uniq_by(target, lambda item: objects.get(item, by))
            else:
                distinct = lists.uniq(target)
            return self._ok("uniq", distinct, removed=len(target) - len(distinct))

        return self._run("uniq", action)
