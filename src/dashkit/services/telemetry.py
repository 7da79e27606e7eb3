"""Service telemetry: timing spans for ``--verbose`` runs.

Spans form a tree per service call. The root span is opened by
:func:`traced`; helpers open children with :func:`trace_span`. When
telemetry is off both are a single ContextVar lookup.

The finished tree is attached to ``ServiceResult.meta["telemetry"]`` and
one ``span.complete`` event is logged per root span.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Generator, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from dashkit.services.result import ServiceResult

_enabled: ContextVar[bool] = ContextVar("dashkit_telemetry_enabled", default=False)
_active: ContextVar[Span | None] = ContextVar("dashkit_active_span", default=None)

_log = structlog.get_logger("dashkit.telemetry")


@dataclass
class Span:
    """One timed step; ``children`` are the steps nested inside it."""

    name: str
    children: list[Span] = field(default_factory=list)
    annotations: dict[str, Any] = field(default_factory=dict)
    started: float = field(default_factory=time.perf_counter)
    finished: float | None = None

    @property
    def elapsed_ms(self) -> float:
        """Milliseconds between start and :meth:`finish`; 0 while running."""
        if self.finished is None:
            return 0.0
        return (self.finished - self.started) * 1000

    def finish(self) -> None:
        self.finished = time.perf_counter()

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def to_dict(self) -> dict[str, Any]:
        tree: dict[str, Any] = {"name": self.name, "duration_ms": round(self.elapsed_ms, 2)}
        if self.annotations:
            tree["annotations"] = dict(self.annotations)
        if self.children:
            tree["children"] = [child.to_dict() for child in self.children]
        return tree


@contextmanager
def _activate(span: Span) -> Iterator[Span]:
    """Make *span* the active span until the block exits, then finish it."""
    token = _active.set(span)
    try:
        yield span
    finally:
        span.finish()
        _active.reset(token)


@contextmanager
def trace_span(name: str) -> Generator[Span | None]:
    """Open a child of the active span.

    Yields None when telemetry is off or no :func:`traced` call is running,
    so callers guard annotations with ``if span:``.
    """
    parent = _active.get() if _enabled.get() else None
    if parent is None:
        yield None
        return
    child = Span(name=name)
    parent.children.append(child)
    with _activate(child):
        yield child


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Time each call of a service method as a root span.

    ServiceResult return values get the span tree merged into ``meta``;
    other return values and exceptions pass through untouched.
    """

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _enabled.get():
            return func(*args, **kwargs)

        root = Span(name=func.__qualname__)
        ok = False
        try:
            with _activate(root):
                result = func(*args, **kwargs)
            ok = not isinstance(result, ServiceResult) or result.ok
        finally:
            _log.debug(
                "span.complete",
                span_name=root.name,
                duration_ms=round(root.elapsed_ms, 2),
                ok=ok,
                children=len(root.children),
            )

        if isinstance(result, ServiceResult):
            meta = {**(result.meta or {}), "telemetry": root.to_dict()}
            return result.model_copy(update={"meta": meta})  # type: ignore[return-value]
        return result

    return wrapper


def enable_telemetry() -> None:
    """Turn span collection on for the current context (``--verbose``)."""
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)


def get_current_span() -> Span | None:
    """The active span, for manual annotation; None when telemetry is off."""
    if not _enabled.get():
        return None
    return _active.get()
