"""TextService: string helpers with defaults from the [strings] section."""

from __future__ import annotations

from typing import Literal

from dashkit.domain import strings
from dashkit.services.base import BaseService
from dashkit.services.result import ServiceResult
from dashkit.services.telemetry import traced

PadSide = Literal["start", "end"]


class TextService(BaseService):
    """Case conversion, trimming, truncation, and padding."""

    @traced
    def convert_case(self, text: str, style: str) -> ServiceResult:
        try:
            converted = strings.convert_case(text, style)
        except ValueError as exc:
            return self._invalid("convert_case", exc)
        return self._ok("convert_case", converted, style=str(style))

    @traced
    def trim(self, text: str, chars: str | None = None) -> ServiceResult:
        """Trim *text*; *chars* falls back to ``strings.trim_chars``."""
        if chars is None:
            chars = self._settings.strings.trim_chars
        return self._ok("trim", strings.trim(text, chars))

    @traced
    def truncate(
        self,
        text: str,
        length: int | None = None,
        omission: str | None = None,
    ) -> ServiceResult:
        cfg = self._settings.strings
        length = cfg.truncate_length if length is None else length
        omission = cfg.omission if omission is None else omission
        truncated = strings.truncate(text, length, omission)
        return self._ok("truncate", truncated, truncated=truncated != text)

    @traced
    def pad(
        self,
        text: str,
        length: int,
        *,
        char: str | None = None,
        side: PadSide = "start",
    ) -> ServiceResult:
        char = self._settings.strings.pad_char if char is None else char
        pad = strings.pad_start if side == "start" else strings.pad_end
        try:
            padded = pad(text, length, char)
        except ValueError as exc:
            return self._invalid("pad", exc)
        return self._ok("pad", padded)
