"""String helpers: case conversion, padding, truncation, trimming."""

from __future__ import annotations

import re
from enum import StrEnum


class CaseStyle(StrEnum):
    """Target conventions for :func:`convert_case`."""

    CAMEL = "camel"
    KEBAB = "kebab"
    SNAKE = "snake"


# Characters stripped by trim() when no explicit set is given.
WHITESPACE = frozenset(
    " \t\n\r\v\f"
    "\u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

_SEPARATORS = re.compile(r"[^A-Za-z0-9]+")
_LOWER_UPPER = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def split_words(text: str) -> list[str]:
    """Break *text* into words for case conversion.

    Words are separated by runs of non-alphanumeric characters and by
    lower-to-upper transitions.

    Examples:
        >>> split_words("fooBar baz-QUX")
        ['foo', 'Bar', 'baz', 'QUX']
    """
    words: list[str] = []
    for part in _SEPARATORS.split(text):
        words.extend(word for word in _LOWER_UPPER.split(part) if word)
    return words


def camel_case(text: str) -> str:
    """``"Foo Bar"`` -> ``"fooBar"``."""
    words = [word.lower() for word in split_words(text)]
    if not words:
        return ""
    return words[0] + "".join(word.capitalize() for word in words[1:])


def kebab_case(text: str) -> str:
    """``"fooBarBaz"`` -> ``"foo-bar-baz"``."""
    return "-".join(word.lower() for word in split_words(text))


def snake_case(text: str) -> str:
    """``"fooBarBaz"`` -> ``"foo_bar_baz"``."""
    return "_".join(word.lower() for word in split_words(text))


_CONVERTERS = {
    CaseStyle.CAMEL: camel_case,
    CaseStyle.KEBAB: kebab_case,
    CaseStyle.SNAKE: snake_case,
}


def convert_case(text: str, style: CaseStyle | str) -> str:
    """Dispatch to the converter for *style*.

    Raises:
        ValueError: If *style* is not a known :class:`CaseStyle`.
    """
    return _CONVERTERS[CaseStyle(style)](text)


def upper_first(text: str) -> str:
    """Uppercase the first character only."""
    return text[:1].upper() + text[1:]


def lower_first(text: str) -> str:
    """Lowercase the first character only."""
    return text[:1].lower() + text[1:]


def _check_pad_char(char: str) -> None:
    if len(char) != 1:
        msg = f"Pad character must be a single character, got {char!r}"
        raise ValueError(msg)


def pad_start(text: str, length: int, char: str = " ") -> str:
    """Left-pad *text* with *char* up to *length*."""
    _check_pad_char(char)
    return text.rjust(length, char)


def pad_end(text: str, length: int, char: str = " ") -> str:
    """Right-pad *text* with *char* up to *length*."""
    _check_pad_char(char)
    return text.ljust(length, char)


def truncate(text: str, length: int = 30, omission: str = "...") -> str:
    """Shorten *text* to *length* characters, ending with *omission*.

    The omission counts toward *length*; when it is longer than *length*
    only the omission is returned.

    Examples:
        >>> truncate("Hello world", 8)
        'Hello...'
        >>> truncate("Hi", 10)
        'Hi'
    """
    if len(text) <= length:
        return text
    keep = max(0, length - len(omission))
    return text[:keep] + omission


def trim(text: str | None, chars: str | None = None) -> str:
    """Strip characters from both ends of *text*.

    With *chars* omitted, a fixed Unicode whitespace set is stripped;
    otherwise every character in *chars* is. ``None`` input yields ``""``.

    Examples:
        >>> trim("###hello###", "#")
        'hello'
        >>> trim(None)
        ''
    """
    if not text:
        return ""
    strip_set = WHITESPACE if chars is None else frozenset(chars)
    start, end = 0, len(text)
    while start < end and text[start] in strip_set:
        start += 1
    while end > start and text[end - 1] in strip_set:
        end -= 1
    return text[start:end]
