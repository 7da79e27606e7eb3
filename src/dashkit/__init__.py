"""dashkit: lodash-style helpers for Python value trees.

Every helper is re-exported here so callers can write
``import dashkit as _`` and use ``_.get(data, "a.b[0]")``.
"""

from __future__ import annotations

from dashkit.domain.deep import clone_deep, flatten_deep
from dashkit.domain.functional import range_, times
from dashkit.domain.lists import (
    chunk,
    compact,
    concat,
    difference,
    difference_by,
    drop,
    drop_right,
    take,
    take_right,
    uniq,
    uniq_by,
)
from dashkit.domain.numbers import clamp, in_range, random
from dashkit.domain.objects import (
    entries,
    get,
    has,
    invert,
    invert_by,
    keys,
    map_keys,
    map_values,
    omit,
    omit_by,
    pick,
    pick_by,
    values,
)
from dashkit.domain.paths import parse_path
from dashkit.domain.strings import (
    CaseStyle,
    camel_case,
    convert_case,
    kebab_case,
    lower_first,
    pad_end,
    pad_start,
    snake_case,
    trim,
    truncate,
    upper_first,
)
from dashkit.domain.types import is_empty, is_not_empty, is_not_null, is_null

__version__ = "0.4.0"

__all__ = [
    "CaseStyle",
    "__version__",
    "camel_case",
    "chunk",
    "clamp",
    "clone_deep",
    "compact",
    "concat",
    "convert_case",
    "difference",
    "difference_by",
    "drop",
    "drop_right",
    "entries",
    "flatten_deep",
    "get",
    "has",
    "in_range",
    "invert",
    "invert_by",
    "is_empty",
    "is_not_empty",
    "is_not_null",
    "is_null",
    "kebab_case",
    "keys",
    "lower_first",
    "map_keys",
    "map_values",
    "omit",
    "omit_by",
    "pad_end",
    "pad_start",
    "parse_path",
    "pick",
    "pick_by",
    "random",
    "range_",
    "snake_case",
    "take",
    "take_right",
    "times",
    "trim",
    "truncate",
    "uniq",
    "uniq_by",
    "upper_first",
    "values",
]
