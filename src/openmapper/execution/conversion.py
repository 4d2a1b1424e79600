# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Conversion policy for values produced by custom member rules.

Values that already satisfy the destination field's declared type are stored
unchanged. Otherwise a primitive-to-primitive conversion is attempted between
``str``, ``int``, ``float``, ``bool``, ``Decimal`` and ``Enum`` types::

    convert(Decimal("999.99"), str)   # "999.99"
    convert("42", int)                # 42
    convert(15.5, int)                # 16 (round half to even)
    convert("TRUE", bool)             # True
    convert(3, int | None)            # 3

Anything else raises :class:`ConversionError`.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from decimal import Decimal
from enum import Enum
from typing import Any, get_args

from openmapper.execution.exceptions import ConversionError
from openmapper.introspection.types import is_union, satisfies, unwrap_optional

_PRIMITIVE_VALUES = (str, int, float, bool, Decimal, Enum)


def convert(value: Any, destination_type: Any) -> Any:
    """Return *value* as it should be stored in a field declared as *destination_type*."""
    if value is None or satisfies(value, destination_type):
        return value

    underlying = unwrap_optional(destination_type)
    if underlying is not None:
        return convert(value, underlying)

    if is_union(destination_type):
        for member in get_args(destination_type):
            converted = _try_convert(value, member)
            if converted is not _UNCONVERTED:
                return converted
        raise ConversionError(type(value), destination_type)

    return _convert_primitive(value, destination_type)


class _Unconverted:
    pass


_UNCONVERTED = _Unconverted()


def _try_convert(value: Any, target: Any) -> Any:
    try:
        return _convert_primitive(value, target)
    except ConversionError:
        return _UNCONVERTED


def _convert_primitive(value: Any, target: Any) -> Any:
    converter = _converter_for(target)
    if converter is None or not isinstance(value, _PRIMITIVE_VALUES):
        raise ConversionError(type(value), target)
    try:
        return converter(value, target)
    except (ValueError, TypeError, KeyError, ArithmeticError) as exc:
        # InvalidOperation and OverflowError are ArithmeticErrors.
        raise ConversionError(type(value), target) from exc


def _converter_for(target: Any) -> Callable[[Any, Any], Any] | None:
    if isinstance(target, type) and issubclass(target, Enum):
        return _to_enum
    return _CONVERTERS.get(target)


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def _to_str(value: Any, target: Any) -> str:
    if isinstance(value, Enum):
        return value.name
    return str(value)


def _to_int(value: Any, target: Any) -> int:
    value = _plain(value)
    if isinstance(value, str):
        return int(value.strip())
    if isinstance(value, (float, Decimal)):
        if not math.isfinite(value):
            raise ValueError(f"{value} is not finite")
        return int(round(value))
    return int(value)


def _to_float(value: Any, target: Any) -> float:
    value = _plain(value)
    if isinstance(value, str):
        return float(value.strip())
    return float(value)


def _to_decimal(value: Any, target: Any) -> Decimal:
    value = _plain(value)
    if isinstance(value, float):
        return Decimal(repr(value))
    if isinstance(value, str):
        return Decimal(value.strip())
    return Decimal(value)


def _to_bool(value: Any, target: Any) -> bool:
    value = _plain(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in ("true", "false"):
            return text == "true"
        raise ValueError(f"{value!r} is not a boolean")
    return value != 0


def _to_enum(value: Any, target: type[Enum]) -> Enum:
    value = _plain(value)
    try:
        return target(value)
    except ValueError:
        if isinstance(value, str):
            return target[value.strip()]
        raise


_CONVERTERS: dict[Any, Callable[[Any, Any], Any]] = {
    str: _to_str,
    int: _to_int,
    float: _to_float,
    bool: _to_bool,
    Decimal: _to_decimal,
}
