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
"""Destination instantiation.

Mapped values whose names are constructor parameters are passed to the
constructor; the rest are assigned on the new instance. A class whose
constructor takes no required arguments therefore behaves exactly like
"construct, then assign every field".

Pydantic models are created with ``model_construct()`` and every value is
assigned afterwards, so no value is validated, coerced or copied on the way
in. A new model ends up holding exactly what ``map_into`` would store.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel

from openmapper.execution.exceptions import DestinationInstantiationError

_KEYWORD_KINDS = (inspect.Parameter.POSITIONAL_OR_KEYWORD, inspect.Parameter.KEYWORD_ONLY)


class DestinationFactory:
    """Creates instances of one destination class from mapped field values."""

    def __init__(self, destination_type: type) -> None:
        self._destination_type = destination_type
        self._keywords, self._required = _constructor_parameters(destination_type)
        self._construct = _constructor(destination_type)

    @property
    def destination_type(self) -> type:
        return self._destination_type

    def create(self, values: dict[str, Any]) -> Any:
        kwargs = {self._keywords[name]: value for name, value in values.items() if name in self._keywords}
        missing = [name for name in self._required if name not in values]
        if missing:
            raise DestinationInstantiationError(self._destination_type, missing)

        instance = self._construct(**kwargs)
        for name, value in values.items():
            if name not in self._keywords:
                setattr(instance, name, value)
        return instance


def _constructor(cls: type) -> Callable[..., Any]:
    if issubclass(cls, BaseModel):
        return cls.model_construct
    return cls


def _constructor_parameters(cls: type) -> tuple[dict[str, str], list[str]]:
    """Map field names to constructor keywords, and list the required ones."""
    if issubclass(cls, BaseModel):
        return {}, [name for name, info in cls.model_fields.items() if info.is_required()]

    try:
        signature = inspect.signature(cls)
    except (TypeError, ValueError):
        # Builtins without an introspectable signature.
        return {}, []

    keywords: dict[str, str] = {}
    required: list[str] = []
    for name, param in signature.parameters.items():
        if param.kind not in _KEYWORD_KINDS:
            continue
        keywords[name] = name
        if param.default is inspect.Parameter.empty:
            required.append(name)
    return keywords, required
