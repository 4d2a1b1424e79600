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
"""Structural descriptors: the public fields of a class, with their declared types.

Supports dataclasses, Pydantic models and plain annotated classes (including
``property`` accessors). Fields are reported in declaration order, base
classes first. Names starting with an underscore are never public.
"""

from __future__ import annotations

import dataclasses
import functools
import inspect
import typing
from dataclasses import dataclass
from typing import Any, ClassVar, Final, get_args, get_origin

from pydantic import BaseModel


@dataclass(frozen=True)
class FieldDescriptor:
    """A named, typed field that can be read and/or written on instances."""

    name: str
    type: Any = Any
    readable: bool = True
    writable: bool = True

    def get(self, obj: Any) -> Any:
        return getattr(obj, self.name)

    def set(self, obj: Any, value: Any) -> None:
        setattr(obj, self.name, value)


@functools.lru_cache(maxsize=None)
def fields_of(cls: type) -> tuple[FieldDescriptor, ...]:
    """Enumerate the public fields of *cls* in declaration order."""
    if isinstance(cls, type) and issubclass(cls, BaseModel):
        return tuple(_model_fields(cls))
    if dataclasses.is_dataclass(cls):
        found = _dataclass_fields(cls)
    else:
        found = _annotated_fields(cls)
    seen = {f.name for f in found}
    found.extend(p for p in _property_fields(cls) if p.name not in seen)
    return tuple(found)


def readable_fields(cls: type) -> list[FieldDescriptor]:
    """Fields whose value can be read from an instance, in declaration order."""
    return [f for f in fields_of(cls) if f.readable]


def writable_fields(cls: type) -> dict[str, FieldDescriptor]:
    """Fields that can be assigned on an existing instance, keyed by name."""
    return {f.name: f for f in fields_of(cls) if f.writable}


# ------------------------------------------------------------------
# Internal helpers
# ------------------------------------------------------------------


def _type_hints(obj: Any) -> dict[str, Any]:
    """Resolved type hints, falling back to raw annotations on unresolved names.

    Unresolved forward references stay as strings and only ever match the
    identical string.
    """
    try:
        return typing.get_type_hints(obj)
    except NameError:
        if isinstance(obj, type):
            merged: dict[str, Any] = {}
            for klass in reversed(obj.__mro__):
                merged.update(inspect.get_annotations(klass))
            return merged
        return inspect.get_annotations(obj)


def _is_public(name: str) -> bool:
    return not name.startswith("_")


def _model_fields(cls: type[BaseModel]) -> list[FieldDescriptor]:
    model_frozen = bool(cls.model_config.get("frozen", False))
    found = [
        FieldDescriptor(
            name=name,
            type=info.annotation if info.annotation is not None else Any,
            writable=not (model_frozen or info.frozen),
        )
        for name, info in cls.model_fields.items()
        if _is_public(name)
    ]
    found.extend(
        FieldDescriptor(name=name, type=info.return_type, writable=False)
        for name, info in cls.model_computed_fields.items()
        if _is_public(name)
    )
    return found


def _dataclass_fields(cls: type) -> list[FieldDescriptor]:
    hints = _type_hints(cls)
    frozen = cls.__dataclass_params__.frozen  # type: ignore[attr-defined]
    return [
        FieldDescriptor(name=f.name, type=hints.get(f.name, Any), writable=not frozen)
        for f in dataclasses.fields(cls)
        if _is_public(f.name)
    ]


def _annotated_fields(cls: type) -> list[FieldDescriptor]:
    """Class-level annotations of a plain class.

    An annotation is a promise that instances carry the attribute. Reading
    one that was never assigned raises ``AttributeError`` at map time, like
    any other failing source access.
    """
    found: list[FieldDescriptor] = []
    for name, hint in _type_hints(cls).items():
        if not _is_public(name) or isinstance(inspect.getattr_static(cls, name, None), property):
            continue
        if hint is ClassVar or get_origin(hint) is ClassVar:
            continue
        if hint is Final or get_origin(hint) is Final:
            args = get_args(hint)
            found.append(FieldDescriptor(name=name, type=args[0] if args else Any, writable=False))
            continue
        found.append(FieldDescriptor(name=name, type=hint))
    return found


def _property_fields(cls: type) -> list[FieldDescriptor]:
    props: dict[str, property] = {}
    for klass in reversed(cls.__mro__):
        for name, attr in vars(klass).items():
            if isinstance(attr, property) and _is_public(name):
                props[name] = attr
    return [
        FieldDescriptor(
            name=name,
            type=_property_type(prop),
            readable=prop.fget is not None,
            writable=prop.fset is not None,
        )
        for name, prop in props.items()
    ]


def _property_type(prop: property) -> Any:
    if prop.fget is not None:
        return _type_hints(prop.fget).get("return", Any)
    if prop.fset is not None:
        hints = _type_hints(prop.fset)
        hints.pop("return", None)
        params = list(inspect.signature(prop.fset).parameters)
        if len(params) == 2:
            return hints.get(params[1], Any)
    return Any
