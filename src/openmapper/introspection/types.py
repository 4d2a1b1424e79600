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
"""Type compatibility rules used by the plan compiler and the conversion policy.

``is_assignable`` works on declared types at compile time, ``satisfies`` on
runtime values at map time. Neither applies a numeric tower: ``int`` is not
assignable to ``float`` (``bool`` is assignable to ``int`` because it is a
subclass).
"""

from __future__ import annotations

import collections
import collections.abc as abc
import types
from typing import Any, Literal, Union, get_args, get_origin

from pydantic import BaseModel

# Ordered sequence origins mapped to the container the mapper builds for them.
_SEQUENCE_CONTAINERS: dict[Any, type] = {
    list: list,
    tuple: tuple,
    collections.deque: collections.deque,
    abc.Sequence: list,
    abc.MutableSequence: list,
    abc.Collection: list,
    abc.Iterable: list,
}

_NON_SEQUENCE_ITERABLES = (str, bytes, bytearray, abc.Mapping, BaseModel)


def is_union(tp: Any) -> bool:
    """True for ``Union[...]``, ``Optional[...]`` and PEP 604 ``X | Y``."""
    return get_origin(tp) is Union or isinstance(tp, types.UnionType)


def unwrap_optional(tp: Any) -> Any | None:
    """Return ``U`` for ``Optional[U]``, else ``None``."""
    if not is_union(tp):
        return None
    non_none = [a for a in get_args(tp) if a is not type(None)]
    if len(non_none) == 1 and len(non_none) < len(get_args(tp)):
        return non_none[0]
    return None


def is_assignable(destination: Any, source: Any) -> bool:
    """Decide whether a field declared as *source* can be copied into *destination*."""
    if destination is Any or destination is object or destination == source:
        return True
    if source is Any:
        return False

    if is_union(source):
        return all(is_assignable(destination, member) for member in get_args(source))
    if is_union(destination):
        return any(is_assignable(member, source) for member in get_args(destination))

    dest_origin = get_origin(destination)
    src_origin = get_origin(source)
    if dest_origin is not None or src_origin is not None:
        if not _is_subclass(src_origin or source, dest_origin or destination):
            return False
        dest_args = get_args(destination)
        if not dest_args:
            return True
        src_args = get_args(source)
        if len(src_args) != len(dest_args):
            return False
        return all(d == s or is_assignable(d, s) for d, s in zip(dest_args, src_args))

    return _is_subclass(source, destination)


def satisfies(value: Any, tp: Any) -> bool:
    """Check a runtime value against a declared type.

    Generic aliases are checked against their origin only; element types are
    not inspected. Types that cannot be checked at runtime (TypeVars, string
    forward references) accept any value.
    """
    if tp is Any or tp is object:
        return True
    if tp is None or tp is type(None):
        return value is None
    if is_union(tp):
        return any(satisfies(value, member) for member in get_args(tp))

    origin = get_origin(tp)
    if origin is Literal:
        return value in get_args(tp)

    supertype = getattr(tp, "__supertype__", None)
    if supertype is not None:
        return satisfies(value, supertype)

    cls = origin or tp
    if isinstance(cls, type):
        return isinstance(value, cls)
    return True


def sequence_element_type(tp: Any) -> tuple[type, Any] | None:
    """Return ``(container, element_type)`` for a homogeneous ordered sequence type.

    ``list[X]``, ``tuple[X, ...]``, ``deque[X]``, ``Sequence[X]``,
    ``MutableSequence[X]``, ``Collection[X]`` and ``Iterable[X]`` qualify;
    bare containers and fixed-length tuples do not.
    """
    origin = get_origin(tp)
    if origin not in _SEQUENCE_CONTAINERS:
        return None
    args = get_args(tp)
    if origin is tuple:
        if len(args) != 2 or args[1] is not Ellipsis:
            return None
    elif len(args) != 1:
        return None
    return _SEQUENCE_CONTAINERS[origin], args[0]


def is_sequence_value(value: Any) -> bool:
    """True for iterables that map element-wise (not strings, mappings or models)."""
    return isinstance(value, abc.Iterable) and not isinstance(value, _NON_SEQUENCE_ITERABLES)


def type_name(tp: Any) -> str:
    """Readable name for a class or generic alias."""
    if isinstance(tp, type) and not get_args(tp):
        return tp.__name__
    return repr(tp).replace("typing.", "")


def _is_subclass(source: Any, destination: Any) -> bool:
    if not (isinstance(source, type) and isinstance(destination, type)):
        return False
    try:
        return issubclass(source, destination)
    except TypeError:
        # Non runtime-checkable protocols refuse issubclass().
        return False
