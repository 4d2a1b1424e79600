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
"""Fluent mapping configuration: ``create_map(...).for_member(...)``.

Example::

    class BookProfile(Profile):
        def configure(self) -> None:
            (
                self.create_map(Book, BookDto)
                .for_member("chapter_count", lambda opt: opt.map_from(lambda src: len(src.chapters)))
                .for_member(lambda d: d.available, lambda opt: opt.map_from(lambda src: src.stock > 0))
            )
"""

from __future__ import annotations

import keyword
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from openmapper.configuration.exceptions import InvalidSelectorError
from openmapper.configuration.member import FieldRule, MappingDeclaration

S = TypeVar("S")
D = TypeVar("D")

Selector = str | Callable[[Any], Any]


class MemberConfigurationExpression(Generic[S]):
    """Options for one destination member, handed to ``for_member`` callbacks."""

    def __init__(self, declaration: MappingDeclaration, field_name: str) -> None:
        self._declaration = declaration
        self._field_name = field_name

    @property
    def field_name(self) -> str:
        return self._field_name

    def map_from(self, resolver: Callable[[S], Any]) -> None:
        """Compute the member from the whole source object at map time.

        Replaces any earlier rule for the same member in this mapping.
        """
        if not callable(resolver):
            raise TypeError(f"map_from() expects a callable, got {type(resolver).__name__}")
        self._declaration.rules[self._field_name] = FieldRule(self._field_name, resolver)


class MappingExpression(Generic[S, D]):
    """Returned by ``Profile.create_map``; configures members of one type pair."""

    def __init__(self, declaration: MappingDeclaration) -> None:
        self._declaration = declaration

    @property
    def source_type(self) -> type[S]:
        return self._declaration.source_type

    @property
    def destination_type(self) -> type[D]:
        return self._declaration.destination_type

    def for_member(
        self,
        destination_member: Selector,
        member_options: Callable[[MemberConfigurationExpression[S]], Any],
    ) -> MappingExpression[S, D]:
        """Configure a single destination member.

        Args:
            destination_member: Field name, or a selector such as ``lambda d: d.total``.
            member_options: Receives a :class:`MemberConfigurationExpression`.

        Raises:
            InvalidSelectorError: If the selector is not a single direct field access.
        """
        field_name = resolve_selector(destination_member)
        member_options(MemberConfigurationExpression(self._declaration, field_name))
        return self


def resolve_selector(selector: Selector) -> str:
    """Resolve a member selector to exactly one field name."""
    if isinstance(selector, str):
        if not selector.isidentifier() or keyword.iskeyword(selector):
            raise InvalidSelectorError(selector, "not a field name")
        return selector
    if not callable(selector):
        raise InvalidSelectorError(selector, "expected a field name or a callable")

    accessed: list[str] = []
    probe = _SelectorProbe(accessed, nested=False)
    try:
        result = selector(probe)
    except _NotADirectField as exc:
        raise InvalidSelectorError(selector, str(exc)) from None
    except Exception as exc:
        raise InvalidSelectorError(selector, f"evaluating the selector failed ({exc})") from exc

    if len(accessed) != 1:
        raise InvalidSelectorError(selector, f"expected one field access, found {len(accessed)}")
    if not isinstance(result, _SelectorProbe) or result is probe:
        raise InvalidSelectorError(selector, "the selector must return the accessed field")
    return accessed[0]


class _NotADirectField(Exception):
    pass


class _SelectorProbe:
    """Stand-in destination that records attribute access made by a selector."""

    __slots__ = ("_accessed", "_nested")

    def __init__(self, accessed: list[str], nested: bool) -> None:
        object.__setattr__(self, "_accessed", accessed)
        object.__setattr__(self, "_nested", nested)

    def __getattr__(self, name: str) -> _SelectorProbe:
        if self._nested:
            raise _NotADirectField("chained member access is not a direct field")
        self._accessed.append(name)
        return _SelectorProbe(self._accessed, nested=True)

    def __getitem__(self, key: Any) -> Any:
        raise _NotADirectField("indexed access is not a direct field")

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        raise _NotADirectField("method calls are not a direct field")
