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
"""Profile — the unit of mapping configuration.

Subclasses declare the type pairs they make mappable, either in
``configure()`` or in ``__init__``::

    class PersonProfile(Profile):
        def configure(self) -> None:
            self.create_map(Person, PersonDto)
            self.create_map(PersonDto, Person)
"""

from __future__ import annotations

from typing import TypeVar

from openmapper.configuration.expression import MappingExpression
from openmapper.configuration.member import MappingDeclaration

S = TypeVar("S")
D = TypeVar("D")


class Profile:
    """Accumulates mapping declarations, consumed once by MapperConfiguration."""

    def __init__(self) -> None:
        self.__dict__.setdefault("_declarations", [])
        self.configure()

    def configure(self) -> None:
        """Declare mappings. Called by ``Profile.__init__``; the default declares nothing."""

    @property
    def declarations(self) -> tuple[MappingDeclaration, ...]:
        """Declarations in the order they were made."""
        return tuple(self.__dict__.get("_declarations", ()))

    def create_map(self, source_type: type[S], destination_type: type[D]) -> MappingExpression[S, D]:
        """Declare that *source_type* can be mapped to *destination_type*."""
        for tp in (source_type, destination_type):
            if not isinstance(tp, type):
                raise TypeError(f"create_map() expects classes, got {tp!r}")
        declaration = MappingDeclaration(source_type, destination_type)
        self.__dict__.setdefault("_declarations", []).append(declaration)
        return MappingExpression(declaration)
