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
"""TypeMap — the compiled, immutable mapping plan for one type pair."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from openmapper.execution.factory import DestinationFactory
from openmapper.execution.steps import AutoStep, CustomStep, FieldAssignmentStep
from openmapper.execution.type_pair import TypePair


class TypeMap:
    """Ordered field-assignment steps plus the destination factory.

    Steps run custom rules first (declaration order), then auto-matched
    fields (source field order). Each step targets a distinct field.
    """

    def __init__(self, type_pair: TypePair, steps: Iterable[FieldAssignmentStep]) -> None:
        self._type_pair = type_pair
        self._steps = tuple(steps)
        self._factory = DestinationFactory(type_pair.destination)

    @property
    def type_pair(self) -> TypePair:
        return self._type_pair

    @property
    def source_type(self) -> type:
        return self._type_pair.source

    @property
    def destination_type(self) -> type:
        return self._type_pair.destination

    @property
    def steps(self) -> tuple[FieldAssignmentStep, ...]:
        return self._steps

    @property
    def custom_steps(self) -> tuple[CustomStep, ...]:
        return tuple(s for s in self._steps if isinstance(s, CustomStep))

    @property
    def auto_steps(self) -> tuple[AutoStep, ...]:
        return tuple(s for s in self._steps if isinstance(s, AutoStep))

    @property
    def destination_fields(self) -> list[str]:
        return [s.destination_field for s in self._steps]

    def map(self, source: Any) -> Any:
        """Create a new destination populated from *source*."""
        values = {step.destination_field: step.resolve(source) for step in self._steps}
        return self._factory.create(values)

    def map_into(self, source: Any, destination: Any) -> Any:
        """Populate an existing *destination* in place and return it."""
        for step in self._steps:
            step.execute(source, destination)
        return destination

    def __repr__(self) -> str:
        return f"TypeMap({self._type_pair}, steps={self.destination_fields})"
