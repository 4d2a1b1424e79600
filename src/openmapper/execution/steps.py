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
"""Compiled field-assignment steps.

A custom step runs a configured resolver against the whole source object and
passes the result through the conversion policy. An auto step copies a
same-named source field whose declared type was already checked for
assignability at compile time.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from openmapper.execution.conversion import convert
from openmapper.introspection.descriptors import FieldDescriptor

if TYPE_CHECKING:
    from openmapper.configuration.member import FieldRule


class FieldAssignmentStep(ABC):
    """Populates one destination field from a source object."""

    destination: FieldDescriptor

    @property
    def destination_field(self) -> str:
        return self.destination.name

    @abstractmethod
    def resolve(self, source: Any) -> Any:
        """Compute the value this step stores."""

    def execute(self, source: Any, destination: Any) -> None:
        self.destination.set(destination, self.resolve(source))


@dataclass(frozen=True)
class CustomStep(FieldAssignmentStep):
    rule: FieldRule
    destination: FieldDescriptor

    def resolve(self, source: Any) -> Any:
        return convert(self.rule.resolver(source), self.destination.type)


@dataclass(frozen=True)
class AutoStep(FieldAssignmentStep):
    source: FieldDescriptor
    destination: FieldDescriptor

    def resolve(self, source: Any) -> Any:
        return self.source.get(source)
