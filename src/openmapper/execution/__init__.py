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
"""OpenMapper Execution — compiled plans and the Mapper runtime."""

from openmapper.execution.conversion import convert
from openmapper.execution.exceptions import (
    ConversionError,
    DestinationInstantiationError,
    MappingNotFoundError,
    NullDestinationError,
)
from openmapper.execution.factory import DestinationFactory
from openmapper.execution.mapper import Mapper
from openmapper.execution.steps import AutoStep, CustomStep, FieldAssignmentStep
from openmapper.execution.type_map import TypeMap
from openmapper.execution.type_pair import TypePair

__all__ = [
    "AutoStep",
    "ConversionError",
    "CustomStep",
    "DestinationFactory",
    "DestinationInstantiationError",
    "FieldAssignmentStep",
    "Mapper",
    "MappingNotFoundError",
    "NullDestinationError",
    "TypeMap",
    "TypePair",
    "convert",
]
