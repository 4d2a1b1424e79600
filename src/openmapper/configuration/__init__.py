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
"""OpenMapper Configuration — profiles, member rules and the compiled registry."""

from openmapper.configuration.member import FieldRule, MappingDeclaration
from openmapper.configuration.exceptions import (
    InvalidProfileError,
    InvalidSelectorError,
    UnknownDestinationFieldError,
)
from openmapper.configuration.expression import MappingExpression, MemberConfigurationExpression
from openmapper.configuration.profile import Profile
from openmapper.configuration.type_map_builder import build_type_map
from openmapper.configuration.mapper_configuration import MapperConfiguration
from openmapper.configuration.properties import MapperProperties

__all__ = [
    "FieldRule",
    "InvalidProfileError",
    "InvalidSelectorError",
    "MapperConfiguration",
    "MapperProperties",
    "MappingDeclaration",
    "MappingExpression",
    "MemberConfigurationExpression",
    "Profile",
    "UnknownDestinationFieldError",
    "build_type_map",
]
