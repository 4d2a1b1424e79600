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
"""Plan compiler: turns one MappingDeclaration into a TypeMap.

Explicit ``for_member`` rules always win over convention: custom steps are
emitted first, and auto-discovery only considers fields no rule covers.
"""

from __future__ import annotations

import structlog

from openmapper.configuration.exceptions import UnknownDestinationFieldError
from openmapper.configuration.member import MappingDeclaration
from openmapper.execution.steps import AutoStep, CustomStep, FieldAssignmentStep
from openmapper.execution.type_map import TypeMap
from openmapper.execution.type_pair import TypePair
from openmapper.introspection.descriptors import readable_fields, writable_fields
from openmapper.introspection.types import is_assignable, type_name

logger = structlog.get_logger("openmapper.configuration")


def build_type_map(declaration: MappingDeclaration) -> TypeMap:
    """Compile *declaration* into an executable TypeMap.

    Raises:
        UnknownDestinationFieldError: If a rule targets a field that is not a
            writable field of the destination type.
    """
    pair = TypePair(declaration.source_type, declaration.destination_type)
    destination_fields = writable_fields(declaration.destination_type)

    custom_steps: list[FieldAssignmentStep] = []
    for name, rule in declaration.rules.items():
        destination = destination_fields.get(name)
        if destination is None:
            raise UnknownDestinationFieldError(name, declaration.destination_type, list(destination_fields))
        custom_steps.append(CustomStep(rule=rule, destination=destination))

    covered = set(declaration.rules)
    auto_steps: list[FieldAssignmentStep] = []
    for source in readable_fields(declaration.source_type):
        if source.name in covered:
            continue
        destination = destination_fields.get(source.name)
        if destination is None:
            continue
        if not is_assignable(destination.type, source.type):
            logger.debug(
                "auto_match_skipped",
                type_pair=str(pair),
                field=source.name,
                source_field_type=type_name(source.type),
                destination_field_type=type_name(destination.type),
            )
            continue
        auto_steps.append(AutoStep(source=source, destination=destination))

    logger.debug(
        "type_map_compiled",
        type_pair=str(pair),
        custom_steps=len(custom_steps),
        auto_steps=len(auto_steps),
    )
    return TypeMap(pair, custom_steps + auto_steps)
