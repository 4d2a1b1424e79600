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
"""Mapping exceptions — errors raised by a single mapping call."""

from __future__ import annotations

from typing import Any

from openmapper.introspection.types import type_name
from openmapper.kernel.exceptions import MappingException


class MappingNotFoundError(MappingException):
    """No compiled TypeMap exists for the requested type pair."""

    def __init__(self, source_type: Any, destination_type: Any) -> None:
        self.source_type = source_type
        self.destination_type = destination_type
        src = type_name(source_type)
        dst = type_name(destination_type)
        super().__init__(
            f"Missing mapping configuration from {src} to {dst}. "
            f"Ensure you have configured this mapping using create_map({src}, {dst}) in a Profile.",
            code="MAPPING_NOT_FOUND",
            context={"source_type": src, "destination_type": dst},
        )


class NullDestinationError(MappingException):
    """``map_into`` was called without a destination instance."""

    def __init__(self) -> None:
        super().__init__(
            "Destination must not be None when mapping into an existing instance",
            code="NULL_DESTINATION",
        )


class ConversionError(MappingException):
    """A custom rule produced a value the destination field's type cannot hold."""

    def __init__(self, value_type: type, destination_type: Any) -> None:
        self.value_type = value_type
        self.destination_type = destination_type
        src = type_name(value_type)
        dst = type_name(destination_type)
        super().__init__(
            f"Cannot convert value of type {src} to {dst}",
            code="CONVERSION_FAILED",
            context={"value_type": src, "destination_type": dst},
        )


class DestinationInstantiationError(MappingException):
    """A new destination instance could not be created from the mapped values."""

    def __init__(self, destination_type: type, missing: list[str]) -> None:
        self.destination_type = destination_type
        self.missing = missing
        dst = type_name(destination_type)
        super().__init__(
            f"Cannot create instance of type {dst}: no mapped value for required "
            f"constructor argument(s) {', '.join(missing)}. Add a for_member() rule or a default value.",
            code="DESTINATION_INSTANTIATION",
            context={"destination_type": dst, "missing": list(missing)},
        )
