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
"""Structural introspection: field discovery and type compatibility."""

from openmapper.introspection.descriptors import (
    FieldDescriptor,
    fields_of,
    readable_fields,
    writable_fields,
)
from openmapper.introspection.types import (
    is_assignable,
    is_sequence_value,
    satisfies,
    sequence_element_type,
    type_name,
    unwrap_optional,
)

__all__ = [
    "FieldDescriptor",
    "fields_of",
    "is_assignable",
    "is_sequence_value",
    "readable_fields",
    "satisfies",
    "sequence_element_type",
    "type_name",
    "unwrap_optional",
    "writable_fields",
]
