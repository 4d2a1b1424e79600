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
"""Per-field rules and the mapping declarations that collect them."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class FieldRule:
    """Destination field *destination_field* is computed by ``resolver(source)``.

    The resolver is only ever called at map time.
    """

    destination_field: str
    resolver: Callable[[Any], Any]


@dataclass
class MappingDeclaration:
    """One ``create_map`` call: a type pair plus its custom field rules.

    ``rules`` is keyed by destination field name and keeps insertion order;
    replacing a rule keeps the field's original position.
    """

    source_type: type
    destination_type: type
    rules: dict[str, FieldRule] = field(default_factory=dict)
