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
"""TypePair — registry key for a (source type, destination type) combination."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from openmapper.introspection.types import type_name


@dataclass(frozen=True)
class TypePair:
    source: Any
    destination: Any

    def __str__(self) -> str:
        return f"{type_name(self.source)} -> {type_name(self.destination)}"
