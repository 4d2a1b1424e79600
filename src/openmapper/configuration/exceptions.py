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
"""Configuration exceptions — fatal errors while building a MapperConfiguration."""

from __future__ import annotations

import difflib
from typing import Any

from openmapper.introspection.types import type_name
from openmapper.kernel.exceptions import ConfigurationException


class UnknownDestinationFieldError(ConfigurationException):
    """A custom rule targets a field the destination type cannot have written."""

    def __init__(
        self,
        field_name: str,
        destination_type: type,
        available: list[str] | None = None,
    ) -> None:
        self.field_name = field_name
        self.destination_type = destination_type
        self.available = available or []

        dest = type_name(destination_type)
        headline = f"Destination type '{dest}' has no writable field '{field_name}'"

        lines = [f"UnknownDestinationFieldError: {headline}"]
        suggestions = difflib.get_close_matches(field_name, self.available, n=3, cutoff=0.6)
        if suggestions:
            lines.append("")
            lines.append(f"  Did you mean: {', '.join(suggestions)}")
        lines.append("")
        lines.append(f"  Writable fields: {', '.join(self.available) or '(none)'}")

        super().__init__(
            "\n".join(lines),
            code="UNKNOWN_DESTINATION_FIELD",
            context={"field": field_name, "destination_type": dest},
        )


class InvalidSelectorError(ConfigurationException):
    """A member selector does not denote exactly one direct field access."""

    def __init__(self, selector: Any, reason: str) -> None:
        self.selector = selector
        self.reason = reason
        description = selector if isinstance(selector, str) else getattr(selector, "__qualname__", repr(selector))
        super().__init__(
            f"Invalid member selector {description!r}: {reason}. "
            "Use a field name ('total') or a single attribute access (lambda d: d.total).",
            code="INVALID_SELECTOR",
            context={"selector": str(description)},
        )


class InvalidProfileError(ConfigurationException):
    """A registered object is not a Profile instance or Profile subclass."""

    def __init__(self, profile: Any) -> None:
        self.profile = profile
        name = getattr(profile, "__name__", None) or type(profile).__name__
        super().__init__(
            f"'{name}' is not a Profile. Mapping configurations must subclass openmapper.Profile.",
            code="INVALID_PROFILE",
            context={"profile": name},
        )
