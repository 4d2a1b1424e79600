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
"""Unified exception hierarchy for OpenMapper.

All library exceptions inherit from OpenMapperException, enabling unified
error handling: catch OpenMapperException to handle every mapping error, or
catch a category for targeted handling.

Categories:
- ConfigurationException: Fatal errors raised while building a MapperConfiguration
- MappingException: Errors raised by a single mapping call
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class OpenMapperException(Exception):
    """Base exception for all OpenMapper errors.

    Carries an optional error code and context dict for structured error data.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "MAPPING_NOT_FOUND").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationException(OpenMapperException):
    """Invalid mapping configuration. Aborts MapperConfiguration construction."""


# =============================================================================
# Mapping Exceptions
# =============================================================================


class MappingException(OpenMapperException):
    """Failure of a single mapping call."""
