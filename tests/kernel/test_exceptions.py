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
"""Tests for the OpenMapper kernel exception hierarchy."""

from openmapper.configuration.exceptions import (
    InvalidProfileError,
    InvalidSelectorError,
    UnknownDestinationFieldError,
)
from openmapper.execution.exceptions import (
    ConversionError,
    DestinationInstantiationError,
    MappingNotFoundError,
    NullDestinationError,
)
from openmapper.kernel.exceptions import (
    ConfigurationException,
    MappingException,
    OpenMapperException,
)


class TestOpenMapperException:
    def test_basic_creation(self):
        exc = OpenMapperException("something went wrong")
        assert str(exc) == "something went wrong"
        assert exc.code is None
        assert exc.context == {}

    def test_with_error_code(self):
        exc = OpenMapperException("bad mapping", code="MAPPING_001")
        assert exc.code == "MAPPING_001"

    def test_with_context(self):
        exc = OpenMapperException("not found", code="NOT_FOUND", context={"source_type": "Person"})
        assert exc.context["source_type"] == "Person"

    def test_context_defaults_to_empty_dict(self):
        exc = OpenMapperException("test")
        exc.context["key"] = "value"
        exc2 = OpenMapperException("test2")
        assert exc2.context == {}


class TestExceptionHierarchy:
    def test_categories_are_openmapper(self):
        assert issubclass(ConfigurationException, OpenMapperException)
        assert issubclass(MappingException, OpenMapperException)

    def test_configuration_errors(self):
        for exc_type in (UnknownDestinationFieldError, InvalidSelectorError, InvalidProfileError):
            assert issubclass(exc_type, ConfigurationException)

    def test_mapping_errors(self):
        for exc_type in (MappingNotFoundError, NullDestinationError, ConversionError, DestinationInstantiationError):
            assert issubclass(exc_type, MappingException)

    def test_catch_base_catches_all(self):
        caught = False
        try:
            raise NullDestinationError()
        except OpenMapperException:
            caught = True
        assert caught
