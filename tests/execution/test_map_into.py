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
"""Tests for Mapper.map_into — populating an existing destination."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from openmapper import MapperConfiguration, MappingNotFoundError, NullDestinationError, Profile


@dataclass
class Person:
    first_name: str = ""
    age: int = 0


@dataclass
class PersonDto:
    first_name: str = ""
    age: int = 0
    note: str = ""


@dataclass
class AuditedPersonDto(PersonDto):
    audited: bool = False


class PersonProfile(Profile):
    def configure(self) -> None:
        self.create_map(Person, PersonDto)


@pytest.fixture
def mapper():
    return MapperConfiguration(PersonProfile()).create_mapper()


class TestMapInto:
    def test_returns_same_instance(self, mapper) -> None:
        existing = PersonDto("old", 1, "keep me")

        result = mapper.map_into(Person("new", 2), existing)

        assert result is existing
        assert existing == PersonDto("new", 2, "keep me")

    def test_none_source_leaves_destination_untouched(self, mapper) -> None:
        existing = PersonDto("old", 1)

        assert mapper.map_into(None, existing) is existing
        assert existing == PersonDto("old", 1)

    def test_none_destination_raises(self, mapper) -> None:
        with pytest.raises(NullDestinationError) as exc_info:
            mapper.map_into(Person(), None)

        assert exc_info.value.code == "NULL_DESTINATION"

    def test_none_destination_checked_before_source(self, mapper) -> None:
        with pytest.raises(NullDestinationError):
            mapper.map_into(None, None)

    def test_runtime_destination_type_is_used(self, mapper) -> None:
        with pytest.raises(MappingNotFoundError) as exc_info:
            mapper.map_into(Person(), AuditedPersonDto())

        assert exc_info.value.source_type is Person
        assert exc_info.value.destination_type is AuditedPersonDto

    def test_declared_destination_type_selects_mapping(self, mapper) -> None:
        existing = AuditedPersonDto(audited=True)

        mapper.map_into(Person("Ada", 36), existing, destination_type=PersonDto)

        assert existing.first_name == "Ada"
        assert existing.audited is True

    def test_declared_source_type_is_reported(self, mapper) -> None:
        with pytest.raises(MappingNotFoundError) as exc_info:
            mapper.map_into(Person(), PersonDto(), source_type=PersonDto)

        assert exc_info.value.source_type is PersonDto
        assert exc_info.value.destination_type is PersonDto
