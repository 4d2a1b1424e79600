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
"""Tests for MapperConfiguration — the compiled registry."""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from openmapper.configuration.exceptions import InvalidProfileError, UnknownDestinationFieldError
from openmapper.configuration.mapper_configuration import MapperConfiguration
from openmapper.configuration.profile import Profile
from openmapper.execution.mapper import Mapper
from openmapper.execution.type_pair import TypePair


@dataclass
class Person:
    first_name: str = ""
    last_name: str = ""


@dataclass
class PersonDto:
    first_name: str = ""
    last_name: str = ""


@dataclass
class Address:
    city: str = ""


@dataclass
class AddressDto:
    city: str = ""


class PersonProfile(Profile):
    def configure(self) -> None:
        self.create_map(Person, PersonDto)
        self.create_map(PersonDto, Person)


class AddressProfile(Profile):
    def configure(self) -> None:
        self.create_map(Address, AddressDto)


class ShoutingPersonProfile(Profile):
    def configure(self) -> None:
        self.create_map(Person, PersonDto).for_member(
            "first_name", lambda opt: opt.map_from(lambda s: s.first_name.upper())
        )


class BrokenProfile(Profile):
    def configure(self) -> None:
        self.create_map(Person, PersonDto).for_member("nickname", lambda opt: opt.map_from(lambda s: "x"))


class TestMapperConfiguration:
    def test_empty_configuration_is_valid(self) -> None:
        config = MapperConfiguration()
        assert len(config) == 0
        assert config.type_pairs == []

    def test_type_map_exists_only_for_declared_pairs(self) -> None:
        config = MapperConfiguration(PersonProfile(), AddressProfile())

        assert TypePair(Person, PersonDto) in config
        assert TypePair(PersonDto, Person) in config
        assert TypePair(Address, AddressDto) in config
        assert TypePair(AddressDto, Address) not in config
        assert len(config) == 3

    def test_profile_classes_are_instantiated(self) -> None:
        config = MapperConfiguration(PersonProfile, AddressProfile)
        assert config.find_type_map(Address, AddressDto) is not None

    def test_find_type_map_missing_returns_none(self) -> None:
        config = MapperConfiguration(AddressProfile())
        assert config.find_type_map(Person, PersonDto) is None

    def test_later_declaration_replaces_earlier(self) -> None:
        config = MapperConfiguration(PersonProfile(), ShoutingPersonProfile())
        type_map = config.find_type_map(Person, PersonDto)

        assert type_map is not None
        assert len(type_map.custom_steps) == 1

        dto = config.create_mapper().map(Person("ada", "lovelace"), PersonDto)
        assert dto.first_name == "ADA"

    def test_later_plain_declaration_drops_earlier_rules(self) -> None:
        config = MapperConfiguration(ShoutingPersonProfile(), PersonProfile())

        dto = config.create_mapper().map(Person("ada", "lovelace"), PersonDto)
        assert dto.first_name == "ada"

    def test_iterates_type_maps_in_declaration_order(self) -> None:
        config = MapperConfiguration(PersonProfile(), AddressProfile())
        assert [str(tm.type_pair) for tm in config] == [
            "Person -> PersonDto",
            "PersonDto -> Person",
            "Address -> AddressDto",
        ]


class TestConfigurationErrors:
    def test_unknown_field_aborts_construction(self) -> None:
        with pytest.raises(UnknownDestinationFieldError):
            MapperConfiguration(PersonProfile(), BrokenProfile())

    @pytest.mark.parametrize("bad", [object(), Person, "PersonProfile", 42])
    def test_non_profiles_are_rejected(self, bad: object) -> None:
        with pytest.raises(InvalidProfileError):
            MapperConfiguration(bad)  # type: ignore[arg-type]


class TestCreateMapper:
    def test_returns_new_mapper_each_time(self) -> None:
        config = MapperConfiguration(PersonProfile())
        first = config.create_mapper()
        second = config.create_mapper()

        assert isinstance(first, Mapper)
        assert first is not second

    def test_mappers_are_interchangeable(self) -> None:
        config = MapperConfiguration(PersonProfile())
        person = Person("Grace", "Hopper")

        a = config.create_mapper().map(person, PersonDto)
        b = config.create_mapper().map(person, PersonDto)
        assert a == b
        assert a is not b
