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
"""Tests for DestinationFactory."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from pydantic import BaseModel, Field

from openmapper.execution.exceptions import DestinationInstantiationError
from openmapper.execution.factory import DestinationFactory


@dataclass
class Required:
    name: str
    age: int = 0


class Plain:
    def __init__(self) -> None:
        self.name = ""
        self.extra = None


class KeywordOnly:
    def __init__(self, *, name: str, tags: list[str] | None = None) -> None:
        self.name = name
        self.tags = tags or []


class Aliased(BaseModel):
    name: str
    age: int = Field(default=0, alias="years")


class Tagged(BaseModel):
    tags: list[str] = Field(default_factory=list)


class TestDestinationFactory:
    def test_constructor_arguments_are_passed_as_keywords(self) -> None:
        created = DestinationFactory(Required).create({"name": "Ada", "age": 36})
        assert created == Required("Ada", 36)

    def test_missing_required_argument_raises(self) -> None:
        with pytest.raises(DestinationInstantiationError) as exc_info:
            DestinationFactory(Required).create({"age": 36})

        assert exc_info.value.missing == ["name"]
        assert exc_info.value.destination_type is Required
        assert exc_info.value.code == "DESTINATION_INSTANTIATION"
        assert "name" in str(exc_info.value)

    def test_non_parameters_are_assigned_after_construction(self) -> None:
        created = DestinationFactory(Plain).create({"name": "Ada", "extra": 1})

        assert created.name == "Ada"
        assert created.extra == 1

    def test_keyword_only_parameters(self) -> None:
        created = DestinationFactory(KeywordOnly).create({"name": "Ada"})

        assert created.name == "Ada"
        assert created.tags == []

    def test_pydantic_fields_are_assigned_by_name(self) -> None:
        created = DestinationFactory(Aliased).create({"name": "Ada", "age": 36})

        assert created.age == 36
        assert created == Aliased(name="Ada", years=36)

    def test_pydantic_values_are_not_validated(self) -> None:
        created = DestinationFactory(Aliased).create({"name": None, "age": "36"})

        assert created.name is None
        assert created.age == "36"

    def test_pydantic_values_are_not_copied(self) -> None:
        tags = ["a"]
        created = DestinationFactory(Tagged).create({"tags": tags})
        assert created.tags is tags

    def test_pydantic_required_fields(self) -> None:
        with pytest.raises(DestinationInstantiationError) as exc_info:
            DestinationFactory(Aliased).create({"age": 1})

        assert exc_info.value.missing == ["name"]

    def test_exposes_destination_type(self) -> None:
        assert DestinationFactory(Plain).destination_type is Plain
