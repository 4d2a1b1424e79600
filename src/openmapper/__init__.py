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
"""OpenMapper — convention-based object mapping with explicit member rules.

Declare mappable type pairs in a Profile, compile them once into a
MapperConfiguration, and map with cheap Mapper instances::

    class BookProfile(Profile):
        def configure(self) -> None:
            self.create_map(Book, BookDto).for_member(
                "available", lambda opt: opt.map_from(lambda src: src.stock > 0)
            )

    mapper = MapperConfiguration(BookProfile()).create_mapper()
    dto = mapper.map(book, BookDto)
"""

from openmapper.configuration import (
    InvalidProfileError,
    InvalidSelectorError,
    MapperConfiguration,
    MappingExpression,
    MemberConfigurationExpression,
    Profile,
    UnknownDestinationFieldError,
)
from openmapper.execution import (
    ConversionError,
    DestinationInstantiationError,
    Mapper,
    MappingNotFoundError,
    NullDestinationError,
    TypeMap,
    TypePair,
)
from openmapper.kernel import ConfigurationException, MappingException, OpenMapperException

__all__ = [
    "ConfigurationException",
    "ConversionError",
    "DestinationInstantiationError",
    "InvalidProfileError",
    "InvalidSelectorError",
    "Mapper",
    "MapperConfiguration",
    "MappingException",
    "MappingExpression",
    "MappingNotFoundError",
    "MemberConfigurationExpression",
    "NullDestinationError",
    "OpenMapperException",
    "Profile",
    "TypeMap",
    "TypePair",
    "UnknownDestinationFieldError",
]
