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
"""MapperConfiguration — the immutable registry of compiled TypeMaps."""

from __future__ import annotations

from collections.abc import Iterator
from types import MappingProxyType
from typing import Any

import structlog

from openmapper.configuration.exceptions import InvalidProfileError
from openmapper.configuration.profile import Profile
from openmapper.configuration.type_map_builder import build_type_map
from openmapper.execution.mapper import Mapper
from openmapper.execution.type_map import TypeMap
from openmapper.execution.type_pair import TypePair

logger = structlog.get_logger("openmapper.configuration")


class MapperConfiguration:
    """Compiles every mapping declared by the given profiles, once.

    Profiles are processed in the order given, declarations in the order
    they were made. When two declarations share a type pair the later one
    replaces the earlier one entirely. Configuration errors propagate from
    the constructor.

    Args:
        *profiles: Profile instances, or Profile subclasses to instantiate.

    Raises:
        InvalidProfileError: If an argument is not a Profile.
        UnknownDestinationFieldError: If a rule targets an unknown field.
    """

    def __init__(self, *profiles: Profile | type[Profile]) -> None:
        type_maps: dict[TypePair, TypeMap] = {}
        for profile in profiles:
            for declaration in _as_profile(profile).declarations:
                type_map = build_type_map(declaration)
                if type_map.type_pair in type_maps:
                    logger.debug(
                        "type_map_replaced",
                        type_pair=str(type_map.type_pair),
                        profile=type(profile).__name__ if isinstance(profile, Profile) else profile.__name__,
                    )
                type_maps[type_map.type_pair] = type_map

        self._type_maps: MappingProxyType[TypePair, TypeMap] = MappingProxyType(type_maps)
        logger.info("mapper_configuration_built", profiles=len(profiles), type_maps=len(type_maps))

    def create_mapper(self) -> Mapper:
        """Return a new Mapper sharing this configuration's TypeMaps."""
        return Mapper(self._type_maps)

    @property
    def type_pairs(self) -> list[TypePair]:
        return list(self._type_maps)

    def find_type_map(self, source_type: Any, destination_type: Any) -> TypeMap | None:
        return self._type_maps.get(TypePair(source_type, destination_type))

    def __contains__(self, pair: object) -> bool:
        return pair in self._type_maps

    def __iter__(self) -> Iterator[TypeMap]:
        return iter(self._type_maps.values())

    def __len__(self) -> int:
        return len(self._type_maps)


def _as_profile(profile: Any) -> Profile:
    if isinstance(profile, Profile):
        return profile
    if isinstance(profile, type) and issubclass(profile, Profile):
        return profile()
    raise InvalidProfileError(profile)
