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
"""Mapper — executes compiled TypeMaps against objects.

Example::

    config = MapperConfiguration(PersonProfile())
    mapper = config.create_mapper()

    dto = mapper.map(person, PersonDto)
    dtos = mapper.map(people, list[PersonDto])
    mapper.map_into(person, existing_dto)
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar, overload

from openmapper.execution.exceptions import MappingNotFoundError, NullDestinationError
from openmapper.execution.type_map import TypeMap
from openmapper.execution.type_pair import TypePair
from openmapper.introspection.types import is_sequence_value, sequence_element_type, unwrap_optional

D = TypeVar("D")


class Mapper:
    """Maps objects using the TypeMaps of one MapperConfiguration.

    Mappers only read the shared, immutable registry, so any number of them
    can be created and used concurrently.
    """

    def __init__(self, type_maps: Mapping[TypePair, TypeMap]) -> None:
        self._type_maps = type_maps

    @overload
    def map(self, source: None, destination_type: Any, *, source_type: Any = None) -> None: ...

    @overload
    def map(self, source: Any, destination_type: type[D], *, source_type: Any = None) -> D: ...

    @overload
    def map(self, source: Any, destination_type: Any, *, source_type: Any = None) -> Any: ...

    def map(self, source: Any, destination_type: Any, *, source_type: Any = None) -> Any:
        """Map *source* to a new instance of *destination_type*.

        Args:
            source: Object to map. ``None`` returns ``None`` without any lookup.
            destination_type: Destination class, or a sequence type such as
                ``list[PersonDto]`` to map an iterable element-wise.
            source_type: Declared source type to look up instead of
                ``type(source)``.

        Raises:
            MappingNotFoundError: If no mapping was declared for the type pair
                (or, for sequences, for an element type pair).
        """
        if source is None:
            return None

        target = sequence_element_type(destination_type)
        if target is not None:
            is_sequence, element_type = _sequence_source(source, source_type)
            if is_sequence:
                container, destination_element = target
                return self._map_sequence(source, element_type, container, destination_element)

        declared = source_type if source_type is not None else type(source)
        return self._find_type_map(declared, destination_type).map(source)

    def map_into(
        self,
        source: Any,
        destination: D,
        *,
        source_type: Any = None,
        destination_type: Any = None,
    ) -> D:
        """Map *source* onto an existing *destination* and return that same instance.

        A ``None`` source leaves *destination* untouched.

        Raises:
            NullDestinationError: If *destination* is ``None``.
            MappingNotFoundError: If no mapping was declared for the type pair.
        """
        if destination is None:
            raise NullDestinationError()
        if source is None:
            return destination

        declared_source = source_type if source_type is not None else type(source)
        declared_destination = destination_type if destination_type is not None else type(destination)
        return self._find_type_map(declared_source, declared_destination).map_into(source, destination)

    def map_list(self, sources: Iterable[Any] | None, destination_type: type[D], *, source_type: Any = None) -> list[D]:
        """Map every element of *sources*; shorthand for ``map(sources, list[destination_type])``."""
        return self.map(sources, list[destination_type], source_type=source_type)  # type: ignore[valid-type]

    def _map_sequence(
        self,
        source: Iterable[Any],
        element_type: Any,
        container: type,
        destination_element: Any,
    ) -> Any:
        # Built fully before returning: the first failing element aborts the call.
        results = [
            None if element is None else self.map(element, destination_element, source_type=element_type)
            for element in source
        ]
        return container(results)

    def _find_type_map(self, source_type: Any, destination_type: Any) -> TypeMap:
        type_map = self._type_maps.get(TypePair(source_type, destination_type))
        if type_map is None:
            raise MappingNotFoundError(source_type, destination_type)
        return type_map


def _sequence_source(source: Any, source_type: Any) -> tuple[bool, Any]:
    """Whether *source* maps element-wise, and its declared element type if known."""
    if not is_sequence_value(source):
        return False, None
    if source_type is not None:
        declared = sequence_element_type(source_type)
        if declared is not None:
            element_type = declared[1]
            return True, unwrap_optional(element_type) or element_type
    return True, None
