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
"""MapperConfigurationBuilder — assembles a MapperConfiguration for a host application.

Usage::

    config = (
        MapperConfigurationBuilder()
        .add_profile(PersonProfile)
        .add_profiles("myapp.mapping")
        .build()
    )

    # or from openmapper.yaml (openmapper.mapper.profiles)
    config = MapperConfigurationBuilder.from_config(Config.from_file("openmapper.yaml"), StructlogAdapter()).build()
"""

from __future__ import annotations

from typing import Any

from openmapper.configuration.exceptions import InvalidProfileError
from openmapper.configuration.mapper_configuration import MapperConfiguration
from openmapper.configuration.profile import Profile
from openmapper.configuration.properties import MapperProperties
from openmapper.core.config import Config
from openmapper.integration.scanner import scan_profiles
from openmapper.logging.port import LoggingPort


class MapperConfigurationBuilder:
    """Collects profiles in registration order and builds the registry."""

    def __init__(self) -> None:
        self._profiles: list[Profile | type[Profile]] = []

    @classmethod
    def from_config(cls, config: Config, logging_port: LoggingPort | None = None) -> MapperConfigurationBuilder:
        """Start a builder with the packages listed under ``openmapper.mapper.profiles``.

        When *logging_port* is given it is configured from the same config
        before any package is scanned.
        """
        if logging_port is not None:
            logging_port.configure(config)
        properties = config.bind(MapperProperties)
        return cls().add_profiles(*properties.profiles)

    @property
    def profiles(self) -> list[Profile | type[Profile]]:
        return list(self._profiles)

    def add_profile(self, profile: Any) -> MapperConfigurationBuilder:
        """Register a Profile subclass or instance.

        Raises:
            InvalidProfileError: If *profile* is not a Profile.
        """
        is_profile_type = isinstance(profile, type) and issubclass(profile, Profile)
        if not (is_profile_type or isinstance(profile, Profile)):
            raise InvalidProfileError(profile)
        self._profiles.append(profile)
        return self

    def add_profiles(self, *package_names: str) -> MapperConfigurationBuilder:
        """Register every concrete Profile found by scanning the given packages."""
        for package_name in package_names:
            for profile_type in scan_profiles(package_name):
                self.add_profile(profile_type)
        return self

    def build(self) -> MapperConfiguration:
        return MapperConfiguration(*self._profiles)
