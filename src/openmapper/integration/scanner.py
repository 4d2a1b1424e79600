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
"""Package scanner for auto-discovering Profile subclasses."""

from __future__ import annotations

import importlib
import inspect
import pkgutil
import types

import structlog

from openmapper.configuration.profile import Profile

logger = structlog.get_logger("openmapper.integration")


def scan_profiles(package_name: str) -> list[type[Profile]]:
    """Import a package (and its submodules) and return its concrete Profiles.

    Args:
        package_name: Dotted package or module name (e.g. "myapp.mapping").

    Returns:
        Profile subclasses defined in the scanned modules, in discovery order.
    """
    module = importlib.import_module(package_name)
    found = scan_module_profiles(module)

    if hasattr(module, "__path__"):
        for _importer, modname, _ispkg in pkgutil.walk_packages(module.__path__, prefix=module.__name__ + "."):
            submodule = importlib.import_module(modname)
            for profile_type in scan_module_profiles(submodule):
                if profile_type not in found:
                    found.append(profile_type)

    logger.debug("profiles_scanned", package=package_name, profiles=[p.__qualname__ for p in found])
    return found


def scan_module_profiles(module: types.ModuleType) -> list[type[Profile]]:
    """Extract the concrete Profile subclasses defined in *module*.

    Profiles imported from other modules are skipped so that each class is
    reported by the module that defines it.
    """
    return [
        obj
        for _name, obj in inspect.getmembers(module, inspect.isclass)
        if issubclass(obj, Profile)
        and obj is not Profile
        and not inspect.isabstract(obj)
        and obj.__module__ == module.__name__
    ]
