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
"""Layered configuration for hosts that build their mapper from files.

Sources, later ones winning:

1. ``openmapper-defaults.yaml`` shipped in ``openmapper.resources``
2. ``config/openmapper.{yaml,toml}`` then ``openmapper.{yaml,toml}``
3. environment overlays ``openmapper-<env>.{yaml,toml}`` in the same places
4. ``OPENMAPPER_*`` environment variables, checked on every ``get()``

String values may contain ``${ENV_VAR}``, ``${other.key}`` or
``${key:default}`` placeholders.
"""

from __future__ import annotations

import dataclasses
import importlib.resources
import os
import re
import tomllib
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any, TypeVar, cast, get_type_hints

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, ValidationError

from openmapper.execution.conversion import convert
from openmapper.execution.exceptions import ConversionError

T = TypeVar("T")

_PLACEHOLDER_RE = re.compile(r"\$\{([^}]+)\}")
_MAX_PLACEHOLDER_DEPTH = 10

_CONFIG_PROPERTIES_ATTR = "__openmapper_config_prefix__"
_FILE_STEM = "openmapper"
_ENV_PREFIX = "OPENMAPPER_"
_EXTENSIONS = (".yaml", ".toml")
_DEFAULTS_SOURCE = "openmapper-defaults.yaml (library defaults)"


def config_properties(prefix: str) -> Callable[[type[T]], type[T]]:
    """Mark a pydantic model or dataclass as bindable with :meth:`Config.bind`.

    Usage::

        @config_properties(prefix="openmapper.mapper")
        class MapperProperties(BaseModel):
            profiles: list[str] = []
    """

    def decorator(cls: type[T]) -> type[T]:
        setattr(cls, _CONFIG_PROPERTIES_ATTR, prefix)
        return cls

    return decorator


def read_config_file(path: Path) -> dict[str, Any]:
    """Parse one YAML or TOML file; empty files give an empty dict."""
    if path.suffix == ".toml":
        with path.open("rb") as f:
            return tomllib.load(f)
    with path.open() as f:
        return yaml.safe_load(f) or {}


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge nested dicts; values from *override* win."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        merged[key] = deep_merge(current, value) if isinstance(current, dict) and isinstance(value, dict) else value
    return merged


def _library_defaults() -> dict[str, Any]:
    resource = importlib.resources.files("openmapper.resources").joinpath("openmapper-defaults.yaml")
    return yaml.safe_load(resource.read_text()) or {}


def _source_files(base_dir: Path, environments: list[str]) -> Iterator[tuple[Path, str | None]]:
    stems: list[tuple[str, str | None]] = [(_FILE_STEM, None)]
    stems += [(f"{_FILE_STEM}-{env}", env) for env in environments]
    for stem, env in stems:
        for directory in (base_dir / "config", base_dir):
            for ext in _EXTENSIONS:
                candidate = directory / f"{stem}{ext}"
                if candidate.is_file():
                    yield candidate, env


class Config:
    """Read-only view over merged configuration data with dot-notation keys."""

    def __init__(self, data: dict[str, Any] | None = None, sources: list[str] | None = None) -> None:
        self._data: dict[str, Any] = data or {}
        self._loaded_sources: list[str] = list(sources or [])

    @property
    def loaded_sources(self) -> list[str]:
        """Files that contributed to this configuration, in merge order."""
        return list(self._loaded_sources)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)

    @classmethod
    def from_sources(
        cls,
        base_dir: str | Path,
        environments: list[str] | None = None,
        load_defaults: bool = True,
    ) -> Config:
        """Merge every standard source found under *base_dir*."""
        data = _library_defaults() if load_defaults else {}
        sources = [_DEFAULTS_SOURCE] if load_defaults else []
        for path, env in _source_files(Path(base_dir), environments or []):
            data = deep_merge(data, read_config_file(path))
            sources.append(str(path) if env is None else f"{path} (environment: {env})")
        return cls(data, sources)

    @classmethod
    def from_file(cls, path: str | Path, load_defaults: bool = True) -> Config:
        """Load a single YAML or TOML file over the library defaults.

        A missing file yields the defaults only.
        """
        path = Path(path)
        data = _library_defaults() if load_defaults else {}
        sources = [_DEFAULTS_SOURCE] if load_defaults else []
        if path.exists():
            data = deep_merge(data, read_config_file(path))
            sources.append(str(path))
        return cls(data, sources)

    def get(self, key: str, default: Any = None) -> Any:
        """Value at *key*, with ``OPENMAPPER_*`` overrides and placeholders applied."""
        # openmapper.logging.format -> OPENMAPPER_LOGGING_FORMAT
        env_key = _ENV_PREFIX + key.removeprefix("openmapper.").upper().replace(".", "_").replace("-", "_")
        if env_key in os.environ:
            return os.environ[env_key]

        value = self._lookup(key)
        if value is None:
            return default
        if isinstance(value, str):
            return self._resolve(value, depth=0)
        return value

    def get_section(self, prefix: str) -> dict[str, Any]:
        """The nested dict under *prefix*, or an empty dict."""
        section = self._lookup(prefix)
        return section if isinstance(section, dict) else {}

    def bind(self, config_cls: type[T]) -> T:
        """Build a ``@config_properties`` pydantic model or dataclass from its section.

        Raises:
            ValueError: If the class is not decorated, or the section does not
                validate against it.
        """
        prefix = getattr(config_cls, _CONFIG_PROPERTIES_ATTR, None)
        if prefix is None:
            raise ValueError(f"{config_cls.__name__} is not decorated with @config_properties")

        section = self.get_section(prefix)
        try:
            if issubclass(config_cls, BaseModel):
                return cast(T, config_cls.model_validate(section))
            return self._bind_dataclass(config_cls, section)
        except (ValidationError, ConversionError) as exc:
            raise ValueError(
                f"Configuration validation failed for '{config_cls.__name__}' (prefix='{prefix}'):\n{exc}"
            ) from exc

    @staticmethod
    def _bind_dataclass(config_cls: type[T], section: dict[str, Any]) -> T:
        # Scalars from env placeholders and TOML strings go through the mapper's conversion policy.
        hints = get_type_hints(config_cls)
        kwargs = {
            field.name: convert(section[field.name], hints.get(field.name, Any))
            for field in dataclasses.fields(config_cls)  # type: ignore[arg-type]
            if field.name in section
        }
        return config_cls(**kwargs)

    def _lookup(self, key: str) -> Any:
        current: Any = self._data
        for part in key.split("."):
            if not isinstance(current, dict):
                return None
            current = current.get(part)
        return current

    def _resolve(self, value: str, depth: int) -> str:
        if "${" not in value:
            return value
        if depth > _MAX_PLACEHOLDER_DEPTH:
            raise ValueError(
                f"Max recursion depth exceeded resolving placeholders in '{value}'. Check for circular references."
            )

        def replace(match: re.Match[str]) -> str:
            ref_key, sep, fallback = match.group(1).partition(":")
            if ref_key in os.environ:
                return os.environ[ref_key]
            referenced = self._lookup(ref_key)
            if referenced is not None:
                return self._resolve(str(referenced), depth + 1)
            if sep:
                return fallback
            raise ValueError(f"Cannot resolve placeholder '${{{match.group(1)}}}': not found in environment or config")

        return _PLACEHOLDER_RE.sub(replace, value)
