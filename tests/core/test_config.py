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
"""Tests for configuration loading and binding."""

from dataclasses import dataclass
from pathlib import Path

import pytest
from pydantic import BaseModel

from openmapper.configuration.properties import MapperProperties
from openmapper.core.config import Config, config_properties


class TestConfig:
    def test_load_from_dict(self):
        config = Config({"app": {"name": "test-service", "port": 8080}})
        assert config.get("app.name") == "test-service"
        assert config.get("app.port") == 8080

    def test_get_with_default(self):
        config = Config({})
        assert config.get("missing.key", "default") == "default"

    def test_load_from_yaml_file(self, tmp_path: Path):
        config_file = tmp_path / "mapping.yaml"
        config_file.write_text("openmapper:\n  mapper:\n    profiles:\n      - myapp.mapping\n")
        config = Config.from_file(config_file)
        assert config.get("openmapper.mapper.profiles") == ["myapp.mapping"]
        assert str(config_file) in config.loaded_sources

    def test_load_from_toml_file(self, tmp_path: Path):
        config_file = tmp_path / "mapping.toml"
        config_file.write_text('[openmapper.logging]\nformat = "json"\n')
        config = Config.from_file(config_file)
        assert config.get("openmapper.logging.format") == "json"

    def test_library_defaults_loaded(self, tmp_path: Path):
        config = Config.from_file(tmp_path / "missing.yaml")
        assert config.get("openmapper.logging.level.root") == "INFO"
        assert config.get("openmapper.mapper.profiles") == []

    def test_defaults_can_be_skipped(self, tmp_path: Path):
        config = Config.from_file(tmp_path / "missing.yaml", load_defaults=False)
        assert config.to_dict() == {}
        assert config.loaded_sources == []

    def test_env_var_override(self, monkeypatch):
        monkeypatch.setenv("OPENMAPPER_LOGGING_FORMAT", "json")
        config = Config({"openmapper": {"logging": {"format": "console"}}})
        assert config.get("openmapper.logging.format") == "json"

    def test_get_section(self):
        config = Config({"openmapper": {"logging": {"level": {"root": "WARNING"}}}})
        assert config.get_section("openmapper.logging.level") == {"root": "WARNING"}
        assert config.get_section("openmapper.missing") == {}


class TestConfigSources:
    def test_base_dir_and_config_subdir_are_merged(self, tmp_path: Path):
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "openmapper.yaml").write_text("app:\n  name: sub\n  port: 1\n")
        (tmp_path / "openmapper.yaml").write_text("app:\n  port: 2\n")

        config = Config.from_sources(tmp_path, load_defaults=False)
        assert config.get("app.name") == "sub"
        assert config.get("app.port") == 2

    def test_environment_overlay_wins(self, tmp_path: Path):
        (tmp_path / "openmapper.yaml").write_text("db:\n  url: base\n")
        (tmp_path / "openmapper-dev.yaml").write_text("db:\n  url: dev-url\n")

        config = Config.from_sources(tmp_path, environments=["dev"], load_defaults=False)
        assert config.get("db.url") == "dev-url"

    def test_missing_environment_file_is_skipped(self, tmp_path: Path):
        (tmp_path / "openmapper.yaml").write_text("app:\n  name: base\n")

        config = Config.from_sources(tmp_path, environments=["nonexistent"], load_defaults=False)
        assert config.get("app.name") == "base"


class TestConfigProperties:
    def test_bind_to_dataclass(self):
        @config_properties(prefix="database")
        @dataclass
        class DatabaseConfig:
            url: str = "sqlite:///test.db"
            pool_size: int = 5

        config = Config({"database": {"url": "postgresql://localhost/mydb", "pool_size": "20"}})
        db_config = config.bind(DatabaseConfig)
        assert db_config.url == "postgresql://localhost/mydb"
        assert db_config.pool_size == 20

    def test_bind_pydantic_model(self):
        config = Config({"openmapper": {"mapper": {"profiles": ["a.b", "c"]}}})
        properties = config.bind(MapperProperties)
        assert properties.profiles == ["a.b", "c"]

    def test_bind_pydantic_defaults(self):
        properties = Config({}).bind(MapperProperties)
        assert properties.profiles == []

    def test_bind_invalid_pydantic_section_raises(self):
        config = Config({"openmapper": {"mapper": {"profiles": 42}}})
        with pytest.raises(ValueError, match="MapperProperties"):
            config.bind(MapperProperties)

    def test_bind_undecorated_class_raises(self):
        class Plain(BaseModel):
            name: str = ""

        with pytest.raises(ValueError, match="not decorated"):
            Config({}).bind(Plain)
