#
# Copyright 2024 wallentines and gmv Project Authors. All rights reserved.
# Use of this source code is governed by a MIT-style
# license that can be found at
#
# https://opensource.org/license/MIT
#
# The above copyright notice and this permission
# notice shall be included in all copies or
# substantial portions of the Software.

"""
Tool configuration loaded from gmv.toml.

Configuration structure:
    [gmv]
    definition = "0.3.0-SNAPSHOT"   # Build definition to evaluate
    gradlew = "./gradlew"           # Gradle launcher
    verbose = false

    [properties]                    # Lowest precedence project properties
    pubUrl = "https://repo.example.com/releases"
"""

import os
from typing import Any, Dict, Mapping, Optional, Tuple

try:
    import tomllib
except ImportError:
    # For Python < 3.11
    import tomli as tomllib

from gmv.utils.gradle.properties import collect_project_properties
from gmv.utils.maven.config import (
    PublishConfigError,
    PublishingConfiguration,
    get_definition,
    resolve,
)

CONFIG_FILE_NAME = "gmv.toml"
DEFAULT_GRADLEW = "./gradlew" if os.name != "nt" else "gradlew.bat"


class ToolConfig:
    """Settings of the gmv command line tool for one project."""

    def __init__(self, config: Optional[Dict[str, Any]] = None, path: Optional[str] = None):
        self.raw_config = config or {}
        self.path = path

        tool_config = self._get_table("gmv")
        self.definition = tool_config.get("definition")
        self.gradlew = tool_config.get("gradlew", DEFAULT_GRADLEW)
        self.verbose = bool(tool_config.get("verbose", False))

        # TOML values may be numbers or booleans, Gradle properties are strings
        self.properties = {
            str(k): _to_property_value(v)
            for k, v in self._get_table("properties").items()
        }

    def _get_table(self, name: str) -> Dict[str, Any]:
        table = self.raw_config.get(name, {})
        if not isinstance(table, dict):
            location = f" at {self.path}" if self.path else ""
            raise PublishConfigError(
                f"Invalid {CONFIG_FILE_NAME}{location}: '{name}' must be a table, "
                f"got {type(table).__name__}"
            )
        return table

    @classmethod
    def load(cls, project_dir: str) -> "ToolConfig":
        """
        Load gmv.toml from a project directory.

        Returns an empty configuration when the file does not exist.
        """
        config_path = os.path.join(project_dir, CONFIG_FILE_NAME)
        if not os.path.isfile(config_path):
            return cls()

        # Must open in rb mode for tomllib
        with open(config_path, "rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise PublishConfigError(f"Invalid {CONFIG_FILE_NAME} at {config_path}: {e}") from e

        return cls(data, config_path)


def _to_property_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def resolve_project(project_dir: str,
                    cli_properties: Optional[Mapping[str, str]] = None,
                    definition: Optional[str] = None,
                    environ: Optional[Mapping[str, str]] = None,
                    ) -> Tuple[ToolConfig, Dict[str, str], PublishingConfiguration]:
    """
    Load gmv.toml, gather project properties and resolve the build.

    Args:
        project_dir: Root directory of the Gradle build
        cli_properties: -P properties from the command line
        definition: Build definition version, overrides [gmv] definition
        environ: Environment, os.environ when None

    Returns:
        Tuple of (tool_config, properties, configuration)

    Raises:
        PublishConfigError: gmv.toml, gradle.properties or the build is invalid
    """
    tool_config = ToolConfig.load(project_dir)
    try:
        properties = collect_project_properties(
            project_dir,
            cli_properties=cli_properties,
            environ=environ,
            defaults=tool_config.properties,
        )
    except ValueError as e:
        raise PublishConfigError(f"Invalid gradle.properties: {e}") from e
    build_definition = get_definition(definition or tool_config.definition)
    return tool_config, properties, resolve(properties, build_definition)
