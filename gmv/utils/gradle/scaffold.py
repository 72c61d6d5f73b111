"""
Gradle build file scaffolding.

Renders the build script of a build definition from the packaged copier
template.
"""

import os
from typing import Any, Dict, Optional

from copier import run_copy

from ..maven.config import (
    BuildDefinition,
    PUB_URL_PROPERTY,
    REMOTE_REPOSITORY_NAME,
)

TEMPLATE_DIR = os.path.join(
    os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))),
    "templates",
    "plugin",
)

GENERATED_FILES = ["build.gradle.kts", "settings.gradle.kts", "gradle.properties"]


def get_template_data(definition: BuildDefinition) -> Dict[str, Any]:
    """Map a build definition onto the template questions."""
    return {
        "group_id": definition.group_id,
        "artifact_id": definition.artifact_id,
        "version": definition.version,
        "toolchain_version": definition.toolchain_version,
        "plugin_name": definition.plugin.name,
        "plugin_id": definition.plugin.id,
        "plugin_class": definition.plugin.implementation_class,
        "publication_name": definition.publication_name,
        "publication_component": definition.publication_component,
        "remote_publishing": definition.remote_publishing,
        "pub_url_property": PUB_URL_PROPERTY,
        "remote_repository_name": REMOTE_REPOSITORY_NAME,
    }


def generate_build_files(dst_path: str, definition: BuildDefinition,
                         overwrite: bool = False,
                         extra_data: Optional[Dict[str, Any]] = None,
                         quiet: bool = True) -> str:
    """
    Render build.gradle.kts, settings.gradle.kts and gradle.properties.

    Args:
        dst_path: Destination directory, created if missing
        definition: Build definition to render
        overwrite: Replace existing files without asking
        extra_data: Answers overriding the definition values
        quiet: Suppress copier's per-file output

    Returns:
        Absolute path of the destination directory
    """
    data = get_template_data(definition)
    data.update(extra_data or {})

    run_copy(
        TEMPLATE_DIR,
        dst_path,
        data=data,
        defaults=True,
        overwrite=overwrite,
        unsafe=True,
        quiet=quiet,
    )
    return os.path.abspath(dst_path)
