"""
Publishing configuration resolver for the gradle-multi-version build.

Evaluates the build definition of the plugin against the Gradle project
properties of one build invocation and produces an immutable
PublishingConfiguration.
"""

from dataclasses import dataclass, field, asdict
from typing import Dict, Mapping, Optional, Tuple, Any

from gmv.utils.version import is_snapshot, release_of

PUB_URL_PROPERTY = 'pubUrl'
REMOTE_REPOSITORY_NAME = 'pub'
DEFAULT_TARGET_NAME = 'default'
PASSWORD_CREDENTIALS = 'PasswordCredentials'


class PublishConfigError(ValueError):
    """Raised when a build definition cannot be resolved."""


@dataclass(frozen=True)
class PluginDeclaration:
    """A gradlePlugin { plugins { ... } } entry."""
    name: str  # Declaration name (e.g., "multiVersion")
    id: str  # Plugin id used in plugins { id(...) }
    implementation_class: str  # Fully qualified entry point class

    @property
    def marker_publication_name(self) -> str:
        """Name of the marker publication java-gradle-plugin derives."""
        return f"{self.name}PluginMarkerMaven"


@dataclass(frozen=True)
class PublicationTarget:
    """A named destination for the built artifacts."""
    name: str
    url: Optional[str] = None  # None for the local repository
    credentials: Optional[str] = None  # Credential type the target requires

    @property
    def is_local(self) -> bool:
        return self.url is None

    @property
    def requires_credentials(self) -> bool:
        return self.credentials is not None

    def credential_property_names(self) -> Tuple[str, str]:
        """Gradle property names holding this repository's credentials."""
        return f"{self.name}Username", f"{self.name}Password"

    def __str__(self) -> str:
        if self.is_local:
            return self.name
        return f"{self.name}@{self.url}"


@dataclass(frozen=True)
class BuildDefinition:
    """Static literals of one snapshot of the build script."""
    group_id: str
    artifact_id: str  # rootProject.name
    version: str
    toolchain_version: int
    plugin: PluginDeclaration
    publication_name: str = 'maven'
    publication_component: str = 'java'
    remote_publishing: bool = False  # Whether the pubUrl branch exists


@dataclass(frozen=True)
class PublishingConfiguration:
    """Result of evaluating a build definition once."""
    group_id: str
    artifact_id: str
    version: str
    toolchain_version: int
    plugin: PluginDeclaration
    publication_name: str
    publications: Tuple[PublicationTarget, ...] = field(default_factory=tuple)

    @property
    def is_snapshot(self) -> bool:
        return is_snapshot(self.version)

    @property
    def default_target(self) -> PublicationTarget:
        return self.publications[0]

    @property
    def remote_target(self) -> Optional[PublicationTarget]:
        for target in self.publications:
            if not target.is_local:
                return target
        return None

    def get_target(self, name: str) -> PublicationTarget:
        for target in self.publications:
            if target.name == name:
                return target
        raise PublishConfigError(
            f"Unknown publication target: {name}. "
            f"Available: {', '.join(t.name for t in self.publications)}"
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['publications'] = [asdict(t) for t in self.publications]
        return data

    def get_config_summary(self) -> str:
        """Get a summary of the configuration for display."""
        lines = []
        lines.append(f"  Group ID: {self.group_id}")
        lines.append(f"  Artifact ID: {self.artifact_id}")
        if self.is_snapshot:
            lines.append(f"  Version: {self.version} (snapshot of {release_of(self.version)})")
        else:
            lines.append(f"  Version: {self.version}")
        lines.append(f"  Java Toolchain: {self.toolchain_version}")
        lines.append(f"  Plugin: {self.plugin.id} -> {self.plugin.implementation_class}")
        lines.append(f"  Maven Publications: {self.publication_name}, {self.plugin.marker_publication_name}")
        lines.append(f"  Targets: [{', '.join(str(t) for t in self.publications)}]")

        remote = self.remote_target
        if remote is not None:
            username_prop, password_prop = remote.credential_property_names()
            lines.append(f"  Credentials: {remote.credentials} ({username_prop}/{password_prop})")

        return '\n'.join(lines)


MULTI_VERSION_PLUGIN = PluginDeclaration(
    name='multiVersion',
    id='org.wallentines.gradle-multi-version',
    implementation_class='org.wallentines.gradle.mv.MultiVersionPlugin',
)

DEFINITIONS: Dict[str, BuildDefinition] = {
    '0.2.0': BuildDefinition(
        group_id='org.wallentines',
        artifact_id='gradle-multi-version',
        version='0.2.0',
        toolchain_version=8,
        plugin=MULTI_VERSION_PLUGIN,
    ),
    '0.3.0-SNAPSHOT': BuildDefinition(
        group_id='org.wallentines',
        artifact_id='gradle-multi-version',
        version='0.3.0-SNAPSHOT',
        toolchain_version=8,
        plugin=MULTI_VERSION_PLUGIN,
        remote_publishing=True,
    ),
}

CURRENT_DEFINITION = DEFINITIONS['0.3.0-SNAPSHOT']


def get_definition(version: Optional[str] = None) -> BuildDefinition:
    """
    Look up a build definition by version.

    Args:
        version: Definition version, the current one when None

    Returns:
        The matching BuildDefinition
    """
    if version is None:
        return CURRENT_DEFINITION

    # Maven treats the SNAPSHOT qualifier case-insensitively
    for key, definition in DEFINITIONS.items():
        if key.upper() == version.strip().upper():
            return definition

    raise PublishConfigError(
        f"Unknown build definition: {version}. Must be one of {list(DEFINITIONS)}"
    )


def resolve(properties: Mapping[str, str],
            definition: BuildDefinition = CURRENT_DEFINITION) -> PublishingConfiguration:
    """
    Resolve the publishing configuration for one build invocation.

    Args:
        properties: Gradle project properties of the invocation
        definition: Build definition to evaluate

    Returns:
        PublishingConfiguration with the default target first and, when
        the definition supports it and pubUrl is set, the 'pub' target.

    Raises:
        PublishConfigError: pubUrl is present but empty
    """
    publications = [PublicationTarget(DEFAULT_TARGET_NAME)]

    if definition.remote_publishing and PUB_URL_PROPERTY in properties:
        url = properties[PUB_URL_PROPERTY]
        if url is None or not str(url).strip():
            raise PublishConfigError(
                f"Property '{PUB_URL_PROPERTY}' is set but empty; "
                f"unset it to publish locally only"
            )
        publications.append(PublicationTarget(
            REMOTE_REPOSITORY_NAME,
            url=url,
            credentials=PASSWORD_CREDENTIALS,
        ))

    return PublishingConfiguration(
        group_id=definition.group_id,
        artifact_id=definition.artifact_id,
        version=definition.version,
        toolchain_version=definition.toolchain_version,
        plugin=definition.plugin,
        publication_name=definition.publication_name,
        publications=tuple(publications),
    )
