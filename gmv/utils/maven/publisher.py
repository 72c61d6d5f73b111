"""
Maven publisher for the gradle-multi-version plugin.

Runs the Gradle publish task matching a resolved publication target.
"""

import os
import subprocess
from typing import Dict, List, Mapping, Optional, Tuple

from .config import PublishingConfiguration, PublicationTarget, PUB_URL_PROPERTY
from .credentials import CredentialsProvider, PasswordCredentials
from ..gradle.properties import ENV_PROPERTY_PREFIX


class MavenPublisher:
    """Handle publishing the plugin to Maven repositories."""

    def __init__(self, config: PublishingConfiguration, project_dir: str,
                 credentials_provider: CredentialsProvider,
                 gradlew: str = './gradlew', verbose: bool = False,
                 environ: Optional[Mapping[str, str]] = None):
        """
        Initialize Maven publisher.

        Args:
            config: Resolved PublishingConfiguration
            project_dir: Root directory of the Gradle build
            credentials_provider: Source of remote repository credentials
            gradlew: Gradle launcher, relative to project_dir or absolute
            verbose: Enable verbose output
            environ: Base environment for Gradle, os.environ when None
        """
        self.config = config
        self.project_dir = project_dir
        self.credentials_provider = credentials_provider
        self.gradlew = gradlew
        self.verbose = verbose
        self.environ = os.environ if environ is None else environ

    def get_gradle_task(self, target: PublicationTarget) -> str:
        """Get the Gradle task publishing to the given target."""
        if target.is_local:
            return 'publishToMavenLocal'
        return f"publishAllPublicationsTo{target.name[:1].upper()}{target.name[1:]}Repository"

    def get_credentials(self, target: PublicationTarget) -> Optional[PasswordCredentials]:
        if not target.requires_credentials:
            return None
        return self.credentials_provider.get_credentials(target.name)

    def validate(self, target: PublicationTarget) -> Tuple[bool, str]:
        """
        Validate that the target can be published to.

        Returns:
            Tuple of (is_valid, error_message)
        """
        if not target.requires_credentials:
            return True, ""

        credentials = self.get_credentials(target)
        if credentials is None or not credentials.is_complete():
            username_prop, password_prop = target.credential_property_names()
            return False, (
                f"Repository '{target.name}' requires username and password. "
                f"Set the '{username_prop}' and '{password_prop}' properties "
                f"or MAVEN_USERNAME and MAVEN_PASSWORD"
            )
        return True, ""

    def build_command(self, target: PublicationTarget) -> List[str]:
        """Build the Gradle command line for a target."""
        gradle_cmd = [self.gradlew, self.get_gradle_task(target), '--no-daemon']

        # The build script only declares the remote repository when pubUrl is set
        if not target.is_local:
            gradle_cmd.append(f"-P{PUB_URL_PROPERTY}={target.url}")

        if self.verbose:
            gradle_cmd.append('--info')
        return gradle_cmd

    def build_environment(self, target: PublicationTarget) -> Dict[str, str]:
        """
        Build the Gradle process environment.

        Credentials travel as ORG_GRADLE_PROJECT_* variables so they never
        show up in the process list.
        """
        env = dict(self.environ)
        credentials = self.get_credentials(target)
        if credentials is not None:
            username_prop, password_prop = target.credential_property_names()
            env[f"{ENV_PROPERTY_PREFIX}{username_prop}"] = credentials.username
            env[f"{ENV_PROPERTY_PREFIX}{password_prop}"] = credentials.password
        return env

    def get_local_repository_path(self) -> str:
        """Get the directory the artifact lands in inside Maven Local."""
        return os.path.expanduser(
            f"~/.m2/repository/{self.config.group_id.replace('.', '/')}"
            f"/{self.config.artifact_id}/{self.config.version}"
        )

    def publish(self, target_name: str) -> bool:
        """
        Publish the plugin to a publication target.

        Args:
            target_name: Name of a target in the configuration

        Returns:
            True if publishing successful
        """
        target = self.config.get_target(target_name)

        is_valid, error_msg = self.validate(target)
        if not is_valid:
            print(f"Configuration validation failed: {error_msg}")
            return False

        gradle_cmd = self.build_command(target)

        print(f"\nPublishing to {target}...")
        print(self.config.get_config_summary())
        print()
        if self.verbose:
            print(f"Running: {' '.join(gradle_cmd)}")

        try:
            result = subprocess.run(
                gradle_cmd,
                cwd=self.project_dir,
                env=self.build_environment(target),
                capture_output=not self.verbose,
                text=True,
                check=False
            )
        except FileNotFoundError:
            print(f"Error: Gradle wrapper not found at {os.path.join(self.project_dir, self.gradlew)}")
            return False
        except OSError as e:
            print(f"Error during publishing: {e}")
            return False

        if result.returncode != 0:
            print(f"✗ Publishing failed with exit code: {result.returncode}")
            if not self.verbose and result.stderr:
                print(f"Error output:\n{result.stderr}")
            return False

        print(f"✓ Successfully published to {target}")
        coordinates = f"{self.config.group_id}:{self.config.artifact_id}:{self.config.version}"
        if target.is_local:
            print(f"  Artifacts available at: {self.get_local_repository_path()}")
        else:
            print(f"  Published to: {target.url}")
        print(f"  Coordinates: {coordinates}")
        print(f"  Plugin marker: {self.config.plugin.id}:{self.config.plugin.id}.gradle.plugin")
        return True
