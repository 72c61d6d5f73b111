"""
Maven publishing for the gradle-multi-version plugin.

This module resolves the publishing configuration of the build and publishes
the plugin to Maven repositories.
"""

from .config import (
    BuildDefinition,
    PluginDeclaration,
    PublicationTarget,
    PublishConfigError,
    PublishingConfiguration,
    get_definition,
    resolve,
)
from .credentials import CredentialsProvider, PasswordCredentials, PropertyCredentialsProvider
from .publisher import MavenPublisher

__all__ = [
    'BuildDefinition',
    'PluginDeclaration',
    'PublicationTarget',
    'PublishConfigError',
    'PublishingConfiguration',
    'get_definition',
    'resolve',
    'CredentialsProvider',
    'PasswordCredentials',
    'PropertyCredentialsProvider',
    'MavenPublisher',
]
