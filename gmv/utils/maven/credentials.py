"""
Credential sources for remote Maven repositories.

The resolver only flags that a repository needs PasswordCredentials.
Publishers ask a CredentialsProvider for the actual values.
"""

import os
from abc import ABC, abstractmethod
from typing import Mapping, Optional


class PasswordCredentials:
    """Username/password pair for a Maven repository."""

    def __init__(self, username: str = '', password: str = ''):
        self.username = username or ''
        self.password = password or ''

    def is_complete(self) -> bool:
        return bool(self.username) and bool(self.password)

    def __eq__(self, other):
        if not isinstance(other, PasswordCredentials):
            return NotImplemented
        return self.username == other.username and self.password == other.password

    def __repr__(self):
        masked = '***' if self.password else ''
        return f"PasswordCredentials(username={self.username!r}, password={masked!r})"


class CredentialsProvider(ABC):
    """Supplies credentials for a named repository."""

    @abstractmethod
    def get_credentials(self, repository_name: str) -> Optional[PasswordCredentials]:
        """
        Get credentials for a repository.

        Args:
            repository_name: Name of the repository (e.g., 'pub')

        Returns:
            PasswordCredentials, or None when nothing is configured
        """


class PropertyCredentialsProvider(CredentialsProvider):
    """
    Read credentials the way Gradle's credentials(PasswordCredentials) does.

    A repository named 'pub' takes its credentials from the 'pubUsername'
    and 'pubPassword' project properties. MAVEN_USERNAME and MAVEN_PASSWORD
    environment variables fill in whatever the properties leave out.
    """

    def __init__(self, properties: Mapping[str, str], environ: Optional[Mapping[str, str]] = None):
        self.properties = properties
        self.environ = os.environ if environ is None else environ

    def get_credentials(self, repository_name: str) -> Optional[PasswordCredentials]:
        username = self.properties.get(f"{repository_name}Username", '')
        password = self.properties.get(f"{repository_name}Password", '')

        if not username:
            username = self.environ.get('MAVEN_USERNAME', '')
        if not password:
            password = self.environ.get('MAVEN_PASSWORD', '')

        if not username and not password:
            return None
        return PasswordCredentials(username, password)


class StaticCredentialsProvider(CredentialsProvider):
    """Fixed credentials per repository, mostly for programmatic use."""

    def __init__(self, credentials: Mapping[str, PasswordCredentials]):
        self.credentials = dict(credentials)

    def get_credentials(self, repository_name: str) -> Optional[PasswordCredentials]:
        return self.credentials.get(repository_name)
