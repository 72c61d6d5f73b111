"""
Gradle project property handling.

Reads .properties files and assembles the project properties of a build
invocation with Gradle's precedence rules.
"""

import os
import string
from typing import Dict, Iterable, List, Mapping, Optional

ENV_PROPERTY_PREFIX = 'ORG_GRADLE_PROJECT_'
GRADLE_PROPERTIES_FILE = 'gradle.properties'

_ESCAPES = {
    't': '\t',
    'n': '\n',
    'r': '\r',
    'f': '\f',
}


def _logical_lines(text: str) -> List[str]:
    """Join backslash-continued lines and drop comments and blank lines."""
    lines = []
    current = None

    for raw in text.splitlines():
        line = raw.lstrip()
        if current is None:
            if not line or line[0] in '#!':
                continue
            current = ''

        # Odd number of trailing backslashes means continuation
        trailing = len(line) - len(line.rstrip('\\'))
        if trailing % 2 == 1:
            current += line[:-1]
            continue

        lines.append(current + line)
        current = None

    if current:
        lines.append(current)
    return lines


def _unescape(value: str) -> str:
    result = []
    i = 0
    while i < len(value):
        ch = value[i]
        if ch != '\\' or i + 1 >= len(value):
            result.append(ch)
            i += 1
            continue

        nxt = value[i + 1]
        if nxt == 'u':
            digits = value[i + 2:i + 6]
            if len(digits) < 4 or any(c not in string.hexdigits for c in digits):
                raise ValueError(f"Malformed \\uxxxx encoding in: {value}")
            result.append(chr(int(digits, 16)))
            i += 6
            continue
        result.append(_ESCAPES.get(nxt, nxt))
        i += 2
    return ''.join(result)


def _split_key_value(line: str):
    i = 0
    while i < len(line):
        ch = line[i]
        if ch == '\\':
            i += 2
            continue
        if ch in '=: \t\f':
            break
        i += 1

    key = line[:i]
    rest = line[i:].lstrip(' \t\f')
    if rest[:1] in ('=', ':'):
        rest = rest[1:].lstrip(' \t\f')
    return _unescape(key), _unescape(rest)


def parse_properties(text: str) -> Dict[str, str]:
    """
    Parse the content of a Java .properties file.

    Args:
        text: File content

    Returns:
        Dictionary of keys to values, later keys overriding earlier ones
    """
    properties = {}
    for line in _logical_lines(text):
        key, value = _split_key_value(line)
        properties[key] = value
    return properties


def load_properties_file(path: str) -> Dict[str, str]:
    """
    Load a .properties file, returning an empty dictionary if it is missing.

    The file is read as ISO-8859-1 like java.util.Properties, other
    characters come in through \\uxxxx escapes.

    Raises:
        ValueError: The file contains a malformed escape
    """
    if not os.path.isfile(path):
        return {}
    with open(path, 'r', encoding='iso-8859-1') as f:
        content = f.read()
    try:
        return parse_properties(content)
    except ValueError as e:
        raise ValueError(f"{path}: {e}") from e


def parse_cli_properties(args: Optional[Iterable[str]]) -> Dict[str, str]:
    """
    Parse -P style KEY=VALUE arguments.

    A bare KEY (no '=') sets the property to an empty string, as Gradle does.
    """
    properties = {}
    for item in args or []:
        if item.startswith('-P'):
            item = item[2:]
        if not item:
            continue
        if '=' in item:
            key, value = item.split('=', 1)
        else:
            key, value = item, ''
        properties[key] = value
    return properties


def properties_from_environment(environ: Mapping[str, str]) -> Dict[str, str]:
    """Collect ORG_GRADLE_PROJECT_<name> environment variables."""
    properties = {}
    for key, value in environ.items():
        if key.startswith(ENV_PROPERTY_PREFIX) and len(key) > len(ENV_PROPERTY_PREFIX):
            properties[key[len(ENV_PROPERTY_PREFIX):]] = value
    return properties


def get_gradle_user_home(environ: Mapping[str, str]) -> str:
    gradle_user_home = environ.get('GRADLE_USER_HOME', '')
    if gradle_user_home:
        return gradle_user_home
    return os.path.join(os.path.expanduser('~'), '.gradle')


def collect_project_properties(project_dir: str,
                               cli_properties: Optional[Mapping[str, str]] = None,
                               environ: Optional[Mapping[str, str]] = None,
                               defaults: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """
    Assemble the Gradle project properties of a build invocation.

    Precedence, lowest first:
        1. defaults (e.g., [properties] in gmv.toml)
        2. <project_dir>/gradle.properties
        3. <GRADLE_USER_HOME>/gradle.properties
        4. ORG_GRADLE_PROJECT_* environment variables
        5. -P command line properties

    Args:
        project_dir: Root directory of the Gradle build
        cli_properties: Properties given on the command line
        environ: Environment, os.environ when None
        defaults: Lowest precedence properties

    Returns:
        Merged property dictionary
    """
    if environ is None:
        environ = os.environ

    properties = {}
    properties.update(defaults or {})
    properties.update(load_properties_file(os.path.join(project_dir, GRADLE_PROPERTIES_FILE)))
    properties.update(load_properties_file(
        os.path.join(get_gradle_user_home(environ), GRADLE_PROPERTIES_FILE)
    ))
    properties.update(properties_from_environment(environ))
    properties.update(cli_properties or {})
    return properties
