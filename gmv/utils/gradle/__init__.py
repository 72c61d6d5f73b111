"""
Gradle integration for gmv.

Reads project properties and gradle.properties files.
"""

from .properties import collect_project_properties, load_properties_file, parse_properties

__all__ = ['collect_project_properties', 'load_properties_file', 'parse_properties']
