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

import sys
import json
import argparse

from gmv.utils.context.namespace import CliNameSpace
from gmv.utils.context.context import CliContext
from gmv.utils.context.command import CliCommand
from gmv.utils.config import resolve_project
from gmv.utils.gradle.properties import parse_cli_properties
from gmv.utils.maven.config import PublishConfigError


class Resolve(CliCommand):
    def __init__(self, argv=None):
        self.argv = sys.argv[2:] if argv is None else argv

    def description(self) -> str:
        return """
        This is a subcommand to show the publishing configuration the build
        script resolves to for the current project properties.

        Project properties are read from gmv.toml [properties], gradle.properties,
        ~/.gradle/gradle.properties, ORG_GRADLE_PROJECT_* variables and -P options.

        Examples:
            gmv resolve
            gmv resolve -PpubUrl=https://repo.example.com/releases
            gmv resolve --definition 0.2.0 --json
        """

    def cli(self) -> CliNameSpace:
        parser = argparse.ArgumentParser(
            prog="gmv resolve",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            description=self.description(),
        )
        parser.add_argument(
            "-P", "--project-prop",
            dest="project_props",
            action="append",
            default=[],
            metavar="KEY=VALUE",
            help="Gradle project property (can be used multiple times)",
        )
        parser.add_argument(
            "--project-dir",
            type=str,
            default=None,
            help="Root directory of the Gradle build (default: current directory)",
        )
        parser.add_argument(
            "--definition",
            type=str,
            default=None,
            help="Build definition version to evaluate (default: latest)",
        )
        parser.add_argument(
            "--json",
            action="store_true",
            help="Print the configuration as JSON",
        )
        return parser.parse_args(self.argv, namespace=CliNameSpace())

    def exec(self, context: CliContext, args: CliNameSpace):
        project_dir = args.project_dir or context.project_dir
        try:
            _, _, configuration = resolve_project(
                project_dir,
                cli_properties=parse_cli_properties(args.project_props),
                definition=args.definition,
            )
        except PublishConfigError as e:
            print(f"ERROR: {e}")
            sys.exit(1)

        if args.json:
            print(json.dumps(configuration.to_dict(), indent=2))
        else:
            print(f"Resolved configuration for {project_dir}:")
            print(configuration.get_config_summary())
