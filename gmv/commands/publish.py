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
import argparse

from gmv.utils.context.namespace import CliNameSpace
from gmv.utils.context.context import CliContext
from gmv.utils.context.command import CliCommand
from gmv.utils.config import resolve_project
from gmv.utils.gradle.properties import parse_cli_properties
from gmv.utils.maven.config import PublishConfigError, DEFAULT_TARGET_NAME
from gmv.utils.maven.credentials import PropertyCredentialsProvider
from gmv.utils.maven.publisher import MavenPublisher


class Publish(CliCommand):
    def __init__(self, argv=None):
        self.argv = sys.argv[2:] if argv is None else argv

    def description(self) -> str:
        return """
        This is a subcommand to publish the plugin with Gradle.

        The 'default' target publishes to Maven Local (~/.m2/repository/).
        The 'pub' target exists only when the pubUrl property is set; its
        credentials come from the pubUsername/pubPassword properties or
        MAVEN_USERNAME/MAVEN_PASSWORD.

        Examples:
            gmv publish                                    # Maven Local
            gmv publish pub -PpubUrl=https://repo.example.com/releases
            gmv publish pub -y --verbose
        """

    def cli(self) -> CliNameSpace:
        parser = argparse.ArgumentParser(
            prog="gmv publish",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            description=self.description(),
        )
        parser.add_argument(
            "target",
            type=str,
            nargs="?",
            default=DEFAULT_TARGET_NAME,
            help="Publication target: default or pub (default: default)",
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
            "--gradlew",
            type=str,
            default=None,
            help="Gradle launcher (default: [gmv] gradlew in gmv.toml or ./gradlew)",
        )
        parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show Gradle output",
        )
        parser.add_argument(
            "-y", "--yes",
            action="store_true",
            help="Skip confirmation prompts",
        )
        return parser.parse_args(self.argv, namespace=CliNameSpace())

    def exec(self, context: CliContext, args: CliNameSpace):
        project_dir = args.project_dir or context.project_dir
        try:
            tool_config, properties, configuration = resolve_project(
                project_dir,
                cli_properties=parse_cli_properties(args.project_props),
                definition=args.definition,
            )
            target = configuration.get_target(args.target)
        except PublishConfigError as e:
            print(f"ERROR: {e}")
            sys.exit(1)

        if not target.is_local and not args.yes:
            response = input(f"Publish {configuration.version} to {target.url}? (y/N): ")
            if response.strip().lower() != "y":
                print("Aborted.")
                sys.exit(1)

        publisher = MavenPublisher(
            configuration,
            project_dir,
            PropertyCredentialsProvider(properties),
            gradlew=args.gradlew or tool_config.gradlew,
            verbose=args.verbose or tool_config.verbose,
        )
        if not publisher.publish(target.name):
            sys.exit(1)
