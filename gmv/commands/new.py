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

import os
import sys
import argparse

from gmv.utils.context.namespace import CliNameSpace
from gmv.utils.context.context import CliContext
from gmv.utils.context.command import CliCommand
from gmv.utils.gradle.scaffold import GENERATED_FILES, generate_build_files
from gmv.utils.maven.config import PublishConfigError, get_definition


class New(CliCommand):
    def __init__(self, argv=None):
        self.argv = sys.argv[2:] if argv is None else argv

    def description(self) -> str:
        return """
        Generate the Gradle build files of the gradle-multi-version plugin
        (build.gradle.kts, settings.gradle.kts, gradle.properties).

        Examples:
            gmv new my-plugin
            gmv new my-plugin --definition 0.2.0
            gmv new . --force --data version=0.3.1-SNAPSHOT
        """

    def cli(self) -> CliNameSpace:
        parser = argparse.ArgumentParser(
            prog="gmv new",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            description=self.description(),
        )
        parser.add_argument(
            "path", help="Directory where the build files will be generated"
        )
        parser.add_argument(
            "--definition",
            type=str,
            default=None,
            help="Build definition version to render (default: latest)",
        )
        parser.add_argument(
            "--data",
            action="append",
            help="Template data in KEY=VALUE format (can be used multiple times)",
        )
        parser.add_argument(
            "--force",
            action="store_true",
            help="Overwrite existing build files",
        )
        return parser.parse_args(self.argv, namespace=CliNameSpace())

    def exec(self, context: CliContext, args: CliNameSpace):
        try:
            definition = get_definition(args.definition)
        except PublishConfigError as e:
            print(f"ERROR: {e}")
            sys.exit(1)

        existing = [f for f in GENERATED_FILES if os.path.exists(os.path.join(args.path, f))]
        if existing and not args.force:
            print(f"ERROR: {', '.join(existing)} already exist in '{args.path}'")
            print("Use --force to overwrite them.")
            sys.exit(1)

        data = {}
        for item in args.data or []:
            if "=" in item:
                key, value = item.split("=", 1)
                # Convert string boolean values to actual booleans
                if value.lower() == "true":
                    value = True
                elif value.lower() == "false":
                    value = False
                data[key] = value

        print(f"Generating build files for {definition.version} in '{args.path}'...")
        dst = generate_build_files(args.path, definition, overwrite=args.force, extra_data=data)

        print(f"\nSuccessfully generated build files in '{dst}'")
        for name in GENERATED_FILES:
            print(f"  {name}")
