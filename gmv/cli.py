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
import importlib
import argparse

from gmv.utils.context.namespace import CliNameSpace
from gmv.utils.context.context import CliContext
from gmv.utils.context.command import CliCommand

SCRIPT_PATH = os.path.split(os.path.realpath(__file__))[0]


# Root Class for Command Line Interface
class Cli(CliCommand):
    def __init__(self, argv=None):
        self.argv = sys.argv[1:] if argv is None else argv

    def description(self) -> str:
        return """GMV - build configuration tool for the gradle-multi-version plugin

USAGE:
    gmv <command> [options]

COMMANDS:
    resolve     Show the publishing configuration of the build
    publish     Publish the plugin to Maven Local or the 'pub' repository
    new         Generate the Gradle build files of a build definition

EXAMPLES:
    gmv resolve                                        # Local publication only
    gmv resolve -PpubUrl=https://repo.example.com/releases --json
    gmv publish default                                # Publish to Maven Local
    gmv publish pub -PpubUrl=https://repo.example.com/releases
    gmv new my-plugin --definition 0.2.0

For more information on a specific command:
    gmv <command> --help
        """

    def get_command_list(self) -> list:
        arr = []
        for command in os.listdir(os.path.join(SCRIPT_PATH, "commands")):
            if command.startswith("_") or command.startswith("test_"):
                continue
            if command.endswith(".py"):
                arr.append(os.path.splitext(os.path.basename(command))[0])
        return sorted(arr)

    def _help_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog="gmv",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            description=self.description(),
        )
        parser.add_argument(
            "subcommand",
            metavar=f"{self.get_command_list()}",
            type=str,
            choices=self.get_command_list(),
        )
        return parser

    def cli(self) -> CliNameSpace:
        # gmv --help, but NOT gmv resolve --help
        if len(self.argv) == 1 and self.argv[0] in ['--help', '-h']:
            self._help_parser().print_help()
            sys.exit(0)

        # Parse subcommand without automatic help handling
        parser = argparse.ArgumentParser(
            prog="gmv",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            description=self.description(),
            add_help=False,
        )
        parser.add_argument(
            "subcommand",
            metavar=f"{self.get_command_list()}",
            type=str,
            nargs='?',
            choices=self.get_command_list(),
        )
        # parse only known args, the subcommand parses the rest
        args, unknown = parser.parse_known_args(self.argv[:1], namespace=CliNameSpace())
        return args

    def exec(self, context: CliContext, args: CliNameSpace):
        if not args.subcommand:
            print("ERROR: No command specified\n")
            self._help_parser().print_help()
            sys.exit(1)

        module = importlib.import_module(f"gmv.commands.{args.subcommand}")
        klass = getattr(module, args.subcommand.capitalize())
        sub_cmd = klass(self.argv[1:])
        sub_cmd.exec(context, sub_cmd.cli())


def main(argv=None):
    cmd = Cli(argv)
    cmd.exec(CliContext(), cmd.cli())


if __name__ == "__main__":
    main()
