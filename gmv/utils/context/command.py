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

from abc import ABC, abstractmethod

from gmv.utils.context.context import CliContext
from gmv.utils.context.namespace import CliNameSpace


# Base class of the root command and every subcommand
class CliCommand(ABC):
    @abstractmethod
    def description(self) -> str:
        pass

    @abstractmethod
    def cli(self) -> CliNameSpace:
        pass

    @abstractmethod
    def exec(self, context: CliContext, args: CliNameSpace):
        pass
