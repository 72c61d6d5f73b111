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

"""gmv - build configuration tooling for the gradle-multi-version plugin."""

__version__ = "0.3.0"
