"""Rewrite version and copyright attributes of AssemblyInfo source files."""

# Copyright 2022-2026 Florian Pigorsch & Contributors. All rights reserved.
#
# Use of this source code is governed by a MIT-style
# license that can be found in the LICENSE file.

__app_name__ = "assemblyinfoutil"
__version__ = "3.3.0"
