# SPDX-FileCopyrightText: 2025 fixrat contributors
# SPDX-License-Identifier: Apache-2.0

from importlib import metadata
from .core import *
from .core import checked
from .core.stringify import stringify, abbrev

try:
    __version__ = metadata.version(__name__)
except metadata.PackageNotFoundError:
    # Running from a source tree that was never installed.
    __version__ = 'unknown'
