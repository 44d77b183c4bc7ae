# SPDX-FileCopyrightText: 2025 fixrat contributors
# SPDX-License-Identifier: Apache-2.0

from .errors import *
from .checked import INT_BITS, INT_MAX, INT_MIN
from .numeric import *
from .rational import *
from . import checked
