#!/usr/bin/env python3

"""
Base Exception

Every error raised by the virtual machine, its stacks, and the program loader
derives from SVMError, so a launcher can catch them all with a single clause.
The more specific errors live beside the code that raises them.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class SVMError(Exception):
    pass


class VMError(SVMError):
    pass
