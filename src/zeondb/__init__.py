""" Python client for the ZeonDB engine. This covers the addressing of keys,
    the construction of engine commands, the interpretation of engine
    results, and account administration, on top of the engine's C API.
"""

# Utility components.

from . import json
from . import errors
from . import config

# Values and command construction.

from .key import KeyPath
from .permission import Permission
from .account import Account, AuthRequestType
from . import command
from . import result
from .result import Ok, Err

# Primary public-facing interfaces.

from .connection import Connection
from .native import NativeConnection
from .session import Session, connect

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
