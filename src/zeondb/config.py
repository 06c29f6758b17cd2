""" Default connection parameters. Each value can be overridden in the
    environment; the environment is consulted every time a value is
    requested, not just at import time.
"""

import os


default_address = '127.0.0.1'
default_port = 6748


def address():
    """ Return the engine address, either from the ZEONDB_ADDRESS environment
        variable or the built-in default.
    """

    return os.environ.get('ZEONDB_ADDRESS', default_address)


def port():
    """ Return the engine port as an integer. A non-integer ZEONDB_PORT
        raises ValueError rather than silently reverting to the default.
    """

    try:
        port = os.environ['ZEONDB_PORT']
    except KeyError:
        return default_port

    return int(port)


def library():
    """ Return the path to the engine's C API shared library, or None if
        ZEONDB_LIBRARY is not set.
    """

    path = os.environ.get('ZEONDB_LIBRARY')

    if path == '':
        path = None

    return path


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
