""" ctypes binding to the engine's C API library. The library is loaded once
    per path and shared; each :class:`NativeConnection` owns one handle
    created through it.
"""

import ctypes
import logging
import threading

from . import config
from .connection import Connection
from .errors import ConnectionFailed, LibraryError


logger = logging.getLogger(__name__)

encoding = 'utf-8'

_handle = ctypes.c_void_p
_string = ctypes.c_char_p

signatures = {
    'ZeonAPI_Connection_create': ((_string, ctypes.c_uint16), _handle),
    'ZeonAPI_Connection_destroy': ((_handle,), None),
    'ZeonAPI_Connection_is_up': ((_handle,), ctypes.c_int32),
    'ZeonAPI_Connection_get_error': ((_handle,), _string),
    'ZeonAPI_Connection_get_buffer': ((_handle,), _string),
    'ZeonAPI_Connection_auth': ((_handle, _string, _string), ctypes.c_int32),
    'ZeonAPI_Connection_exec': ((_handle, _string), ctypes.c_int32),
}


_libraries = dict()
_libraries_lock = threading.Lock()


def load(path=None):
    """ Return the loaded C API library at *path*, defaulting to the location
        named by ZEONDB_LIBRARY. Repeated calls for the same path return the
        same library instance.
    """

    if path is None:
        path = config.library()

    if path is None:
        raise LibraryError('no engine library specified; set ZEONDB_LIBRARY')

    with _libraries_lock:
        try:
            return _libraries[path]
        except KeyError:
            pass

        try:
            library = ctypes.CDLL(path)
        except OSError as e:
            raise LibraryError('cannot load engine library %s: %s' % (path, e))

        bind(library)
        _libraries[path] = library

    logger.debug('loaded engine library %s', path)
    return library


def bind(library):
    """ Declare argument and return types for every C API symbol on
        *library*, so that ctypes converts arguments and results correctly.
    """

    for name, signature in signatures.items():
        arguments, result = signature

        try:
            function = getattr(library, name)
        except AttributeError:
            raise LibraryError('engine library is missing symbol ' + name)

        function.argtypes = arguments
        function.restype = result


def _encode(string):
    return string.encode(encoding)


def _decode(raw):
    if raw is None:
        return ''
    return raw.decode(encoding, errors='replace')


class NativeConnection(Connection):
    """ A :class:`zeondb.connection.Connection` backed by one handle from the
        engine's C API. The *library* may be a path, an already-loaded
        library, or None to use :func:`load` with its default path. A handle
        is created immediately; :class:`ConnectionFailed` is raised if the
        library refuses.
    """

    def __init__(self, address, port, library=None):

        if library is None or isinstance(library, str):
            library = load(library)

        self.library = library
        self.address = address
        self.port = int(port)

        handle = library.ZeonAPI_Connection_create(_encode(address), self.port)

        if not handle:
            raise ConnectionFailed('no connection handle for %s:%d' % (address, self.port))

        self.handle = handle
        logger.debug('connected to %s:%d', address, self.port)


    def __repr__(self):
        return 'native.NativeConnection(%r, %d)' % (self.address, self.port)


    def authenticate(self, username, password):
        result = self.library.ZeonAPI_Connection_auth(self.handle, _encode(username), _encode(password))
        return result == 1


    def execute(self, command):
        result = self.library.ZeonAPI_Connection_exec(self.handle, _encode(command))
        return result == 1


    def read_error(self):
        return _decode(self.library.ZeonAPI_Connection_get_error(self.handle))


    def read_output(self):
        return _decode(self.library.ZeonAPI_Connection_get_buffer(self.handle))


    def is_up(self):
        return bool(self.library.ZeonAPI_Connection_is_up(self.handle))


    def destroy(self):
        handle = self.handle
        if handle is None:
            return

        self.handle = None
        self.library.ZeonAPI_Connection_destroy(handle)
        logger.debug('disconnected from %s:%d', self.address, self.port)


# end of class NativeConnection


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
