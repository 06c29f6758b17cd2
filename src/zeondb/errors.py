"""Exceptions raised by the zeondb client.

Engine-side failures are not exceptions; they come back as
:class:`zeondb.result.Err` values. The classes here cover everything that
is caught on the client side, or that breaks the protocol contract.
"""


class ZeonError(Exception):
    """Base class for all zeondb errors."""


class ValidationError(ZeonError, ValueError):
    """A request was rejected before any contact with the engine."""


class IdentityError(ZeonError, RuntimeError):
    """An operation needed the active login identity, and there is none."""


class ProtocolError(ZeonError):
    """The engine reported success but its output could not be decoded."""

    def __init__(self, output):
        ZeonError.__init__(self, 'undecodable engine output: %r' % (output,))
        self.output = output


class EngineError(ZeonError):
    """Raised by :func:`zeondb.result.Err.unwrap`."""

    def __init__(self, message):
        ZeonError.__init__(self, message)
        self.message = message


class SessionClosed(ZeonError, RuntimeError):
    """The session was used after its connection was released."""


class LibraryError(ZeonError, OSError):
    """The engine's C API library could not be located or loaded."""


class ConnectionFailed(ZeonError, ConnectionError):
    """The engine library did not hand back a connection handle."""


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
