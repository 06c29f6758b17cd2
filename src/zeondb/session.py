""" The :class:`Session` is the principal interface for interacting with an
    engine. It owns one connection handle and the identity of the user
    logged in through it, and turns each client operation into one command
    cycle: build the command, execute it, decode the outcome.
"""

import logging
import threading

from . import command
from . import config
from . import result
from .errors import SessionClosed, ValidationError
from .native import NativeConnection


logger = logging.getLogger(__name__)


class Session:
    """ A logged-in (or not yet logged-in) conversation with the engine over
        a single :class:`zeondb.connection.Connection`. The session takes
        ownership of the *connection*; :func:`disconnect` releases it, after
        which the session cannot be used.

        The engine keeps one error/output slot per connection, overwritten
        by every command. Each command cycle therefore runs under a lock, so
        that concurrent callers sharing a session never read each other's
        results. Independent sessions share nothing.

        All data operations return a :class:`zeondb.result.Ok` or
        :class:`zeondb.result.Err`. Nothing is retried.
    """

    def __init__(self, connection):

        self.connection = connection
        self.closed = False

        self._identity = None
        self._lock = threading.Lock()


    def __enter__(self):
        return self


    def __exit__(self, *exc_info):
        if not self.closed:
            self.disconnect()


    def __repr__(self):
        return 'session.Session(%r, identity=%r)' % (self.connection, self._identity)


    @property
    def identity(self):
        """ The username of the last successful :func:`login`, or None.
        """

        return self._identity


    def _check(self):
        if self.closed:
            raise SessionClosed('the session has been disconnected')


    def _run(self, line):
        """ Execute one command line and decode its outcome, holding the lock
            across the execute and the read of the result slot.
        """

        connection = self.connection
        logger.debug('executing %s', line.split(' ', 1)[0])

        with self._lock:
            self._check()
            success = connection.execute(line)
            return result.decode(success, connection.read_error, connection.read_output)


    def login(self, username, password):
        """ Authenticate as *username*. On success the session remembers the
            identity, and pins the engine's output format to JSON, which is
            what every later response is decoded as. Only the outcome of the
            authentication is returned; if pinning the format fails, that is
            logged but not reported.
        """

        command.check(username, password)

        connection = self.connection
        pin = command.options_set('format', command.FORMAT)

        with self._lock:
            self._check()
            authenticated = connection.authenticate(username, password)

            if not authenticated:
                self._identity = None
                logger.debug('login refused for %s', username)
                return False

            self._identity = username

            ### Whether the engine can ever refuse this is unverified; the
            ### failure is not surfaced to the caller.
            if not connection.execute(pin):
                logger.warning('could not set output format after login: %s', connection.read_error())

        logger.debug('logged in as %s', username)
        return True


    def is_up(self):
        with self._lock:
            self._check()
            return self.connection.is_up()


    def last_error(self):
        """ Return the raw contents of the connection's error slot.
        """

        with self._lock:
            self._check()
            return self.connection.read_error()


    def last_output(self):
        """ Return the raw contents of the connection's output slot.
        """

        with self._lock:
            self._check()
            return self.connection.read_output()


    def get(self, key):
        return self._run(command.get(key))


    def set(self, key, value):
        """ Store the JSON-serializable *value* at *key*.
        """

        return self._run(command.set(key, value))


    def delete(self, key):
        return self._run(command.delete(key))


    def link(self, key, target):
        return self._run(command.link(key, target))


    def merge(self, key, branch1, branch2):
        """ Merge *branch2* of *key* into *branch1*.
        """

        return self._run(command.merge(key, branch1, branch2))


    def branches(self, key):
        return self._run(command.branches(key))


    def get_template(self, name):
        return self._run(command.template_get(name))


    def use_template(self, name, key):
        return self._run(command.template_set(name, key))


    def new_template(self, name, template):
        return self._run(command.template_create(name, template))


    def config(self, key=None, value=None):
        """ Inspect or change engine options. With a *key* and a *value* the
            option is set; with only a *key* its value is returned; with
            neither, every option is returned. The output format can only be
            'JSON': anything else is an :class:`zeondb.result.Err` without
            contacting the engine.
        """

        self._check()

        if key is None:
            if value is not None:
                raise ValidationError('an option value requires an option name')
            return self._run(command.options_print())

        if value is None:
            return self._run(command.options_get(key))

        if key == 'format' and value != command.FORMAT:
            return result.Err('Format must be JSON')

        return self._run(command.options_set(key, value))


    def array_push(self, key, value):
        return self._run(command.array_push(key, value))


    def array_insert(self, key, index, value):
        return self._run(command.array_insert(key, index, value))


    def array_erase(self, key, index):
        return self._run(command.array_erase(key, index))


    def array_length(self, key):
        return self._run(command.array_length(key))


    def auth(self, intent):
        """ Execute an account request built by :class:`zeondb.Account`.
            Permission queries and changes for the logged-in user use the
            engine's implicit self form, which requires a prior
            :func:`login`; see :func:`zeondb.command.auth`.
        """

        self._check()
        return self._run(command.auth(intent, self._identity))


    def disconnect(self):
        """ Release the connection handle. Any further use of this session
            raises :class:`zeondb.errors.SessionClosed`.
        """

        with self._lock:
            self._check()
            self.closed = True
            self.connection.destroy()

        logger.debug('session disconnected')


# end of class Session



def connect(address=None, port=None, library=None):
    """ Open a new :class:`Session` against the engine at *address* and
        *port*, through the C API library at *library*. Each argument left
        as None is taken from :mod:`zeondb.config`. Every call returns a new
        session with its own connection handle.
    """

    if address is None:
        address = config.address()

    if port is None:
        port = config.port()

    connection = NativeConnection(address, port, library)
    return Session(connection)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
