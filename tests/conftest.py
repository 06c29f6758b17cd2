import collections
import pytest
import time

import zeondb


class ScriptedConnection(zeondb.Connection):
    """ Stand-in for an engine connection. Every call is recorded in
        self.calls; each execute() consumes the next queued response, or
        acknowledges with 'OK' if nothing is queued. Like the real engine,
        a command overwrites the single error/output slot.
    """

    def __init__(self, accept_login=True, delay=0):

        self.accept_login = accept_login
        self.delay = delay
        self.calls = list()
        self.responses = collections.deque()
        self.error = ''
        self.output = ''
        self.up = True
        self.destroyed = 0


    def respond(self, success, text):
        self.responses.append((success, text))


    def authenticate(self, username, password):
        self.calls.append(('authenticate', username, password))
        return self.accept_login


    def execute(self, command):
        self.calls.append(('execute', command))

        try:
            success, text = self.responses.popleft()
        except IndexError:
            success, text = True, 'OK'

        if success:
            self.output = text
            self.error = ''
        else:
            self.output = ''
            self.error = text

        # Widen the window between the command and the read of its result,
        # for tests that check the session serializes command cycles.

        if self.delay:
            time.sleep(self.delay)

        return success


    def read_error(self):
        self.calls.append(('read_error',))
        return self.error


    def read_output(self):
        self.calls.append(('read_output',))
        return self.output


    def is_up(self):
        self.calls.append(('is_up',))
        return self.up


    def destroy(self):
        self.calls.append(('destroy',))
        self.destroyed += 1


    def commands(self):
        return [call[1] for call in self.calls if call[0] == 'execute']


class EchoConnection(ScriptedConnection):
    """ Answers every command with the command text itself, encoded as a
        JSON string, so concurrent callers can tell whose output they got.
    """

    def execute(self, command):
        self.respond(True, zeondb.json.dumps(command).decode())
        return ScriptedConnection.execute(self, command)


class FakeFunction:

    def __init__(self, name, library):
        self.name = name
        self.library = library
        self.argtypes = None
        self.restype = None

    def __call__(self, *arguments):
        self.library.calls.append((self.name,) + arguments)
        return self.library.returns.get(self.name)


class FakeLibrary:
    """ Mimics a loaded ctypes library exposing the engine's C API.
    """

    def __init__(self, skip=()):

        self.calls = list()
        self.returns = dict()

        for name in zeondb.native.signatures:
            if name in skip:
                continue
            setattr(self, name, FakeFunction(name, self))

        self.returns['ZeonAPI_Connection_create'] = 1234
        self.returns['ZeonAPI_Connection_is_up'] = 1
        self.returns['ZeonAPI_Connection_auth'] = 1
        self.returns['ZeonAPI_Connection_exec'] = 1
        self.returns['ZeonAPI_Connection_get_error'] = b''
        self.returns['ZeonAPI_Connection_get_buffer'] = b'OK'


@pytest.fixture
def connection():
    return ScriptedConnection()


@pytest.fixture
def connection_factory():
    return ScriptedConnection


@pytest.fixture
def session(connection):
    return zeondb.Session(connection)


@pytest.fixture
def logged_in(connection, session):
    """ A session logged in as 'admin', with the login traffic cleared.
    """

    assert session.login('admin', 'admin')
    del connection.calls[:]
    return session


@pytest.fixture
def library():
    return FakeLibrary()


@pytest.fixture
def echo():
    return EchoConnection(delay=0.001)


@pytest.fixture
def library_factory():
    return FakeLibrary


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
