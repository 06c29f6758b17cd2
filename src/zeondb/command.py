""" Construction of engine commands. Each function here maps one client
    operation to exactly one line of the engine's textual protocol: tokens
    separated by single spaces, where a token may be a JSON literal but never
    contains a line break. Nothing in this module talks to the engine.
"""

from __future__ import annotations

from typing import Any, Optional

from . import json
from .account import AuthIntent, Create, GetPerm, SetPerm, Promote, Demote, Delete
from .errors import IdentityError, ValidationError
from .key import KeyPath, validate_index


FORMAT = 'JSON'

# A command is terminated by the C string terminator on the way out and is
# parsed as a single line by the engine; none of these may appear inside it.

_forbidden = ('\n', '\r', '\0')


def encode(value: Any) -> str:
    """ Encode a Python-native value as a single-line JSON token.
    """

    try:
        encoded = json.dumps(value)
    except TypeError as e:
        raise ValidationError('value cannot be encoded as JSON: ' + str(e))

    return encoded.decode()


def check(*strings):
    """ Raise ValidationError if any of *strings* contains a line break or
        a NUL character. This applies to credentials as well as commands.
    """

    for string in strings:
        for character in _forbidden:
            if character in string:
                raise ValidationError('engine strings cannot contain %r' % (character,))


def line(*tokens) -> str:
    """ Join *tokens* into one command line. KeyPath and Permission tokens
        are rendered; anything else is converted with str().
    """

    command = ' '.join(str(token) for token in tokens)
    check(command)
    return command


def _index(index):
    validate_index(index)
    return index


def set(key: KeyPath, value: Any) -> str:
    return line('set', key, encode(value))


def get(key: KeyPath) -> str:
    return line('get', key)


def delete(key: KeyPath) -> str:
    return line('delete', key)


def link(key: KeyPath, target: KeyPath) -> str:
    """ Make *key* a link to *target*. The engine resolves a leading '$'
        segment in *target* to the root of the key space.
    """

    return line('link', key, target)


def merge(key: KeyPath, branch1: str, branch2: str) -> str:
    return line('branches', 'merge', key, branch1, branch2)


def branches(key: KeyPath) -> str:
    return line('branches', 'get', key)


def template_get(name: str) -> str:
    return line('template', 'get', name)


def template_set(name: str, key: KeyPath) -> str:
    """ Apply the stored template *name* to *key*.
    """

    return line('template', 'set', name, key)


def template_create(name: str, template: Any) -> str:
    return line('template', 'create', name, encode(template))


def options_set(name: str, value: Any) -> str:
    """ Set an engine option. The client decodes every response as JSON, so
        the output format is pinned: any other format is refused here.
    """

    if name == 'format' and value != FORMAT:
        raise ValidationError('Format must be JSON')

    return line('options', 'set', name, encode(value))


def options_get(name: str) -> str:
    return line('options', 'get', name)


def options_print() -> str:
    return line('options', 'print')


def array_push(key: KeyPath, value: Any) -> str:
    return line('array', 'push', key, encode(value))


def array_insert(key: KeyPath, index: int, value: Any) -> str:
    return line('array', 'insert', key, _index(index), encode(value))


def array_erase(key: KeyPath, index: int) -> str:
    return line('array', 'erase', key, _index(index))


def array_length(key: KeyPath) -> str:
    return line('array', 'length', key)


def auth(intent: AuthIntent, identity: Optional[str] = None) -> str:
    """ Build the command for an account request. Permission queries and
        changes aimed at the logged-in user, named by *identity*, use the
        engine's implicit self form; for anyone else the target user is
        named explicitly. Those two request types require an *identity*.
    """

    if isinstance(intent, Create):
        return line('auth', 'create', intent.username, intent.password, intent.perms)

    if isinstance(intent, (GetPerm, SetPerm)):
        if identity is None:
            raise IdentityError('log in before querying or changing permissions')

        own = intent.username == identity

        if isinstance(intent, GetPerm):
            if own:
                return line('auth', 'get', intent.key)
            return line('auth', 'get', intent.key, 'of', intent.username)

        if own:
            return line('auth', 'set', intent.key, intent.perms)
        return line('auth', 'set', intent.key, intent.perms, 'to', intent.username)

    if isinstance(intent, Promote):
        return line('auth', 'promote', intent.username)

    if isinstance(intent, Demote):
        return line('auth', 'demote', intent.username)

    if isinstance(intent, Delete):
        return line('auth', 'delete', intent.username)

    raise TypeError('not an account request: %r' % (intent,))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
