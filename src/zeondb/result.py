""" Interpretation of the engine's response to a single command. The engine
    keeps one error slot and one output slot per connection; a command
    reports only a success flag, and the caller reads the relevant slot
    afterwards. :func:`decode` turns that into an :class:`Ok` or :class:`Err`.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Callable

from . import json
from .errors import EngineError, ProtocolError


ACK = 'OK'


@dataclasses.dataclass(frozen=True)
class Ok:
    """ A successful command. The *value* is either the acknowledgement
        literal 'OK' or the decoded JSON output of the command.
    """

    value: Any

    ok = True

    def unwrap(self):
        return self.value


@dataclasses.dataclass(frozen=True)
class Err:
    """ A command the engine refused; *message* is the engine's error text.
    """

    message: str

    ok = False

    def unwrap(self):
        raise EngineError(self.message)


def decode(success: bool, read_error: Callable[[], str], read_output: Callable[[], str]):
    """ Return the :class:`Ok` or :class:`Err` for a command whose success
        flag is *success*. Only the slot relevant to the outcome is read.
        Output that is neither the acknowledgement literal nor valid JSON
        raises :class:`ProtocolError`.
    """

    if not success:
        return Err(read_error())

    output = read_output()

    if output == ACK:
        return Ok(output)

    try:
        value = json.loads(output)
    except (json.DecodeError, ValueError):
        raise ProtocolError(output)

    return Ok(value)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
