""" Key paths address a location in the engine's key space. A key path is a
    chain of segments; each segment names a key, optionally qualified by a
    branch and an array index, and optionally continues into a nested key.
    The canonical rendering is what the engine expects in a command::

        path[@branch][[index]][.next]

    :class:`KeyPath` instances are immutable. The derivation methods return
    new instances, so a cached key can be shared freely::

        users = KeyPath('users')
        theo = users.with_branch('theo')
        str(theo.with_index(2).chain(KeyPath('name')))   # users@theo[2].name
"""

from __future__ import annotations

import dataclasses
from typing import Optional

from .errors import ValidationError


UNSET = -1


def validate_index(index):
    """ Raise ValidationError unless *index* is a non-negative integer.
        Booleans are not accepted as integers here.
    """

    if isinstance(index, bool) or not isinstance(index, int):
        raise ValidationError('index must be an integer, not %r' % (index,))
    if index < 0:
        raise ValidationError('Index cannot be less than 0!')


@dataclasses.dataclass(frozen=True)
class KeyPath:

    path: str
    branch: str = ''
    index: int = UNSET
    next: Optional[KeyPath] = None

    def __post_init__(self):

        if not isinstance(self.path, str) or self.path == '':
            raise ValidationError('a key path must be a non-empty string')

        if self.branch is None:
            object.__setattr__(self, 'branch', '')

        # -1 is the sentinel for "no index"; any other negative value is
        # rejected outright.

        if self.index != UNSET:
            validate_index(self.index)

        if self.next is not None and not isinstance(self.next, KeyPath):
            raise ValidationError('a key path can only chain to another KeyPath')


    def __str__(self):
        return self.render()


    def with_branch(self, branch: str) -> KeyPath:
        """ Return a copy of this segment qualified by *branch*. An empty
            string selects the default branch.
        """

        return dataclasses.replace(self, branch=branch)


    def with_index(self, index: int) -> KeyPath:
        """ Return a copy of this segment qualified by the array *index*.
            Negative values raise :class:`ValidationError`.
        """

        validate_index(index)
        return dataclasses.replace(self, index=index)


    def chain(self, next: KeyPath) -> KeyPath:
        """ Return a copy of this segment with *next* as its nested key.
            Any previously chained key is replaced, not extended.
        """

        return dataclasses.replace(self, next=next)


    def copy(self) -> KeyPath:
        """ Return a deep copy, including every chained segment.
        """

        next = self.next
        if next is not None:
            next = next.copy()

        return KeyPath(self.path, self.branch, self.index, next)


    def render(self) -> str:

        rendered = self.path

        if self.branch:
            rendered += '@' + self.branch

        if self.index > UNSET:
            rendered += '[%d]' % (self.index)

        if self.next is not None:
            rendered += '.' + self.next.render()

        return rendered


# end of class KeyPath


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
