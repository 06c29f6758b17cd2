""" Read/write capability flags, as consumed by the engine's permission
    commands.
"""

from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class Permission:
    """ An immutable pair of capability flags. The rendered token always
        lists the write flag first, then the read flag, in the exact form
        the engine expects.
    """

    read: bool
    write: bool

    template = '{can_write: %s, can_read: %s }'

    @classmethod
    def full(cls) -> Permission:
        return cls(read=True, write=True)


    @classmethod
    def none(cls) -> Permission:
        return cls(read=False, write=False)


    def __str__(self):
        return self.render()


    def render(self) -> str:
        return self.template % (_flag(self.write), _flag(self.read))


# end of class Permission



def _flag(value):
    if value:
        return 'true'
    return 'false'


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
