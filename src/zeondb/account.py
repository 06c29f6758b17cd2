""" Account administration requests. An :class:`Account` is bound to a single
    username, and each of its methods returns one request value describing
    an administrative action against that user. The request values are
    handed to :func:`zeondb.Session.auth` for execution.

    Every request type is its own frozen class carrying exactly the fields
    that request needs; there is no catch-all payload.
"""

from __future__ import annotations

import dataclasses
import enum
from typing import ClassVar, Optional

from .key import KeyPath
from .permission import Permission


class AuthRequestType(enum.IntEnum):
    CREATE = 1
    GET = 2
    SET = 3
    PROMOTE = 4
    DEMOTE = 5
    DELETE = 6


@dataclasses.dataclass(frozen=True)
class AuthIntent:
    """ Common base for the six request types. Not instantiated directly.
    """

    type: ClassVar[AuthRequestType]

    username: str


@dataclasses.dataclass(frozen=True)
class Create(AuthIntent):
    type = AuthRequestType.CREATE

    password: str
    perms: Permission


@dataclasses.dataclass(frozen=True)
class GetPerm(AuthIntent):
    type = AuthRequestType.GET

    key: KeyPath


@dataclasses.dataclass(frozen=True)
class SetPerm(AuthIntent):
    type = AuthRequestType.SET

    key: KeyPath
    perms: Permission


@dataclasses.dataclass(frozen=True)
class Promote(AuthIntent):
    type = AuthRequestType.PROMOTE


@dataclasses.dataclass(frozen=True)
class Demote(AuthIntent):
    type = AuthRequestType.DEMOTE


@dataclasses.dataclass(frozen=True)
class Delete(AuthIntent):
    type = AuthRequestType.DELETE


class Account:
    """ Request builder bound to *username*. The builder holds no other
        state; every call returns a fresh request value.
    """

    def __init__(self, username: str):
        self.username = username


    def __repr__(self):
        return 'account.Account(%r)' % (self.username)


    def create(self, password: str, perms: Optional[Permission] = None) -> Create:
        """ Create the user with *password*. Without explicit *perms* the new
            user gets full read and write permission.
        """

        if perms is None:
            perms = Permission.full()

        return Create(self.username, password, perms)


    def get_perms(self, key: KeyPath) -> GetPerm:
        return GetPerm(self.username, key)


    def set_perms(self, key: KeyPath, perms: Permission) -> SetPerm:
        return SetPerm(self.username, key, perms)


    def promote(self) -> Promote:
        return Promote(self.username)


    def demote(self) -> Demote:
        return Demote(self.username)


    def delete(self) -> Delete:
        return Delete(self.username)


# end of class Account


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
