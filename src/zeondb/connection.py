"""Connection interface.

This is the (small) contract that an engine connection must follow. The
engine is reached through an opaque per-connection handle; everything the
client does is expressed in terms of these operations, so the session layer
is agnostic of how the handle is actually implemented.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Connection(ABC):
    """Minimal contract for one engine connection handle.

    A concrete connection creates its handle when it is instantiated with an
    address and port. :meth:`execute` overwrites the single error/output slot
    that :meth:`read_error` and :meth:`read_output` return.
    """

    @abstractmethod
    def authenticate(self, username: str, password: str) -> bool:
        """Log in; return whether the engine accepted the credentials."""

    @abstractmethod
    def execute(self, command: str) -> bool:
        """Run one command line; return the engine's success flag."""

    @abstractmethod
    def read_error(self) -> str:
        """Return the error message left by the most recent command."""

    @abstractmethod
    def read_output(self) -> str:
        """Return the output left by the most recent command."""

    @abstractmethod
    def is_up(self) -> bool:
        """Whether the engine connection is currently alive."""

    @abstractmethod
    def destroy(self) -> None:
        """Release the handle. The connection cannot be used afterwards."""
