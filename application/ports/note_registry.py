"""
Note registry port (contracts-first).

The registry is the process-wide mailbox of route notes, keyed by exact
location. Implementations own their locking; the application service only
depends on this contract.
"""
from __future__ import annotations

from typing import AsyncContextManager, Protocol

from domain.route_guide import Point, RouteNote


class NoteRegistryPort(Protocol):
    """Append-only, per-location list of route notes shared by all chats."""

    def replay(self, note: RouteNote) -> AsyncContextManager[list[RouteNote]]:
        """Hold the lock for ``note.location`` and yield the notes already
        stored there, in insertion order.

        ``note`` is appended when the block exits normally. If the block
        raises (a failed send, a cancelled call) nothing is stored. The
        lock is held for the whole block, so two notes at the same
        location are totally ordered and each sees the full replay of the
        ones before it.
        """
        ...

    async def notes_at(self, location: Point) -> list[RouteNote]: ...


__all__ = ["NoteRegistryPort"]
