"""In-memory note registries.

Single-process only; notes live for the life of the process and are never
pruned.
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, List
import asyncio

from application.ports.note_registry import NoteRegistryPort
from domain.route_guide import Point, RouteNote


class InMemoryNoteRegistry(NoteRegistryPort):
    """One lock guards every location (simple, serializes all chats)."""

    def __init__(self) -> None:
        self._notes: Dict[str, List[RouteNote]] = {}
        self._lock = asyncio.Lock()

    def _lock_for(self, key: str) -> asyncio.Lock:
        return self._lock

    @asynccontextmanager
    async def replay(self, note: RouteNote) -> AsyncIterator[list[RouteNote]]:  # type: ignore[override]
        key = note.location.key
        async with self._lock_for(key):
            yield list(self._notes.get(key, ()))
            # Not reached when the block raises
            self._notes.setdefault(key, []).append(note)

    async def notes_at(self, location: Point) -> list[RouteNote]:  # type: ignore[override]
        async with self._lock:
            return list(self._notes.get(location.key, ()))


class ShardedNoteRegistry(InMemoryNoteRegistry):
    """One lock per location.

    Chats at the same location stay totally ordered; chats at different
    locations do not wait on each other.
    """

    def __init__(self) -> None:
        self._notes: Dict[str, List[RouteNote]] = {}
        self._locks: Dict[str, asyncio.Lock] = {}

    def _lock_for(self, key: str) -> asyncio.Lock:
        # No await between lookup and insert, so this is atomic on the loop
        lock = self._locks.get(key)
        if lock is None:
            lock = self._locks[key] = asyncio.Lock()
        return lock

    async def notes_at(self, location: Point) -> list[RouteNote]:  # type: ignore[override]
        key = location.key
        lock = self._locks.get(key)
        if lock is None:
            # Nothing was ever stored here
            return []
        async with lock:
            return list(self._notes.get(key, ()))
