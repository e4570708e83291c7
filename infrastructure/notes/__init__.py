"""Note registries (global lock, per-location lock)."""
from __future__ import annotations

from application.ports.note_registry import NoteRegistryPort
from .inmemory import InMemoryNoteRegistry, ShardedNoteRegistry


def create_note_registry(lock_mode: str = "global") -> NoteRegistryPort:
    if lock_mode == "per_key":
        return ShardedNoteRegistry()
    if lock_mode == "global":
        return InMemoryNoteRegistry()
    raise ValueError(f"unknown note registry lock mode: {lock_mode!r}")


__all__ = ["InMemoryNoteRegistry", "ShardedNoteRegistry", "create_note_registry"]
