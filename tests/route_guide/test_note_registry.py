import asyncio

import pytest

from domain.route_guide import Point, RouteNote
from infrastructure.notes import InMemoryNoteRegistry, ShardedNoteRegistry, create_note_registry


K1 = Point(407838351, -746143763)
K2 = Point(408122808, -743999179)


@pytest.fixture(params=["global", "per_key"])
def registry(request):
    return create_note_registry(request.param)


async def _chat(registry, note):
    async with registry.replay(note) as previous:
        return previous


def test_create_note_registry_by_lock_mode():
    assert isinstance(create_note_registry("global"), InMemoryNoteRegistry)
    assert isinstance(create_note_registry("per_key"), ShardedNoteRegistry)
    with pytest.raises(ValueError):
        create_note_registry("sharded")


@pytest.mark.asyncio
async def test_replay_yields_previous_notes_then_appends(registry):
    n1 = RouteNote(K1, "first")
    n2 = RouteNote(K1, "second")
    n3 = RouteNote(K2, "elsewhere")

    assert await _chat(registry, n1) == []
    assert await _chat(registry, n2) == [n1]
    assert await _chat(registry, n3) == []
    assert await registry.notes_at(K1) == [n1, n2]
    assert await registry.notes_at(K2) == [n3]
    assert await registry.notes_at(Point(0, 0)) == []


@pytest.mark.asyncio
async def test_note_is_appended_only_after_the_block(registry):
    n1 = RouteNote(K1, "first")
    await _chat(registry, n1)

    async with registry.replay(RouteNote(K1, "second")) as previous:
        assert previous == [n1]
        assert registry._notes[K1.key] == [n1]
    assert len(await registry.notes_at(K1)) == 2


@pytest.mark.asyncio
async def test_failed_block_stores_nothing(registry):
    n1 = RouteNote(K1, "first")
    await _chat(registry, n1)

    with pytest.raises(ConnectionResetError):
        async with registry.replay(RouteNote(K1, "lost")):
            raise ConnectionResetError("send failed")

    assert await registry.notes_at(K1) == [n1]
    # Lock was released
    assert await asyncio.wait_for(_chat(registry, RouteNote(K1, "next")), timeout=1) == [n1]


@pytest.mark.asyncio
async def test_keys_are_exact_coordinates(registry):
    await _chat(registry, RouteNote(Point(1, 2), "a"))
    assert await _chat(registry, RouteNote(Point(1, 3), "b")) == []
    assert await _chat(registry, RouteNote(Point(2, 1), "c")) == []
    assert await _chat(registry, RouteNote(Point(1, 2), "d")) == [RouteNote(Point(1, 2), "a")]


@pytest.mark.asyncio
async def test_duplicate_notes_are_kept(registry):
    note = RouteNote(K1, "same")
    await _chat(registry, note)
    await _chat(registry, note)
    assert await registry.notes_at(K1) == [note, note]


@pytest.mark.asyncio
async def test_concurrent_chats_are_totally_ordered(registry):
    notes = [RouteNote(K1, f"m{i}") for i in range(50)]

    snapshots = await asyncio.gather(*(_chat(registry, n) for n in notes))
    stored = await registry.notes_at(K1)

    assert sorted(stored, key=lambda n: n.message) == sorted(notes, key=lambda n: n.message)
    # Every snapshot is exactly the prefix stored before that note
    for note, snapshot in zip(notes, snapshots):
        assert stored[: len(snapshot)] == snapshot
        assert stored[len(snapshot)] == note
    assert sorted(len(s) for s in snapshots) == list(range(len(notes)))


@pytest.mark.asyncio
async def test_replayed_snapshot_is_a_copy(registry):
    await _chat(registry, RouteNote(K1, "a"))
    async with registry.replay(RouteNote(K1, "b")) as snapshot:
        snapshot.clear()
    assert len(await registry.notes_at(K1)) == 2


@pytest.mark.asyncio
async def test_global_registry_serializes_all_keys():
    registry = InMemoryNoteRegistry()
    async with registry._lock:
        pending = asyncio.ensure_future(_chat(registry, RouteNote(K2, "waits")))
        await asyncio.sleep(0.01)
        assert not pending.done()
    assert await pending == []


@pytest.mark.asyncio
async def test_sharded_registry_does_not_block_other_keys():
    registry = ShardedNoteRegistry()
    await _chat(registry, RouteNote(K1, "seed"))
    async with registry._lock_for(K1.key):
        # A different location proceeds while K1 is held
        assert await asyncio.wait_for(_chat(registry, RouteNote(K2, "free")), timeout=1) == []
        blocked = asyncio.ensure_future(_chat(registry, RouteNote(K1, "waits")))
        await asyncio.sleep(0.01)
        assert not blocked.done()
    assert await blocked == [RouteNote(K1, "seed")]


@pytest.mark.asyncio
async def test_sharded_registry_reads_do_not_create_locks():
    registry = ShardedNoteRegistry()
    for lat in range(10):
        assert await registry.notes_at(Point(lat, 0)) == []
    assert registry._locks == {}

    await _chat(registry, RouteNote(K1, "a"))
    assert await registry.notes_at(K1) == [RouteNote(K1, "a")]
    assert list(registry._locks) == [K1.key]
