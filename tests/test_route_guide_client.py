import pytest

import route_guide_client
from domain.route_guide import Point


PATRIOTS_PATH = Point(407838351, -746143763)
WHIPPANY = Point(408122808, -743999179)


def test_sample_notes_revisit_patriots_path():
    assert [(n.location, n.message) for n in route_guide_client.SAMPLE_NOTES] == [
        (PATRIOTS_PATH, "First note at Patriots Path"),
        (WHIPPANY, "Second note at Whippany"),
        (PATRIOTS_PATH, "Back at Patriots Path!"),
    ]


@pytest.mark.asyncio
async def test_demo_run_against_server(grpc_route_guide_server, note_registry):
    target, _ = grpc_route_guide_server

    await route_guide_client.run(target)

    assert [n.message for n in await note_registry.notes_at(PATRIOTS_PATH)] == [
        "First note at Patriots Path",
        "Back at Patriots Path!",
    ]
    assert [n.message for n in await note_registry.notes_at(WHIPPANY)] == ["Second note at Whippany"]
