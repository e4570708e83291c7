import json

import pytest

import grpc_main
from domain.common.exceptions import FeatureSourceException
from grpc_app.services.route_guide_service import RouteGuideService


def test_parse_args_defaults_to_settings():
    args = grpc_main.parse_args([])
    assert args.port is None
    assert args.features is None

    args = grpc_main.parse_args(["--port", "6000", "--features", "db.json"])
    assert args.port == 6000
    assert args.features == "db.json"


def test_build_servicer_loads_features(tmp_path):
    path = tmp_path / "features.json"
    path.write_text(json.dumps([{"location": {"latitude": 1, "longitude": 2}, "name": "x"}]))
    assert isinstance(grpc_main.build_servicer(str(path), "per_key"), RouteGuideService)


def test_build_servicer_fails_on_missing_source(tmp_path):
    with pytest.raises(FeatureSourceException):
        grpc_main.build_servicer(str(tmp_path / "missing.json"), "global")


@pytest.mark.asyncio
async def test_main_exits_before_serving_when_features_fail(tmp_path, monkeypatch):
    async def _unexpected(*args, **kwargs):
        raise AssertionError("server must not be created")

    monkeypatch.setattr(grpc_main, "create_server", _unexpected)
    bad = tmp_path / "bad.json"
    bad.write_text("{oops")

    assert await grpc_main.main(["--features", str(bad)]) == 1
