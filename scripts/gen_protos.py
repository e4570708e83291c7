#!/usr/bin/env python3
"""Regenerate the protobuf and gRPC stubs under grpc_app/generated/.

Needs the dev extra (grpcio-tools). Run from anywhere:

    python scripts/gen_protos.py

Exit non-zero if protoc fails.
"""
from __future__ import annotations

import sys
from pathlib import Path
import re

from grpc_tools import protoc


OUT_PACKAGE = "grpc_app.generated"


def main() -> int:
    root = Path(__file__).resolve().parents[1]
    proto_root = root / "protos"
    out_dir = root / Path(*OUT_PACKAGE.split("."))
    protos = sorted(str(p.relative_to(proto_root)) for p in proto_root.rglob("*.proto"))
    if not protos:
        return 0

    rc = protoc.main(
        [
            "grpc_tools.protoc",
            f"-I{proto_root}",
            f"--python_out={out_dir}",
            f"--grpc_python_out={out_dir}",
            *protos,
        ]
    )
    if rc != 0:
        print(f"protoc failed with exit code {rc}", file=sys.stderr)
        return rc

    # protoc emits imports relative to the proto root; make them absolute
    import_re = re.compile(r"^from (\w+) import (\w+_pb2) as ", re.MULTILINE)
    for stub in out_dir.rglob("*_pb2_grpc.py"):
        text = stub.read_text(encoding="utf-8")
        stub.write_text(import_re.sub(rf"from {OUT_PACKAGE}.\1 import \2 as ", text), encoding="utf-8")

    for pkg in {out_dir, *(p.parent for p in out_dir.rglob("*_pb2.py"))}:
        (pkg / "__init__.py").touch()
    return 0


if __name__ == "__main__":
    sys.exit(main())
