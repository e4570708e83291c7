"""gRPC transport layer for the route guide.

This package hosts:
- Generated Python stubs (in `generated/`) for the protocol buffers in
  `protos/`; regenerate with `python scripts/gen_protos.py`.
- Server bootstrap and interceptors.
- A thin service adapter mapping gRPC calls to the application service.
"""
