"""
gRPC Proto Generated Files

Regenerate after editing eventmaster.proto (from this directory):

    python -m grpc_tools.protoc -I. --python_out=. --grpc_python_out=. eventmaster.proto

then change the generated `import eventmaster_pb2` in eventmaster_pb2_grpc.py
to a package-relative import.
"""
from . import eventmaster_pb2, eventmaster_pb2_grpc

__all__ = [
    'eventmaster_pb2', 'eventmaster_pb2_grpc',
]
