"""
Eventmaster Service Errors

Every failure the gateway can surface. Front ends map these classes to gRPC
status codes or HTTP statuses; nothing here knows about either wire format.
"""


class GatewayError(Exception):
    """Base class for gateway failures"""


class DecodeError(GatewayError):
    """Malformed JSON in event data or topic schema"""


class ValidationError(GatewayError):
    """Missing or malformed client input caught before any store call"""


class NotFoundError(GatewayError):
    """The store could not resolve a requested identifier"""


class StoreError(GatewayError):
    """Opaque failure reported by the store"""


class EncodeError(GatewayError):
    """A stored value could not be serialized back to the caller's format"""


class OperationError(GatewayError):
    """Failure of a named operation, wrapping the underlying cause"""

    def __init__(self, operation: str, cause: BaseException):
        super().__init__(f"operation {operation}: {cause}")
        self.operation = operation
        self.cause = cause


def root_cause(error: BaseException) -> BaseException:
    """Unwrap OperationError layers down to the original failure"""
    while isinstance(error, OperationError):
        error = error.cause
    return error
