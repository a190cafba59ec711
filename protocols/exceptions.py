"""
Exceptions raised by the protocol model itself.

Two surfaces are kept apart: decode errors (a JSON value could not be mapped
onto a record) and validation errors (a decoded record breaks a semantic rule).
Protocol error kinds such as TaskNotFoundError are payload values and live in
protocols.errors; they are never raised.
"""

from typing import Any, List, Optional


class A2AException(Exception):
    """Base class for all exceptions raised by this package."""


class A2ADecodeError(A2AException, ValueError):
    """A JSON value could not be decoded into the requested record."""

    def __init__(self, message: str, errors: Optional[List[Any]] = None):
        super().__init__(message)
        self.errors = errors or []


class A2AValidationError(A2AException, ValueError):
    """A decoded record violates a semantic rule. The message names the rule."""


class InvalidTransitionError(A2AValidationError):
    def __init__(self, from_state, to_state):
        self.from_state = from_state
        self.to_state = to_state
        super().__init__(
            f"Invalid task state transition from {getattr(from_state, 'value', from_state)} "
            f"to {getattr(to_state, 'value', to_state)}"
        )


class A2ARpcError(A2AException):
    """
    Failure that should be reported back to the peer.

    Carries the protocol error payload (for example a JSONParseError) so the
    transport layer can place it in a JSON-RPC error response unchanged.
    """

    def __init__(self, error):
        self.error = error
        super().__init__(str(error))
