"""
Error taxonomy shared by the storage and service layers.

Every domain failure is a subclass of ``GiftListError`` carrying the
HTTP status code the façade should answer with and a short message
used as the ``error`` field of the response envelope.  Services
convert these exceptions into structured results so that route
handlers never see an uncontrolled failure.
"""

from typing import Any, Dict, List, Optional


class GiftListError(Exception):
    """Base class for all gift list failures."""

    status_code: int = 500
    message: str = "Internal Server Error"

    def __init__(self, message: Optional[str] = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_payload(self) -> Dict[str, Any]:
        """Return the JSON error envelope for this failure."""
        return {"error": self.message}


class ValidationError(GiftListError):
    """Input failed schema constraints.

    ``details`` is a list of field level violations, each a dict with
    ``field``, ``message`` and ``code`` keys.
    """

    status_code = 400
    message = "Invalid gift item"

    def __init__(self, message: Optional[str] = None, details: Optional[List[Dict[str, Any]]] = None) -> None:
        super().__init__(message)
        self.details = details or []

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.message, "details": self.details}


class BadRequest(GiftListError):
    """Malformed request shape, e.g. a missing id segment."""

    status_code = 400
    message = "Bad request"


class NotFound(GiftListError):
    """The referenced gift id does not exist."""

    status_code = 404
    message = "Gift not found"


class StorageFailure(GiftListError):
    """The underlying durable storage operation failed.

    The message returned to clients is always generic; the original
    exception is kept in ``__cause__`` for logging.
    """

    status_code = 500
    message = "Internal Server Error"
