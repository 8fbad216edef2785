"""Domain errors raised by the service layer and mapped to HTTP responses in ``main``."""
from typing import List, Optional


class ScrumBoardError(Exception):
    """Base class for errors the API knows how to report."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(ScrumBoardError):
    status_code = 404

    def __init__(self, resource: str, identifier: Optional[str] = None):
        super().__init__(f"{resource} not found")
        self.resource = resource
        self.identifier = identifier


class ImportValidationError(ScrumBoardError):
    """A board import payload is structurally invalid."""

    status_code = 400

    def __init__(self, message: str, fields: Optional[List[str]] = None):
        super().__init__(message)
        self.fields = fields or []


class StorageError(ScrumBoardError):
    """The store rejected or failed a query. Detail is logged, never sent to clients."""

    status_code = 500

    def __init__(self, message: str = "Database operation failed"):
        super().__init__(message)
