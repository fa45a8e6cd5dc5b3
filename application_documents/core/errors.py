from __future__ import annotations


class ApplicationDocumentError(Exception):
    """Base class for document generation failures."""


class InvalidApplicationDataError(ApplicationDocumentError, ValueError):
    """A sub-entity required by the application's state is missing."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message

    def __str__(self) -> str:
        return self.message
