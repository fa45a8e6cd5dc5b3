"""Collaborators the document generator depends on.

Implementations live outside this package: data access, template lookup,
HTML rendering and PDF conversion are all provided by the host.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from application_documents.schemas.application import Application
from application_documents.schemas.documents import ApplicationViewModel, PdfOptions


class ApplicationLookup(Protocol):
    def find(self, application_id: UUID) -> Application | None: ...


class TemplatePathProvider(Protocol):
    def get(self, name: str) -> str: ...


class ViewRenderer(Protocol):
    def render(self, url: str, view_model: ApplicationViewModel) -> str: ...


class PdfDocument(Protocol):
    def to_bytes(self) -> bytes: ...


class PdfConverter(Protocol):
    def from_html(self, html: str, options: PdfOptions) -> PdfDocument: ...
