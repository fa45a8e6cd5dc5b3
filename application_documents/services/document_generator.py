from __future__ import annotations

import logging
from uuid import UUID

from application_documents.core import context
from application_documents.core.settings import Settings, get_settings
from application_documents.schemas.documents import DOCUMENT_PDF_OPTIONS
from application_documents.services import view_models
from application_documents.services.ports import (
    ApplicationLookup,
    PdfConverter,
    TemplatePathProvider,
    ViewRenderer,
)

logger = logging.getLogger(__name__)


def normalize_base_uri(base_uri: str) -> str:
    if base_uri.endswith("/"):
        return base_uri[:-1]
    return base_uri


class ApplicationDocumentGenerator:
    """Turn an application into a PDF for its current lifecycle state."""

    def __init__(
        self,
        applications: ApplicationLookup,
        template_paths: TemplatePathProvider,
        view_renderer: ViewRenderer,
        pdf_converter: PdfConverter,
        settings: Settings | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        self.applications = applications
        self.template_paths = template_paths
        self.view_renderer = view_renderer
        self.pdf_converter = pdf_converter
        self.settings = settings if settings is not None else get_settings()
        self.log = log or logger

    def generate(self, application_id: UUID, base_uri: str) -> bytes | None:
        """Return the PDF bytes, or None when there is no document to produce.

        ``InvalidApplicationDataError`` propagates when the application lacks
        an entity its state requires.
        """
        token = context.set_application_id(str(application_id))
        try:
            application = self.applications.find(application_id)
            if application is None:
                self.log.warning("No application found for id '%s'", application_id)
                return None

            base_uri = normalize_base_uri(base_uri)
            document = view_models.build_view_model(application, self.settings, log=self.log)
            if document is None:
                return None

            path = self.template_paths.get(document.template_name)
            html = self.view_renderer.render(f"{base_uri}{path}", document.view_model)
            pdf = self.pdf_converter.from_html(html, DOCUMENT_PDF_OPTIONS)
            return pdf.to_bytes()
        finally:
            context.reset_application_id(token)
