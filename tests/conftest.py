"""Global test fixtures and shared test infrastructure.

Provides:
- Environment variable defaults (must be set before any package import)
- Fake collaborators matching the generator ports (lookup, template paths,
  renderer, PDF converter) that record what they were called with
- Model factories (make_person, make_legal_entity, make_fund, make_product,
  make_review, make_application, make_settings)
- Shared pytest fixtures wiring a generator to the fakes
"""

from __future__ import annotations

import os

# Environment defaults: must be set before importing the package, which
# instantiates pydantic Settings on import.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SUPPORT_EMAIL", "support@example.com")
os.environ.setdefault("SIGNATURE", "Client Services")
os.environ.setdefault("TAX_RATE", "0.2")

from datetime import date
from decimal import Decimal
from typing import Any
from uuid import UUID, uuid4

import pytest

from application_documents.core.settings import Settings
from application_documents.schemas.application import (
    Application,
    ApplicationState,
    Fund,
    LegalEntity,
    Person,
    Product,
    Review,
)
from application_documents.schemas.documents import PdfOptions
from application_documents.services.document_generator import ApplicationDocumentGenerator


# ---------------------------------------------------------------------------
# Fake collaborators
# ---------------------------------------------------------------------------


class FakeApplicationLookup:
    def __init__(self, applications: list[Application] | None = None) -> None:
        self._applications = {app.id: app for app in applications or []}
        self.lookups: list[UUID] = []

    def add(self, application: Application) -> None:
        self._applications[application.id] = application

    def find(self, application_id: UUID) -> Application | None:
        self.lookups.append(application_id)
        return self._applications.get(application_id)


class FakeTemplatePaths:
    def __init__(self) -> None:
        self.requested: list[str] = []

    def get(self, name: str) -> str:
        self.requested.append(name)
        return f"/templates/{name}.cshtml"


class FakeViewRenderer:
    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []

    def render(self, url: str, view_model: Any) -> str:
        self.calls.append((url, view_model))
        return f"<html>{url}</html>"


class FakePdf:
    def __init__(self, html: str) -> None:
        self.html = html

    def to_bytes(self) -> bytes:
        return self.html.encode("utf-8")


class FakePdfConverter:
    def __init__(self) -> None:
        self.calls: list[tuple[str, PdfOptions]] = []

    def from_html(self, html: str, options: PdfOptions) -> FakePdf:
        self.calls.append((html, options))
        return FakePdf(html)


# ---------------------------------------------------------------------------
# Model factories
# ---------------------------------------------------------------------------


def make_settings(**overrides) -> Settings:
    defaults = dict(
        SUPPORT_EMAIL="support@example.com",
        SIGNATURE="Client Services",
        TAX_RATE=Decimal("0.2"),
    )
    defaults.update(overrides)
    return Settings(**defaults)


def make_person(**overrides) -> Person:
    defaults = dict(first_name="Jane", surname="Dlamini", email="jane@example.com")
    defaults.update(overrides)
    return Person(**defaults)


def make_legal_entity(**overrides) -> LegalEntity:
    defaults = dict(name="Dlamini Holdings (Pty) Ltd", registration_number="2015/123456/07")
    defaults.update(overrides)
    return LegalEntity(**defaults)


def make_fund(amount: str = "100", fees: str = "10", **overrides) -> Fund:
    defaults = dict(
        fund_id=f"F-{uuid4().hex[:6]}",
        name="Balanced Fund",
        amount=Decimal(amount),
        fees=Decimal(fees),
    )
    defaults.update(overrides)
    return Fund(**defaults)


def make_product(funds: list[Fund] | None = None, **overrides) -> Product:
    defaults = dict(
        product_id=f"P-{uuid4().hex[:6]}",
        name="Retirement Annuity",
        funds=tuple(funds or []),
    )
    defaults.update(overrides)
    return Product(**defaults)


def make_review(reason: str = "suspicious login", **overrides) -> Review:
    defaults = dict(
        reason=reason,
        reviewed_by="compliance@example.com",
        opened_on=date(2024, 3, 1),
        notes="Flagged by monitoring",
    )
    defaults.update(overrides)
    return Review(**defaults)


_UNSET = object()


def make_application(
    state: ApplicationState = ApplicationState.PENDING,
    *,
    person: Any = _UNSET,
    **overrides,
) -> Application:
    defaults = dict(
        id=uuid4(),
        state=state,
        reference_number="APP-0001",
        date=date(2024, 2, 14),
        person=make_person() if person is _UNSET else person,
        is_legal_entity=False,
        legal_entity=None,
        products=(
            make_product([make_fund("100", "10"), make_fund("50", "5")]),
        ),
        current_review=make_review() if state == ApplicationState.IN_REVIEW else None,
    )
    defaults.update(overrides)
    return Application(**defaults)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def lookup() -> FakeApplicationLookup:
    return FakeApplicationLookup()


@pytest.fixture
def template_paths() -> FakeTemplatePaths:
    return FakeTemplatePaths()


@pytest.fixture
def renderer() -> FakeViewRenderer:
    return FakeViewRenderer()


@pytest.fixture
def pdf_converter() -> FakePdfConverter:
    return FakePdfConverter()


@pytest.fixture
def generator(lookup, template_paths, renderer, pdf_converter, settings) -> ApplicationDocumentGenerator:
    return ApplicationDocumentGenerator(
        applications=lookup,
        template_paths=template_paths,
        view_renderer=renderer,
        pdf_converter=pdf_converter,
        settings=settings,
    )
