from __future__ import annotations

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Union

from pydantic import BaseModel, ConfigDict

from application_documents.schemas.application import Fund, LegalEntity, Review

PDF_HEADER_HTML = (
    '<div class="document-header">'
    '<img class="document-header__logo" src="logo.png" alt="" />'
    '<span class="document-header__title">Application Summary</span>'
    "</div>"
)


class PageNumbers(str, Enum):
    NONE = "NONE"
    NUMERIC = "NUMERIC"


class HeaderRepeat(str, Enum):
    FIRST_PAGE_ONLY = "FIRST_PAGE_ONLY"
    ALL_PAGES = "ALL_PAGES"


class HeaderOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    header_repeat: HeaderRepeat
    header_html: str


class PdfOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    page_numbers: PageNumbers
    header_options: HeaderOptions


DOCUMENT_PDF_OPTIONS = PdfOptions(
    page_numbers=PageNumbers.NUMERIC,
    header_options=HeaderOptions(
        header_repeat=HeaderRepeat.FIRST_PAGE_ONLY,
        header_html=PDF_HEADER_HTML,
    ),
)


class PendingApplicationViewModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    reference_number: str
    state: str
    full_name: str
    applied_on: date
    support_email: str
    signature: str


class ActivatedApplicationViewModel(PendingApplicationViewModel):
    legal_entity: LegalEntity | None = None
    portfolio_funds: tuple[Fund, ...]
    portfolio_total_amount: Decimal


class InReviewApplicationViewModel(ActivatedApplicationViewModel):
    in_review_message: str
    in_review_information: Review


ApplicationViewModel = Union[
    PendingApplicationViewModel,
    ActivatedApplicationViewModel,
    InReviewApplicationViewModel,
]
