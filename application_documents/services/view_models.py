from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from application_documents.core.settings import Settings
from application_documents.schemas.application import Application, ApplicationState
from application_documents.schemas.documents import (
    ActivatedApplicationViewModel,
    ApplicationViewModel,
    InReviewApplicationViewModel,
    PendingApplicationViewModel,
)
from application_documents.services import portfolio, review_messages, validation

logger = logging.getLogger(__name__)

PENDING_TEMPLATE = "PendingApplication"
ACTIVATED_TEMPLATE = "ActivatedApplication"
IN_REVIEW_TEMPLATE = "InReviewApplication"


@dataclass(frozen=True)
class DocumentView:
    template_name: str
    view_model: ApplicationViewModel


def _base_fields(application: Application, settings: Settings) -> dict:
    return {
        "reference_number": application.reference_number,
        "state": application.state.description,
        "full_name": application.person.full_name,
        "applied_on": application.date,
        "support_email": settings.support_email,
        "signature": settings.signature,
    }


def _portfolio_fields(application: Application, settings: Settings) -> dict:
    summary = portfolio.summarize_portfolio(application.products, settings.tax_rate)
    return {
        "legal_entity": application.legal_entity if application.is_legal_entity else None,
        "portfolio_funds": summary.funds,
        "portfolio_total_amount": summary.total_amount,
    }


def _validate(application: Application, log: logging.Logger) -> None:
    validation.validate_application(
        application, validation.required_entities(application), log=log
    )


def build_pending(application: Application, settings: Settings, log: logging.Logger) -> DocumentView:
    _validate(application, log)
    return DocumentView(
        template_name=PENDING_TEMPLATE,
        view_model=PendingApplicationViewModel(**_base_fields(application, settings)),
    )


def build_activated(
    application: Application, settings: Settings, log: logging.Logger
) -> DocumentView:
    _validate(application, log)
    return DocumentView(
        template_name=ACTIVATED_TEMPLATE,
        view_model=ActivatedApplicationViewModel(
            **_base_fields(application, settings),
            **_portfolio_fields(application, settings),
        ),
    )


def build_in_review(
    application: Application, settings: Settings, log: logging.Logger
) -> DocumentView:
    _validate(application, log)
    review = application.current_review
    return DocumentView(
        template_name=IN_REVIEW_TEMPLATE,
        view_model=InReviewApplicationViewModel(
            **_base_fields(application, settings),
            **_portfolio_fields(application, settings),
            in_review_message=review_messages.select_review_message(review.reason),
            in_review_information=review,
        ),
    )


StateHandler = Callable[[Application, Settings, logging.Logger], DocumentView]

STATE_HANDLERS: dict[ApplicationState, StateHandler] = {
    ApplicationState.PENDING: build_pending,
    ApplicationState.ACTIVATED: build_activated,
    ApplicationState.IN_REVIEW: build_in_review,
}

# Valid lifecycle states that have no document.
UNSUPPORTED_STATES = frozenset({ApplicationState.OTHER})


def build_view_model(
    application: Application,
    settings: Settings,
    log: logging.Logger | None = None,
) -> DocumentView | None:
    """Validate the application and build the view model for its state.

    Returns None when the state has no document. Raises
    ``InvalidApplicationDataError`` when a required entity is missing.
    """
    log = log or logger
    handler = STATE_HANDLERS.get(application.state)
    if handler is None:
        log.warning(
            "The application is in state '%s' and no valid document can be generated for it.",
            application.state.description,
        )
        return None
    return handler(application, settings, log)
