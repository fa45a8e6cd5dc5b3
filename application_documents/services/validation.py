from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable

from application_documents.core.errors import InvalidApplicationDataError
from application_documents.schemas.application import Application, ApplicationState

logger = logging.getLogger(__name__)


class RequiredEntity(str, Enum):
    PERSON = "person"
    LEGAL_ENTITY = "legal_entity"
    CURRENT_REVIEW = "current_review"


# Checking order; the first missing entity is reported.
_CHECK_ORDER = (
    RequiredEntity.PERSON,
    RequiredEntity.LEGAL_ENTITY,
    RequiredEntity.CURRENT_REVIEW,
)

_ENTITY_LABELS = {
    RequiredEntity.PERSON: "Person",
    RequiredEntity.LEGAL_ENTITY: "Legal Entity",
    RequiredEntity.CURRENT_REVIEW: "Current Review",
}


def required_entities(application: Application) -> tuple[RequiredEntity, ...]:
    state = application.state
    if state not in (
        ApplicationState.PENDING,
        ApplicationState.ACTIVATED,
        ApplicationState.IN_REVIEW,
    ):
        return ()

    required = [RequiredEntity.PERSON]
    if state != ApplicationState.PENDING and application.is_legal_entity:
        required.append(RequiredEntity.LEGAL_ENTITY)
    if state == ApplicationState.IN_REVIEW:
        required.append(RequiredEntity.CURRENT_REVIEW)
    return tuple(required)


def _is_present(application: Application, entity: RequiredEntity) -> bool:
    return getattr(application, entity.value) is not None


def validate_application(
    application: Application,
    required: Iterable[RequiredEntity],
    log: logging.Logger | None = None,
) -> None:
    """Raise ``InvalidApplicationDataError`` for the first missing required entity."""
    log = log or logger
    wanted = set(required)
    for entity in _CHECK_ORDER:
        if entity not in wanted or _is_present(application, entity):
            continue
        label = _ENTITY_LABELS[entity]
        log.warning("The application model is invalid. %s entity is missing", label)
        raise InvalidApplicationDataError(
            entity.value, f"Application is missing required entity '{label}'"
        )
