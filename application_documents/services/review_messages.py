from __future__ import annotations

from typing import Callable

IN_REVIEW_PREFIX = "Your application has been placed in review"

ADDRESS_VERIFICATION_SUFFIX = " pending outstanding address verification for FICA purposes."
BANK_VERIFICATION_SUFFIX = " pending outstanding bank account verification."
SUSPICIOUS_ACTIVITY_SUFFIX = (
    " because of suspicious account behaviour. Please contact support ASAP."
)

# Evaluated in order; the first matching predicate wins.
REVIEW_MESSAGE_RULES: list[tuple[Callable[[str], bool], str]] = [
    (lambda reason: "address" in reason, ADDRESS_VERIFICATION_SUFFIX),
    (lambda reason: "bank" in reason, BANK_VERIFICATION_SUFFIX),
]


def select_review_message(reason: str | None) -> str:
    reason = reason or ""
    for matches, suffix in REVIEW_MESSAGE_RULES:
        if matches(reason):
            return IN_REVIEW_PREFIX + suffix
    return IN_REVIEW_PREFIX + SUSPICIOUS_ACTIVITY_SUFFIX
