"""Map any failure raised while summarizing to a category, status and safe message."""
from __future__ import annotations

import re
from dataclasses import dataclass

from ..exceptions import CATEGORY_RESPONSES, ErrorCategory, SummaryPipelineError

# Backend failures are only recognisable by their text.
AUTH_FAILURE = re.compile(r"api[ _-]?key|authenticat|unauthori[sz]ed", re.IGNORECASE)
QUOTA_FAILURE = re.compile(r"quota|billing", re.IGNORECASE)


@dataclass(frozen=True)
class ClassifiedError:
    category: ErrorCategory
    http_status: int
    message: str

    @classmethod
    def of(cls, category: ErrorCategory) -> "ClassifiedError":
        status, message = CATEGORY_RESPONSES[category]
        return cls(category=category, http_status=status, message=message)


def categorize(exc: BaseException) -> ErrorCategory:
    if isinstance(exc, SummaryPipelineError):
        return exc.category
    text = str(exc)
    if AUTH_FAILURE.search(text):
        return ErrorCategory.INVALID_CREDENTIALS
    if QUOTA_FAILURE.search(text):
        return ErrorCategory.QUOTA_EXCEEDED
    return ErrorCategory.INTERNAL_ERROR


def classify_error(exc: BaseException) -> ClassifiedError:
    """The message always comes from the category table, never from ``exc``."""
    return ClassifiedError.of(categorize(exc))
