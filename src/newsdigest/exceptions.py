"""Error categories and the typed failures raised by each pipeline stage."""
from __future__ import annotations

from enum import Enum


class ErrorCategory(str, Enum):
    MISSING_INPUT = "missing_input"
    MISSING_CREDENTIALS = "missing_credentials"
    UNSUPPORTED_FILE_TYPE = "unsupported_file_type"
    UNREADABLE_FILE = "unreadable_file"
    NO_EXTRACTABLE_TEXT = "no_extractable_text"
    FILE_TOO_LARGE = "file_too_large"
    INVALID_CREDENTIALS = "invalid_credentials"
    QUOTA_EXCEEDED = "quota_exceeded"
    GENERATION_FAILED = "generation_failed"
    INTERNAL_ERROR = "internal_error"


# (http status, user-facing message) per category
CATEGORY_RESPONSES: dict[ErrorCategory, tuple[int, str]] = {
    ErrorCategory.MISSING_INPUT: (400, "Please provide a file or some text to summarize."),
    ErrorCategory.MISSING_CREDENTIALS: (500, "The OpenAI API key is not configured."),
    ErrorCategory.UNSUPPORTED_FILE_TYPE: (400, "Unsupported file type."),
    ErrorCategory.UNREADABLE_FILE: (400, "The file could not be read."),
    ErrorCategory.NO_EXTRACTABLE_TEXT: (400, "No text could be extracted."),
    ErrorCategory.FILE_TOO_LARGE: (413, "The file is too large."),
    ErrorCategory.INVALID_CREDENTIALS: (401, "The OpenAI API key is invalid."),
    ErrorCategory.QUOTA_EXCEEDED: (429, "The API usage limit has been exceeded."),
    ErrorCategory.GENERATION_FAILED: (500, "The summary could not be generated."),
    ErrorCategory.INTERNAL_ERROR: (
        500,
        "An error occurred while summarizing. Please try again later.",
    ),
}


class SummaryPipelineError(RuntimeError):
    """Base class for failures whose category is fixed by the stage that raised them."""

    category: ErrorCategory = ErrorCategory.INTERNAL_ERROR

    def __init__(self, detail: str = ""):
        self.detail = detail
        super().__init__(detail or self.category.value)


class MissingInputError(SummaryPipelineError):
    category = ErrorCategory.MISSING_INPUT


class MissingCredentialsError(SummaryPipelineError):
    category = ErrorCategory.MISSING_CREDENTIALS


class ContentExtractionError(SummaryPipelineError):
    """Raised when content extraction fails."""


class UnsupportedFileTypeError(ContentExtractionError):
    category = ErrorCategory.UNSUPPORTED_FILE_TYPE

    def __init__(self, mime_type: str):
        self.mime_type = mime_type
        super().__init__(f"Unsupported MIME type: {mime_type}")


class UnreadableFileError(ContentExtractionError):
    category = ErrorCategory.UNREADABLE_FILE


class NoExtractableTextError(ContentExtractionError):
    category = ErrorCategory.NO_EXTRACTABLE_TEXT


class FileTooLargeError(ContentExtractionError):
    category = ErrorCategory.FILE_TOO_LARGE

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"File too large ({size} bytes, max {limit} bytes)")


class GenerationFailedError(SummaryPipelineError):
    """The backend answered but produced no usable text."""

    category = ErrorCategory.GENERATION_FAILED
