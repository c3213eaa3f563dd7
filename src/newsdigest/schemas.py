from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import ErrorCategory


class SummaryOptions(BaseModel):
    """Free-form labels; blank purpose/style are simply left out of the prompt."""

    model_config = ConfigDict(frozen=True)

    language: str = Field(min_length=1)
    purpose: Optional[str] = None
    style: Optional[str] = None


class SummaryResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    original_text: str = Field(alias="originalText")
    summary: str = Field(min_length=1)
    success: bool = True
    options: Optional[SummaryOptions] = None
    file_name: Optional[str] = Field(default=None, alias="fileName")


class ErrorResponse(BaseModel):
    error: str
    code: ErrorCategory


class OptionsResponse(BaseModel):
    purposes: List[str]
    styles: List[str]
    languages: List[str]
    default_language: str
    media_types: List[str]
