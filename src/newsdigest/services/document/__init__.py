"""Document processing domain services."""
from .cleaner import CLEANUP_RULES, CleanupRule, clean_extracted_text
from .extractors import (
    BaseContentExtractor,
    ContentExtractor,
    ContentKind,
    FileContent,
    ImageExtractor,
    PDFExtractor,
    TextExtractor,
    resolve_content_kind,
)
from .prompt_builder import SYSTEM_PROMPT, SummaryPrompt, build_summary_prompt
from .summarizer import Summarizer, build_openai_client

__all__ = [
    "CLEANUP_RULES",
    "CleanupRule",
    "clean_extracted_text",
    "BaseContentExtractor",
    "ContentExtractor",
    "ContentKind",
    "FileContent",
    "ImageExtractor",
    "PDFExtractor",
    "TextExtractor",
    "resolve_content_kind",
    "SYSTEM_PROMPT",
    "SummaryPrompt",
    "build_summary_prompt",
    "Summarizer",
    "build_openai_client",
]
