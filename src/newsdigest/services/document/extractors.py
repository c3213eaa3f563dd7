from __future__ import annotations

import base64
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from io import BytesIO
from typing import Dict, List, Optional

import fitz  # PyMuPDF
from openai import OpenAI
from PIL import Image as PILImage

from ...config import Defaults, Settings
from ...exceptions import (
    ContentExtractionError,
    FileTooLargeError,
    NoExtractableTextError,
    UnreadableFileError,
    UnsupportedFileTypeError,
)
from ...logging_config import get_logger
from ...utils import decode_text, normalize_mime_type, sha256_bytes
from .cleaner import clean_extracted_text
from .summarizer import first_message_text

log = get_logger("newsdigest.services.extractors")

IMAGE_EXTRACTION_PROMPT = (
    "Extract only the news article text from this image. "
    "Extract the article body exactly and do not include any extra commentary or notes."
)


# Data Classes

class ContentKind(str, Enum):
    TEXT = "text"
    IMAGE = "image"
    PDF = "pdf"
    UNSUPPORTED = "unsupported"


def resolve_content_kind(mime_type: Optional[str]) -> ContentKind:
    mime = normalize_mime_type(mime_type)
    if mime == "text/plain":
        return ContentKind.TEXT
    if mime == "application/pdf":
        return ContentKind.PDF
    if mime.startswith("image/"):
        return ContentKind.IMAGE
    return ContentKind.UNSUPPORTED


@dataclass(frozen=True)
class FileContent:
    """An uploaded file as it arrived: name, declared media type and raw bytes."""
    filename: str
    mime_type: str
    data: bytes

    @property
    def kind(self) -> ContentKind:
        return resolve_content_kind(self.mime_type)


# Base Content Extractor

class BaseContentExtractor(ABC):
    """Turns the bytes of one kind of file into plain text."""

    kind: ContentKind

    @abstractmethod
    def extract(self, file: FileContent) -> str:
        """
        Extract text from file bytes.

        Raises:
            ContentExtractionError: the bytes cannot be turned into text
        """


class TextExtractor(BaseContentExtractor):
    """Extractor for plain text files."""

    kind = ContentKind.TEXT

    def extract(self, file: FileContent) -> str:
        try:
            return decode_text(file.data)
        except UnicodeDecodeError as e:
            raise UnreadableFileError(f"File must be UTF-8 encoded: {e}") from e


class PDFExtractor(BaseContentExtractor):
    """Extractor for the text layer of PDF files."""

    kind = ContentKind.PDF

    def extract(self, file: FileContent) -> str:
        try:
            with fitz.open(stream=file.data, filetype="pdf") as pdf_doc:
                if pdf_doc.needs_pass:
                    raise UnreadableFileError("PDF is password protected")
                text_parts: List[str] = []
                for page in pdf_doc:
                    page_text = page.get_text()
                    if page_text.strip():
                        text_parts.append(page_text.strip())
        except ContentExtractionError:
            raise
        except Exception as e:
            raise UnreadableFileError(f"Failed to read PDF: {e}") from e

        log.debug("pdf extracted pages_with_text=%d", len(text_parts))
        return "\n\n".join(text_parts)


class ImageExtractor(BaseContentExtractor):
    """
    Extractor for images.

    There is no local OCR: the image goes to a vision-capable chat model as a
    data URI and the reply is run through the artifact cleaner, since the model
    tends to wrap the article in its own commentary.
    """

    kind = ContentKind.IMAGE

    def __init__(self, client: OpenAI, model: str, max_tokens: int):
        self.client = client
        self.model = model
        self.max_tokens = max_tokens

    def extract(self, file: FileContent) -> str:
        self._verify_image(file.data)
        mime_type = normalize_mime_type(file.mime_type)
        data_uri = f"data:{mime_type};base64,{base64.b64encode(file.data).decode('ascii')}"

        resp = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": IMAGE_EXTRACTION_PROMPT},
                        {"type": "image_url", "image_url": {"url": data_uri}},
                    ],
                }
            ],
            max_tokens=self.max_tokens,
        )
        raw = first_message_text(resp)
        cleaned = clean_extracted_text(raw)
        log.debug("image text extracted raw_chars=%d cleaned_chars=%d", len(raw), len(cleaned))
        return cleaned

    @staticmethod
    def _verify_image(image_bytes: bytes) -> None:
        """Reject bytes Pillow cannot decode before paying for a vision call."""
        try:
            with PILImage.open(BytesIO(image_bytes)) as img:
                img.verify()
        except Exception as e:
            raise UnreadableFileError(f"Invalid image data: {e}") from e


# Content Extractor

class ContentExtractor:
    """Dispatches a file to the extractor for its content kind."""

    def __init__(self, settings: Settings, client: OpenAI):
        self.max_upload_bytes = settings.max_upload_bytes
        extractors: List[BaseContentExtractor] = [
            TextExtractor(),
            PDFExtractor(),
            ImageExtractor(
                client,
                model=settings.openai_vision_model,
                max_tokens=settings.extraction_max_tokens,
            ),
        ]
        self._extractors: Dict[ContentKind, BaseContentExtractor] = {e.kind: e for e in extractors}

    @property
    def supported_kinds(self) -> List[ContentKind]:
        return list(self._extractors)

    def extract_file(self, file: FileContent) -> str:
        kind = file.kind
        if kind is ContentKind.UNSUPPORTED:
            raise UnsupportedFileTypeError(file.mime_type or Defaults.DEFAULT_MIME_TYPE)
        if len(file.data) > self.max_upload_bytes:
            raise FileTooLargeError(len(file.data), self.max_upload_bytes)

        log.info(
            "extracting filename=%s kind=%s size=%d sha256=%s",
            file.filename, kind.value, len(file.data), sha256_bytes(file.data),
        )
        return ensure_text(self._extractors[kind].extract(file))

    def extract(self, file: Optional[FileContent], text: Optional[str]) -> str:
        """File content wins; inline text is returned verbatim, never cleaned."""
        if file is not None:
            return self.extract_file(file)
        return ensure_text(text or "")


def ensure_text(text: str) -> str:
    if not text.strip():
        raise NoExtractableTextError("Extraction produced no text")
    return text
