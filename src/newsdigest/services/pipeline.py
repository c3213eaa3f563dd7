from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Union

from openai import OpenAI

from ..config import Settings
from ..exceptions import MissingCredentialsError, MissingInputError, SummaryPipelineError
from ..logging_config import get_logger
from ..schemas import SummaryOptions, SummaryResponse
from .document import (
    ContentExtractor,
    FileContent,
    Summarizer,
    build_openai_client,
    build_summary_prompt,
)
from .error_classifier import ClassifiedError, classify_error

log = get_logger("newsdigest.services.pipeline")


@dataclass(frozen=True)
class SummaryRequest:
    """One summarization job: a file or inline text (never both) plus options."""
    options: SummaryOptions
    file: Optional[FileContent] = None
    text: Optional[str] = None

    def __post_init__(self) -> None:
        if self.file is not None and self.text is not None:
            raise ValueError("SummaryRequest takes either a file or text, not both")

    @classmethod
    def from_form(
        cls,
        options: SummaryOptions,
        file: Optional[FileContent] = None,
        text: Optional[str] = None,
    ) -> "SummaryRequest":
        """Blank text counts as absent; when both are sent the file is used."""
        if text is not None and not text.strip():
            text = None
        if file is not None and text is not None:
            log.warning("both file and text supplied; using file=%s", file.filename)
            text = None
        return cls(options=options, file=file, text=text)

    @property
    def has_content(self) -> bool:
        return self.file is not None or self.text is not None


PipelineResult = Union[SummaryResponse, ClassifiedError]


class SummaryPipeline:
    """
    Request orchestrator: validate, extract, build the prompt, summarize.

    This is the only place failures are caught. Every stage raises; ``run``
    turns whatever was raised into a ClassifiedError so callers get either a
    complete SummaryResponse or an error, never half of one.
    """

    def __init__(
        self,
        settings: Settings,
        client_factory: Callable[[Settings], OpenAI] = build_openai_client,
    ):
        self.settings = settings
        self.client_factory = client_factory

    def run(self, request: SummaryRequest) -> PipelineResult:
        try:
            return self._run(request)
        except SummaryPipelineError as e:
            classified = classify_error(e)
            log.warning(
                "summary request rejected category=%s status=%d detail=%s",
                classified.category.value, classified.http_status, e.detail,
            )
            return classified
        except Exception as e:
            classified = classify_error(e)
            log.error(
                "summary request failed category=%s status=%d",
                classified.category.value, classified.http_status, exc_info=True,
            )
            return classified

    def _run(self, request: SummaryRequest) -> SummaryResponse:
        if not request.has_content:
            raise MissingInputError("neither file nor text supplied")
        if not self.settings.is_summarizer_enabled:
            raise MissingCredentialsError("OPENAI_API_KEY is not set")

        log.info(
            "summary request source=%s language=%s",
            request.file.kind.value if request.file else "inline",
            request.options.language,
        )

        with self.client_factory(self.settings) as client:
            original_text = ContentExtractor(self.settings, client).extract(request.file, request.text)
            prompt = build_summary_prompt(original_text, request.options)
            summary = Summarizer(client, self.settings).summarize(prompt)

        return SummaryResponse(
            original_text=original_text,
            summary=summary,
            options=request.options,
            file_name=request.file.filename if request.file else None,
        )
