from __future__ import annotations

from typing import Optional

import anyio
from fastapi import APIRouter, File, Form, Request, UploadFile
from fastapi.responses import JSONResponse

from .config import Defaults, Settings
from .logging_config import get_logger
from .schemas import ErrorResponse, OptionsResponse, SummaryOptions
from .services.document import FileContent
from .services.error_classifier import ClassifiedError
from .services.pipeline import SummaryPipeline, SummaryRequest

log = get_logger("newsdigest.api")

router = APIRouter(prefix="/api/summarize")


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value.strip()


def _error_response(err: ClassifiedError) -> JSONResponse:
    body = ErrorResponse(error=err.message, code=err.category)
    return JSONResponse(status_code=err.http_status, content=body.model_dump(mode="json"))


@router.post("")
async def summarize(
    request: Request,
    file: Optional[UploadFile] = File(None),
    text: Optional[str] = Form(None),
    purpose: Optional[str] = Form(None),
    style: Optional[str] = Form(None),
    language: Optional[str] = Form(None),
) -> JSONResponse:
    settings: Settings = request.app.state.settings
    pipeline: SummaryPipeline = request.app.state.pipeline

    file_content: Optional[FileContent] = None
    if file is not None:
        raw: bytes = await file.read()
        file_content = FileContent(
            filename=file.filename or Defaults.DEFAULT_FILENAME,
            mime_type=file.content_type or Defaults.DEFAULT_MIME_TYPE,
            data=raw,
        )

    options = SummaryOptions(
        language=_blank_to_none(language) or settings.default_language,
        purpose=_blank_to_none(purpose),
        style=_blank_to_none(style),
    )
    summary_request = SummaryRequest.from_form(options, file=file_content, text=text)

    # two blocking round trips to OpenAI at most; keep them off the event loop
    result = await anyio.to_thread.run_sync(pipeline.run, summary_request)
    if isinstance(result, ClassifiedError):
        return _error_response(result)
    return JSONResponse(status_code=200, content=result.model_dump(mode="json", by_alias=True))


@router.get("/options", response_model=OptionsResponse)
async def summary_options(request: Request) -> OptionsResponse:
    settings: Settings = request.app.state.settings
    return OptionsResponse(
        purposes=Defaults.PURPOSES,
        styles=Defaults.STYLES,
        languages=Defaults.LANGUAGES,
        default_language=settings.default_language,
        media_types=sorted(Defaults.SUPPORTED_MIME_TYPES),
    )
