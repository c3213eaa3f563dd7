from __future__ import annotations

from typing import Any, Optional

from openai import OpenAI

from ...config import Settings
from ...exceptions import GenerationFailedError
from ...logging_config import get_logger
from .prompt_builder import SummaryPrompt

log = get_logger("newsdigest.services.summarizer")


def build_openai_client(settings: Settings) -> OpenAI:
    # max_retries defaults to 0: failures go straight back to the caller
    return OpenAI(
        api_key=settings.openai_api_key,
        timeout=settings.openai_timeout,
        max_retries=settings.openai_max_retries,
    )


def first_message_text(resp: Any) -> str:
    """Text of the first choice, or "" when the backend sent nothing usable."""
    if not getattr(resp, "choices", None):
        return ""
    msg = resp.choices[0].message
    return (msg.content or "").strip() if msg else ""


class Summarizer:
    """Sends a built prompt to the chat completions API and returns the summary."""

    def __init__(self, client: OpenAI, settings: Settings):
        self.client = client
        self.model = settings.openai_model
        self.temperature = settings.summary_temperature
        self.max_tokens = settings.summary_max_tokens

    def summarize(self, prompt: SummaryPrompt) -> str:
        resp = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": prompt.system},
                {"role": "user", "content": prompt.user},
            ],
            max_tokens=self.max_tokens,
            temperature=self.temperature,  # low: stick to the facts
        )
        content = first_message_text(resp)
        if not content:
            # could be refusal, empty output, or truncated output
            raise GenerationFailedError("OpenAI returned an empty summary")

        usage: Optional[Any] = getattr(resp, "usage", None)
        if usage is not None:
            log.info(
                "summary generated model=%s prompt_tokens=%s completion_tokens=%s",
                self.model,
                getattr(usage, "prompt_tokens", None),
                getattr(usage, "completion_tokens", None),
            )
        return content
