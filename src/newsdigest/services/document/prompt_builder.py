from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ...schemas import SummaryOptions

SYSTEM_PROMPT = (
    "You are an expert at summarizing news articles. "
    "Provide an accurate and useful summary that follows the given requirements."
)

CLOSING_DIRECTIVE = "Summarize clearly and concisely without leaving out any key points."


@dataclass(frozen=True)
class SummaryPrompt:
    system: str
    user: str


def build_directives(options: SummaryOptions) -> List[str]:
    """One line per option that is set, always in language/purpose/style order."""
    directives = [f"- Language: write the summary in {options.language}"]
    if options.purpose and options.purpose.strip():
        directives.append(f"- Purpose: tailor the summary for {options.purpose.strip()}")
    if options.style and options.style.strip():
        directives.append(f"- Style: write in a {options.style.strip()} tone")
    return directives


def build_summary_prompt(text: str, options: SummaryOptions) -> SummaryPrompt:
    lines: List[str] = [
        "Summarize the following news article:",
        "",
        text,
        "",
        "Summary requirements:",
    ]
    lines.extend(build_directives(options))
    lines.extend(["", CLOSING_DIRECTIVE])
    return SummaryPrompt(system=SYSTEM_PROMPT, user="\n".join(lines))
