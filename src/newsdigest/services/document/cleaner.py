"""Strip the conversational framing a vision model wraps around extracted text.

Rules are (name, pattern, replacement) triples applied in order. Every removal
pattern is anchored to a line boundary so the article body is left alone; missing
some noise is acceptable, eating real content is not.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Pattern


@dataclass(frozen=True)
class CleanupRule:
    name: str
    pattern: Pattern[str]
    replacement: str = ""

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


def _rule(name: str, pattern: str, replacement: str = "") -> CleanupRule:
    return CleanupRule(name, re.compile(pattern, re.IGNORECASE | re.MULTILINE), replacement)


CLEANUP_RULES: List[CleanupRule] = [
    _rule("newlines", r"\r\n?", "\n"),
    # "아래는 이미지에 있는 기사 텍스트입니다:"
    _rule(
        "preamble_ko",
        r"^[ \t]*아래는?\s*이미지에?\s*(?:있는|포함된)?[^\n]*?입니다?[ \t]*:?[ \t]*\n*",
    ),
    # "Below is the text found in the image:" / "Sure, here's the extracted article:"
    _rule(
        "preamble_en",
        r"\A\s*(?:(?:sure|certainly|okay|of course)[ \t]*[,.!]?[ \t]*)?"
        r"(?:here\s+is|here's|below\s+is|the\s+following\s+is)\b"
        r"[^\n]*?\b(?:text|article|content|transcription)\b[^\n]*:[ \t]*\n+",
    ),
    # "이미지의 텍스트를 원문 그대로 추출한 내용입니다:"
    _rule(
        "verbatim_notice_ko",
        r"^[^\n]*?텍스트를?\s*(?:원문\s*)?그대로\s*추출한?\s*내용입니다?[ \t]*:?[ \t]*\n*",
    ),
    # "기사 내용은 다음과 같습니다:"
    _rule("as_follows_ko", r"^[^\n]*?다음과?\s*같습니다?[ \t]*:?[ \t]*\n*"),
    # a final separator with a short remark after it
    _rule("trailing_separator_block", r"\n[ \t]*-{3,}[ \t]*\n(?:[^\n]*(?:\n|\Z)){0,2}\Z"),
    _rule("separator_lines", r"^[ \t]*-{3,}[ \t]*(?:\n|\Z)"),
    # closing remarks and notes only count as noise on the last line
    # "필요하신 부분이 있으면 말씀해 주세요."
    _rule("closing_offer_ko", r"\n*^[ \t]*필요하신?[ \t]*부분[^\n]*\s*\Z"),
    _rule(
        "closing_offer_en",
        r"\n*^[ \t]*(?:let\s+me\s+know|please\s+let\s+me\s+know|feel\s+free\s+to\s+(?:ask|reach|let)|"
        r"if\s+you\s+need\s+(?:any\s+)?(?:more|further|anything|additional|help)|"
        r"i\s+hope\s+this\s+helps|hope\s+this\s+helps)\b[^\n]*\s*\Z",
    ),
    # "Note: some text in the image was blurry."
    _rule(
        "meta_note_en",
        r"\n*^[ \t]*(?:please\s+)?note[ \t]*:[^\n]*\b(?:image|extract\w*|transcri\w*)\b[^\n]*\s*\Z",
    ),
]

_BLANK_RUN = re.compile(r"\n\s*\n\s*\n")


def clean_extracted_text(text: str, rules: List[CleanupRule] = CLEANUP_RULES) -> str:
    cleaned = text
    for rule in rules:
        cleaned = rule.apply(cleaned)
    # substitutions first, then squeeze blank runs
    cleaned = _BLANK_RUN.sub("\n\n", cleaned)
    return cleaned.strip()
