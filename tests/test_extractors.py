"""Tests for content extraction and media-type dispatch."""

import pytest

from newsdigest.config import load_settings
from newsdigest.exceptions import (
    FileTooLargeError,
    NoExtractableTextError,
    UnreadableFileError,
    UnsupportedFileTypeError,
)
from newsdigest.services.document import (
    ContentExtractor,
    ContentKind,
    FileContent,
    resolve_content_kind,
)

from .conftest import FakeOpenAI, make_pdf


@pytest.fixture
def extractor(settings, fake_client):
    return ContentExtractor(settings, fake_client)


class TestResolveContentKind:
    @pytest.mark.parametrize(
        "mime,kind",
        [
            ("text/plain", ContentKind.TEXT),
            ("TEXT/PLAIN; charset=utf-8", ContentKind.TEXT),
            ("application/pdf", ContentKind.PDF),
            ("image/png", ContentKind.IMAGE),
            ("image/jpeg", ContentKind.IMAGE),
            ("image/gif", ContentKind.IMAGE),
            ("application/xml", ContentKind.UNSUPPORTED),
            ("", ContentKind.UNSUPPORTED),
            (None, ContentKind.UNSUPPORTED),
        ],
    )
    def test_kinds(self, mime, kind):
        assert resolve_content_kind(mime) is kind


class TestInlineText:
    def test_returned_verbatim(self, extractor, fake_client):
        text = "  Below is the text found in the image:\nBody  "
        assert extractor.extract(None, text) == text
        assert fake_client.calls == []

    def test_whitespace_only_rejected(self, extractor):
        with pytest.raises(NoExtractableTextError):
            extractor.extract(None, " \n\t ")


class TestTextFiles:
    def test_utf8_decoded(self, extractor):
        file = FileContent("a.txt", "text/plain", "속보: 강이 범람했다".encode("utf-8"))
        assert extractor.extract(file, None) == "속보: 강이 범람했다"

    def test_bom_stripped(self, extractor):
        file = FileContent("a.txt", "text/plain", b"\xef\xbb\xbfhello")
        assert extractor.extract(file, None) == "hello"

    def test_invalid_utf8_unreadable(self, extractor):
        with pytest.raises(UnreadableFileError):
            extractor.extract(FileContent("a.txt", "text/plain", b"\xff\xfe\xfa"), None)

    def test_empty_file(self, extractor):
        with pytest.raises(NoExtractableTextError):
            extractor.extract(FileContent("a.txt", "text/plain", b""), None)

    def test_file_wins_over_text(self, extractor):
        file = FileContent("a.txt", "text/plain", b"from file")
        assert extractor.extract(file, "from form") == "from file"


class TestPDFFiles:
    def test_text_layer_extracted(self, extractor, pdf_bytes, fake_client):
        text = extractor.extract(FileContent("a.pdf", "application/pdf", pdf_bytes), None)
        assert "City council approves new budget" in text
        assert fake_client.calls == []

    def test_pdf_without_text(self, extractor):
        with pytest.raises(NoExtractableTextError):
            extractor.extract(FileContent("blank.pdf", "application/pdf", make_pdf()), None)

    def test_garbage_unreadable(self, extractor):
        with pytest.raises(UnreadableFileError):
            extractor.extract(FileContent("a.pdf", "application/pdf", b"not a pdf at all"), None)


class TestImageFiles:
    def test_vision_call_and_cleanup(self, settings, png_bytes):
        client = FakeOpenAI(
            replies=[
                "Here is the text from the image:\nArticle body.\n\n"
                "Let me know if you need anything else."
            ]
        )
        extractor = ContentExtractor(settings, client)

        text = extractor.extract(FileContent("shot.png", "image/png", png_bytes), None)

        assert text == "Article body."
        assert len(client.calls) == 1
        call = client.calls[0]
        assert call["model"] == settings.openai_vision_model
        assert call["max_tokens"] == 4000
        content = call["messages"][0]["content"]
        assert content[0]["type"] == "text"
        assert content[1]["image_url"]["url"].startswith("data:image/png;base64,")

    def test_empty_vision_reply(self, settings, png_bytes):
        extractor = ContentExtractor(settings, FakeOpenAI(replies=[""]))
        with pytest.raises(NoExtractableTextError):
            extractor.extract(FileContent("shot.png", "image/png", png_bytes), None)

    def test_corrupt_image_never_sent(self, extractor, fake_client):
        with pytest.raises(UnreadableFileError):
            extractor.extract(FileContent("shot.png", "image/png", b"definitely not png"), None)
        assert fake_client.calls == []


class TestDispatchTable:
    def test_every_supported_kind_has_an_extractor(self, extractor):
        assert set(extractor.supported_kinds) == set(ContentKind) - {ContentKind.UNSUPPORTED}


class TestRejectedFiles:
    def test_unsupported_type(self, extractor, fake_client):
        with pytest.raises(UnsupportedFileTypeError) as exc_info:
            extractor.extract(FileContent("feed.xml", "application/xml", b"<rss/>"), None)
        assert exc_info.value.mime_type == "application/xml"
        assert fake_client.calls == []

    def test_too_large(self, fake_client, png_bytes):
        settings = load_settings(openai_api_key="sk-test", max_upload_bytes=10, _env_file=None)
        extractor = ContentExtractor(settings, fake_client)
        with pytest.raises(FileTooLargeError):
            extractor.extract(FileContent("shot.png", "image/png", png_bytes), None)
        assert fake_client.calls == []
