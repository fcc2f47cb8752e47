"""API tests with upstream clients replaced by stubs."""

from __future__ import annotations

import httpx
import pytest
from fastapi.testclient import TestClient

from devreader.api.deps import get_app_settings, get_devto_client, get_paragraph_analyzer, get_speech_client
from devreader.core.config import Settings
from devreader.llm_utils import build_debug_info
from devreader.main import app
from devreader.schemas.analysis import AnalysisResult
from devreader.schemas.article import Article, ArticleAuthor
from devreader.services.completion_client import CompletionError
from devreader.services.devto_client import ArticleNotFoundError, DevToClient, DevToError
from devreader.services.paragraph_analyzer import AnalysisFormatError, AnalysisOutcome
from devreader.services.speech_client import SpeechAudio, SpeechError

ARTICLE = Article(
    id="devto-7",
    source_id="7",
    title="Reading HTML",
    content=(
        "<p>This is a real sentence. It has two parts.</p>\n"
        "<ul><li>Short</li><li>This list item is definitely long enough to qualify.</li></ul>\n"
        "<pre><code>print('a. B')</code></pre>"
    ),
    author=ArticleAuthor(name="Some One", username="someone"),
)


class StubDevToClient:
    def __init__(self) -> None:
        self.list_calls: list[dict] = []
        self.fail = False

    async def list_articles(self, page=1, per_page=20, tag=None):
        if self.fail:
            raise DevToError("dev.to is down")
        self.list_calls.append({"page": page, "per_page": per_page, "tag": tag})
        return [ARTICLE]

    async def get_article(self, article_id):
        if article_id != ARTICLE.id:
            raise ArticleNotFoundError(article_id)
        return ARTICLE


class StubAnalyzer:
    def __init__(self) -> None:
        self.error: Exception | None = None
        self.paragraphs: list[str] = []

    async def analyze(self, paragraph):
        if self.error is not None:
            raise self.error
        self.paragraphs.append(paragraph)
        messages = [{"role": "user", "content": paragraph}]
        return AnalysisOutcome(
            result=AnalysisResult(translation="訳", entities=["HTML"]),
            debug=build_debug_info(messages, {"choices": []}),
        )


class StubSpeechClient:
    def __init__(self) -> None:
        self.fail = False

    async def synthesize(self, text):
        if self.fail:
            raise SpeechError("speech is down")
        return SpeechAudio(content=b"ID3audio", media_type="audio/mpeg")


@pytest.fixture
def devto() -> StubDevToClient:
    return StubDevToClient()


@pytest.fixture
def analyzer() -> StubAnalyzer:
    return StubAnalyzer()


@pytest.fixture
def speech() -> StubSpeechClient:
    return StubSpeechClient()


@pytest.fixture
def settings() -> Settings:
    return Settings(articles_per_page=5, llm_debug=False)


@pytest.fixture
def client(devto, analyzer, speech, settings):
    app.dependency_overrides[get_devto_client] = lambda: devto
    app.dependency_overrides[get_paragraph_analyzer] = lambda: analyzer
    app.dependency_overrides[get_speech_client] = lambda: speech
    app.dependency_overrides[get_app_settings] = lambda: settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_health(client: TestClient) -> None:
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_list_articles_uses_default_page_size(client: TestClient, devto: StubDevToClient) -> None:
    response = client.get("/api/articles", params={"tag": "python"})

    assert response.status_code == 200
    assert response.json()["articles"][0]["id"] == "devto-7"
    assert devto.list_calls == [{"page": 1, "per_page": 5, "tag": "python"}]


def test_list_articles_upstream_failure(client: TestClient, devto: StubDevToClient) -> None:
    devto.fail = True

    response = client.get("/api/articles")

    assert response.status_code == 502
    assert response.json()["detail"] == "Failed to fetch articles"


def test_invalid_upstream_json_maps_to_bad_gateway(client: TestClient) -> None:
    broken = DevToClient(transport=httpx.MockTransport(lambda request: httpx.Response(200, text="<html>down</html>")))
    app.dependency_overrides[get_devto_client] = lambda: broken

    assert client.get("/api/articles").status_code == 502
    assert client.get("/api/articles/devto-7").status_code == 502


def test_get_article_and_not_found(client: TestClient) -> None:
    assert client.get("/api/articles/devto-7").json()["article"]["title"] == "Reading HTML"

    missing = client.get("/api/articles/devto-8")
    assert missing.status_code == 404
    assert missing.json()["detail"] == "Article not found"


def test_article_sentences(client: TestClient) -> None:
    data = client.get("/api/articles/devto-7/sentences").json()

    assert data["article_id"] == "devto-7"
    assert [item["text"] for item in data["sentences"]] == [
        "This is a real sentence.",
        "It has two parts.",
        "ShortThis list item is definitely long enough to qualify.",
    ]
    assert data["sentences"][2]["id"] == "devto-7-2"
    assert data["sentences"][2]["position"] == 2


def test_annotated_article_marks_selected_block(client: TestClient) -> None:
    selected = "This is a real sentence. It has two parts."

    data = client.get("/api/articles/devto-7/annotated", params={"selected": selected}).json()

    assert [block["kind"] for block in data["blocks"]] == ["p", "ul"]
    assert data["blocks"][0]["selected"] is True
    assert "bg-blue-200" in data["html"]
    assert 'data-sentence="This is a real sentence. It has two parts."' in data["html"]


def test_reading_endpoints(client: TestClient) -> None:
    html = "<p>Plain paragraph text.</p><script>alert(1)</script>"

    assert client.post("/api/reading/text", json={"html": html}).json() == {"text": "Plain paragraph text."}

    response = client.post("/api/reading/sentences", json={"html": "<p>Plain paragraph text.</p>"})
    sentences = response.json()["sentences"]
    assert sentences == [
        {"id": "0", "text": "Plain paragraph text.", "position": 0, "article_id": None},
    ]

    annotated = client.post("/api/reading/annotate", json={"html": html, "selected": None}).json()
    assert annotated["blocks"] == [{"kind": "p", "text": "Plain paragraph text.", "selected": False}]
    assert "clickable-paragraph" in annotated["html"]


def test_analyze_accepts_legacy_sentence_field(client: TestClient, analyzer: StubAnalyzer) -> None:
    response = client.post("/api/analyze", json={"sentence": "A paragraph to study."})

    assert response.status_code == 200
    body = response.json()
    assert body["analysis"]["translation"] == "訳"
    assert body["debug"] is None
    assert analyzer.paragraphs == ["A paragraph to study."]


def test_analyze_requires_paragraph(client: TestClient) -> None:
    response = client.post("/api/analyze", json={})

    assert response.status_code == 400
    assert response.json()["detail"] == "Paragraph is required"


def test_analyze_maps_errors(client: TestClient, analyzer: StubAnalyzer) -> None:
    analyzer.error = AnalysisFormatError("bad json")
    response = client.post("/api/analyze", json={"paragraph": "Something."})
    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to analyze paragraph"

    analyzer.error = CompletionError("unauthorized", status_code=401)
    assert client.post("/api/analyze", json={"paragraph": "Something."}).status_code == 502


def test_analyze_returns_debug_when_enabled(client: TestClient, settings: Settings) -> None:
    settings.llm_debug = True

    body = client.post("/api/analyze", json={"paragraph": "Something."}).json()

    assert body["debug"]["prompt"] == [{"role": "user", "content": "Something."}]


def test_tts(client: TestClient, speech: StubSpeechClient) -> None:
    response = client.post("/api/tts", json={"text": "Read me."})

    assert response.status_code == 200
    assert response.content == b"ID3audio"
    assert response.headers["content-type"].startswith("audio/mpeg")

    assert client.post("/api/tts", json={"text": "  "}).status_code == 400

    speech.fail = True
    assert client.post("/api/tts", json={"text": "Read me."}).status_code == 502
