import pytest
import requests

from itinerary_planner.core.config import Settings
from itinerary_planner.llm.backends import gemini_backend
from itinerary_planner.llm.backends.gemini_backend import GeminiOracle, to_gemini_schema
from itinerary_planner.llm.backends.ollama_backend import OllamaOracle
from itinerary_planner.llm.client import SamplingOptions
from itinerary_planner.llm.errors import ConfigurationError, GenerationFailed
from itinerary_planner.llm.factory import build_oracle
from itinerary_planner.llm.schemas import HOTEL_LIST_SCHEMA


class _Response:
    def __init__(self, payload=None, status=200):
        self.payload = payload or {}
        self.status = status

    def raise_for_status(self):
        if self.status >= 400:
            raise requests.HTTPError(f"{self.status} Server Error")

    def json(self):
        return self.payload


def test_ollama_posts_chat_payload(monkeypatch):
    sent = {}

    def fake_post(url, json, timeout):
        sent.update(url=url, json=json, timeout=timeout)
        return _Response({"message": {"content": "[]"}})

    monkeypatch.setattr(requests, "post", fake_post)
    oracle = OllamaOracle(host="http://ollama:11434/", model="llama3", timeout_s=30)

    text = oracle.request("hello", schema=HOTEL_LIST_SCHEMA, options=SamplingOptions(0.8, top_p=0.9))

    assert text == "[]"
    assert sent["url"] == "http://ollama:11434/api/chat"
    assert sent["timeout"] == 30
    assert sent["json"]["stream"] is False
    assert sent["json"]["format"] is HOTEL_LIST_SCHEMA
    assert sent["json"]["options"] == {"temperature": 0.8, "top_p": 0.9}
    assert sent["json"]["messages"] == [{"role": "user", "content": "hello"}]


def test_ollama_omits_format_without_schema(monkeypatch):
    sent = {}

    def fake_post(url, json, timeout):
        sent.update(json=json)
        return _Response({"message": {"content": "true"}})

    monkeypatch.setattr(requests, "post", fake_post)
    OllamaOracle(host="http://ollama:11434", model="llama3").request("x", options=SamplingOptions(0.0))

    assert "format" not in sent["json"]
    assert sent["json"]["options"] == {"temperature": 0.0}


def test_ollama_http_error_becomes_generation_failed(monkeypatch):
    monkeypatch.setattr(requests, "post", lambda url, json, timeout: _Response(status=500))

    with pytest.raises(GenerationFailed, match="500 Server Error"):
        OllamaOracle(host="http://ollama:11434", model="llama3").request("x")


def test_to_gemini_schema_uppercases_types():
    converted = to_gemini_schema(HOTEL_LIST_SCHEMA)

    assert converted["type"] == "ARRAY"
    assert converted["items"]["type"] == "OBJECT"
    assert converted["items"]["properties"]["name"]["type"] == "STRING"
    assert converted["items"]["required"] == HOTEL_LIST_SCHEMA["items"]["required"]
    assert HOTEL_LIST_SCHEMA["type"] == "array"


class _FakeModels:
    def __init__(self, text="ok", error=None):
        self.text = text
        self.error = error
        self.calls = []

    def generate_content(self, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error:
            raise self.error
        return type("Resp", (), {"text": self.text})()


def _fake_client(monkeypatch, text="ok", error=None):
    clients = []

    class FakeClient:
        def __init__(self, api_key, http_options=None):
            self.api_key = api_key
            self.http_options = http_options
            self.models = _FakeModels(text=text, error=error)
            clients.append(self)

    monkeypatch.setattr(gemini_backend.genai, "Client", FakeClient)
    return clients


def test_gemini_sends_json_config(monkeypatch):
    clients = _fake_client(monkeypatch, text='[{"name": "x"}]')

    oracle = GeminiOracle(api_key="secret", timeout_s=10)
    text = oracle.request("p", schema=HOTEL_LIST_SCHEMA, options=SamplingOptions(0.7))

    assert text == '[{"name": "x"}]'
    client = clients[0]
    assert client.api_key == "secret"
    assert client.http_options.timeout == 10000
    call = client.models.calls[0]
    assert call["model"] == "gemini-2.5-flash"
    assert call["contents"] == "p"
    assert call["config"].temperature == 0.7
    assert call["config"].top_p is None
    assert call["config"].response_mime_type == "application/json"


def test_gemini_generation_config_carries_schema_and_sampling(monkeypatch):
    _fake_client(monkeypatch)
    oracle = GeminiOracle(api_key="secret")

    config = oracle._generation_config(HOTEL_LIST_SCHEMA, SamplingOptions(0.8, top_p=0.9))
    assert config["response_schema"]["type"] == "ARRAY"
    assert config["temperature"] == 0.8
    assert config["top_p"] == 0.9
    assert oracle._generation_config(None, SamplingOptions(0.0)) == {"temperature": 0.0}


def test_gemini_plain_request_has_no_schema(monkeypatch):
    clients = _fake_client(monkeypatch, text="true")

    GeminiOracle(api_key="secret").request("p", options=SamplingOptions(0.0))

    config = clients[0].models.calls[0]["config"]
    assert config.temperature == 0.0
    assert config.response_mime_type is None
    assert config.response_schema is None


def test_gemini_oracles_keep_their_own_keys(monkeypatch):
    clients = _fake_client(monkeypatch, text="true")

    first = GeminiOracle(api_key="key-A")
    second = GeminiOracle(api_key="key-B")
    first.request("p")
    second.request("q")

    assert [c.api_key for c in clients] == ["key-A", "key-B"]
    assert [call["contents"] for call in clients[0].models.calls] == ["p"]
    assert [call["contents"] for call in clients[1].models.calls] == ["q"]


def test_gemini_errors_become_generation_failed(monkeypatch):
    _fake_client(monkeypatch, error=RuntimeError("429 Resource exhausted"))

    with pytest.raises(GenerationFailed, match="Gemini API error: 429 Resource exhausted"):
        GeminiOracle(api_key="secret").request("p")


def test_build_oracle_requires_credential_for_gemini():
    with pytest.raises(ConfigurationError, match="API_KEY"):
        build_oracle(Settings(llm_provider="gemini", api_key=None))


def test_build_oracle_rejects_unknown_provider():
    with pytest.raises(ConfigurationError, match="Unknown LLM_PROVIDER"):
        build_oracle(Settings(llm_provider="carrier-pigeon", api_key="x"))


def test_build_oracle_ollama_needs_no_credential():
    oracle = build_oracle(Settings(llm_provider="ollama", api_key=None, ollama_model="mistral"))
    assert isinstance(oracle, OllamaOracle)
    assert oracle.model == "mistral"
