import os
from unittest import TestCase

import httpx
from fastapi.testclient import TestClient

os.environ.setdefault("TRANSCRIBE_LOAD_DOTENV", "false")

from bangla_transcribe.main import app  # noqa: E402
from bangla_transcribe.feature_modules.transcribe.handler import TranscriptionHandler  # noqa: E402
from bangla_transcribe.feature_modules.transcribe.routes import get_handler  # noqa: E402


class _FakeConfig:
    def openai_api_key(self):
        return "sk-test"

    def openai_api_base(self):
        return "https://api.openai.com"

    def translate_api_base(self):
        return "https://translate.googleapis.com"

    def stt_model(self):
        return "whisper-1"

    def timeout_s(self):
        return 5.0


def _upstream(request: httpx.Request) -> httpx.Response:
    if request.url.host == "api.openai.com":
        return httpx.Response(200, json={"text": "আজ আবহাওয়া ভালো", "language": "bengali", "duration": 2.0})
    return httpx.Response(500)


class TranscribeRouteTests(TestCase):
    def setUp(self):
        handler = TranscriptionHandler(_FakeConfig(), transport=httpx.MockTransport(_upstream))
        app.dependency_overrides[get_handler] = lambda: handler
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()

    def test_upload_through_both_paths(self):
        for path in ("/api/transcribe", "/.netlify/functions/transcribe"):
            res = self.client.post(path, files={"file": ("rec.webm", b"webm-bytes", "audio/webm")})
            self.assertEqual(res.status_code, 200)
            body = res.json()
            self.assertEqual(body["bengali"], "আজ আবহাওয়া ভালো")
            self.assertEqual(body["duration"], 2.0)
            self.assertEqual(res.headers["access-control-allow-origin"], "*")
            self.assertEqual(res.headers["access-control-allow-methods"], "POST, OPTIONS")
            self.assertEqual(res.headers["access-control-allow-headers"], "Content-Type, Authorization")
            self.assertEqual(res.headers["content-type"], "application/json")

    def test_preflight(self):
        res = self.client.options(
            "/api/transcribe",
            headers={"Origin": "https://example.org", "Access-Control-Request-Method": "POST"},
        )
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.content, b"")
        self.assertEqual(res.headers["access-control-allow-origin"], "*")

    def test_get_is_not_allowed(self):
        res = self.client.get("/api/transcribe")
        self.assertEqual(res.status_code, 405)
        self.assertEqual(res.json()["error"], "Method not allowed. Use POST.")

    def test_probe(self):
        res = self.client.post("/api/transcribe", json={"test": True})
        self.assertEqual(res.status_code, 200)
        self.assertTrue(res.json()["apiKeyPresent"])

    def test_plain_text_rejected(self):
        res = self.client.post("/api/transcribe", content=b"hi", headers={"Content-Type": "text/plain"})
        self.assertEqual(res.status_code, 400)
        self.assertEqual(res.json()["received"], "text/plain")

    def test_healthz(self):
        self.assertEqual(self.client.get("/healthz").json(), {"ok": True})
