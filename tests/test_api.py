from __future__ import annotations

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from _support import FakeTextGenerator

from fastapi.testclient import TestClient

from application import build_default_app, create_app
from routers.reply import GENERATION_FAILED_DETAIL
from services import SarcasticReplyService
from settings import Settings, get_settings


def _client(generator: FakeTextGenerator) -> TestClient:
    settings = Settings.model_validate({"GEMINI_API_KEY": "test-key"})
    return TestClient(create_app(settings, SarcasticReplyService(generator)))


class ReplyApiTest(unittest.TestCase):
    def test_end_to_end_reply(self) -> None:
        generator = FakeTextGenerator(result={"reply": "Oh, absolutely thrilling."})
        client = _client(generator)

        response = client.post(
            "/api/v1/reply",
            json={"message": "I love Mondays", "language": "English", "sarcasmLevel": "Nuclear"},
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"reply": "Oh, absolutely thrilling."})
        prompt, _ = generator.calls[0]
        self.assertIn("Language: English\nSarcasm Level: Nuclear\nMessage: I love Mondays\n", prompt)

    def test_validation_errors_return_422_without_calling_generator(self) -> None:
        generator = FakeTextGenerator(result={"reply": "unused"})
        client = _client(generator)

        response = client.post(
            "/api/v1/reply",
            json={"message": "", "language": "French", "sarcasmLevel": "Nuclear"},
        )

        self.assertEqual(response.status_code, 422)
        self.assertEqual(
            response.json(),
            {
                "detail": {
                    "errors": {
                        "message": "must not be empty",
                        "language": "must be one of: English, Kiswahili, Sheng",
                    }
                }
            },
        )
        self.assertEqual(generator.calls, [])

    def test_non_object_bodies_use_the_same_error_shape(self) -> None:
        generator = FakeTextGenerator(result={"reply": "unused"})
        client = _client(generator)

        for body in (["hi"], "hi", None):
            response = client.post("/api/v1/reply", json=body)

            self.assertEqual(response.status_code, 422)
            detail = response.json()["detail"]
            self.assertEqual(list(detail), ["errors"])
            self.assertIn("__root__", detail["errors"])
        self.assertEqual(generator.calls, [])

    def test_generation_failure_returns_opaque_502(self) -> None:
        generator = FakeTextGenerator(error=ConnectionError("secret upstream detail"))
        client = _client(generator)

        with self.assertLogs("eehsawa.reply", level="ERROR"):
            response = client.post(
                "/api/v1/reply",
                json={"message": "Nice weather", "language": "Sheng", "sarcasmLevel": "Mild"},
            )

        self.assertEqual(response.status_code, 502)
        self.assertEqual(response.json(), {"detail": GENERATION_FAILED_DETAIL})
        self.assertNotIn("secret upstream detail", response.text)

    def test_reply_options(self) -> None:
        response = _client(FakeTextGenerator()).get("/api/v1/reply/options")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(),
            {
                "languages": ["English", "Kiswahili", "Sheng"],
                "sarcasmLevels": ["Mild", "Medium", "Nuclear"],
                "maxMessageLength": 280,
                "defaultLanguage": "English",
                "defaultSarcasmLevel": "Medium",
            },
        )

    def test_index_serves_form(self) -> None:
        response = _client(FakeTextGenerator()).get("/")

        self.assertEqual(response.status_code, 200)
        self.assertIn("text/html", response.headers["content-type"])
        self.assertIn('id="reply-form"', response.text)
        self.assertIn("/api/v1/reply", response.text)


class HealthApiTest(unittest.TestCase):
    def test_healthy_when_generator_configured(self) -> None:
        response = _client(FakeTextGenerator()).get("/healthz")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(),
            {"status": "healthy", "model": "fake-model", "llm": "configured", "issues": []},
        )

    def test_degraded_without_api_key(self) -> None:
        settings = Settings.model_validate({"GEMINI_API_KEY": ""})
        client = TestClient(create_app(settings))

        body = client.get("/healthz").json()

        self.assertEqual(body["status"], "degraded")
        self.assertEqual(body["llm"], "missing_api_key")
        self.assertEqual(body["model"], "gemini-2.5-flash")


if __name__ == "__main__":
    unittest.main()


class DefaultAppTest(unittest.TestCase):
    def setUp(self) -> None:
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)
        get_settings.cache_clear()
        self.addCleanup(get_settings.cache_clear)

    def test_default_app_reads_local_env_file(self) -> None:
        env_path = Path(self.tmpdir.name) / ".env"
        env_path.write_text("REPLY_LLM_MODEL=gemini-from-file\n", encoding="utf-8")

        with mock.patch.dict(os.environ, {}, clear=True):
            client = TestClient(build_default_app(env_path))
            body = client.get("/healthz").json()

        self.assertEqual(body["model"], "gemini-from-file")
        self.assertEqual(body["llm"], "missing_api_key")

    def test_entrypoint_module_exposes_app(self) -> None:
        import app_main

        self.assertEqual(app_main.app.title, "EehSawa AI")
        self.assertIs(app_main.create_app, create_app)
