import os
import unittest
from unittest.mock import MagicMock, patch

from techcross.io.gemini_client import GeminiAPIError, GeminiClient


def _session_returning(payload):
    session = MagicMock()
    session.post.return_value.json.return_value = payload
    return session


class GeminiClientTests(unittest.TestCase):
    def test_missing_api_key_raises(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(GeminiAPIError):
                GeminiClient()

    def test_model_can_come_from_environment(self) -> None:
        with patch.dict(os.environ, {"GEMINI_API_KEY": "k", "GEMINI_MODEL": "gemini-test"}, clear=True):
            client = GeminiClient(session=MagicMock())
        self.assertEqual(client.model_name, "gemini-test")

    def test_generate_text_returns_first_candidate(self) -> None:
        payload = {"candidates": [{"content": {"parts": [{"text": "[]"}]}}]}
        session = _session_returning(payload)
        with patch.dict(os.environ, {"GEMINI_API_KEY": "k"}, clear=True):
            client = GeminiClient(session=session)
        text = client.generate_text("prompt", response_mime_type="application/json")
        self.assertEqual(text, "[]")
        kwargs = session.post.call_args[1]
        self.assertEqual(kwargs["params"], {"key": "k"})
        self.assertEqual(kwargs["json"]["generationConfig"], {"responseMimeType": "application/json"})
        self.assertTrue(session.post.call_args[0][0].endswith("gemini-2.5-flash:generateContent"))

    def test_generate_text_without_candidates_raises(self) -> None:
        session = _session_returning({"candidates": []})
        with patch.dict(os.environ, {"GEMINI_API_KEY": "k"}, clear=True):
            client = GeminiClient(session=session)
        with self.assertRaises(GeminiAPIError):
            client.generate_text("prompt")

    def test_extract_text_skips_empty_parts(self) -> None:
        payload = {
            "candidates": [
                {"content": {"parts": [{"text": ""}]}},
                {"content": {"parts": [{"text": "second"}]}},
            ]
        }
        self.assertEqual(GeminiClient._extract_text(payload), "second")
        self.assertIsNone(GeminiClient._extract_text({}))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
