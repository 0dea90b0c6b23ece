import os
import tempfile
from pathlib import Path
from unittest import TestCase
from unittest.mock import patch

from bangla_transcribe.config import settings
from bangla_transcribe.feature_modules.transcribe.config import TranscribeConfig as Cfg


class TranscribeConfigTests(TestCase):
    def test_key_is_read_at_call_time(self):
        with patch.object(settings, "openai_api_key", None):
            with patch.dict(os.environ, {"TRANSCRIBE_LOAD_DOTENV": "false"}, clear=False):
                os.environ.pop("OPENAI_API_KEY", None)
                self.assertIsNone(Cfg.openai_api_key())
                os.environ["OPENAI_API_KEY"] = "sk-later"
                self.assertEqual(Cfg.openai_api_key(), "sk-later")

    def test_blank_key_counts_as_missing(self):
        with patch.object(settings, "openai_api_key", ""):
            with patch.dict(os.environ, {"OPENAI_API_KEY": "", "TRANSCRIBE_LOAD_DOTENV": "false"}):
                self.assertIsNone(Cfg.openai_api_key())

    def test_api_bases_strip_trailing_slash(self):
        with patch.dict(os.environ, {"OPENAI_API_BASE": "http://proxy.local/", "TRANSLATE_API_BASE": "http://tr.local/"}):
            self.assertEqual(Cfg.openai_api_base(), "http://proxy.local")
            self.assertEqual(Cfg.translate_api_base(), "http://tr.local")

    def test_defaults(self):
        self.assertEqual(Cfg.MAX_BYTES, 25 * 1024 * 1024)
        self.assertEqual(Cfg.TARGET_LANG, "bn")
        with patch.object(settings, "openai_model_stt", None):
            self.assertEqual(Cfg.stt_model(), "whisper-1")


class FeatureEnvLoaderTests(TestCase):
    def test_env_file_edited_after_first_load_is_reread(self):
        from bangla_transcribe.feature_modules.transcribe import env_loader

        with tempfile.TemporaryDirectory() as tmp:
            env_path = Path(tmp) / ".env.transcribe"
            env_path.write_text("UNRELATED_FLAG=1\n")
            with patch.dict(os.environ, {}, clear=False):
                os.environ.pop("BT_LATE_KEY", None)
                env_loader._load([env_path])
                self.assertIsNone(os.getenv("BT_LATE_KEY"))

                env_path.write_text("UNRELATED_FLAG=1\nBT_LATE_KEY=sk-added\n")
                self.assertEqual(env_loader._load([env_path]), [str(env_path)])
                self.assertEqual(os.getenv("BT_LATE_KEY"), "sk-added")

    def test_existing_environment_wins_over_file(self):
        from bangla_transcribe.feature_modules.transcribe import env_loader

        with tempfile.TemporaryDirectory() as tmp:
            env_path = Path(tmp) / ".env"
            env_path.write_text("BT_LATE_KEY=from-file\n")
            with patch.dict(os.environ, {"BT_LATE_KEY": "from-process"}):
                env_loader._load([env_path])
                self.assertEqual(os.getenv("BT_LATE_KEY"), "from-process")
