"""
Tests for configuration loading, structured logging, console helpers and
JSON reports.
"""
import json
import logging

import pytest

from shared.config import ScytaleConfig
from shared.console import ScytaleConsole
from shared.logger import ScytaleLogger

from scytale.core.models import LanguageScore
from scytale.output.console import ScytaleConsoleOutput
from scytale.output.report import ReportGenerator


class TestConfig:
    """Test ScytaleConfig defaults and TOML loading."""

    def test_defaults(self):
        config = ScytaleConfig()
        assert config.cipher.two_square_filler == "X"
        assert config.cipher.quagmire_indicator == "A"
        assert config.cipher.max_amsco_key_length == 9
        assert config.cipher.rail_fence_rails == 3
        assert config.analysis.kasiski_ngram_size == 3
        assert config.analysis.max_key_length == 20
        assert config.analysis.default_language == "english"
        assert config.global_settings.log_level == "WARNING"

    def test_load_toml(self, tmp_path):
        path = tmp_path / "scytale.toml"
        path.write_text(
            "[global]\n"
            'log_level = "DEBUG"\n'
            "[cipher]\n"
            'two_square_filler = "Q"\n'
            "[analysis]\n"
            'default_language = "german"\n'
            "top_candidates = 3\n",
            encoding="utf-8",
        )
        config = ScytaleConfig.load(path)
        assert config.global_settings.log_level == "DEBUG"
        assert config.cipher.two_square_filler == "Q"
        assert config.cipher.quagmire_indicator == "A"
        assert config.analysis.default_language == "german"
        assert config.analysis.top_candidates == 3

    def test_unknown_keys_ignored(self, tmp_path):
        path = tmp_path / "scytale.toml"
        path.write_text('[cipher]\nenigma_rotors = 3\n[legacy]\nx = 1\n', encoding="utf-8")
        config = ScytaleConfig.load(path)
        assert config.cipher == ScytaleConfig().cipher

    def test_missing_explicit_path(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ScytaleConfig.load(tmp_path / "absent.toml")

    def test_to_dict(self):
        data = ScytaleConfig().to_dict()
        assert set(data) == {"global_settings", "cipher", "analysis"}
        assert data["cipher"]["morse_word_separator"] == "   "


class TestLogger:
    """Test ScytaleLogger handlers and structured output."""

    def test_json_file_records(self, tmp_path):
        log_file = tmp_path / "logs" / "scytale.jsonl"
        log = ScytaleLogger(
            "test.json", log_level="DEBUG", log_file=log_file,
            json_logs=True, console_output=False,
        )
        with log.operation("encode"):
            log.info("column order %s", [2, 0, 1], cipher="amsco")
        log.warning("outside")

        for handler in log.underlying.handlers:
            handler.flush()
            handler.close()

        lines = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
        assert lines[0]["message"] == "column order [2, 0, 1]"
        assert lines[0]["operation"] == "encode"
        assert lines[0]["tool_name"] == "test.json"
        assert lines[0]["extra"] == {"cipher": "amsco"}
        assert lines[0]["logger"] == "scytale.test.json"
        assert "operation" not in lines[1]

    def test_level_and_isolation(self):
        log = ScytaleLogger("test.level", log_level="error", console_output=False)
        assert log.underlying.level == logging.ERROR
        assert log.underlying.propagate is False

    def test_reinstantiation_does_not_stack_handlers(self):
        ScytaleLogger("test.stack")
        log = ScytaleLogger("test.stack")
        assert len(log.underlying.handlers) == 1


class TestOutput:
    """Test the console formatters and the JSON report generator."""

    def test_report_wraps_payload(self):
        scores = [LanguageScore(language="english", chi_squared=1.5, p_value=0.9)]
        data = ReportGenerator().build("detect_language", scores)
        assert data["report_metadata"]["kind"] == "detect_language"
        assert data["result"] == [
            {"language": "english", "chi_squared": 1.5, "p_value": 0.9}
        ]

    def test_generate_json_creates_parents(self, tmp_path):
        score = LanguageScore(language="french", chi_squared=2.0)
        path = ReportGenerator().generate_json("score", score, tmp_path / "a" / "b.json")
        assert json.loads(path.read_text(encoding="utf-8"))["result"]["language"] == "french"

    def test_language_table_rendered(self):
        console = ScytaleConsole(record=True)
        ScytaleConsoleOutput(console).display_languages(
            [LanguageScore(language="spanish", chi_squared=3.25, p_value=0.5)]
        )
        assert "spanish" in console.export_text()
