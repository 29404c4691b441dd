"""
Tests for the Click command-line interface.
"""
import json

import pytest
from click.testing import CliRunner

from scytale.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


def invoke(runner, *args, **kwargs):
    return runner.invoke(cli, list(args), obj={}, **kwargs)


class TestCipherCommands:
    """Test encode and decode."""

    def test_quiet_encode(self, runner):
        result = invoke(runner, "-q", "encode", "caesar", "Hello, World!", "-k", "3")
        assert result.exit_code == 0
        assert result.output.strip() == "Khoor, Zruog!"

    def test_quiet_decode(self, runner):
        result = invoke(runner, "-q", "decode", "amsco", "OHELENCETSTTPASEDIXE", "-k", "321")
        assert result.exit_code == 0
        assert result.output.strip() == "ENCODETHISTEXTPLEASE"

    def test_secondary_key(self, runner):
        result = invoke(
            runner, "-q", "encode", "two_square", "EO", "-k", "EXAMPLE", "-s", "KEYWORD"
        )
        assert result.output.strip() == "OE"

    def test_stdin(self, runner):
        result = invoke(runner, "-q", "encode", "rot13", "-", input="Hello")
        assert result.output.strip() == "Uryyb"

    def test_json_output(self, runner):
        result = invoke(runner, "-o", "json", "encode", "rot13", "Hello")
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["report_metadata"]["kind"] == "encode"
        assert data["result"]["output_text"] == "Uryyb"
        assert data["result"]["family"] == "shift"

    def test_console_output(self, runner):
        result = invoke(runner, "encode", "caesar", "Hello", "-k", "3")
        assert result.exit_code == 0
        assert "Khoor" in result.output

    def test_cipher_error_exits_1(self, runner):
        result = invoke(runner, "-q", "encode", "amsco", "hello", "-k", "1245")
        assert result.exit_code == 1
        assert "key" in result.output

    def test_unknown_cipher_exits_2(self, runner):
        result = invoke(runner, "encode", "enigma", "hello")
        assert result.exit_code == 2

    def test_new_cipher_names(self, runner):
        result = invoke(runner, "-q", "encode", "vigenere", "HELLO", "-k", "KEY")
        assert result.output.strip() == "RIJVS"
        result = invoke(runner, "-q", "decode", "RAIL_FENCE", "HLOEL", "-k", "2")
        assert result.output.strip() == "HELLO"

    def test_keyword_with_symbols_exits_1(self, runner):
        result = invoke(runner, "-q", "encode", "quagmire1", "HELLO", "-k", "K3Y!")
        assert result.exit_code == 1
        assert "[key]" in result.output

    def test_case_insensitive_name(self, runner):
        result = invoke(runner, "-q", "encode", "ATBASH", "hi!")
        assert result.output.strip() == "xw5"


class TestListing:
    """Test the cipher listing."""

    def test_quiet_listing(self, runner):
        result = invoke(runner, "-q", "ciphers")
        names = result.output.split()
        assert len(names) == 28
        assert "quagmire3" in names

    def test_json_listing(self, runner):
        result = invoke(runner, "-o", "json", "ciphers")
        data = json.loads(result.output)
        assert len(data["result"]) == 28

    def test_console_listing(self, runner):
        result = invoke(runner, "ciphers")
        assert result.exit_code == 0
        assert "adfgvx" in result.output


class TestAnalysisCommands:
    """Test frequency, crack-shift and detect-language."""

    def test_crack_shift_quiet(self, runner, english_text, shifted_text):
        result = invoke(runner, "-q", "crack-shift", shifted_text)
        assert result.exit_code == 0
        shift, plaintext = result.output.rstrip("\n").split("\t", 1)
        assert shift == "7"
        assert plaintext == english_text

    def test_crack_shift_json_top(self, runner, shifted_text):
        result = invoke(runner, "-o", "json", "crack-shift", shifted_text, "-n", "3")
        data = json.loads(result.output)
        assert len(data["result"]) == 3
        assert data["result"][0]["shift"] == 7

    def test_detect_language_quiet(self, runner, english_text):
        result = invoke(runner, "-q", "detect-language", english_text)
        assert result.output.strip() == "english"

    def test_frequency_json(self, runner, english_text):
        result = invoke(runner, "-o", "json", "frequency", english_text)
        data = json.loads(result.output)
        report = data["result"]
        assert report["language"] == "english"
        assert len(report["pairs"]) == 26

    def test_frequency_console(self, runner, english_text):
        result = invoke(runner, "frequency", english_text)
        assert result.exit_code == 0

    def test_frequency_unknown_language(self, runner):
        result = invoke(runner, "frequency", "hello", "-l", "klingon")
        assert result.exit_code == 2

    def test_output_file(self, runner, tmp_path, english_text):
        target = tmp_path / "reports" / "freq.json"
        result = invoke(runner, "-q", "-o", "json", "-f", str(target), "frequency", english_text)
        assert result.exit_code == 0
        data = json.loads(target.read_text(encoding="utf-8"))
        assert data["report_metadata"]["tool"] == "scytale"


class TestConfigOption:
    """The --config option feeds the engine."""

    def test_config_file(self, runner, tmp_path):
        path = tmp_path / "scytale.toml"
        path.write_text('[cipher]\nmorse_word_separator = " / "\n', encoding="utf-8")
        result = invoke(runner, "-c", str(path), "-q", "encode", "morse", "a b")
        assert result.output.strip() == ".- / -..."


class TestKasiskiCommand:
    """Test the kasiski command."""

    def test_quiet(self, runner):
        result = invoke(runner, "-q", "kasiski", "ABCABCABC")
        assert result.exit_code == 0
        assert result.output.strip() == "3"

    def test_json(self, runner):
        result = invoke(runner, "-o", "json", "kasiski", "ABCABCABC")
        data = json.loads(result.output)
        assert data["report_metadata"]["kind"] == "kasiski"
        assert data["result"]["gcd"] == 3

    def test_console_without_repeats(self, runner):
        result = invoke(runner, "kasiski", "ABCDEFGHIJ")
        assert result.exit_code == 0
        assert "No repeated" in result.output

    def test_console_table(self, runner):
        result = invoke(runner, "kasiski", "ABCABCABC")
        assert result.exit_code == 0
        assert "Key Length Candidates" in result.output
