# =============================================================================
# test_runner.py - Runner and Configuration Tests
# =============================================================================

import pytest

from pylox.errors import LexicalAnalysisError, UnexpectedCharacterError
from pylox.lexer import TokenType
from pylox.runner import LoxOptions, LoxRunner, RunResult


# =============================================================================
# Configuration Tests
# =============================================================================

class TestLoxOptions:
    """Defaults and environment overrides."""

    def test_defaults(self):
        options = LoxOptions()
        assert options.encoding == "utf-8"
        assert options.strict is False

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("PYLOX_ENCODING", "latin-1")
        monkeypatch.setenv("PYLOX_STRICT", "Yes")
        options = LoxOptions.from_env()
        assert options.encoding == "latin-1"
        assert options.strict is True

    def test_from_env_unset(self, monkeypatch):
        monkeypatch.delenv("PYLOX_ENCODING", raising=False)
        monkeypatch.delenv("PYLOX_STRICT", raising=False)
        assert LoxOptions.from_env() == LoxOptions()

    def test_invalid_strict_value_ignored(self, monkeypatch):
        monkeypatch.setenv("PYLOX_STRICT", "maybe")
        assert LoxOptions.from_env().strict is False

    def test_unknown_encoding_ignored(self, monkeypatch):
        monkeypatch.setenv("PYLOX_ENCODING", "bogus")
        assert LoxOptions.from_env().encoding == "utf-8"

    def test_encoding_alias_accepted(self, monkeypatch):
        monkeypatch.setenv("PYLOX_ENCODING", "latin1")
        assert LoxOptions.from_env().encoding == "latin1"


# =============================================================================
# Runner Tests
# =============================================================================

class TestLoxRunner:
    """Scanning through the runner."""

    def test_run_source_success(self):
        result = LoxRunner().run_source("var x = 1;")
        assert isinstance(result, RunResult)
        assert result.success
        assert result.errors == []
        assert result.token_count == 5
        assert result.tokens[-1].type == TokenType.EOF
        assert result.filename == "<input>"

    def test_run_source_with_errors(self):
        result = LoxRunner().run_source("@ 1 #", "bad.lox")
        assert not result.success
        assert len(result.errors) == 2
        assert all(isinstance(e, UnexpectedCharacterError) for e in result.errors)
        assert str(result.errors[0].location) == "bad.lox:1"
        assert result.token_count == 1

    def test_strict_raises_aggregate(self):
        runner = LoxRunner(LoxOptions(strict=True))
        with pytest.raises(LexicalAnalysisError) as exc_info:
            runner.run_source('@\n"open')
        report = str(exc_info.value)
        assert "<input>:1: error: Unexpected character" in report
        assert "<input>:2: error: Unterminated string" in report
        assert report.endswith("\n2 errors")

    def test_strict_clean_source(self):
        result = LoxRunner(LoxOptions(strict=True)).run_source("print 1;")
        assert result.success

    def test_runs_are_independent(self):
        runner = LoxRunner()
        assert not runner.run_source("@").success
        assert runner.run_source("ok").success

    def test_run_file(self, tmp_path):
        path = tmp_path / "hello.lox"
        path.write_text('print "hello";\n')
        result = LoxRunner().run_file(path)
        assert result.success
        assert result.filename == str(path)
        assert [t.type for t in result.tokens] == [
            TokenType.PRINT, TokenType.STRING, TokenType.SEMICOLON, TokenType.EOF,
        ]
        assert result.tokens[-1].line == 2

    def test_run_file_missing(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            LoxRunner().run_file(tmp_path / "missing.lox")

    def test_run_file_encoding(self, tmp_path):
        path = tmp_path / "latin.lox"
        path.write_bytes('"café"'.encode("latin-1"))
        result = LoxRunner(LoxOptions(encoding="latin-1")).run_file(path)
        assert result.tokens[0].literal == "café"
