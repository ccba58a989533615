# test_output.py

import logging
import pytest
from io import BytesIO, StringIO
from unittest.mock import Mock

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import tagline
from tagline.config import ColorChoice, Settings
from tagline.logger import Logger, get_logger
from tagline.output import TextSink


@pytest.fixture
def plain_env(monkeypatch):
    """Environment with no color overrides."""
    for name in ("TAGLINE_COLOR", "NO_COLOR", "FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestWriteEntryPoints:
    """Test suite for writing to caller-supplied sinks."""

    def test_write(self):
        sink = BytesIO()
        tagline.write(sink, "a {$red}b{/$} {}", 7)
        assert sink.getvalue() == b"a \x1b[0m\x1b[31mb\x1b[0m 7"

    def test_writeln(self):
        for source, expected in [
            ("", b"\n"),
            ("hello", b"hello\n"),
            ("a {$red}b{/$}", b"a \x1b[0m\x1b[31mb\x1b[0m\n"),
        ]:
            sink = BytesIO()
            tagline.writeln(sink, source)
            assert sink.getvalue() == expected

    def test_write_accepts_parsed_template(self):
        sink = BytesIO()
        template = tagline.parse("{sink}-{template}")
        tagline.write(sink, template, sink="s", template="t")
        assert sink.getvalue() == b"s-t"

    def test_styled(self):
        assert tagline.styled("{[green]}!", 27) == "\x1b[0m\x1b[32m27\x1b[0m!"

    def test_render_function(self):
        sink = BytesIO()
        tagline.render(tagline.parse("{$bold}{}{/$}"), [1], {}, sink, colors=False)
        assert sink.getvalue() == b"1"

    def test_text_sink(self):
        stream = StringIO()
        TextSink(stream).write("é".encode("utf-8"))
        assert stream.getvalue() == "é"


class TestPrintEntryPoints:
    """Test suite for printing to the standard streams."""

    def test_print_without_terminal_is_plain(self, plain_env, capsys):
        tagline.print("a{$red}b{/$}{}", 1)
        assert capsys.readouterr().out == "ab1"

    def test_println_always(self, plain_env, capsys):
        plain_env.setenv("TAGLINE_COLOR", "always")
        tagline.println("{$red}x{/$}")
        assert capsys.readouterr().out == "\x1b[0m\x1b[31mx\x1b[0m\n"

    def test_never_beats_forced_terminal(self, plain_env, capsys):
        plain_env.setenv("FORCE_COLOR", "1")
        plain_env.setenv("TAGLINE_COLOR", "never")
        tagline.print("{$red}x{/$}")
        assert capsys.readouterr().out == "x"

    def test_forced_terminal_under_auto(self, plain_env, capsys):
        plain_env.setenv("FORCE_COLOR", "1")
        plain_env.setenv("TERM", "xterm-256color")
        tagline.print("{$red}x{/$}")
        assert capsys.readouterr().out == "\x1b[0m\x1b[31mx\x1b[0m"

    def test_no_color_under_auto(self, plain_env, capsys):
        plain_env.setenv("FORCE_COLOR", "1")
        plain_env.setenv("TERM", "xterm-256color")
        plain_env.setenv("NO_COLOR", "1")
        tagline.print("{$red}x{/$}")
        assert capsys.readouterr().out == "x"

    def test_eprint_and_eprintln(self, plain_env, capsys):
        tagline.eprint("warn {}", 1)
        tagline.eprintln(" done")
        captured = capsys.readouterr()
        assert captured.err == "warn 1 done\n"
        assert captured.out == ""

    def test_print_errors_are_raised(self, plain_env, capsys):
        with pytest.raises(tagline.MissingArgumentError):
            tagline.print("{} {}", 1)
        assert capsys.readouterr().out == "1 "

    def test_parse_errors_are_logged_and_raised(self, plain_env):
        logger = Mock()
        plain_env.setattr("tagline.output.logger", logger)
        with pytest.raises(tagline.ParseError):
            tagline.println("{$red}never closed")
        logger.error.assert_called_once()
        assert "never closed" in logger.error.call_args[0][0]


class TestSettings:
    """Test suite for environment configuration."""

    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings == Settings(ColorChoice.AUTO, False, None)

    def test_from_env(self):
        settings = Settings.from_env({
            "TAGLINE_COLOR": " Always ",
            "TAGLINE_LOG": "yes",
            "TAGLINE_LOG_FILE": "-",
        })
        assert settings.color is ColorChoice.ALWAYS
        assert settings.logging_enabled
        assert settings.log_file == "-"

    @pytest.mark.parametrize("raw", ["", "sometimes", None])
    def test_invalid_color_falls_back_to_auto(self, raw):
        assert ColorChoice.parse(raw) is ColorChoice.AUTO

    @pytest.mark.parametrize("flag", ["0", "false", "off", "no", ""])
    def test_falsy_log_flags(self, flag):
        assert not Settings.from_env({"TAGLINE_LOG": flag}).logging_enabled


class TestLogger:
    """Test suite for the logging wrapper."""

    def test_disabled_logger_uses_null_handler(self):
        logger = Logger("tagline.tests.disabled")
        Logger("tagline.tests.disabled")
        handlers = logging.getLogger("tagline.tests.disabled").handlers
        assert [type(h) for h in handlers] == [logging.NullHandler]
        assert callable(logger.debug)

    def test_methods_forward_to_stdlib_logger(self):
        logger = Logger("tagline.tests.forward")
        logger._logger = Mock()
        logger.warning("careful")
        logger._logger.warning.assert_called_once_with("careful", exc_info=None)

    def test_enabled_logger_defaults_to_stderr(self, monkeypatch, tmp_path):
        basic_config = Mock()
        monkeypatch.setattr(logging, "basicConfig", basic_config)
        monkeypatch.chdir(tmp_path)
        Logger("tagline.tests.enabled", logging_enabled=True)
        assert basic_config.call_args.kwargs["stream"] is sys.stderr
        assert "filename" not in basic_config.call_args.kwargs
        assert list(tmp_path.iterdir()) == []

    def test_enabled_logger_with_file(self, monkeypatch, tmp_path):
        basic_config = Mock()
        monkeypatch.setattr(logging, "basicConfig", basic_config)
        log_file = str(tmp_path / "tagline.log")
        Logger("tagline.tests.file", logging_enabled=True, log_file=log_file)
        assert basic_config.call_args.kwargs["filename"] == log_file

    def test_get_logger_reads_settings(self):
        logger = get_logger("tagline.tests.settings", Settings())
        assert isinstance(logger, Logger)
