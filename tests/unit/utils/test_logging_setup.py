"""Unit tests for logging utilities."""

import io
import json

import pytest

from git_status_vars.utils import DEBUG_ENV_VAR, create_logger


class TestCreateLogger:
    def test_text_format(self) -> None:
        stream = io.StringIO()
        logger = create_logger(log_format="text", file=stream)

        logger.warning("repository_opened", path="/tmp/repo")

        output = stream.getvalue()
        assert "repository_opened" in output
        assert "path=/tmp/repo" in output

    def test_json_format(self) -> None:
        stream = io.StringIO()
        logger = create_logger(log_format="json", file=stream)

        logger.error("config_loaded", sources=["default"])

        record = json.loads(stream.getvalue())
        assert record["event"] == "config_loaded"
        assert record["level"] == "error"
        assert record["sources"] == ["default"]
        assert "timestamp" in record

    def test_default_level_filters_debug(self) -> None:
        stream = io.StringIO()
        logger = create_logger(file=stream)

        logger.debug("hidden")
        logger.info("also_hidden")

        assert stream.getvalue() == ""

    def test_level_threshold(self) -> None:
        stream = io.StringIO()
        logger = create_logger(level="info", file=stream)

        logger.debug("hidden")
        logger.info("shown")

        assert "hidden" not in stream.getvalue()
        assert "shown" in stream.getvalue()

    def test_unknown_level_falls_back_to_warning(self) -> None:
        stream = io.StringIO()
        logger = create_logger(level="chatty", file=stream)

        logger.info("hidden")
        logger.warning("shown")

        assert "hidden" not in stream.getvalue()
        assert "shown" in stream.getvalue()

    def test_verbose_enables_debug(self) -> None:
        stream = io.StringIO()
        logger = create_logger(level="error", verbose=True, file=stream)

        logger.debug("shown")

        assert "shown" in stream.getvalue()

    def test_debug_env_var_enables_debug(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(DEBUG_ENV_VAR, "1")
        stream = io.StringIO()
        logger = create_logger(level="error", file=stream)

        logger.debug("shown")

        assert "shown" in stream.getvalue()

    def test_defaults_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        logger = create_logger()

        logger.warning("to_stderr")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "to_stderr" in captured.err
