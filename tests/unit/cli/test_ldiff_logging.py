"""Unit tests for CLI logging features.

Tests for --log-file, --trace, --verbose and logging configuration.
"""

import logging
from unittest.mock import MagicMock, patch

import pytest


@pytest.mark.unit
@pytest.mark.cli
class TestLoggingConfiguration:
    """Test configure_logging."""

    def test_configure_logging_basic(self):
        from ldiff.logging_utils import configure_logging

        with patch("logging.getLogger") as mock_get_logger:
            mock_logger = MagicMock()
            mock_get_logger.return_value = mock_logger

            configure_logging(logging.INFO)

            mock_logger.setLevel.assert_called_once_with(logging.INFO)
            assert mock_logger.addHandler.call_count == 1

    def test_configure_logging_string_level(self):
        from ldiff.logging_utils import configure_logging

        with patch("logging.getLogger") as mock_get_logger:
            mock_logger = MagicMock()
            mock_get_logger.return_value = mock_logger

            configure_logging("debug")

            mock_logger.setLevel.assert_called_once_with(logging.DEBUG)

    def test_unknown_level_name_falls_back_to_warning(self):
        from ldiff.logging_utils import configure_logging

        with patch("logging.getLogger") as mock_get_logger:
            mock_logger = MagicMock()
            mock_get_logger.return_value = mock_logger

            configure_logging("chatty")

            mock_logger.setLevel.assert_called_once_with(logging.WARNING)

    def test_configure_logging_with_file(self, tmp_path):
        from ldiff.logging_utils import configure_logging

        log_file = tmp_path / "ldiff.log"

        with patch("logging.getLogger") as mock_get_logger:
            mock_logger = MagicMock()
            mock_get_logger.return_value = mock_logger

            configure_logging(logging.DEBUG, log_file=str(log_file))

            assert mock_logger.addHandler.call_count == 2
            for call in mock_logger.addHandler.call_args_list:
                call.args[0].close()

    def test_unwritable_log_file_is_reported(self, tmp_path):
        from ldiff.logging_utils import configure_logging

        with patch("logging.getLogger") as mock_get_logger:
            mock_logger = MagicMock()
            mock_get_logger.return_value = mock_logger

            configure_logging(logging.DEBUG, log_file=str(tmp_path / "missing" / "dir" / "ldiff.log"))

            assert mock_logger.addHandler.call_count == 1
            assert mock_logger.warning.called

    def test_configure_logging_trace_mode(self):
        from ldiff.logging_utils import configure_logging

        with patch("logging.getLogger") as mock_get_logger, patch("logging.Formatter") as mock_formatter:
            mock_get_logger.return_value = MagicMock()

            configure_logging(logging.DEBUG, trace_mode=True)

            format_str = mock_formatter.call_args_list[0][0][0]
            assert "asctime" in format_str
            assert "name" in format_str

    def test_configure_logging_normal_mode(self):
        from ldiff.logging_utils import configure_logging

        with patch("logging.getLogger") as mock_get_logger, patch("logging.Formatter") as mock_formatter:
            mock_get_logger.return_value = MagicMock()

            configure_logging(logging.INFO, trace_mode=False)

            format_str = mock_formatter.call_args_list[0][0][0]
            assert "asctime" not in format_str
            assert "message" in format_str


@pytest.mark.unit
@pytest.mark.cli
class TestLoggingFlags:
    """Test how CLI flags select the log level."""

    @pytest.fixture
    def run_main(self, file_pair):
        from io import StringIO

        from ldiff.cli import main

        old_path, new_path = file_pair("a\n", "b\n")

        def _run(*flags):
            with patch("ldiff.cli.configure_logging") as mock_configure:
                exit_code = main([*flags, str(old_path), str(new_path)], output=StringIO(), error=StringIO())
            assert exit_code == 1
            return mock_configure

        return _run

    def test_default_level_is_warning(self, run_main):
        mock_configure = run_main()
        mock_configure.assert_called_once_with(logging.WARNING, log_file=None, trace_mode=False)

    def test_verbose_means_debug(self, run_main):
        mock_configure = run_main("-v")
        assert mock_configure.call_args.args[0] == logging.DEBUG

    def test_explicit_level_beats_verbose(self, run_main):
        mock_configure = run_main("-v", "--log-level", "ERROR")
        assert mock_configure.call_args.args[0] == logging.ERROR

    def test_trace_enables_debug(self, run_main):
        mock_configure = run_main("--trace", "--log-level", "ERROR")
        mock_configure.assert_called_once_with(logging.DEBUG, log_file=None, trace_mode=True)

    def test_log_file_is_passed(self, run_main, tmp_path):
        log_file = str(tmp_path / "run.log")
        mock_configure = run_main("--log-file", log_file)
        assert mock_configure.call_args.kwargs["log_file"] == log_file
